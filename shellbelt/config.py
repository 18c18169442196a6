"""Configuration for shellbelt."""

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SHELLBELT_CONFIG"
CONFIG_FILE_NAME = "config.json"

# Fields holding paths get "~" expanded on load
PATH_FIELDS = ("p4_root", "repos_root", "ssh_key", "transcript_dir")


def get_config_dir() -> Path:
    """Directory holding the config file and default transcript folder."""
    if sys.platform == "win32":
        base = os.environ.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base) / "shellbelt"
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "shellbelt"


def get_config_path() -> Path:
    """Path of the active config file."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_config_dir() / CONFIG_FILE_NAME


def _default_ssh_client() -> str:
    return "plink" if sys.platform == "win32" else "ssh"


@dataclass
class BeltConfig:
    """User configuration with defaults for every helper."""
    editor: str = "vim"
    gui_editor: str = "gvim"
    fuzzy_finder: str = "fzf"
    search_tool: str = "rg"
    p4_binary: str = "p4"
    p4_root: str = "~/p4"
    repos_root: str = "~/src"
    ssh_client: str = ""
    ssh_key: str = "~/.ssh/id_rsa.pub"
    elevated_shell: str = "pwsh"
    transcript_dir: str = ""

    def __post_init__(self):
        self.ssh_client = self.ssh_client or _default_ssh_client()
        self.transcript_dir = self.transcript_dir or str(get_config_dir() / "transcripts")
        for name in PATH_FIELDS:
            setattr(self, name, os.path.expanduser(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BeltConfig":
        """Build a config from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: str(v) for k, v in data.items() if k in known and v is not None})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "BeltConfig":
        """Load config from disk, falling back to defaults if absent."""
        path = path or get_config_path()
        if not path.exists():
            logger.debug("No config file at %s, using defaults", path)
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        logger.debug("Loaded config from %s", path)
        return cls.from_dict(data)

    def save(self, path: Optional[Path] = None) -> Path:
        """Save config to disk."""
        path = path or get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        return path
