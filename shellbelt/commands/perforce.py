"""Perforce workspace selection."""

import getpass
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..errors import ToolError, ValidationError
from ..session.context import SessionContext
from ..session.prompt import Selector
from ..utils.files import ensure_dir
from ..utils.process import CommandRunner, Invocation

logger = logging.getLogger(__name__)

CLIENT_ENV_VAR = "P4CLIENT"


@dataclass
class WorkspaceSelection:
    """Outcome of a workspace selection."""
    context: SessionContext
    selected: Optional[str] = None
    directory: Optional[Path] = None


def default_user(env: Optional[dict[str, str]] = None) -> str:
    """Perforce user from the environment, falling back to the login name."""
    env = env if env is not None else dict(os.environ)
    for key in ("P4USER", "USER", "USERNAME"):
        if env.get(key):
            return env[key]
    return getpass.getuser()


def parse_workspaces(output: str) -> list[str]:
    """
    Workspace names from ``p4 clients`` output.

    Each line looks like ``Client <name> <date> root <path> '<description>'``;
    the name is the second whitespace-delimited token.
    """
    names = []
    for line in output.splitlines():
        tokens = line.split()
        if len(tokens) >= 2:
            names.append(tokens[1])
    return names


class PerforceClient:
    """Thin wrapper around the p4 command line."""

    def __init__(self, runner: Optional[CommandRunner] = None, binary: str = "p4"):
        self.runner = runner or CommandRunner()
        self.binary = binary

    def list_workspaces(self, user: str) -> list[str]:
        result = self.runner.run(Invocation(self.binary, ["clients", "-u", user]), check=True)
        return parse_workspaces(result.stdout)

    def set_workspace(self, name: str, cwd: Path) -> None:
        invocation = Invocation(self.binary, ["set", f"{CLIENT_ENV_VAR}={name}"])
        result = self.runner.run(invocation, cwd=cwd)
        if not result.ok:
            raise ToolError(
                str(invocation),
                result.returncode,
                result.stderr,
                message=f"Failed to set workspace {name}",
            )


def select_workspace(
    context: SessionContext,
    selector: Selector,
    root: Union[str, Path],
    user: Optional[str] = None,
    client: Optional[PerforceClient] = None,
) -> WorkspaceSelection:
    """
    Pick a workspace, move into its directory and make it active.

    The directory is created if absent and is left in place if setting
    the workspace fails afterwards.
    """
    client = client or PerforceClient()
    user = user or default_user(context.env)

    workspaces = client.list_workspaces(user)
    if not workspaces:
        raise ValidationError(f"No workspaces found for user {user}")

    selected = selector.select(workspaces, prompt="workspace")
    if not selected:
        return WorkspaceSelection(context=context)

    destination = Path(root) / selected
    if not destination.exists():
        logger.info("Creating workspace directory %s", destination)
    ensure_dir(destination)

    moved = context.with_cwd(destination)
    client.set_workspace(selected, destination)

    return WorkspaceSelection(
        context=moved.with_env(**{CLIENT_ENV_VAR: selected}),
        selected=selected,
        directory=destination,
    )
