"""Copy a public key into a remote authorized_keys file."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..utils.process import CommandRunner, Invocation

logger = logging.getLogger(__name__)

REMOTE_APPEND = "umask 077; test -d .ssh || mkdir .ssh; cat >> .ssh/authorized_keys"


@dataclass
class KeyCopyResult:
    """Outcome of a key copy."""
    key_file: Path
    destination: str
    copied: bool = False


def build_copy_invocation(user: str, host: str, client: str = "ssh") -> Invocation:
    return Invocation(client, [f"{user}@{host}", REMOTE_APPEND])


def copy_ssh_key(
    user: str,
    host: str,
    key_file: Union[str, Path],
    client: str = "ssh",
    runner: Optional[CommandRunner] = None,
) -> KeyCopyResult:
    """
    Append a local public key to ``~/.ssh/authorized_keys`` on a host.

    A missing key file copies nothing and is reported through
    ``copied=False`` rather than an error.
    """
    key_path = Path(key_file).expanduser()
    destination = f"{user}@{host}"
    result = KeyCopyResult(key_file=key_path, destination=destination)

    if not key_path.is_file():
        logger.debug("Key file %s not found, nothing to copy", key_path)
        return result

    runner = runner or CommandRunner()
    key_data = key_path.read_bytes()
    if not key_data.endswith(b"\n"):
        key_data += b"\n"

    # Password prompts go through the terminal, so stdout/stderr are inherited
    runner.run(build_copy_invocation(user, host, client), input=key_data, capture=False, check=True)
    result.copied = True
    return result
