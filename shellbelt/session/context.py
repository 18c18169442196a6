"""Session context passed into and returned from stateful helpers."""

import os
import shlex
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SessionContext:
    """Working directory and environment of the calling shell session."""
    cwd: Path
    env: dict[str, str] = field(default_factory=dict)

    @classmethod
    def current(cls) -> "SessionContext":
        """Snapshot of this process's cwd and environment."""
        return cls(cwd=Path.cwd(), env=dict(os.environ))

    def with_cwd(self, cwd: Path) -> "SessionContext":
        return replace(self, cwd=Path(cwd))

    def with_env(self, **values: str) -> "SessionContext":
        env = dict(self.env)
        env.update(values)
        return replace(self, env=env)

    def changes_from(self, before: "SessionContext") -> dict[str, str]:
        """Environment entries that differ from an earlier context."""
        return {k: v for k, v in self.env.items() if before.env.get(k) != v}

    def to_shell(
        self,
        before: Optional["SessionContext"] = None,
        dialect: str = "posix",
    ) -> list[str]:
        """Render this context as statements the parent shell can eval."""
        statements = []
        changed = self.changes_from(before) if before else {}

        for key, value in sorted(changed.items()):
            if dialect == "pwsh":
                statements.append(f"$env:{key} = {_pwsh_quote(value)}")
            else:
                statements.append(f"export {key}={shlex.quote(value)}")

        if before is None or before.cwd != self.cwd:
            if dialect == "pwsh":
                statements.append(f"Set-Location -LiteralPath {_pwsh_quote(str(self.cwd))}")
            else:
                statements.append(f"cd {shlex.quote(str(self.cwd))}")

        return statements


def _pwsh_quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"
