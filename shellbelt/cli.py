"""Belt CLI - personal interactive-shell helpers."""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

import typer
from rich.table import Table

from . import __version__
from .commands.clipboard import open_clipboard
from .commands.elevate import run_elevated
from .commands.line_endings import convert_line_endings
from .commands.links import create_symlink
from .commands.perforce import PerforceClient, default_user, select_workspace
from .commands.pipe import pipe_to_command
from .commands.remove import force_remove
from .commands.repos import choose_repository
from .commands.search import RipGrep, resolve_editor, search_and_open
from .commands.ssh import copy_ssh_key
from .commands.verbs import GROUPS, find_verbs
from .config import BeltConfig, get_config_path
from .errors import BeltError
from .logs import setup_logging
from .session.context import SessionContext
from .session.prompt import ConsolePrompter, FzfSelector
from .ui import ui

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="belt",
    help="Belt - personal interactive-shell helpers",
    add_completion=False,
    no_args_is_help=True,
)

config_app = typer.Typer(help="Show or create the configuration file")
app.add_typer(config_app, name="config")

SHELL_DIALECTS = ("bash", "zsh", "pwsh")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        ui.console.print(f"belt v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Verbose output",
    ),
    log_file: Optional[str] = typer.Option(
        None, "--log-file",
        help="Write logs to file",
    ),
    version: bool = typer.Option(
        False, "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Personal interactive-shell helpers."""
    setup_logging(verbose=verbose, log_file=log_file)


@contextmanager
def _command_errors() -> Iterator[None]:
    """Turn operation errors into an error line and exit status."""
    try:
        yield
    except BeltError as e:
        logger.debug("Command failed", exc_info=True)
        ui.print_error(str(e))
        raise typer.Exit(1)
    except OSError as e:
        logger.debug("Command failed", exc_info=True)
        ui.print_error(str(e))
        raise typer.Exit(1)
    except KeyboardInterrupt:
        raise typer.Exit(130)


def _load_config() -> BeltConfig:
    with _command_errors():
        return BeltConfig.load()


def _check_dialect(dialect: str) -> None:
    if dialect not in SHELL_DIALECTS:
        ui.print_error(f"Unknown shell: {dialect}")
        raise typer.Exit(1)


def _emit_context(
    after: SessionContext,
    before: SessionContext,
    emit_shell: bool,
    dialect: str,
) -> None:
    """Print a changed context as a directory or as shell statements."""
    if emit_shell:
        style = "pwsh" if dialect == "pwsh" else "posix"
        if after != before:
            for statement in after.to_shell(before, dialect=style):
                ui.print_data(statement)
    elif after.cwd != before.cwd:
        ui.print_data(str(after.cwd))


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def pipe(
    command: str = typer.Argument(..., help="Command to run"),
    args: Optional[list[str]] = typer.Argument(None, help="Arguments placed before the piped ones"),
) -> None:
    """
    Run COMMAND with each line of stdin as an extra argument.

    Examples:
        ls *.log | belt pipe rm
    """
    with _command_errors():
        status = pipe_to_command(command, sys.stdin, extra_args=args)
    raise typer.Exit(status)


@app.command()
def verb(
    pattern: str = typer.Argument("", help="Substring to look for"),
    group: Optional[str] = typer.Option(
        None, "--group", "-g",
        help=f"Only this group ({', '.join(GROUPS)})",
    ),
) -> None:
    """Find approved command verbs."""
    verbs = find_verbs(pattern, group=group)
    if not verbs:
        ui.print_warning(f"No verbs match '{pattern}'")
        return

    table = Table()
    table.add_column("Verb", style="cyan")
    table.add_column("Alias")
    table.add_column("Group")
    for v in verbs:
        table.add_row(v.name, v.alias_prefix, v.group)
    ui.print_table(table)


@app.command()
def symlink(
    link: str = typer.Argument(..., help="Link path to create"),
    target: str = typer.Argument(..., help="Existing file or directory"),
    force: bool = typer.Option(
        False, "--force", "-f",
        help="Replace an existing link path",
    ),
) -> None:
    """Create a symbolic link LINK pointing at TARGET."""
    with _command_errors():
        result = create_symlink(link, target, force=force)
    verb_text = "Replaced" if result.replaced else "Created"
    ui.print_status(f"{verb_text} {result.link} -> {result.target}")


@app.command()
def eol(
    file_path: str = typer.Argument(..., metavar="FILE", help="File to convert"),
    output: Optional[str] = typer.Option(
        None, "--output", "-o",
        help="Write here instead of overwriting FILE",
    ),
    reverse: bool = typer.Option(
        False, "--reverse", "-r",
        help="Convert LF to CRLF",
    ),
) -> None:
    """Convert CRLF line endings to LF (or back with --reverse)."""
    with _command_errors():
        result = convert_line_endings(file_path, output_path=output, reverse=reverse)
    direction = "LF -> CRLF" if reverse else "CRLF -> LF"
    ui.print_status(f"{direction}: {result.replacements} line endings in {result.destination}")


@app.command()
def sudo(
    commands: list[str] = typer.Argument(..., help="Commands to run elevated"),
) -> None:
    """Run commands in an elevated shell and wait for them."""
    config = _load_config()
    with _command_errors():
        run_elevated(commands, shell=config.elevated_shell)


@app.command()
def clip() -> None:
    """Open the clipboard in the GUI editor; ZZ copies it back and quits."""
    config = _load_config()
    with _command_errors():
        open_clipboard(editor=config.gui_editor)


@app.command("p4-client")
def p4_client(
    root: Optional[str] = typer.Option(
        None, "--root",
        help="Directory holding workspace folders",
    ),
    user: Optional[str] = typer.Option(
        None, "--user", "-u",
        help="Perforce user (default: P4USER or login name)",
    ),
    emit_shell: bool = typer.Option(
        False, "--emit-shell",
        help="Print shell statements instead of the directory",
    ),
    dialect: str = typer.Option(
        "bash", "--dialect",
        help="Shell dialect for --emit-shell",
    ),
) -> None:
    """Pick a Perforce workspace, move into it and make it active."""
    _check_dialect(dialect)
    config = _load_config()
    before = SessionContext.current()

    with _command_errors():
        selection = select_workspace(
            before,
            FzfSelector(binary=config.fuzzy_finder),
            root=root or config.p4_root,
            user=user or default_user(before.env),
            client=PerforceClient(binary=config.p4_binary),
        )

    if selection.selected:
        ui.print_status(f"Workspace {selection.selected} in {selection.directory}")
    _emit_context(selection.context, before, emit_shell, dialect)


@app.command()
def repos(
    root: Optional[str] = typer.Argument(None, help="Directory to scan"),
    full: bool = typer.Option(
        False, "--full",
        help="Show full paths",
    ),
    emit_shell: bool = typer.Option(
        False, "--emit-shell",
        help="Print shell statements instead of the directory",
    ),
    dialect: str = typer.Option(
        "bash", "--dialect",
        help="Shell dialect for --emit-shell",
    ),
) -> None:
    """List git repositories under ROOT and move into the chosen one."""
    _check_dialect(dialect)
    config = _load_config()
    before = SessionContext.current()

    with _command_errors():
        selection = choose_repository(
            before,
            ConsolePrompter(console=ui.err_console),
            root=root or config.repos_root,
            full=full,
            show=ui.print_selection,
        )

    if not selection.repos:
        ui.print_warning(f"No repositories under {root or config.repos_root}")
    _emit_context(selection.context, before, emit_shell, dialect)


@app.command("ssh-copy-id")
def ssh_copy_id(
    user: str = typer.Argument(..., help="Remote user"),
    host: str = typer.Argument(..., help="Remote host"),
    key: Optional[str] = typer.Option(
        None, "--key", "-i",
        help="Public key file",
    ),
) -> None:
    """Append a public key to the remote authorized_keys file."""
    config = _load_config()
    with _command_errors():
        result = copy_ssh_key(user, host, key or config.ssh_key, client=config.ssh_client)

    if result.copied:
        ui.print_status(f"Copied {result.key_file} to {result.destination}")
    else:
        ui.print_warning(f"Key file not found: {result.key_file}")


@app.command()
def transcript(
    log_dir: Optional[str] = typer.Option(
        None, "--dir", "-d",
        help="Directory for transcript files",
    ),
) -> None:
    """Start a shell session recorded to a timestamped log file."""
    from .commands.transcript import start_transcript

    config = _load_config()
    with _command_errors():
        result = start_transcript(log_dir or config.transcript_dir)
    ui.print_status(f"Transcript saved: {result.path}")


@app.command()
def ps(
    pattern: str = typer.Argument(..., help="Regular expression matched against names"),
) -> None:
    """List running processes whose name matches PATTERN."""
    from .commands.processes import find_processes

    with _command_errors():
        found = find_processes(pattern)
    if not found:
        return

    table = Table()
    table.add_column("PID", style="cyan", justify="right")
    table.add_column("Name")
    table.add_column("User")
    table.add_column("Memory", justify="right")
    for proc in found:
        memory = f"{proc.memory_rss / (1024 * 1024):.1f} MB" if proc.memory_rss else "-"
        table.add_row(str(proc.pid), proc.name, proc.username or "-", memory)
    ui.print_table(table)


@app.command()
def rmrf(
    path: str = typer.Argument(..., help="File or directory to delete"),
) -> None:
    """Delete PATH and everything below it, without prompting."""
    with _command_errors():
        removed = force_remove(path)
    ui.print_status(f"Removed {removed}")


@app.command()
def search(
    pattern: str = typer.Argument(..., help="Search pattern"),
    editor: Optional[str] = typer.Option(
        None, "--editor", "-e",
        help="Editor (default: $EDITOR, then config)",
    ),
    files: bool = typer.Option(
        False, "--files", "-f",
        help="Match file names instead of contents",
    ),
) -> None:
    """Search with rg, pick a hit with fzf, open it in the editor."""
    config = _load_config()
    with _command_errors():
        search_and_open(
            pattern,
            FzfSelector(binary=config.fuzzy_finder),
            editor=resolve_editor(editor, default=config.editor),
            files_only=files,
            rg=RipGrep(binary=config.search_tool),
        )


@app.command("find-files")
def find_files(
    pattern: str = typer.Argument(..., help="Pattern matched against file names"),
) -> None:
    """List file names under the current directory matching PATTERN."""
    config = _load_config()
    with _command_errors():
        names = RipGrep(binary=config.search_tool).find_files(pattern)
    for name in names:
        ui.print_data(name)


SHELL_INIT = {
    "bash": (
        'gr() { eval "$(belt repos --emit-shell "$@")"; }\n'
        'p4c() { eval "$(belt p4-client --emit-shell "$@")"; }\n'
    ),
    "pwsh": (
        "function gr { belt repos --emit-shell --dialect pwsh @args"
        " | Out-String | Invoke-Expression }\n"
        "function p4c { belt p4-client --emit-shell --dialect pwsh @args"
        " | Out-String | Invoke-Expression }\n"
    ),
}
SHELL_INIT["zsh"] = SHELL_INIT["bash"]


@app.command("shell-init")
def shell_init(
    dialect: str = typer.Argument("bash", help=f"One of: {', '.join(SHELL_DIALECTS)}"),
) -> None:
    """
    Print wrapper functions that apply directory changes to your shell.

    Examples:
        eval "$(belt shell-init bash)"
    """
    if dialect not in SHELL_INIT:
        ui.print_error(f"Unknown shell: {dialect}")
        raise typer.Exit(1)
    sys.stdout.write(SHELL_INIT[dialect])


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    config = _load_config()

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in config.to_dict().items():
        table.add_row(key, str(value))

    ui.err_console.print(f"[bold]Config file:[/bold] {get_config_path()}")
    ui.print_table(table)


@config_app.command("init")
def config_init(
    force: bool = typer.Option(
        False, "--force",
        help="Overwrite an existing file",
    ),
) -> None:
    """Write a config file with default values."""
    path = get_config_path()
    if path.exists() and not force:
        ui.print_error(f"Config already exists: {path}")
        raise typer.Exit(1)

    with _command_errors():
        BeltConfig().save(path)
    ui.print_status(f"Created config: {path}")


# Short aliases
app.command(
    "ptc",
    hidden=True,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)(pipe)
app.command("fv", hidden=True)(verb)
app.command("ln", hidden=True)(symlink)
app.command("vclip", hidden=True)(clip)
app.command("gr", hidden=True)(repos)
app.command("pgrep", hidden=True)(ps)
app.command("fe", hidden=True)(search)


if __name__ == "__main__":
    app()
