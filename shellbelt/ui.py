"""Console output for the belt CLI."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table


class UI:
    """Two rich consoles: stdout carries data, stderr carries chatter."""

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)

    def print_error(self, message: str) -> None:
        self.err_console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        self.err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_status(self, message: str) -> None:
        self.err_console.print(f"[green]✓[/green] {escape(message)}")

    def print_data(self, text: str) -> None:
        """Plain line on stdout, safe for command substitution."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def print_table(self, table: Table) -> None:
        self.console.print(table)

    def print_selection(self, index: int, label: str) -> None:
        """One numbered entry of an interactive selection list."""
        self.err_console.print(f"[cyan]{index:>3}[/cyan]  {escape(label)}", highlight=False)


ui = UI()
