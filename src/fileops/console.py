"""Console output for the command line interface."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm


class TUI:
    """Text User Interface for fileops (non-interactive mode)."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize TUI.

        Args:
            console: Console to print to. Defaults to a new stdout console.
        """
        self.console = console or Console()

    def confirm(self, message: str, default: bool = False) -> bool:
        """Show confirmation prompt.

        Args:
            message: Confirmation message.
            default: Default response.

        Returns:
            User's response.
        """
        return Confirm.ask(message, default=default, console=self.console)

    def show_content(self, content: str) -> None:
        """Print file content verbatim, without markup or highlighting."""
        self.console.print(content, markup=False, highlight=False, end="", soft_wrap=True)

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {escape(message)}")
