"""Console output for file-crud commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from file_crud.types import OpStatus

if TYPE_CHECKING:
    from pathlib import Path

    from file_crud.config import OperationConfig
    from file_crud.types import OpResult


class TUI:
    """Text User Interface for file-crud (non-interactive)."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize TUI.

        Args:
            console: Console to print to. A new stdout console by default.
        """
        self.console = console or Console()

    def show_config(self, config: OperationConfig) -> None:
        """Display the effective configuration.

        Args:
            config: Configuration to display.
        """
        table = Table(title="Configuration")
        table.add_column("Key", style="cyan")
        table.add_column("Value")

        table.add_row("operation", config.operation.value)
        table.add_row("directory", escape(str(config.directory)))
        table.add_row("fileName", escape(config.file_name))
        table.add_row("content", escape(config.content))
        table.add_row("newFileName", escape(config.new_file_name))

        self.console.print(table)

    def show_result(self, result: OpResult) -> None:
        """Display the outcome of a file operation.

        Args:
            result: Result to display.
        """
        if result.status is OpStatus.DONE:
            self.show_success(result.message)
        elif result.status is OpStatus.SKIPPED:
            self.show_info(result.message)
        else:
            self.show_error(result.message)

    def show_path_status(self, path: Path, is_dir: bool, is_file: bool) -> None:
        """Display what kind of entry a path is.

        Args:
            path: Checked path.
            is_dir: True if the path is a directory.
            is_file: True if the path is a regular file.
        """
        if is_dir:
            self.show_success(f"'{path}' is a directory")
        elif is_file:
            self.show_success(f"'{path}' is a file")
        else:
            self.show_warning(f"'{path}' does not exist")

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {escape(message)}")

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {escape(message)}")
