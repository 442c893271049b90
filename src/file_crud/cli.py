"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from file_crud.config import OperationConfig
    from file_crud.types import OpResult

import typer
from rich.console import Console
from rich.logging import RichHandler

from file_crud import __version__
from file_crud.config import load_config
from file_crud.console import TUI
from file_crud.context import create_context
from file_crud.dispatch import run_operation
from file_crud.types import Operation

app = typer.Typer(
    name="file-crud",
    help="Create, write, rename and delete files one operation at a time",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")

app.add_typer(config_app, name="config")

console = Console()
tui = TUI(console)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"file-crud v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Route package log records to stderr through rich.

    Args:
        verbose: Show DEBUG records instead of only warnings and errors.
    """
    package_logger = logging.getLogger("file_crud")
    package_logger.handlers.clear()
    package_logger.addHandler(
        RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    )
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log every operation step")
    ] = False,
) -> None:
    """Create, write, rename and delete files one operation at a time."""
    configure_logging(verbose)


def _finish(result: OpResult) -> None:
    """Show a result and exit non-zero if it failed.

    Raises:
        typer.Exit: If the operation failed.
    """
    tui.show_result(result)
    if not result.success:
        raise typer.Exit(1)


def _load_config(config_file: Path | None, **overrides) -> OperationConfig:
    """Load configuration, reporting problems as a CLI error.

    Raises:
        typer.Exit: If the file is missing or invalid.
    """
    try:
        return load_config(config_file, **overrides)
    except (FileNotFoundError, ValueError) as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e


# ============================================================================
# Run Command
# ============================================================================


@app.command()
def run(
    config_file: Annotated[
        Path | None, typer.Option("--config", "-c", help="JSON or YAML config file")
    ] = None,
    operation: Annotated[
        Operation | None, typer.Option("--operation", "-o", help="Operation to perform")
    ] = None,
    directory: Annotated[
        Path | None, typer.Option("--directory", "-d", help="Target directory")
    ] = None,
    file_name: Annotated[
        str | None, typer.Option("--file-name", "-f", help="Target file name")
    ] = None,
    content: Annotated[
        str | None, typer.Option("--content", help="Content for writeFileContent")
    ] = None,
    new_file_name: Annotated[
        str | None, typer.Option("--new-file-name", "-n", help="New name for renameFile")
    ] = None,
    _context=None,
) -> None:
    """Run the single operation selected by config and flags."""
    ctx = _context or create_context()
    config = _load_config(
        config_file,
        operation=operation,
        directory=directory,
        file_name=file_name,
        content=content,
        new_file_name=new_file_name,
    )
    tui.show_config(config)
    _finish(run_operation(config, ctx.operations))


# ============================================================================
# Operation Commands
# ============================================================================


@app.command()
def mkdir(
    directory: Annotated[Path, typer.Argument(help="Directory to create")],
    _context=None,
) -> None:
    """Create a directory and any missing parents."""
    ctx = _context or create_context()
    _finish(ctx.operations.create_directory(directory))


@app.command()
def touch(
    directory: Annotated[Path, typer.Argument(help="Containing directory")],
    name: Annotated[str, typer.Argument(help="File name")],
    _context=None,
) -> None:
    """Create an empty file."""
    ctx = _context or create_context()
    _finish(ctx.operations.create_file(directory, name))


@app.command()
def write(
    directory: Annotated[Path, typer.Argument(help="Containing directory")],
    name: Annotated[str, typer.Argument(help="File name")],
    content: Annotated[str, typer.Argument(help="New file content")],
    _context=None,
) -> None:
    """Overwrite the content of an existing file."""
    ctx = _context or create_context()
    _finish(ctx.operations.write_file(directory, name, content))


@app.command()
def rename(
    directory: Annotated[Path, typer.Argument(help="Containing directory")],
    old_name: Annotated[str, typer.Argument(help="Current file name")],
    new_name: Annotated[str, typer.Argument(help="New file name")],
    _context=None,
) -> None:
    """Rename a file within a directory."""
    ctx = _context or create_context()
    _finish(ctx.operations.rename_file(directory, old_name, new_name))


@app.command()
def delete(
    directory: Annotated[Path, typer.Argument(help="Containing directory")],
    name: Annotated[str, typer.Argument(help="File name")],
    _context=None,
) -> None:
    """Delete a file."""
    ctx = _context or create_context()
    _finish(ctx.operations.delete_file(directory, name))


@app.command()
def check(
    path: Annotated[Path, typer.Argument(help="Path to inspect")],
    _context=None,
) -> None:
    """Report whether a path is a directory, a file, or absent."""
    ctx = _context or create_context()
    tui.show_path_status(
        path,
        is_dir=ctx.operations.directory_exists(path),
        is_file=ctx.operations.file_exists(path),
    )


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    config_file: Annotated[
        Path | None, typer.Option("--config", "-c", help="JSON or YAML config file")
    ] = None,
) -> None:
    """Show the effective configuration."""
    tui.show_config(_load_config(config_file))


if __name__ == "__main__":
    app()
