"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

from fileops import __version__
from fileops.console import TUI
from fileops.context import CONFIG_ENV_VAR, create_context
from fileops.errors import FileOperationError

if TYPE_CHECKING:
    from fileops.context import AppContext

app = typer.Typer(
    name="fileops",
    help="Create, read, update, delete and copy files and directories",
    no_args_is_help=True,
)

console = Console()
tui = TUI(console)

# Set by the global --config option
_config_path: Path | None = None


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"fileops v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every filesystem change")
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option("--config", envvar=CONFIG_ENV_VAR, help="YAML configuration file"),
    ] = None,
) -> None:
    """Create, read, update, delete and copy files and directories."""
    global _config_path
    _config_path = config
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _get_context(context: AppContext | None) -> AppContext:
    """Return the injected context or build the production one.

    Raises:
        typer.Exit: If the configuration file cannot be loaded.
    """
    if context is not None:
        return context
    try:
        return create_context(_config_path)
    except (FileNotFoundError, ValueError) as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e


def _parse_replacements(pairs: list[str]) -> dict[str, str]:
    """Parse KEY=VALUE strings into a replacement map.

    Raises:
        typer.Exit: If a pair has no '='.
    """
    replacements: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            tui.show_error(f"Invalid replacement '{pair}'. Use: KEY=VALUE")
            raise typer.Exit(1)
        replacements[key] = value
    return replacements


# ============================================================================
# Directory Commands
# ============================================================================


@app.command("mkdir")
def mkdir(
    paths: Annotated[list[str], typer.Argument(help="Directories to create")],
    _context=None,
) -> None:
    """Create directories."""
    ctx = _get_context(_context)
    try:
        ctx.operations.create_directories(paths)
    except FileOperationError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    for path in paths:
        tui.show_success(f"Directory '{path}' ready")


@app.command("rmtree")
def rmtree(
    directory: Annotated[str, typer.Argument(help="Directory to remove")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    _context=None,
) -> None:
    """Remove a directory and everything beneath it."""
    ctx = _get_context(_context)
    if not yes and not tui.confirm(f"Remove '{directory}' and all its contents?"):
        tui.show_error("Aborted")
        raise typer.Exit(1)
    try:
        ctx.operations.remove_directory_recursive(directory)
    except FileOperationError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    tui.show_success(f"Removed '{directory}'")


# ============================================================================
# File Commands
# ============================================================================


@app.command("create")
def create(
    destination: Annotated[str, typer.Argument(help="File to create")],
    content: Annotated[str, typer.Option("--content", "-c", help="File content")] = "",
    _context=None,
) -> None:
    """Create a new file. Fails if it already exists."""
    ctx = _get_context(_context)
    try:
        ctx.operations.set_destination_path(destination).create_file(content)
    except FileOperationError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    tui.show_success(f"Created '{destination}'")


@app.command("read")
def read(
    source: Annotated[str, typer.Argument(help="File to read")],
    _context=None,
) -> None:
    """Print the content of a file."""
    ctx = _get_context(_context)
    try:
        content = ctx.operations.set_source_path(source).read_file()
    except FileOperationError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    tui.show_content(content)


@app.command("update")
def update(
    destination: Annotated[str, typer.Argument(help="File to overwrite")],
    content: Annotated[str, typer.Option("--content", "-c", help="New file content")] = "",
    _context=None,
) -> None:
    """Overwrite an existing file."""
    ctx = _get_context(_context)
    try:
        ctx.operations.set_destination_path(destination).update_file(content)
    except FileOperationError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    tui.show_success(f"Updated '{destination}'")


@app.command("delete")
def delete(
    destination: Annotated[str, typer.Argument(help="File to delete")],
    _context=None,
) -> None:
    """Delete a file."""
    ctx = _get_context(_context)
    try:
        ctx.operations.set_destination_path(destination).delete_file()
    except FileOperationError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    tui.show_success(f"Deleted '{destination}'")


@app.command("copy")
def copy(
    source: Annotated[str, typer.Argument(help="File to copy")],
    destination: Annotated[str, typer.Argument(help="Target path, overwritten if present")],
    _context=None,
) -> None:
    """Copy a file."""
    ctx = _get_context(_context)
    try:
        ctx.operations.copy_file(source, destination)
    except FileOperationError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    tui.show_success(f"Copied '{source}' to '{destination}'")


@app.command("render")
def render(
    source: Annotated[str, typer.Argument(help="Template file")],
    destination: Annotated[str, typer.Argument(help="Output file")],
    replacements: Annotated[
        list[str] | None,
        typer.Option("--set", "-s", help="Replacement as KEY=VALUE (repeatable)"),
    ] = None,
    placeholder_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Placeholder format with one %s slot"),
    ] = None,
    _context=None,
) -> None:
    """Copy a template to a destination, replacing placeholders."""
    ctx = _get_context(_context)
    mapping = _parse_replacements(replacements or [])
    try:
        ctx.operations.replace_content(
            mapping,
            placeholder_format or ctx.config.placeholder_format,
            source_path=source,
            destination_path=destination,
        )
    except FileOperationError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    tui.show_success(f"Rendered '{source}' to '{destination}'")
