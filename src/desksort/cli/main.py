"""Main CLI interface for DeskSort using Click."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..classifier import category_for
from ..config import ConfigManager, DeskSortConfig
from ..core import DeskSortApp, SortReport
from ..errors import DeskSortError
from ..utils.logging import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def _load_config(ctx, create_if_missing: bool = True) -> tuple[ConfigManager, DeskSortConfig]:
    """Load configuration and apply its logging settings."""
    manager = ConfigManager(ctx.obj.get("config_path"))
    config = manager.load(create_if_missing=create_if_missing)

    log_dir = None
    if config.logging.file_enabled:
        log_dir = config.logging.log_dir or manager.config_dir / "logs"

    setup_logging(
        level=config.logging.level,
        log_dir=log_dir,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        console_enabled=config.logging.console_enabled,
        file_enabled=config.logging.file_enabled,
    )
    return manager, config


def _open_app(ctx) -> DeskSortApp:
    manager, config = _load_config(ctx)
    config_dir = None if config.database.path else manager.config_dir
    return DeskSortApp.from_config(config, config_dir=config_dir)


def _fail(message: str, exc: Exception):
    console.print(f"[bold red]✗ {message}:[/bold red] {escape(str(exc))}")
    logger.debug(message, exc_info=exc)
    sys.exit(1)


def print_report(report: SortReport):
    """Render a sort report: summary line, moved items, then errors."""
    if report.failed:
        console.print(
            f"[yellow]⚠ Sorting completed with {len(report.failed)} errors[/yellow]"
        )
    else:
        console.print(f"[green]✓ Successfully moved {len(report.moved)} items[/green]")

    if report.moved:
        console.print(f"\n[cyan]Moved {len(report.moved)} items:[/cyan]")
        for message in report.moved_files:
            console.print(f"  [green]✓[/green] {escape(message)}")

    if report.failed:
        console.print(f"\n[red]Encountered {len(report.failed)} errors:[/red]")
        for message in report.errors:
            console.print(f"  [red]⚠[/red] {escape(message)}")


@click.group()
@click.version_option(version=__version__, prog_name="DeskSort")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx, config: Optional[Path]):
    """
    DeskSort - tidy your desktop into category folders.

    Files are sorted by extension, folders are moved as a whole, and nothing
    is ever overwritten.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


@cli.command()
@click.pass_context
def init(ctx):
    """
    Create the default configuration and mapping database.

    Running it again is harmless: existing settings and mappings are kept.
    """
    console.print("\n[bold cyan]DeskSort Initialization[/bold cyan]\n")

    try:
        manager, config = _load_config(ctx)
        if manager.config_path is None:
            saved = manager.save(config)
            console.print(f"✓ Created default configuration: [green]{escape(str(saved))}[/green]")
        else:
            console.print(
                f"✓ Loaded configuration from: [green]{escape(str(manager.config_path))}[/green]"
            )

        config_dir = None if config.database.path else manager.config_dir
        with DeskSortApp.from_config(config, config_dir=config_dir) as app:
            count = len(app.get_all_mappings())
            console.print(f"✓ Database ready: [green]{escape(str(app.database.db_path))}[/green]")
            console.print(f"✓ {count} mappings configured")
            console.print(f"✓ Desktop: [green]{escape(str(app.desktop_dir))}[/green]")

        console.print("\n[bold green]✓ Initialization complete![/bold green]")
        console.print("\n[cyan]Next steps:[/cyan]")
        console.print("  1. Review mappings: [yellow]desksort mappings list[/yellow]")
        console.print("  2. Sort the desktop: [yellow]desksort sort[/yellow]")

    except DeskSortError as e:
        _fail("Initialization failed", e)


@cli.command()
@click.option(
    "--root",
    type=click.Path(path_type=Path),
    help="Directory to sort instead of the desktop",
)
@click.pass_context
def sort(ctx, root: Optional[Path]):
    """Move every file and folder on the desktop into its category folder."""
    try:
        with _open_app(ctx) as app:
            target = root or app.desktop_dir
            console.print(f"[cyan]Sorting[/cyan] {escape(str(target))}")
            report = app.scan_and_sort(target)
    except DeskSortError as e:
        _fail("Sorting failed", e)

    print_report(report)


@cli.group(name="mappings")
def mappings_group():
    """View and edit extension-to-folder mappings."""
    pass


@mappings_group.command(name="list")
@click.pass_context
def mappings_list(ctx):
    """Show every mapping."""
    try:
        with _open_app(ctx) as app:
            mappings = app.get_all_mappings()
    except DeskSortError as e:
        _fail("Failed to read mappings", e)

    table = Table(title="Path Mappings", show_header=True, header_style="bold cyan")
    table.add_column("Extension", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Destination", style="green")

    for mapping in mappings:
        table.add_row(
            mapping.key,
            category_for(mapping.key) or "-",
            escape(str(mapping.target_path)),
        )

    console.print(table)
    console.print(f"\n[dim]{len(mappings)} mappings[/dim]")


@mappings_group.command(name="get")
@click.argument("extension")
@click.pass_context
def mappings_get(ctx, extension: str):
    """Show the destination for EXTENSION (e.g. .pdf, or 'folder')."""
    try:
        with _open_app(ctx) as app:
            target = app.get_mapping(extension)
    except DeskSortError as e:
        _fail("Failed to read mapping", e)

    if target is None:
        console.print(f"[yellow]No mapping for {escape(extension)}[/yellow]")
        sys.exit(1)
    console.print(escape(str(target)))


@mappings_group.command(name="set")
@click.argument("extension")
@click.argument("target_path", type=click.Path(path_type=Path))
@click.pass_context
def mappings_set(ctx, extension: str, target_path: Path):
    """Send files with EXTENSION to TARGET_PATH."""
    target_path = target_path.expanduser().absolute()
    try:
        with _open_app(ctx) as app:
            app.set_mapping(extension, target_path)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="EXTENSION") from e
    except DeskSortError as e:
        _fail("Failed to save mapping", e)

    console.print(f"[green]✓[/green] {escape(extension)} -> {escape(str(target_path))}")


@cli.group(name="config")
def config_group():
    """Manage DeskSort configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display current configuration."""
    console.print("\n[bold cyan]DeskSort Configuration[/bold cyan]\n")

    try:
        manager, config = _load_config(ctx)
    except DeskSortError as e:
        _fail("Failed to load configuration", e)

    console.print("[bold]Sorting:[/bold]")
    console.print(f"  Desktop: {escape(str(config.desktop_dir or 'auto-detect'))}")
    console.print(f"  Sorted folder: {escape(config.sorted_folder_name)}")

    console.print("\n[bold]Database:[/bold]")
    console.print(f"  Path: {escape(str(config.database.path or 'default'))}")

    console.print("\n[bold]Logging:[/bold]")
    console.print(f"  Level: {config.logging.level}")
    console.print(f"  Console: {config.logging.console_enabled}")
    console.print(f"  File: {config.logging.file_enabled}")

    source = manager.config_path or "built-in defaults"
    console.print(f"\n[dim]Config file: {escape(str(source))}[/dim]")


if __name__ == "__main__":
    cli()
