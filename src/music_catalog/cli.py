"""Command line interface for music catalog."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .domain.catalog import CatalogReportService, CatalogReport, format_duration
from .exceptions import MusicCatalogError
from .infrastructure.catalog_file import LoadResult, load_catalog
from .models.config import Config, load_config, create_default_config

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(catalog_file: Path, config: Config, strict: bool = False) -> LoadResult:
    logger.debug(f"Loading catalog from {catalog_file}")
    result = load_catalog(catalog_file, strict=strict or config.strict_references)
    if result.has_rejections:
        err_console.print(f"[yellow]Skipped {len(result.rejected)} song(s) with unknown albums[/yellow]")
        for error in result.rejected[:10]:
            err_console.print(f"  • {error}")
        if len(result.rejected) > 10:
            err_console.print(f"  ... and {len(result.rejected) - 10} more")
    return result


def _render_report(report: CatalogReport, config: Config) -> None:
    duration_format = config.report.duration_format

    summary = (
        f"Albums: {report.total_albums}\n"
        f"Songs: {report.total_songs}\n"
        f"Songs without album: {report.songs_without_album}\n"
        f"Longest song: {report.longest_song or '-'}\n"
        f"Longest album: {report.longest_album or '-'}"
    )
    console.print(Panel(summary, title="Catalog"))

    albums_table = Table(title="Albums")
    albums_table.add_column("Album", style="cyan")
    albums_table.add_column("Year", justify="right")
    albums_table.add_column("Songs", justify="right")
    albums_table.add_column("Average duration", justify="right")
    for album in report.albums:
        albums_table.add_row(
            album.name,
            str(album.year) if album.year is not None else "-",
            str(album.song_count),
            format_duration(album.average_duration, duration_format),
        )
    console.print(albums_table)

    songs_table = Table(title="Songs")
    songs_table.add_column("#", justify="right", style="dim")
    songs_table.add_column("Song")
    for index, name in enumerate(report.song_names, start=1):
        songs_table.add_row(str(index), name)
    console.print(songs_table)


@click.group()
@click.version_option(package_name="music-catalog")
@click.option(
    '--config',
    'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Verbose output'
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """Query a music catalog of albums and songs."""
    try:
        config = load_config(config_path) if config_path else Config.default()
    except MusicCatalogError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    _configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = config


@cli.command()
@click.argument('catalog_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--json', 'as_json', is_flag=True, help='Print the report as JSON')
@click.option('--strict', is_flag=True, help='Abort on songs with unknown albums')
@click.pass_obj
def report(config: Config, catalog_file: Path, as_json: bool, strict: bool):
    """Print a full report for CATALOG_FILE."""
    try:
        result = _load(catalog_file, config, strict)
        catalog_report = CatalogReportService(result.catalog).build(config.report)
    except MusicCatalogError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(catalog_report.to_dict(), indent=2))
    else:
        _render_report(catalog_report, config)


@cli.command()
@click.argument('catalog_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def songs(config: Config, catalog_file: Path):
    """List the song names of CATALOG_FILE in order."""
    try:
        catalog = _load(catalog_file, config).catalog
    except MusicCatalogError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    for name in catalog.ordered_song_names():
        click.echo(name)


@cli.command()
@click.argument('catalog_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--year', type=int, default=None, help='Only albums released in this year')
@click.pass_obj
def albums(config: Config, catalog_file: Path, year: Optional[int]):
    """List the album names of CATALOG_FILE."""
    try:
        catalog = _load(catalog_file, config).catalog
    except MusicCatalogError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    names = catalog.album_names() if year is None else catalog.album_in_year(year)
    if config.report.sort_albums:
        names = sorted(names)
    for name in names:
        click.echo(name)


@cli.command()
@click.argument('catalog_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('album_name')
@click.pass_obj
def album(config: Config, catalog_file: Path, album_name: str):
    """Show song count and average duration of ALBUM_NAME."""
    try:
        catalog = _load(catalog_file, config).catalog
    except MusicCatalogError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    summary = CatalogReportService(catalog).summarize_album(album_name)
    click.echo(f"Songs: {summary.song_count}")
    click.echo(f"Average duration: {format_duration(summary.average_duration, config.report.duration_format)}")


@cli.command('init-config')
@click.argument('config_file', type=click.Path(dir_okay=False, path_type=Path))
def init_config(config_file: Path):
    """Write a default configuration to CONFIG_FILE."""
    if config_file.exists():
        err_console.print(f"[red]Error: {config_file} already exists[/red]")
        sys.exit(1)
    create_default_config(config_file)
    console.print(f"[green]Wrote default configuration to {config_file}[/green]")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
