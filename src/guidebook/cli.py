"""CLI interface for Guidebook.

Command-line tool for serving and inspecting documentation content.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from guidebook.config import Config
from guidebook.core.content import ContentIndex
from guidebook.errors import GuidebookError, MissingConceptError

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover guidebook.toml)",
)

root_dir_option = click.option(
    "--root-dir",
    "-r",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Content root directory that ~/ refers to (overrides config)",
)

verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)


@click.group()
def cli() -> None:
    """Guidebook - content lookups for your documentation site."""


@cli.command()
@config_option
@root_dir_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@verbose_option
def serve(
    config_path: Path | None,
    root_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the content API server."""
    from guidebook.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path, root_dir).with_overrides(host=host, port=port)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Content root: {config.content.root_dir}")

    try:
        run_server(config)
    except GuidebookError as e:
        _fail(str(e))


@cli.command()
@config_option
@root_dir_option
@verbose_option
def quickstart(config_path: Path | None, root_dir: Path | None, verbose: bool) -> None:
    """List quick start pages in order."""
    _configure_logging(verbose)
    index = _load_index(_load_config(config_path, root_dir))

    for page in index.sorted_quick_start_pages:
        click.echo(f"{page.order}. {page.title}")


@cli.command()
@click.argument("ids", nargs=-1, required=True)
@config_option
@root_dir_option
@verbose_option
def related(
    ids: tuple[str, ...],
    config_path: Path | None,
    root_dir: Path | None,
    verbose: bool,
) -> None:
    """Show concept pages for the given concept IDS, in order."""
    _configure_logging(verbose)
    index = _load_index(_load_config(config_path, root_dir))

    try:
        pages = index.related_concept_pages(ids)
    except MissingConceptError as e:
        _fail(str(e))

    for page in pages:
        click.echo(f"{page.id}: {page.title}")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_path: Path | None, root_dir: Path | None) -> Config:
    try:
        config = Config.load(config_path)
    except ValueError as e:
        _fail(str(e))
    return config.with_overrides(root_dir=root_dir)


def _load_index(config: Config) -> ContentIndex:
    from guidebook.server import build_content_index

    try:
        return build_content_index(config)
    except GuidebookError as e:
        _fail(str(e))


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)
