"""CLI interface for docnav.

Command-line tool for serving and checking a documentation sidebar.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from docnav.config import Config
from docnav.core.content import ContentSource
from docnav.core.errors import ValidationError
from docnav.core.index import NavigationIndex
from docnav.core.links import check_links, check_manifest_sources
from docnav.core.tree import TreeBuilder
from docnav.core.types import Channel

CHANNEL_CHOICE = click.Choice([c.value for c in Channel])

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docnav.toml)",
)
manifest_option = click.option(
    "--manifest",
    "-m",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Sidebar manifest JSON file (overrides config)",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """docnav - documentation sidebar navigation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@config_option
@manifest_option
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
@click.option("--host", default=None, help="Host to bind to (overrides config)")
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--channel",
    type=CHANNEL_CHOICE,
    default=None,
    help="Default release channel (overrides config)",
)
@click.option(
    "--live-reload/--no-live-reload",
    default=None,
    help="Enable/disable manifest live reload (overrides config, default: enabled)",
)
def serve(
    config_path: Path | None,
    manifest: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    channel: str | None,
    live_reload: bool | None,
) -> None:
    """Start the navigation server."""
    from docnav.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        source_dir=source_dir,
        manifest=manifest,
        default_channel=Channel(channel) if channel else None,
        live_reload_enabled=live_reload,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Manifest: {config.docs.manifest}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    click.echo(f"Default channel: {config.navigation.default_channel}")
    if config.live_reload.enabled:
        click.echo("Live reload: enabled")
    else:
        click.echo("Live reload: disabled")

    try:
        run_server(config)
    except (ValidationError, FileNotFoundError) as e:
        _fail(str(e))


@cli.command()
@config_option
@manifest_option
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
@click.option(
    "--sources/--no-sources",
    default=False,
    help="Also report manifest paths without a content file",
)
def check(
    config_path: Path | None,
    manifest: Path | None,
    source_dir: Path | None,
    sources: bool,
) -> None:
    """Validate the manifest and check cross-reference links."""
    config = _load_config(config_path).with_overrides(
        manifest=manifest,
        source_dir=source_dir,
    )
    index = _build_index(config.docs.manifest)
    click.echo(f"Manifest OK: {len(index)} nodes")

    broken = check_links(index, config.docs.source_dir, config.navigation.link_prefixes)
    for link in broken:
        click.echo(click.style(f"Broken link {link}", fg="red"), err=True)

    missing: list[str] = []
    if sources:
        missing = check_manifest_sources(index, ContentSource(config.docs.source_dir))
        for path in missing:
            click.echo(click.style(f"Missing content for {path}", fg="yellow"), err=True)

    if broken or missing:
        sys.exit(1)
    click.echo(click.style("All links resolve", fg="green"))


@cli.command()
@config_option
@manifest_option
@click.option("--channel", type=CHANNEL_CHOICE, default=None, help="Release channel")
def flatten(config_path: Path | None, manifest: Path | None, channel: str | None) -> None:
    """Print pages in prev/next order."""
    config = _load_config(config_path).with_overrides(manifest=manifest)
    index = _build_index(config.docs.manifest)
    effective = Channel(channel) if channel else config.navigation.default_channel

    for node in index.flatten(effective):
        click.echo(f"{node.path}\t{node.title}")


@cli.command()
@config_option
@manifest_option
@click.option("--channel", type=CHANNEL_CHOICE, default=None, help="Release channel")
def tree(config_path: Path | None, manifest: Path | None, channel: str | None) -> None:
    """Print the sidebar as an indented outline."""
    config = _load_config(config_path).with_overrides(manifest=manifest)
    index = _build_index(config.docs.manifest)
    effective = Channel(channel) if channel else config.navigation.default_channel

    for node, depth in index.display_list(effective):
        indent = "  " * depth
        if node.is_section_header:
            click.echo(f"{indent}[{node.section_header_text}]")
        elif node.path is None:
            click.echo(f"{indent}{node.title}")
        else:
            click.echo(f"{indent}{node.title} ({node.path})")


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (ValueError, FileNotFoundError) as e:
        _fail(str(e))


def _build_index(manifest: Path) -> NavigationIndex:
    try:
        return NavigationIndex.from_tree(TreeBuilder().build_from_file(manifest))
    except (ValidationError, FileNotFoundError) as e:
        _fail(str(e))


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)
