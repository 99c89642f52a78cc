"""CLI entry point for docker-tags."""

from __future__ import annotations

import json
import logging
import sys

import click

from docker_tags import __version__
from docker_tags.config import (
    DEFAULT_SETTINGS,
    PLUGIN_METADATA_COMMAND,
    PLUGIN_SUBCOMMAND,
    Settings,
)
from docker_tags.engine import DEFAULT_STRATEGY, STRATEGIES, fetch_tags
from docker_tags.formatter import format_tags
from docker_tags.progress import make_reporter
from docker_tags.registry.client import HubClient, RegistryError
from docker_tags.registry.parser import ImageNameError, parse_image_name

logger = logging.getLogger(__name__)


def strip_plugin_subcommand(args: list[str]) -> list[str]:
    """Drop the leading ``tags`` token the Docker CLI adds when calling a plugin."""
    if args and args[0] == PLUGIN_SUBCOMMAND:
        return args[1:]
    return args


def _print_plugin_metadata(settings: Settings) -> None:
    """Answer the Docker CLI plugin discovery handshake."""
    click.echo(json.dumps(settings.metadata.to_dict(), separators=(",", ":")))


@click.command()
@click.argument("image")
@click.option(
    "-u",
    "--print-updated",
    "print_updated",
    is_flag=True,
    default=False,
    help="Print the last updated date of each tag.",
)
@click.option(
    "-s",
    "--strategy",
    type=click.Choice(sorted(STRATEGIES), case_sensitive=False),
    default=DEFAULT_STRATEGY,
    show_default=True,
    help="How to walk the paginated tag listing.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable verbose (DEBUG) logging.",
)
@click.version_option(__version__, prog_name="docker-tags")
def main(image: str, print_updated: bool, strategy: str, verbose: bool) -> None:
    """docker-tags — list the tags of a Docker Hub image.

    IMAGE is an image name, e.g. alpine or library/ubuntu.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    settings = DEFAULT_SETTINGS

    if image == PLUGIN_METADATA_COMMAND:
        _print_plugin_metadata(settings)
        return

    try:
        ref = parse_image_name(image)
    except ImageNameError as exc:
        raise click.ClickException(str(exc)) from exc

    client = HubClient(settings)
    reporter = make_reporter(sys.stdout.isatty())

    try:
        tags = fetch_tags(client, ref, reporter, settings, strategy=strategy.lower())
    except RegistryError as exc:
        raise click.ClickException(f"Failed to fetch tags: {exc}") from exc

    for line in format_tags(tags, show_updated=print_updated):
        click.echo(line)


def run(argv: list[str] | None = None) -> None:
    """Console-script entry point, also used when invoked as ``docker tags``."""
    args = sys.argv[1:] if argv is None else argv
    main(args=strip_plugin_subcommand(list(args)), prog_name="docker-tags")


if __name__ == "__main__":
    run()
