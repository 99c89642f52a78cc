"""Render tags for printing."""

from __future__ import annotations

from docker_tags.models import TagRecord


def format_tag(tag: TagRecord, show_updated: bool = False) -> str:
    """Return ``name`` or, with *show_updated*, ``name (YYYY-MM-DD)``."""
    if not show_updated:
        return tag.name
    date = tag.last_updated.split("T", 1)[0]
    return f"{tag.name} ({date})"


def format_tags(tags: list[TagRecord], show_updated: bool = False) -> list[str]:
    """Format *tags* one per line, keeping their order."""
    return [format_tag(tag, show_updated) for tag in tags]
