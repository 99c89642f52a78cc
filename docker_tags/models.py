"""Data structures shared by the client and the fetch strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TagRecord:
    """A single tag of an image.

    Attributes:
        name: Tag name (e.g. ``3.19``).
        last_updated: ISO-8601 timestamp of the last push to the tag.
    """

    name: str
    last_updated: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TagRecord:
        return cls(name=data["name"], last_updated=data["last_updated"])


@dataclass(frozen=True)
class PageResult:
    """One page of the Docker Hub tags listing.

    Attributes:
        total_count: Total number of tags the registry reports for the image.
        next_cursor: URI of the following page, ``None`` on the last page.
        tags: Tags carried by this page, in registry order.
    """

    total_count: int
    next_cursor: str | None
    tags: tuple[TagRecord, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PageResult:
        return cls(
            total_count=data["count"],
            next_cursor=data.get("next"),
            tags=tuple(TagRecord.from_dict(item) for item in data["results"]),
        )


@dataclass
class FetchSession:
    """Working state of one fetch run."""

    total_count: int | None = None
    accumulated_tags: list[TagRecord] = field(default_factory=list)
    retrieved_count: int = 0

    def start(self, total_count: int) -> None:
        """Record the declared total; only the first call counts."""
        if self.total_count is None:
            self.total_count = total_count

    def add(self, tags: tuple[TagRecord, ...] | list[TagRecord]) -> None:
        self.accumulated_tags.extend(tags)
        self.retrieved_count += len(tags)
