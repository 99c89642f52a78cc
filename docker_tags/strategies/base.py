"""Base class for all fetch strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Protocol

from docker_tags.config import Settings
from docker_tags.models import FetchSession, PageResult
from docker_tags.progress import BaseReporter

logger = logging.getLogger(__name__)


class PageFetcher(Protocol):
    """What a strategy needs from :class:`~docker_tags.registry.client.HubClient`."""

    def fetch_page(
        self,
        url: str,
        params: dict[str, int] | None = None,
    ) -> PageResult: ...


class BaseStrategy(ABC):
    """Abstract base class for the ways of walking a paginated tags listing.

    Subclasses must define :attr:`name` and implement :meth:`fetch`.

    Args:
        client: Page fetcher, usually a :class:`HubClient`.
        settings: Run-wide settings (page sizes, worker count).
    """

    #: Name used to select the strategy on the command line.
    name: str = ""

    def __init__(self, client: PageFetcher, settings: Settings) -> None:
        self.client = client
        self.settings = settings

    @abstractmethod
    def fetch(self, url: str, reporter: BaseReporter) -> FetchSession:
        """Retrieve every tag of the listing at *url*.

        Args:
            url: Tags listing URL, without query string.
            reporter: Progress reporter to start and advance.

        Returns:
            A :class:`FetchSession` holding the tags in registry order.

        Raises:
            RegistryError: On the first failed page; nothing is retried.
        """
