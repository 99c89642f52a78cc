"""Sequential strategy — follows the registry's ``next`` cursor page by page."""

from __future__ import annotations

import logging

from docker_tags.models import FetchSession
from docker_tags.progress import BaseReporter
from docker_tags.registry.client import MalformedResponse
from docker_tags.strategies.base import BaseStrategy

logger = logging.getLogger(__name__)


class SequentialStrategy(BaseStrategy):
    """Request one page at a time, always using the cursor the registry returned."""

    name = "sequential"

    def fetch(self, url: str, reporter: BaseReporter) -> FetchSession:
        session = FetchSession()
        visited: set[str] = set()

        page = self.client.fetch_page(
            url, params={"page_size": self.settings.page_size}
        )
        session.start(page.total_count)
        reporter.start(page.total_count)

        while True:
            session.add(page.tags)
            reporter.advance(len(page.tags))
            logger.debug(
                "Retrieved %d/%d tags", session.retrieved_count, session.total_count
            )

            cursor = page.next_cursor
            if not cursor:
                break
            if cursor in visited:
                raise MalformedResponse(
                    f"Registry returned an already visited page: {cursor}"
                )
            visited.add(cursor)

            page = self.client.fetch_page(cursor)

        return session
