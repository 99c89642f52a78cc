"""Parallel strategy — computes every page up front and fetches them concurrently."""

from __future__ import annotations

import logging
import math
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from docker_tags.models import FetchSession, PageResult, TagRecord
from docker_tags.progress import BaseReporter
from docker_tags.strategies.base import BaseStrategy

logger = logging.getLogger(__name__)


class ParallelStrategy(BaseStrategy):
    """Probe the total tag count, then fetch all pages on a thread pool.

    Relies on the registry reporting the same total for the probe and for
    every page; tags pushed or deleted in between can be missed or repeated.
    """

    name = "parallel"

    def fetch(self, url: str, reporter: BaseReporter) -> FetchSession:
        session = FetchSession()

        probe = self.client.fetch_page(
            url, params={"page_size": self.settings.probe_page_size}
        )
        session.start(probe.total_count)
        reporter.start(probe.total_count)

        page_size = self.settings.page_size
        last_page = math.ceil(probe.total_count / page_size)
        logger.debug("Fetching %d pages of %d tags", last_page, page_size)
        if last_page == 0:
            return session

        # One slot per page; each slot is written by exactly one future.
        slots: list[tuple[TagRecord, ...] | None] = [None] * last_page

        # Limit workers to avoid hammering the registry
        max_workers = min(self.settings.max_workers, last_page)
        executor = ThreadPoolExecutor(max_workers=max_workers)
        try:
            futures: dict[Future[PageResult], int] = {
                executor.submit(
                    self.client.fetch_page,
                    url,
                    {"page_size": page_size, "page": index + 1},
                ): index
                for index in range(last_page)
            }
            for future in as_completed(futures):
                index = futures[future]
                page = future.result()
                slots[index] = page.tags
                reporter.advance(len(page.tags))
        except Exception as exc:
            logger.error("Fetching tags failed, abandoning remaining pages: %s", exc)
            executor.shutdown(wait=True, cancel_futures=True)
            raise
        except BaseException:
            # Interrupted: drop queued pages without waiting on in-flight ones.
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        else:
            executor.shutdown(wait=True)

        for tags in slots:
            session.add(tags or ())
        return session
