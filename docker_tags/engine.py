"""Fetch engine — turns an image reference into its complete list of tags."""

from __future__ import annotations

import logging

from docker_tags.config import Settings
from docker_tags.models import TagRecord
from docker_tags.progress import BaseReporter
from docker_tags.registry.client import HubClient
from docker_tags.registry.parser import ImageReference
from docker_tags.strategies.base import BaseStrategy
from docker_tags.strategies.parallel import ParallelStrategy
from docker_tags.strategies.sequential import SequentialStrategy

logger = logging.getLogger(__name__)

STRATEGIES: dict[str, type[BaseStrategy]] = {
    SequentialStrategy.name: SequentialStrategy,
    ParallelStrategy.name: ParallelStrategy,
}

DEFAULT_STRATEGY = SequentialStrategy.name


def fetch_tags(
    client: HubClient,
    ref: ImageReference,
    reporter: BaseReporter,
    settings: Settings,
    strategy: str = DEFAULT_STRATEGY,
) -> list[TagRecord]:
    """Retrieve every tag of *ref*, in registry order.

    The reporter is always finished (and its display cleared) before this
    returns or raises.

    Args:
        client: Docker Hub client.
        ref: Repository to list.
        reporter: Progress reporter.
        settings: Run-wide settings.
        strategy: Name of the strategy in :data:`STRATEGIES`.

    Returns:
        All tags, in the order the registry paginated them.

    Raises:
        ValueError: If *strategy* is unknown.
        RegistryError: If any page could not be fetched.
    """
    if strategy not in STRATEGIES:
        available = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown strategy '{strategy}'. Available: {available}")

    runner = STRATEGIES[strategy](client, settings)
    url = client.tags_url(ref)
    logger.debug("Listing tags of %s with %s strategy", ref.repository, strategy)

    try:
        session = runner.fetch(url, reporter)
    finally:
        reporter.finish()

    total = session.total_count
    if total is not None and session.retrieved_count != total:
        logger.warning(
            "Registry announced %d tags for %s but %d were retrieved",
            session.total_count,
            ref.repository,
            session.retrieved_count,
        )
    return session.accumulated_tags
