"""Progress reporting while tags are being retrieved."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TimeElapsedColumn,
)

logger = logging.getLogger(__name__)


class BaseReporter(ABC):
    """Abstract progress reporter.

    The fetch strategies drive a reporter without knowing whether anything
    is displayed: :meth:`start` once the total is known, :meth:`advance`
    for every retrieved page, and :meth:`finish` before results are printed.
    """

    @abstractmethod
    def start(self, total: int) -> None:
        """Begin reporting towards *total* tags. Later calls are ignored."""

    @abstractmethod
    def advance(self, count: int) -> None:
        """Record *count* more retrieved tags."""

    @abstractmethod
    def finish(self) -> None:
        """Stop reporting and clear anything that was displayed."""


class NullReporter(BaseReporter):
    """Reporter used when stdout is not a terminal; displays nothing."""

    def start(self, total: int) -> None:
        pass

    def advance(self, count: int) -> None:
        pass

    def finish(self) -> None:
        pass


class RichReporter(BaseReporter):
    """Live progress bar rendered with :mod:`rich`.

    The bar is drawn on stderr and refreshed from rich's own timer thread,
    which animates the spinner and elapsed time. ``Progress`` serialises
    task updates and refreshes under a single lock.

    Args:
        console: Console to draw on (defaults to stderr).
        refresh_per_second: Refresh rate of the animation.
    """

    def __init__(
        self,
        console: Console | None = None,
        refresh_per_second: float = 10,
    ) -> None:
        self._progress = Progress(
            SpinnerColumn(style="green"),
            TimeElapsedColumn(),
            BarColumn(complete_style="cyan", finished_style="blue"),
            MofNCompleteColumn(),
            console=console or Console(stderr=True),
            transient=True,
            refresh_per_second=refresh_per_second,
        )
        self._task: TaskID | None = None

    def start(self, total: int) -> None:
        if self._task is not None:
            return
        logger.debug("Starting progress display for %d tags", total)
        self._task = self._progress.add_task("tags", total=total)
        self._progress.start()

    def advance(self, count: int) -> None:
        if self._task is not None:
            self._progress.advance(self._task, count)

    def finish(self) -> None:
        if self._task is not None:
            self._progress.stop()


def make_reporter(interactive: bool) -> BaseReporter:
    """Return a :class:`RichReporter` on a terminal, else a :class:`NullReporter`."""
    return RichReporter() if interactive else NullReporter()
