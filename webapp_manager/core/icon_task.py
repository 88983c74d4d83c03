"""Background icon download.

Icon resolution blocks on the network, so the UI runs it on a worker
thread and polls for the single result from its main loop.
"""

import queue
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ..utils.logger import get_logger
from .icon_resolver import resolve_icon

logger = get_logger(__name__)


@dataclass(frozen=True)
class IconDownloadOutcome:
    """Terminal result of a background icon download.

    Exactly one of ``path`` and ``error`` is set.
    """

    path: Optional[Path] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.path is not None


class IconDownloadTask:
    """Runs one icon download on a daemon thread.

    The worker sends exactly one outcome through a single-slot queue.
    :meth:`poll` never blocks; a worker that ends without sending is
    reported as a failed outcome.
    """

    def __init__(
        self, url: str, resolver: Callable[[str], Path] = resolve_icon
    ) -> None:
        """Initialize task.

        Args:
            url: Page URL to resolve the icon of
            resolver: Callable doing the blocking resolution
        """
        self.url = url
        self._resolver = resolver
        self._results: "queue.Queue[IconDownloadOutcome]" = queue.Queue(maxsize=1)
        self._thread: Optional[threading.Thread] = None
        self._outcome: Optional[IconDownloadOutcome] = None

    def start(self) -> "IconDownloadTask":
        """Start the worker thread."""
        if self._thread is not None:
            raise RuntimeError("Icon download already started")

        self._thread = threading.Thread(
            target=self._run, name="icon-download", daemon=True
        )
        self._thread.start()
        logger.debug(f"Icon download started for {self.url}")
        return self

    def _run(self) -> None:
        try:
            path = self._resolver(self.url)
        except Exception as e:
            logger.warning(f"Icon download failed: {e}")
            self._results.put(IconDownloadOutcome(error=e))
            return
        self._results.put(IconDownloadOutcome(path=path))

    @property
    def pending(self) -> bool:
        """True while no outcome has been collected."""
        return self._outcome is None

    def poll(self) -> Optional[IconDownloadOutcome]:
        """Collect the outcome without blocking.

        Returns:
            None while the worker is running, the outcome afterwards
        """
        if self._outcome is not None:
            return self._outcome

        try:
            self._outcome = self._results.get_nowait()
        except queue.Empty:
            if self._thread is None or self._thread.is_alive():
                return None
            # The worker may have put its result right before exiting
            try:
                self._outcome = self._results.get_nowait()
            except queue.Empty:
                logger.error(f"Icon download for {self.url} ended without a result")
                self._outcome = IconDownloadOutcome(
                    error=RuntimeError("Icon download ended without a result")
                )

        return self._outcome

    def wait(self, timeout: Optional[float] = None) -> Optional[IconDownloadOutcome]:
        """Block until the worker ends, then poll."""
        if self._thread is not None:
            self._thread.join(timeout)
        return self.poll()
