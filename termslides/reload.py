"""Live reload — polls the deck file's modification time."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from .source import SourceError

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1.0


class ReloadMonitor:
    """Remembers the last seen mtime of *path* and reloads when it changes.

    :meth:`start` must run before the first :meth:`poll`, otherwise the
    first tick would see a change and reload needlessly.
    """

    def __init__(
        self,
        path: str,
        interval: float = DEFAULT_INTERVAL,
        stat: Callable[[str], os.stat_result] = os.stat,
    ) -> None:
        self.path = path
        self.interval = interval
        self._stat = stat
        self._last_mtime: int | None = None

    @property
    def last_mtime(self) -> int | None:
        return self._last_mtime

    def _mtime(self) -> int:
        return self._stat(self.path).st_mtime_ns

    def start(self) -> None:
        try:
            self._last_mtime = self._mtime()
        except OSError as exc:
            logger.debug("Initial stat of %s failed: %s", self.path, exc)
            self._last_mtime = None

    def poll(self, reload: Callable[[], None]) -> bool:
        """Call *reload* if the file changed since the last successful reload.

        Stat and read failures are logged and swallowed; the recorded mtime
        is left alone so the next poll tries again.
        """
        try:
            mtime = self._mtime()
        except OSError as exc:
            logger.debug("Stat of %s failed: %s", self.path, exc)
            return False

        if mtime == self._last_mtime:
            return False

        try:
            reload()
        except (OSError, SourceError, ValueError) as exc:
            logger.warning("Reload of %s failed, keeping previous slides: %s", self.path, exc)
            return False

        logger.info("Reloaded %s", self.path)
        self._last_mtime = mtime
        return True
