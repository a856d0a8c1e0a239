"""Per-server cooldown tracking for report links."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from cachetools import TTLCache

logger = logging.getLogger(__name__)


class CooldownStore:
    """
    Remembers which reports were recently answered in which server.

    Entries expire after ``window_seconds``. Expired entries never block a
    response, but stay in memory until ``purge_expired`` is called.

    Args:
        window_seconds: How long a report stays on cooldown.
        maxsize: Upper bound on tracked entries; the least recently used
            entry is evicted when full.
        timer: Clock returning seconds, monotonic by default.
    """

    def __init__(
        self,
        window_seconds: float,
        maxsize: int = 10_000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self.window_seconds = window_seconds
        self._entries: TTLCache[tuple[int, str], float] = TTLCache(
            maxsize=maxsize, ttl=window_seconds, timer=timer
        )

    def __len__(self) -> int:
        return len(self._entries)

    def is_on_cooldown(self, scope_id: int, report_code: str) -> bool:
        """Check whether a report was answered in a server within the window."""
        return (scope_id, report_code) in self._entries

    def put(self, scope_id: int, report_code: str) -> None:
        """
        Start (or restart) the cooldown for a report in a server.

        TTLCache also drops expired entries on insert, so call
        ``purge_expired`` first when the removed count matters.
        """
        self._entries[(scope_id, report_code)] = self._entries.timer()

    def purge_expired(self) -> int:
        """Drop expired entries and return how many were removed."""
        removed = len(self._entries.expire())
        if removed:
            logger.debug(f"Purged {removed} expired cooldown entries")
        return removed
