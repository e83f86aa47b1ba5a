"""Process-wide match counters with explicit read-and-reset."""

from __future__ import annotations

import threading
from collections import Counter

MATCHED = "matched"
FILTERED = "filtered"


class MatchStats:
    """Thread-safe counters for rule evaluation outcomes."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: Counter[str] = Counter()

    def record(self, key: str, amount: int = 1) -> None:
        with self._lock:
            self._counts[key] += amount

    def record_match(self) -> None:
        self.record(MATCHED)

    def record_filtered(self) -> None:
        self.record(FILTERED)

    def get_and_reset(self, key: str) -> int:
        """Return the current value of one counter and zero it."""
        with self._lock:
            return self._counts.pop(key, 0)

    def snapshot(self, *, reset: bool = False) -> dict[str, int]:
        """Return all counters, optionally zeroing them in the same step."""
        with self._lock:
            out = {MATCHED: 0, FILTERED: 0, **self._counts}
            if reset:
                self._counts.clear()
            return out


_DEFAULT_STATS = MatchStats()


def default_stats() -> MatchStats:
    """Return the process-wide counters instance."""
    return _DEFAULT_STATS
