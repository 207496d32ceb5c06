"""In-process search counters, shared by every coordinator in the process."""

from collections import Counter
from threading import Lock
from typing import Dict

ITERATIONS = "search_iterations_total"
INVALID_SCALARS = "search_invalid_scalar_total"
LATE_MATCHES = "search_late_matches_discarded_total"
OUTCOME_PREFIX = "searches_"

_COUNTERS: Counter = Counter()
_LOCK = Lock()


def increment_counter(name: str, value: int = 1) -> None:
    with _LOCK:
        _COUNTERS[name] += value


def record_outcome(outcome: str) -> None:
    """outcome is one of: won, timed_out, cancelled, failed"""
    increment_counter(f"{OUTCOME_PREFIX}{outcome}_total")


def get_counters_snapshot() -> Dict[str, int]:
    with _LOCK:
        return dict(_COUNTERS)


def reset_counters() -> None:
    with _LOCK:
        _COUNTERS.clear()
