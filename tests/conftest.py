"""
Pytest fixtures for vanity search tests
"""

import os
import secrets
from threading import Lock
from typing import Iterable, Optional

import pytest

# Set test environment before imports
os.environ.setdefault("SEARCH_TIMEOUT_SECONDS", "30")
os.environ.setdefault("MAX_ITERATIONS", "0")

from vanity.config import Settings
from vanity.schemas.criteria import MatchCriteria
from vanity.services.keys import derive_candidate
from vanity.services.telemetry import reset_counters


class ScriptedEntropy:
    """Thread-safe entropy source: replays script, then repeats fallback (or random bytes)"""

    def __init__(self, script: Iterable[bytes] = (), fallback: Optional[bytes] = None):
        self._script = list(script)
        self._fallback = fallback
        self._lock = Lock()
        self.calls = 0

    def __call__(self, nbytes: int) -> bytes:
        with self._lock:
            self.calls += 1
            if self._script:
                return self._script.pop(0)
            if self._fallback is not None:
                return self._fallback
        return secrets.token_bytes(nbytes)


def make_settings(**overrides) -> Settings:
    values = {
        "ENTROPY_BITS": 256,
        "SINGLE_SIDED_WORKERS": 4,
        "COMBINED_WORKERS": 8,
        "MAX_WORKERS": 16,
        "SEARCH_TIMEOUT_SECONDS": 30,
        "MAX_ITERATIONS": 0,
    }
    values.update(overrides)
    return Settings(**values)


def criteria_for(address: str, prefix_hex: int = 3, suffix_hex: int = 2) -> MatchCriteria:
    """Criteria that address satisfies"""
    return MatchCriteria(
        prefix=address[:2 + prefix_hex],
        suffix=address[len(address) - suffix_hex:] if suffix_hex else "",
    )


def criteria_missing(address: str) -> MatchCriteria:
    """Criteria that address cannot satisfy"""
    other = "1" if address[2] == "0" else "0"
    return MatchCriteria(prefix="0x" + other)


@pytest.fixture(autouse=True)
def clean_counters():
    reset_counters()
    yield
    reset_counters()


@pytest.fixture(scope="session")
def winner_entropy() -> bytes:
    return bytes(range(32))


@pytest.fixture(scope="session")
def winner_address(winner_entropy: bytes) -> str:
    return derive_candidate(winner_entropy).address


@pytest.fixture(scope="session")
def zero_entropy() -> bytes:
    return bytes(32)


@pytest.fixture(scope="session")
def zero_address(zero_entropy: bytes) -> str:
    return derive_candidate(zero_entropy).address
