"""
Concurrent vanity search

Workers are asyncio tasks. Each iteration's hashing and scalar
multiplication runs in a thread pool sized to the worker count, so
a worker only suspends while its iteration is in flight. The first
outcome (result or error) placed on the single-slot channel wins;
every later one is dropped.
"""

import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

from vanity.config import Settings, get_settings, validate_search_settings
from vanity.errors import KeyDerivationError, SearchCancelled, SearchTimedOut
from vanity.logging_config import (
    log_search_cancelled,
    log_search_failed,
    log_search_started,
    log_search_timed_out,
    log_search_won,
)
from vanity.schemas.criteria import MatchCriteria
from vanity.schemas.result import Candidate, SearchResult
from vanity.services import keys
from vanity.services.entropy import EntropySource
from vanity.services.matching import criteria_matches
from vanity.services.telemetry import (
    INVALID_SCALARS,
    ITERATIONS,
    LATE_MATCHES,
    increment_counter,
    record_outcome,
)

logger = logging.getLogger("vanity.search")

Outcome = Union[SearchResult, BaseException]


def recommended_worker_count(
    criteria: MatchCriteria,
    settings: Settings,
    requested: Optional[int] = None,
) -> int:
    """
    Concurrency policy
    Combined patterns need ~16x more draws per extra digit, so they get the larger pool
    """
    if requested is None:
        requested = settings.COMBINED_WORKERS if criteria.is_combined else settings.SINGLE_SIDED_WORKERS
    return max(1, min(requested, settings.MAX_WORKERS))


class SearchCoordinator:
    """Runs one search; a coordinator is single use"""

    def __init__(
        self,
        criteria: MatchCriteria,
        worker_count: int,
        *,
        timeout: Optional[float] = None,
        max_iterations: Optional[int] = None,
        passphrase: str = "",
        entropy_bits: int = 256,
        language: str = "english",
        entropy_source: Optional[EntropySource] = None,
    ):
        if worker_count < 1:
            raise ValueError("worker_count must be >= 1")
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive")
        if max_iterations is not None and max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")

        self.criteria = criteria
        self.worker_count = worker_count
        self.timeout = timeout
        self.max_iterations = max_iterations
        self.passphrase = passphrase
        self.entropy_bits = entropy_bits
        self.language = language
        self._entropy_source = entropy_source

        self._iterations = 0
        self._active = 0
        self._started = False
        self._published = False
        self._cancel_requested = False
        self._started_at: Optional[float] = None
        self._stop: Optional[asyncio.Event] = None
        self._outcome: Optional[asyncio.Queue] = None

    @property
    def iterations(self) -> int:
        """Iterations started so far"""
        return self._iterations

    @property
    def elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        return time.monotonic() - self._started_at

    @property
    def stopped(self) -> bool:
        return self._stop is not None and self._stop.is_set()

    def cancel(self) -> None:
        """
        Stop the search; run() raises SearchCancelled
        Must be called from the event loop thread running the search
        """
        self._cancel_requested = True
        if self._outcome is not None:
            self._publish(SearchCancelled(self._iterations))

    async def run(self) -> SearchResult:
        if self._started:
            raise RuntimeError("SearchCoordinator.run() may only be called once")
        self._started = True
        self._stop = asyncio.Event()
        self._outcome = asyncio.Queue(maxsize=1)
        self._started_at = time.monotonic()

        log_search_started(
            self.criteria.prefix,
            self.criteria.suffix,
            self.worker_count,
            self.criteria.expected_attempts(),
        )

        if self._cancel_requested:
            self._publish(SearchCancelled(0))

        loop = asyncio.get_running_loop()
        executor = ThreadPoolExecutor(
            max_workers=self.worker_count,
            thread_name_prefix="vanity-worker",
        )
        self._active = self.worker_count
        workers = [
            asyncio.create_task(self._worker(loop, executor, worker_id))
            for worker_id in range(self.worker_count)
        ]

        try:
            try:
                await asyncio.wait_for(self._stop.wait(), timeout=self.timeout)
            except asyncio.TimeoutError:
                # No-op if a winner landed at the deadline
                self._publish(SearchTimedOut("deadline", self._iterations, self.elapsed))
            outcome = self._outcome.get_nowait()
        except asyncio.CancelledError:
            # Caller cancelled the task (Ctrl-C under asyncio.run)
            self._publish(SearchCancelled(self._iterations))
            record_outcome("cancelled")
            log_search_cancelled(self._iterations)
            raise
        finally:
            self._stop.set()
            # In-flight iterations finish; none start after this point
            await asyncio.gather(*workers, return_exceptions=True)
            executor.shutdown(wait=True)

        return self._finish(outcome)

    def _finish(self, outcome: Outcome) -> SearchResult:
        if isinstance(outcome, SearchResult):
            record_outcome("won")
            log_search_won(outcome.address, outcome.iterations, outcome.elapsed_seconds)
            return outcome

        if isinstance(outcome, SearchTimedOut):
            record_outcome("timed_out")
            log_search_timed_out(outcome.reason, outcome.iterations)
        elif isinstance(outcome, SearchCancelled):
            record_outcome("cancelled")
            log_search_cancelled(outcome.iterations)
        else:
            record_outcome("failed")
            log_search_failed(outcome)
        raise outcome

    def _publish(self, outcome: Outcome) -> bool:
        """Place outcome on the channel if it is the first; runs on the loop thread only"""
        if self._published:
            return False
        self._published = True
        self._stop.set()
        self._outcome.put_nowait(outcome)
        return True

    def _cap_reached(self) -> bool:
        return self.max_iterations is not None and self._iterations >= self.max_iterations

    def _derive(self) -> Candidate:
        return keys.draw_candidate(
            self.entropy_bits,
            self.passphrase,
            self._entropy_source,
            self.language,
        )

    async def _worker(self, loop: asyncio.AbstractEventLoop, executor: ThreadPoolExecutor, worker_id: int) -> None:
        try:
            while not self._stop.is_set():
                if self._cap_reached():
                    break

                self._iterations += 1
                increment_counter(ITERATIONS)
                try:
                    candidate = await loop.run_in_executor(executor, self._derive)
                except KeyDerivationError:
                    increment_counter(INVALID_SCALARS)
                    logger.debug("worker %d drew an invalid scalar, retrying", worker_id)
                    continue

                if not criteria_matches(candidate.address, self.criteria):
                    continue

                result = SearchResult(
                    mnemonic=candidate.mnemonic,
                    address=candidate.address,
                    iterations=self._iterations,
                    elapsed_seconds=self.elapsed,
                )
                if not self._publish(result):
                    increment_counter(LATE_MATCHES)
                return
        except Exception as exc:
            if not self._publish(exc):
                logger.debug("worker %d failed after the search ended type=%s", worker_id, type(exc).__name__)
        finally:
            self._active -= 1
            if self._active == 0 and self._cap_reached():
                self._publish(SearchTimedOut("iteration_cap", self._iterations, self.elapsed))


async def run_search(
    criteria: MatchCriteria,
    worker_count: Optional[int] = None,
    *,
    settings: Optional[Settings] = None,
    entropy_source: Optional[EntropySource] = None,
) -> SearchResult:
    """
    Search until one account matches criteria

    Raises:
      SearchTimedOut when the deadline or iteration cap is hit
      EntropyGenerationError when the secure random source fails
    """
    settings = settings or get_settings()
    validate_search_settings(settings)

    coordinator = SearchCoordinator(
        criteria,
        recommended_worker_count(criteria, settings, worker_count),
        timeout=settings.search_timeout,
        max_iterations=settings.iteration_cap,
        passphrase=settings.SEED_PASSPHRASE,
        entropy_bits=settings.ENTROPY_BITS,
        language=settings.MNEMONIC_LANGUAGE,
        entropy_source=entropy_source,
    )
    return await coordinator.run()


def run_search_sync(
    criteria: MatchCriteria,
    worker_count: Optional[int] = None,
    *,
    settings: Optional[Settings] = None,
    entropy_source: Optional[EntropySource] = None,
) -> SearchResult:
    """Blocking wrapper for callers without an event loop"""
    return asyncio.run(
        run_search(criteria, worker_count, settings=settings, entropy_source=entropy_source)
    )
