"""
Logging configuration
Search events are logged but never include key material
"""

import logging
import sys
from typing import Set


class SecretFilter(logging.Filter):
    """Filter that redacts anything that may carry key material"""

    SENSITIVE_KEYS: Set[str] = {
        "mnemonic",
        "phrase",
        "words",
        "seed",
        "entropy",
        "private",
        "secret",
        "passphrase",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if key in msg and ("=" in msg or ":" in msg):
                    # Likely contains a sensitive value assignment
                    record.msg = "[REDACTED - Sensitive data filtered]"
                    record.args = ()
                    break
        return True


def setup_logging(level: str = "INFO"):
    """Configure application logging"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    root = logging.getLogger()
    root.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)


# Search lifecycle logger
search_logger = logging.getLogger("vanity.search")


def log_search_started(prefix: str, suffix: str, workers: int, expected: int):
    """Log search start (patterns are public, key material is not)"""
    search_logger.info(
        "Search started prefix=%r suffix=%r workers=%d expected_attempts=%d",
        prefix, suffix, workers, expected,
    )


def log_search_won(address: str, iterations: int, elapsed: float):
    """Log the winning address only"""
    search_logger.info(f"Match {address} after {iterations} iterations in {elapsed:.2f}s")


def log_search_timed_out(reason: str, iterations: int):
    """Log a bounded search that ran out"""
    search_logger.warning(f"Search gave up ({reason}) after {iterations} iterations")


def log_search_cancelled(iterations: int):
    search_logger.warning(f"Search cancelled after {iterations} iterations")


def log_search_failed(error: BaseException):
    """Log a systemic failure (type only)"""
    search_logger.error("Search aborted type=%s", type(error).__name__)
