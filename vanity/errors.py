"""
Error taxonomy for the derivation pipeline and the search coordinator
"""

from typing import Optional


class VanityError(Exception):
    """Base class for all search errors"""


class EntropyGenerationError(VanityError):
    """The secure randomness subsystem failed; aborts the whole search"""


class KeyDerivationError(VanityError):
    """Derived scalar is zero or not below the curve order; retried with fresh entropy"""


class MnemonicEncodingError(VanityError):
    """A phrase failed its own checksum; indicates a defect, never retried"""


class SearchTimedOut(VanityError):
    """No match within the configured deadline or iteration cap"""

    def __init__(self, reason: str, iterations: int, elapsed: Optional[float] = None):
        self.reason = reason
        self.iterations = iterations
        self.elapsed = elapsed
        message = f"search stopped without a match ({reason}) after {iterations} iterations"
        if elapsed is not None:
            message += f" in {elapsed:.1f}s"
        super().__init__(message)


class SearchCancelled(VanityError):
    """The search was cancelled by its caller"""

    def __init__(self, iterations: int):
        self.iterations = iterations
        super().__init__(f"search cancelled after {iterations} iterations")
