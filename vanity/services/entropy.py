"""
Cryptographically secure entropy
Uses only the system CSPRNG - no third-party randomness
"""

import secrets
from typing import Callable

from vanity.errors import EntropyGenerationError

EntropySource = Callable[[int], bytes]


def system_entropy(nbytes: int) -> bytes:
    return secrets.token_bytes(nbytes)


def generate_entropy(bits: int, source: EntropySource = system_entropy) -> bytes:
    """
    Draw bits // 8 fresh bytes from source

    Raises:
      ValueError if bits is not a positive multiple of 8
      EntropyGenerationError if the source is unavailable or misbehaves
    """
    if bits <= 0 or bits % 8:
        raise ValueError("entropy bits must be a positive multiple of 8")

    nbytes = bits // 8
    try:
        data = source(nbytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropyGenerationError(f"secure random source unavailable: {type(exc).__name__}") from exc

    if not isinstance(data, (bytes, bytearray)) or len(data) != nbytes:
        raise EntropyGenerationError(f"entropy source returned an unexpected value, wanted {nbytes} bytes")
    return bytes(data)
