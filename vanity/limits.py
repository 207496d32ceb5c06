"""
Pattern and address size limits used by criteria validation and the worker policy.
"""

# Address shape.
ADDRESS_PREFIX = "0x"
ADDRESS_HEX_CHARS = 40
ADDRESS_BYTES = 20

# Pattern limits, counted in hex digits (the "0x" marker is not counted).
MAX_PREFIX_ONLY_HEX_CHARS = 5
MAX_SUFFIX_ONLY_HEX_CHARS = 5
MAX_COMBINED_HEX_CHARS = 7

# Ways a single pattern character can come out of an EIP-55 address.
DIGIT_ALTERNATIVES = 16
LETTER_ALTERNATIVES = 32


def expected_attempts_for(pattern_hex: str) -> int:
    """Return the expected number of draws for pattern_hex under exact-case matching."""
    attempts = 1
    for char in pattern_hex:
        attempts *= DIGIT_ALTERNATIVES if char.isdigit() else LETTER_ALTERNATIVES
    return attempts
