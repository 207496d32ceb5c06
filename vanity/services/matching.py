"""
Address matching

Comparison is exact-case against the EIP-55 checksummed address, so a
lowercase pattern only matches where the checksum leaves those letters
lowercase.
"""

from vanity.schemas.criteria import MatchCriteria


def matches(address: str, prefix: str, suffix: str) -> bool:
    return address.startswith(prefix) and address.endswith(suffix)


def criteria_matches(address: str, criteria: MatchCriteria) -> bool:
    return matches(address, criteria.prefix, criteria.suffix)
