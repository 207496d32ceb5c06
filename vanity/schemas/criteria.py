"""
Match criteria schema - validated once, immutable afterwards
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from vanity.limits import (
    ADDRESS_PREFIX,
    MAX_COMBINED_HEX_CHARS,
    MAX_PREFIX_ONLY_HEX_CHARS,
    MAX_SUFFIX_ONLY_HEX_CHARS,
    expected_attempts_for,
)

_PREFIX_RE = re.compile(r"^0x[0-9a-fA-F]*$")
_SUFFIX_RE = re.compile(r"^[0-9a-fA-F]*$")


class MatchCriteria(BaseModel):
    """Prefix and/or suffix an address must carry, compared with exact case"""
    model_config = ConfigDict(frozen=True)

    prefix: str = Field(default="", max_length=len(ADDRESS_PREFIX) + MAX_COMBINED_HEX_CHARS)
    suffix: str = Field(default="", max_length=MAX_COMBINED_HEX_CHARS)

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, value: str) -> str:
        if value and not _PREFIX_RE.match(value):
            raise ValueError("prefix must start with '0x' and contain only hex digits")
        return value

    @field_validator("suffix")
    @classmethod
    def validate_suffix(cls, value: str) -> str:
        if not _SUFFIX_RE.match(value):
            raise ValueError("suffix must contain only hex digits")
        return value

    @model_validator(mode="after")
    def validate_lengths(self) -> "MatchCriteria":
        prefix_len = len(self.prefix_hex)
        suffix_len = len(self.suffix)

        if prefix_len == 0 and suffix_len == 0:
            raise ValueError("at least one hex digit of prefix or suffix is required")
        if prefix_len and suffix_len:
            if prefix_len + suffix_len > MAX_COMBINED_HEX_CHARS:
                raise ValueError(
                    f"prefix and suffix together must not exceed {MAX_COMBINED_HEX_CHARS} hex digits"
                )
        elif prefix_len > MAX_PREFIX_ONLY_HEX_CHARS:
            raise ValueError(f"prefix must not exceed {MAX_PREFIX_ONLY_HEX_CHARS} hex digits after '0x'")
        elif suffix_len > MAX_SUFFIX_ONLY_HEX_CHARS:
            raise ValueError(f"suffix must not exceed {MAX_SUFFIX_ONLY_HEX_CHARS} hex digits")
        return self

    @property
    def prefix_hex(self) -> str:
        """Prefix without the '0x' marker"""
        return self.prefix[len(ADDRESS_PREFIX):] if self.prefix else ""

    @property
    def hex_length(self) -> int:
        return len(self.prefix_hex) + len(self.suffix)

    @property
    def is_combined(self) -> bool:
        return bool(self.prefix_hex) and bool(self.suffix)

    def expected_attempts(self) -> int:
        return expected_attempts_for(self.prefix_hex + self.suffix)
