"""
Search result schemas
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from vanity.limits import ADDRESS_HEX_CHARS

ADDRESS_PATTERN = rf"^0x[0-9a-fA-F]{{{ADDRESS_HEX_CHARS}}}$"


class Candidate(BaseModel):
    """One iteration's account, before matching"""
    model_config = ConfigDict(frozen=True)

    mnemonic: Tuple[str, ...]
    address: str = Field(..., pattern=ADDRESS_PATTERN)


class SearchResult(BaseModel):
    """The single published winner of a search"""
    model_config = ConfigDict(frozen=True)

    mnemonic: Tuple[str, ...] = Field(..., min_length=12, max_length=24)
    address: str = Field(..., pattern=ADDRESS_PATTERN)
    iterations: int = Field(default=0, ge=0)
    elapsed_seconds: float = Field(default=0.0, ge=0)

    @property
    def phrase(self) -> str:
        return " ".join(self.mnemonic)

    def __repr__(self) -> str:
        # Never render the phrase in reprs that may end up in logs
        return f"SearchResult(address={self.address!r}, words={len(self.mnemonic)})"

    __str__ = __repr__
