# VANITY Pydantic Schemas
from vanity.schemas.criteria import MatchCriteria
from vanity.schemas.result import Candidate, SearchResult

__all__ = [
    "MatchCriteria",
    "Candidate", "SearchResult",
]
