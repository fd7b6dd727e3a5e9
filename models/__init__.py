from .candidate import Candidate
from .search_query import SearchQuery
from .fetch_identity import FetchIdentity

__all__ = [
    "Candidate",
    "SearchQuery",
    "FetchIdentity",
]
