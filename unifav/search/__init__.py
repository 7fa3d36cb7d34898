"""Search module -- query construction, directory client, search lifecycle."""

from unifav.search.coordinator import SearchCoordinator
from unifav.search.query import Query, build_query
from unifav.search.records import UniversityRecord, parse_records
from unifav.search.results import SearchOk, SearchResult, TransportError
from unifav.search.session import SearchSession, SearchState

__all__ = [
    "Query",
    "SearchCoordinator",
    "SearchOk",
    "SearchResult",
    "SearchSession",
    "SearchState",
    "TransportError",
    "UniversityRecord",
    "build_query",
    "parse_records",
]
