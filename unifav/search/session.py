"""Search lifecycle state machine.

State flows:

  IDLE -> SEARCHING -> RESULTS_FOUND
                    -> RESULTS_EMPTY
                    -> FAILED

Any state may go back to SEARCHING when a new search starts. Every search
is tagged with a generation number; a response that arrives after a newer
search has started is discarded instead of overwriting the newer state.
"""

from enum import Enum
from typing import Optional, Tuple

from unifav.search.coordinator import SearchCoordinator
from unifav.search.records import UniversityRecord
from unifav.search.results import SearchOk, SearchResult, TransportError
from unifav.utils.logger import get_logger

log = get_logger(__name__)


class SearchState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    RESULTS_EMPTY = "results_empty"
    RESULTS_FOUND = "results_found"
    FAILED = "failed"


class SearchSession:
    """Holds the state of the most recent search for one presentation surface."""

    def __init__(self, coordinator: SearchCoordinator):
        self._coordinator = coordinator
        self._generation = 0
        self.state = SearchState.IDLE
        self.result: Optional[SearchResult] = None

    @property
    def has_searched(self) -> bool:
        """False until a search has completed at least once."""
        return self.state not in (SearchState.IDLE, SearchState.SEARCHING)

    @property
    def records(self) -> Tuple[UniversityRecord, ...]:
        if isinstance(self.result, SearchOk):
            return self.result.records
        return ()

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self.result, TransportError):
            return self.result.message
        return None

    async def search(
        self, country: Optional[str], university_name: Optional[str]
    ) -> Optional[SearchResult]:
        """Run a search and apply its outcome.

        ``ValidationError`` propagates with the state left untouched. Returns
        None when the response was superseded by a newer search.
        """
        query = self._coordinator.build_query(country, university_name)

        self._generation += 1
        tag = self._generation
        self.state = SearchState.SEARCHING
        self.result = None

        result = await self._coordinator.execute(query)
        if tag != self._generation:
            log.debug("Discarding stale search result (generation %d < %d)", tag, self._generation)
            return None

        self.result = result
        self.state = _classify(result)
        return result

    def reset(self) -> None:
        """Back to IDLE; any in-flight search becomes stale."""
        self._generation += 1
        self.state = SearchState.IDLE
        self.result = None


def _classify(result: SearchResult) -> SearchState:
    if isinstance(result, SearchOk):
        return SearchState.RESULTS_FOUND if result.records else SearchState.RESULTS_EMPTY
    return SearchState.FAILED
