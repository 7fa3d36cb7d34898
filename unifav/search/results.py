"""Search outcomes handed to the presentation layer."""

from dataclasses import dataclass, field
from typing import Tuple

from unifav.search.records import UniversityRecord


@dataclass(frozen=True)
class SearchResult:
    """Base for the two possible outcomes of ``SearchCoordinator.execute``."""

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class SearchOk(SearchResult):
    """The directory answered; ``records`` may legitimately be empty."""

    records: Tuple[UniversityRecord, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class TransportError(SearchResult):
    """Network, HTTP status or parse failure, with a human-readable message."""

    message: str = ""
