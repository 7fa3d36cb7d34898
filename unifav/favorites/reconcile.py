"""Reconcile search results against stored favorites."""

from typing import Iterable, List, Tuple

from unifav.favorites.records import FavoriteRecord
from unifav.search.records import UniversityRecord


def mark_favorites(
    records: Iterable[UniversityRecord],
    favorites: Iterable[FavoriteRecord],
) -> List[Tuple[UniversityRecord, bool]]:
    """Pair each record with whether its first web page is already a favorite."""
    saved = {fav.web_page for fav in favorites}
    return [(record, record.first_web_page in saved) for record in records]
