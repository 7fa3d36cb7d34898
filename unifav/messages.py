"""User-facing text for every core outcome."""

from unifav.favorites.records import FavoriteRecord
from unifav.favorites.store import AddOutcome, RemoveOutcome

NO_CRITERIA = "Please provide at least the Country or University to search."
NO_RESULTS = "No universities found for this search."
NO_FAVORITES = "No universities have been favorited yet."
LOAD_FAILED = "Could not load saved favorites."
SAVE_FAILED = "Could not save the favorite."


def add_message(outcome: AddOutcome, favorite: FavoriteRecord) -> str:
    if outcome is AddOutcome.ADDED:
        return f'Favorited! "{favorite.name}" added to favorites.'
    return f'Already Exists: "{favorite.name}" is already in your favorites.'


def remove_message(outcome: RemoveOutcome, web_page: str, name: str | None = None) -> str:
    if outcome is RemoveOutcome.REMOVED:
        return f'Removed: "{name or web_page}" was removed from favorites.'
    return f"Not Found: {web_page} is not in your favorites."


def no_web_page_message(name: str) -> str:
    return f'Favorite Failed: "{name}" does not have a valid web page to add to favorites.'


def search_error_message(detail: str) -> str:
    return f"Search Error: {detail}"
