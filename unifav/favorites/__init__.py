"""Favorites module -- persisted favorite records and reconciliation."""

from unifav.favorites.reconcile import mark_favorites
from unifav.favorites.records import FavoriteRecord
from unifav.favorites.store import AddOutcome, FavoritesStore, RemoveOutcome

__all__ = ["AddOutcome", "FavoriteRecord", "FavoritesStore", "RemoveOutcome", "mark_favorites"]
