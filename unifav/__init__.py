"""University directory search with locally persisted favorites."""
