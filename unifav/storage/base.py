"""Abstract key-value storage used to persist serialized blobs."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStorage(ABC):
    """Abstract interface -- swap backends without touching callers.

    Values are whole serialized blobs; ``set`` replaces the previous value
    in one step so readers never observe a partial write.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under *key*, or None when absent."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove *key*; a missing key is not an error."""
        ...

    async def aclose(self) -> None:
        """Release any held connections."""
