"""Store interfaces (repository pattern).

Stores must be swappable.  A ``KeyValueStore`` is an ordered map from
text keys to JSON-compatible dicts; record collections are built on top
of it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class DuplicateKeyError(Exception):
    """Raised when inserting a key that is already present."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Key already exists: {key}")
        self.key = key


class KeyValueStore(ABC):
    """Interface for durable key/value persistence."""

    @abstractmethod
    def insert(self, key: str, value: Dict[str, Any]) -> None:
        """Store a new pair.

        Raises:
            DuplicateKeyError: If ``key`` is already present.
        """
        ...

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Return the value for ``key``, or None if not found."""
        ...

    @abstractmethod
    def values(self) -> List[Dict[str, Any]]:
        """Return all values ordered by key."""
        ...

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Check if a key exists."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...
