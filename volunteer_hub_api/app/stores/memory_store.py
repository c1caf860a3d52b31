"""
In-memory implementation of the KeyValueStore.

Values are deep-copied on the way in and out so callers can never
mutate stored state through a returned reference.  Data is lost when
the process exits; use it for tests and demos.
"""

import copy
from typing import Any, Dict, List, Optional

from .interfaces import DuplicateKeyError, KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed key/value store."""

    def __init__(self) -> None:
        self._data: Dict[str, Dict[str, Any]] = {}

    def insert(self, key: str, value: Dict[str, Any]) -> None:
        if key in self._data:
            raise DuplicateKeyError(key)
        self._data[key] = copy.deepcopy(value)

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def values(self) -> List[Dict[str, Any]]:
        return [copy.deepcopy(self._data[key]) for key in sorted(self._data)]

    def contains(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
