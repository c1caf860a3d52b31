"""
Record collections and the store that owns them.

A ``Collection`` turns a ``KeyValueStore`` of plain dicts into a typed,
append-only map of pydantic records.  ``RecordStore`` owns the four
collections of the service, each backed by its own map:

====  ==============
 id   collection
====  ==============
 0    volunteers
 1    events
 2    registrations
 3    feedbacks
====  ==============

The store is built once at application start and handed to request
handlers through a FastAPI dependency, so tests can swap in an
in-memory store.
"""

import logging
import threading
from typing import Callable, Generic, List, Optional, Type, TypeVar

from ..core.config import settings
from ..core.db import get_database_path
from ..schemas.event import Event
from ..schemas.feedback import Feedback
from ..schemas.registration import Registration
from ..schemas.volunteer import Volunteer
from .interfaces import KeyValueStore
from .memory_store import InMemoryKeyValueStore
from .sqlite_store import SqliteKeyValueStore


logger = logging.getLogger(__name__)

R = TypeVar("R", Volunteer, Event, Registration, Feedback)

VOLUNTEERS_MAP_ID = 0
EVENTS_MAP_ID = 1
REGISTRATIONS_MAP_ID = 2
FEEDBACKS_MAP_ID = 3


class Collection(Generic[R]):
    """Typed view over a key/value map.

    ``lock`` guards read-then-write sequences (such as a uniqueness scan
    followed by an insert) when handlers run concurrently.
    """

    def __init__(self, name: str, record_type: Type[R], backend: KeyValueStore) -> None:
        self.name = name
        self.record_type = record_type
        self._backend = backend
        self.lock = threading.RLock()

    def insert(self, record_id: str, record: R) -> R:
        """Insert a new record and return it.

        Raises:
            DuplicateKeyError: If ``record_id`` is already stored.
        """
        with self.lock:
            self._backend.insert(record_id, record.model_dump(mode="json", by_alias=True))
        return record

    def get(self, record_id: str) -> Optional[R]:
        """Return the record for ``record_id``, or None if not found."""
        value = self._backend.get(record_id)
        if value is None:
            return None
        return self.record_type.model_validate(value)

    def values(self) -> List[R]:
        """Return every record in key order."""
        return [self.record_type.model_validate(value) for value in self._backend.values()]

    def __len__(self) -> int:
        return len(self._backend)

    def __repr__(self) -> str:
        return f"Collection({self.name!r}, {self.record_type.__name__})"


class RecordStore:
    """The service's persistent state: four independent collections."""

    def __init__(self, backend_factory: Callable[[int], KeyValueStore]) -> None:
        self.volunteers: Collection[Volunteer] = Collection(
            "volunteers", Volunteer, backend_factory(VOLUNTEERS_MAP_ID)
        )
        self.events: Collection[Event] = Collection(
            "events", Event, backend_factory(EVENTS_MAP_ID)
        )
        self.registrations: Collection[Registration] = Collection(
            "registrations", Registration, backend_factory(REGISTRATIONS_MAP_ID)
        )
        self.feedbacks: Collection[Feedback] = Collection(
            "feedbacks", Feedback, backend_factory(FEEDBACKS_MAP_ID)
        )

    @classmethod
    def in_memory(cls) -> "RecordStore":
        return cls(lambda map_id: InMemoryKeyValueStore())

    @classmethod
    def sqlite(cls, db_path: str) -> "RecordStore":
        return cls(lambda map_id: SqliteKeyValueStore(map_id, db_path))

    @classmethod
    def from_settings(cls) -> "RecordStore":
        """Build the store selected by ``settings.storage_backend``."""
        backend = settings.storage_backend.lower()
        if backend == "memory":
            logger.info("Using in-memory record store")
            return cls.in_memory()
        if backend == "sqlite":
            db_path = get_database_path()
            logger.info("Using SQLite record store at %s", db_path)
            return cls.sqlite(db_path)
        raise ValueError(f"Unknown storage backend: {settings.storage_backend}")

    def counts(self) -> dict:
        """Return the number of records in each collection."""
        return {
            collection.name: len(collection)
            for collection in (self.volunteers, self.events, self.registrations, self.feedbacks)
        }
