"""
Shared plumbing for the record services.

Every service receives the ``RecordStore`` plus two injectable
capabilities: an ID generator and a clock.  Production code uses
random UUIDs and the current UTC time; tests pass deterministic
replacements.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Type, TypeVar

import pydantic

from ..core.errors import ValidationError
from ..stores.record_store import RecordStore


logger = logging.getLogger(__name__)

S = TypeVar("S", bound=pydantic.BaseModel)


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordService:
    """Base class holding the store and the injected capabilities."""

    def __init__(
        self,
        store: RecordStore,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._store = store
        self._new_id = id_factory or generate_id
        self._now = clock or utcnow

    @staticmethod
    def parse(schema: Type[S], payload: Any, message: str) -> S:
        """Validate ``payload`` against ``schema``.

        Raises:
            ValidationError: With ``message`` if the payload is not an
                object or any field is missing or of the wrong type.
        """
        if not isinstance(payload, dict):
            raise ValidationError(message)
        try:
            return schema.model_validate(payload)
        except pydantic.ValidationError as exc:
            logger.info(
                "Rejected %s payload: %s",
                schema.__name__,
                "; ".join(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in exc.errors()),
            )
            raise ValidationError(message) from exc
