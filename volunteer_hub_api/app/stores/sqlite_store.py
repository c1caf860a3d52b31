"""
SQLite implementation of the KeyValueStore.

Every map lives in the shared ``stable_maps`` table and is addressed by
its ``map_id``.  Values are stored as JSON text.  Each insert runs in
its own transaction, so a crash leaves either the whole record or
nothing.  A new connection is opened per operation, mirroring the rest
of the ``db`` helpers.
"""

import json
import logging
import sqlite3
from typing import Any, Dict, List, Optional

from ..core.db import get_cursor, init_db
from .interfaces import DuplicateKeyError, KeyValueStore


logger = logging.getLogger(__name__)


class SqliteKeyValueStore(KeyValueStore):
    """SQLite-backed key/value store for a single map."""

    def __init__(self, map_id: int, db_path: str) -> None:
        self.map_id = map_id
        self.db_path = db_path
        init_db(db_path)

    def insert(self, key: str, value: Dict[str, Any]) -> None:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    "INSERT INTO stable_maps (map_id, key, value) VALUES (?, ?, ?)",
                    (self.map_id, key, json.dumps(value)),
                )
        except sqlite3.IntegrityError as exc:
            raise DuplicateKeyError(key) from exc
        logger.debug("Inserted key %s into map %s", key, self.map_id)

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT value FROM stable_maps WHERE map_id = ? AND key = ?",
                (self.map_id, key),
            ).fetchone()
        return json.loads(row["value"]) if row else None

    def values(self) -> List[Dict[str, Any]]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                "SELECT value FROM stable_maps WHERE map_id = ? ORDER BY key",
                (self.map_id,),
            ).fetchall()
        return [json.loads(row["value"]) for row in rows]

    def contains(self, key: str) -> bool:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT 1 FROM stable_maps WHERE map_id = ? AND key = ?",
                (self.map_id, key),
            ).fetchone()
        return row is not None

    def __len__(self) -> int:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT COUNT(*) AS total FROM stable_maps WHERE map_id = ?",
                (self.map_id,),
            ).fetchone()
        return row["total"]
