"""Data Access Layer over the metadata key/value table.

Users live in one JSON list under a single record key (``wiremit_users`` by
default), mirroring how the browser client kept them in local storage.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional

from .schema import BASIC_UTC_NOW

logger = logging.getLogger("wiremit.db")


class Database:
    def __init__(self, db_path: Path, users_record_key: str = "wiremit_users"):
        self.db_path = db_path
        self.users_record_key = users_record_key

    # ------------------------------------------------------------------
    # Connection helpers
    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    # ------------------------------------------------------------------
    # Metadata
    def get_value(self, key: str) -> Optional[str]:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("SELECT value FROM metadata WHERE key=?", (key,))
            row = cur.fetchone()
            return row[0] if row else None

    def set_value(self, key: str, value: str) -> None:
        with self._connect() as conn:
            conn.execute(
                "INSERT INTO metadata(key,value) VALUES(?,?) "
                "ON CONFLICT(key) DO UPDATE SET value=excluded.value, "
                f"updated_at=({BASIC_UTC_NOW})",
                (key, value),
            )

    # ------------------------------------------------------------------
    # Users
    def list_users(self) -> List[Dict[str, Any]]:
        raw = self.get_value(self.users_record_key)
        if not raw:
            return []
        try:
            users = json.loads(raw)
        except ValueError:
            logger.error("user record '%s' is not valid JSON; treating as empty", self.users_record_key)
            return []
        if not isinstance(users, list):
            logger.error("user record '%s' is not a list; treating as empty", self.users_record_key)
            return []
        return [u for u in users if isinstance(u, dict)]

    def find_user(self, email: str) -> Optional[Dict[str, Any]]:
        for user in self.list_users():
            if user.get("email") == email:
                return user
        return None

    def append_user(self, user: Dict[str, Any]) -> None:
        users = self.list_users()
        users.append(user)
        self.set_value(self.users_record_key, json.dumps(users, ensure_ascii=False))
