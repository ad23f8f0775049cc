import json
import logging
import sqlite3
from typing import Any

from pydantic import ValidationError

from src.domain.entities import ButtonSettings

logger = logging.getLogger(__name__)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteOptionStore:
    """SQLite adapter for the settings record (one row in a key-value table)."""

    def __init__(self, db_path: str, option_key: str):
        self.db_path = db_path
        self.option_key = option_key
        self._ensure_table()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def _ensure_table(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS options (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
            )
            conn.commit()
        finally:
            conn.close()

    def load(self) -> ButtonSettings | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT value FROM options WHERE key = ?", (self.option_key,)
            ).fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return self._map_row(row)

    def save(self, settings: ButtonSettings) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO options (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value=excluded.value
            """,
                (self.option_key, settings.model_dump_json()),
            )
            conn.commit()
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> ButtonSettings | None:
        # Missing keys are filled from model defaults; unreadable rows count as absent.
        try:
            data = json.loads(row["value"])
            return ButtonSettings.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Ignoring unreadable settings record %r: %s", self.option_key, e)
            return None
