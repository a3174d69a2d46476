"""
Key-value record store.

Repositories only ever talk to a RecordStore; the pure progress and
leaderboard functions never touch one. Values are JSON-serializable
Python structures (lists/dicts of plain values).
"""
import json
import logging
from typing import Any, Optional, Protocol

from sqlalchemy.orm import Session

from hira.store.models import Record

logger = logging.getLogger(__name__)


# Storage keys
HABITS = "hira_habits"
PHOTOS = "hira_photos"
REWARDS = "hira_rewards"
CHALLENGES = "hira_challenges"
USER = "hira_user"
FRIENDS = "hira_friends"
CASH_REDEMPTIONS = "hira_cash_redemptions"


class RecordStore(Protocol):
    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def keys(self) -> list[str]:
        ...


class SqlRecordStore:
    """RecordStore backed by the `records` table."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[Any]:
        row = self.db.get(Record, key)
        if row is None:
            return None
        return json.loads(row.value)

    def set(self, key: str, value: Any) -> None:
        payload = json.dumps(value)
        try:
            row = self.db.get(Record, key)
            if row is None:
                self.db.add(Record(key=key, value=payload))
            else:
                row.value = payload
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception("Failed to write record key=%s", key)
            raise

    def keys(self) -> list[str]:
        return [r.key for r in self.db.query(Record.key).order_by(Record.key).all()]


class MemoryRecordStore:
    """In-process store. Values are copied through JSON on the way in and out."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    def keys(self) -> list[str]:
        return sorted(self._data)
