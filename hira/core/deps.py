from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from hira.core.errors import HiraError, InvalidDateError, NotFoundError
from hira.db.session import get_db
from hira.store.records import RecordStore, SqlRecordStore
from hira.users.models import UserRecord
from hira.users.repository import initialize_user


def get_store(db: Session = Depends(get_db)) -> RecordStore:
    return SqlRecordStore(db)


def get_current_user(store: RecordStore = Depends(get_store)) -> UserRecord:
    """
    There is no login: every request acts as the single local user,
    created on first access.
    """
    return initialize_user(store)


def to_http(exc: HiraError) -> HTTPException:
    """Map a domain error onto the HTTP status the API returns for it."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, InvalidDateError):
        return HTTPException(status_code=422, detail=str(exc))
    return HTTPException(status_code=400, detail=str(exc))
