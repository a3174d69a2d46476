from fastapi import APIRouter, Depends

from hira.core.deps import get_store
from hira.db.base import describe_database
from hira.store.records import RecordStore

router = APIRouter(prefix="/debug", tags=["debug"])


@router.get("/records")
def debug_records(store: RecordStore = Depends(get_store)):
    """Stored keys with the size of each value (collections count their items)."""
    result = {}
    for key in store.keys():
        value = store.get(key)
        result[key] = len(value) if isinstance(value, (list, dict)) else 1
    return result


@router.get("/diagnostics/db")
def db_diagnostics():
    """Which database the app is bound to. Passwords are never rendered."""
    return describe_database()
