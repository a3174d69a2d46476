from fastapi import APIRouter, Depends

from hira.friends import repository
from hira.store.records import RecordStore
from hira.core.deps import get_store

router = APIRouter(prefix="/api/friends", tags=["friends"])


@router.get("")
def list_friends(store: RecordStore = Depends(get_store)):
    friends = repository.refresh_friend_stats(store)
    return {
        "friends": [f.model_dump(mode="json") for f in friends],
        "winning": [f.model_dump(mode="json") for f in friends if f.weekly_points > 0],
    }


@router.post("/sync")
def sync_contacts(store: RecordStore = Depends(get_store)):
    repository.sync_contacts(store)
    friends = repository.refresh_friend_stats(store)
    return {"status": "success", "friends": [f.model_dump(mode="json") for f in friends]}
