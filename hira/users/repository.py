import logging
from typing import Optional

from hira.core.config import LOCAL_USER_ID
from hira.core.dates import now_iso
from hira.store import records
from hira.store.records import RecordStore
from hira.users.models import UserRecord

logger = logging.getLogger(__name__)


def get_user(store: RecordStore) -> Optional[UserRecord]:
    data = store.get(records.USER)
    return UserRecord.model_validate(data) if data else None


def save_user(store: RecordStore, user: UserRecord) -> None:
    store.set(records.USER, user.model_dump(mode="json"))


def initialize_user(store: RecordStore) -> UserRecord:
    """Return the local user, creating it (and the predefined challenges) on first run."""
    from hira.challenges.repository import initialize_challenges

    existing = get_user(store)
    if existing:
        initialize_challenges(store)
        return existing

    user = UserRecord(
        id=LOCAL_USER_ID,
        name="You",
        total_points=0,
        joined_at=now_iso(),
        completed_challenges=[],
        has_completed_onboarding=False,
    )
    save_user(store, user)
    initialize_challenges(store)
    logger.info("Created local user id=%s", user.id)
    return user


def add_points(store: RecordStore, amount: int) -> UserRecord:
    """Credit (or debit, when negative) the local user's Hira balance."""
    user = initialize_user(store)
    user.total_points += amount
    save_user(store, user)
    return user


def complete_onboarding(store: RecordStore, updates: dict) -> UserRecord:
    user = initialize_user(store)
    merged = user.model_copy(update={**updates, "has_completed_onboarding": True})
    user = UserRecord.model_validate(merged.model_dump())
    save_user(store, user)
    return user
