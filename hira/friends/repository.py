"""
Friends are local, simulated records: "syncing contacts" adds a fixed set of
mock people and their weekly stats are derived, not fetched.
"""
import logging
from datetime import datetime, timedelta

from hira.challenges.models import ChallengeRecord
from hira.challenges.repository import get_challenges
from hira.friends.models import Friend
from hira.store import records
from hira.store.records import RecordStore
from hira.users.models import UserRecord

logger = logging.getLogger(__name__)

WEEKLY_SHARE = 0.15  # assume 15% of a friend's total was earned this week

MOCK_CONTACTS = [
    {"id": "friend_1", "name": "Alex Johnson", "phone_number": "+1234567890", "total_points": 245, "joined_days_ago": 30},
    {"id": "friend_2", "name": "Sarah Chen", "phone_number": "+1234567891", "total_points": 189, "joined_days_ago": 45},
    {"id": "friend_3", "name": "Mike Rodriguez", "phone_number": "+1234567892", "total_points": 312, "joined_days_ago": 20},
    {"id": "friend_4", "name": "Emma Wilson", "phone_number": "+1234567893", "total_points": 156, "joined_days_ago": 60},
    {"id": "friend_5", "name": "David Kim", "phone_number": "+1234567894", "total_points": 278, "joined_days_ago": 15},
]


def get_friends(store: RecordStore) -> list[Friend]:
    return [Friend.model_validate(f) for f in store.get(records.FRIENDS) or []]


def save_friends(store: RecordStore, friends: list[Friend]) -> None:
    store.set(records.FRIENDS, [f.model_dump(mode="json") for f in friends])


def add_friend(store: RecordStore, friend: Friend) -> Friend:
    friends = get_friends(store)
    if any(f.id == friend.id for f in friends):
        return friend
    friends.append(friend)
    save_friends(store, friends)
    return friend


def _mock_friends(now: datetime) -> list[Friend]:
    return [
        Friend(
            id=c["id"],
            name=c["name"],
            phone_number=c["phone_number"],
            total_points=c["total_points"],
            joined_at=(now - timedelta(days=c["joined_days_ago"])).isoformat(timespec="seconds"),
            is_synced_from_contacts=True,
        )
        for c in MOCK_CONTACTS
    ]


def sync_contacts(store: RecordStore) -> list[Friend]:
    """Add mock contacts that are not already friends. Returns the full list."""
    existing = get_friends(store)
    known = {f.id for f in existing}
    new = [f for f in _mock_friends(datetime.now()) if f.id not in known]
    if new:
        existing.extend(new)
        save_friends(store, existing)
        logger.info("Synced %d contacts", len(new))
    return existing


# ---------------------------------------------------------------------------
# DERIVED STATS
# ---------------------------------------------------------------------------

def weekly_points(friend: Friend) -> int:
    return int(friend.total_points * WEEKLY_SHARE)


def tasks_done(friend: Friend) -> int:
    """3-14 tasks, stable per friend id."""
    if not friend.id:
        return 0
    seed = ord(friend.id[-1])
    return seed % 12 + 3


def challenges_done(friend: Friend, challenges: list[ChallengeRecord]) -> int:
    return sum(1 for c in challenges if friend.id in c.participants)


def refresh_friend_stats(store: RecordStore) -> list[Friend]:
    """Recompute weekly stats, persist them, and return friends sorted by weekly Hira."""
    challenges = get_challenges(store)
    friends = [
        f.model_copy(update={
            "weekly_points": weekly_points(f),
            "tasks_done": tasks_done(f),
            "challenges_done": challenges_done(f, challenges),
        })
        for f in get_friends(store)
    ]
    if friends:
        save_friends(store, friends)
    return sorted(friends, key=lambda f: f.weekly_points, reverse=True)


def as_users(friends: list[Friend]) -> list[UserRecord]:
    """Friends as leaderboard-known users."""
    return [
        UserRecord(
            id=f.id,
            name=f.name,
            email=f.email,
            profile_photo=f.profile_photo,
            total_points=f.total_points,
            joined_at=f.joined_at,
        )
        for f in friends
    ]
