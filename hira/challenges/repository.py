"""
Challenge records.
Participants are only ever appended (no leave); joining also creates the
habit that feeds the leaderboard, once per challenge.
"""
import logging
from datetime import timedelta
from typing import Optional

from hira.challenges.catalog import PREDEFINED_CHALLENGES
from hira.challenges.models import ChallengeRecord, ChallengeStatus
from hira.core.config import CHALLENGE_LENGTH_DAYS
from hira.core.dates import DayLike, days_until, now_iso, parse_day, to_iso, today as _today
from hira.core.errors import NotFoundError
from hira.habits.repository import add_habit, get_habit, get_habits, new_id
from hira.habits.models import HabitRecord
from hira.store import records
from hira.store.records import RecordStore

logger = logging.getLogger(__name__)


def get_challenges(store: RecordStore) -> list[ChallengeRecord]:
    return [ChallengeRecord.model_validate(c) for c in store.get(records.CHALLENGES) or []]


def save_challenges(store: RecordStore, challenges: list[ChallengeRecord]) -> None:
    store.set(records.CHALLENGES, [c.model_dump(mode="json") for c in challenges])


def get_challenge(store: RecordStore, challenge_id: str) -> ChallengeRecord:
    challenge = next((c for c in get_challenges(store) if c.id == challenge_id), None)
    if challenge is None:
        raise NotFoundError("Challenge", challenge_id)
    return challenge


def add_challenge(store: RecordStore, challenge: ChallengeRecord) -> ChallengeRecord:
    challenges = get_challenges(store)
    challenges.append(challenge)
    save_challenges(store, challenges)
    return challenge


def update_challenge(store: RecordStore, challenge_id: str, updates: dict) -> ChallengeRecord:
    challenges = get_challenges(store)
    for index, challenge in enumerate(challenges):
        if challenge.id == challenge_id:
            merged = challenge.model_dump()
            merged.update(updates)
            merged["id"] = challenge.id
            challenges[index] = ChallengeRecord.model_validate(merged)
            save_challenges(store, challenges)
            return challenges[index]
    raise NotFoundError("Challenge", challenge_id)


# ---------------------------------------------------------------------------
# PREDEFINED
# ---------------------------------------------------------------------------

def predefined_challenges(today: Optional[DayLike] = None) -> list[ChallengeRecord]:
    day = parse_day(today) if today is not None else _today()
    return [
        ChallengeRecord(
            id=item["id"],
            name=item["name"],
            description=item["description"],
            habit_name=item["habit_name"],
            created_by="system",
            created_at=to_iso(day),
            end_date=to_iso(day + timedelta(days=item["length_days"])),
            participants=[],
            photos=[],
            status=ChallengeStatus.ACTIVE,
            is_predefined=True,
            emoji=item["emoji"],
            category=item["category"],
        )
        for item in PREDEFINED_CHALLENGES
    ]


def initialize_challenges(store: RecordStore, today: Optional[DayLike] = None) -> int:
    """Add any predefined challenge missing from the store. Returns how many were added."""
    existing = get_challenges(store)
    known = {c.id for c in existing}
    missing = [c for c in predefined_challenges(today) if c.id not in known]

    if missing or store.get(records.CHALLENGES) is None:
        save_challenges(store, existing + missing)
    if missing:
        logger.info("Seeded %d predefined challenges", len(missing))
    return len(missing)


# ---------------------------------------------------------------------------
# CREATE / JOIN
# ---------------------------------------------------------------------------

def create_challenge(
    store: RecordStore,
    user_id: str,
    name: str,
    habit_id: str,
    description: str = "",
    emoji: str = "🎯",
    today: Optional[DayLike] = None,
) -> ChallengeRecord:
    """New challenge around one of the user's habits; the creator is the first participant."""
    habit = get_habit(store, habit_id)
    day = parse_day(today) if today is not None else _today()

    challenge = ChallengeRecord(
        id=new_id("challenge"),
        name=name,
        description=description,
        habit_name=habit.name,
        emoji=emoji,
        created_by=user_id,
        created_at=now_iso(),
        end_date=to_iso(day + timedelta(days=CHALLENGE_LENGTH_DAYS)),
        participants=[user_id],
        photos=[],
        status=ChallengeStatus.ACTIVE,
        category=habit.category or "Daily",
    )
    add_challenge(store, challenge)
    logger.info("Created challenge id=%s by user=%s", challenge.id, user_id)
    return challenge


def join_challenge(
    store: RecordStore,
    challenge_id: str,
    user_id: str,
    today: Optional[DayLike] = None,
) -> ChallengeRecord:
    """Add user to participants (if absent) and make sure the challenge habit exists."""
    challenge = get_challenge(store, challenge_id)
    day = parse_day(today) if today is not None else _today()

    if user_id not in challenge.participants:
        challenge = update_challenge(store, challenge_id, {
            "participants": [*challenge.participants, user_id],
        })
        logger.info("User %s joined challenge %s", user_id, challenge_id)

    if not any(h.challenge_id == challenge_id and h.owner_id is None for h in get_habits(store)):
        total_days = days_until(challenge.end_date, day) if challenge.end_date else None
        add_habit(store, HabitRecord(
            id=new_id("habit"),
            name=challenge.habit_name,
            emoji=challenge.emoji or "🎯",
            created_at=now_iso(),
            completed_dates=[],
            photos=[],
            total_points=0,
            reminder_time="09:00",
            total_days=total_days,
            start_date=to_iso(day),
            challenge_id=challenge_id,
        ))

    return challenge


def challenges_for_user(store: RecordStore, user_id: str) -> list[ChallengeRecord]:
    return [c for c in get_challenges(store) if user_id in c.participants]


def filter_by_category(challenges: list[ChallengeRecord], category: str) -> list[ChallengeRecord]:
    if not category or category == "All":
        return challenges
    return [c for c in challenges if (c.category or "").lower() == category.lower()]
