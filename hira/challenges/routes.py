import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from hira.challenges import repository
from hira.challenges.leaderboard import leaderboard_position, medal, rank
from hira.challenges.models import ChallengeRecord
from hira.core.deps import get_current_user, get_store, to_http
from hira.core.errors import HiraError
from hira.friends.repository import as_users, get_friends
from hira.habits.repository import get_habits
from hira.store.records import RecordStore
from hira.users.models import UserRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/challenges", tags=["challenges"])


class ChallengeCreate(BaseModel):
    name: str
    habit_id: str
    description: Optional[str] = ""
    emoji: Optional[str] = "🎯"


def known_users(store: RecordStore, user: UserRecord) -> list[UserRecord]:
    """Everyone a leaderboard can resolve: the local user plus friends."""
    return [user, *as_users(get_friends(store))]


def _challenge_view(challenge: ChallengeRecord, user: UserRecord, users, habits) -> dict:
    position, points, total = leaderboard_position(challenge, user.id, users, habits)
    return {
        **challenge.model_dump(mode="json"),
        "participant_count": len(challenge.participants),
        "is_participating": user.id in challenge.participants,
        "position": {"rank": position, "points": points, "total_participants": total},
    }


@router.get("")
def list_challenges(
    category: str = Query("All"),
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    challenges = repository.filter_by_category(repository.get_challenges(store), category)
    users = known_users(store, user)
    habits = get_habits(store)
    return [_challenge_view(c, user, users, habits) for c in challenges]


@router.post("", status_code=201)
def create_challenge(
    data: ChallengeCreate,
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    if not data.name.strip():
        raise HTTPException(status_code=400, detail="Challenge name is required")
    try:
        challenge = repository.create_challenge(
            store,
            user_id=user.id,
            name=data.name.strip(),
            habit_id=data.habit_id,
            description=data.description or "",
            emoji=data.emoji or "🎯",
        )
    except HiraError as exc:
        raise to_http(exc)
    return challenge.model_dump(mode="json")


@router.post("/{challenge_id}/join")
def join_challenge(
    challenge_id: str,
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    try:
        challenge = repository.join_challenge(store, challenge_id, user.id)
    except HiraError as exc:
        raise to_http(exc)
    return {"status": "success", "challenge": challenge.model_dump(mode="json")}


@router.get("/{challenge_id}/leaderboard")
def get_leaderboard(
    challenge_id: str,
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    try:
        challenge = repository.get_challenge(store, challenge_id)
    except HiraError as exc:
        raise to_http(exc)

    board = rank(challenge, known_users(store, user), get_habits(store))
    you = next((e for e in board if e.user_id == user.id), None)
    return {
        "challenge": challenge.model_dump(mode="json"),
        "entries": [{**e.model_dump(), "medal": medal(e.rank)} for e in board],
        "you": you.model_dump() if you else None,
        "participant_count": len(board),
        "total_points": sum(e.points for e in board),
    }
