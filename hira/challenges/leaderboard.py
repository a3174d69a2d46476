"""
Challenge leaderboard ranking.

Points come from the habit created when the challenge was joined
(habit.challenge_id == challenge.id). Equal points share a rank and the
next distinct score resumes at its position: 50, 50, 30 -> 1, 1, 3.
"""
from typing import Optional, Sequence

from hira.challenges.models import ChallengeRecord, LeaderboardEntry
from hira.habits.models import HabitRecord
from hira.users.models import UserRecord


def challenge_habit(
    challenge: ChallengeRecord,
    habits: Sequence[HabitRecord],
    participant_id: Optional[str] = None,
) -> Optional[HabitRecord]:
    """
    The habit tracking `challenge` for a participant.

    A habit owned by the participant wins; otherwise the first unowned habit
    for the challenge (the local user's) is used.
    """
    linked = [h for h in habits if h.challenge_id == challenge.id]
    if participant_id is not None:
        owned = next((h for h in linked if h.owner_id == participant_id), None)
        if owned is not None:
            return owned
    return next((h for h in linked if h.owner_id is None), None)


def rank(
    challenge: ChallengeRecord,
    users: Sequence[UserRecord],
    habits: Sequence[HabitRecord],
) -> list[LeaderboardEntry]:
    """Ranked entries for every participant with a known user record."""
    users_by_id = {u.id: u for u in users}

    entries = []
    for participant_id in challenge.participants:
        user = users_by_id.get(participant_id)
        if user is None:
            # Participant lists may name users that are not known locally
            continue
        habit = challenge_habit(challenge, habits, participant_id)
        entries.append({
            "user_id": user.id,
            "display_name": user.name,
            "profile_photo": user.profile_photo,
            "points": habit.total_points if habit else 0,
            "completions": len(habit.completed_dates) if habit else 0,
        })

    entries.sort(key=lambda e: e["points"], reverse=True)

    ranked: list[LeaderboardEntry] = []
    for index, entry in enumerate(entries):
        position = index + 1
        if ranked and ranked[-1].points == entry["points"]:
            position = ranked[-1].rank
        ranked.append(LeaderboardEntry(rank=position, **entry))
    return ranked


def leaderboard_position(
    challenge: ChallengeRecord,
    user_id: str,
    users: Sequence[UserRecord],
    habits: Sequence[HabitRecord],
) -> tuple[int, int, int]:
    """(rank, points, total participants) for one user; rank 0 when absent."""
    board = rank(challenge, users, habits)
    for entry in board:
        if entry.user_id == user_id:
            return entry.rank, entry.points, len(board)
    return 0, 0, len(board)


def medal(rank_value: int) -> Optional[str]:
    return {1: "🥇", 2: "🥈", 3: "🥉"}.get(rank_value)
