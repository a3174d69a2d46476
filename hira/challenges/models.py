from typing import List, Optional
from enum import Enum

from pydantic import BaseModel


class ChallengeStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    UPCOMING = "upcoming"


class ChallengePhoto(BaseModel):
    id: str
    challenge_id: str
    user_id: str
    user_name: str
    photo_data: str
    timestamp: str
    date: str


class ChallengeRecord(BaseModel):
    id: str
    name: str
    description: str = ""

    # Label only, not a reference to a HabitRecord
    habit_name: str

    created_by: str = "system"
    created_at: Optional[str] = None
    end_date: Optional[str] = None  # informational

    # Unique user ids, in join order
    participants: List[str] = []
    photos: List[ChallengePhoto] = []

    status: ChallengeStatus = ChallengeStatus.ACTIVE
    is_predefined: bool = False
    emoji: Optional[str] = None
    category: Optional[str] = None


class LeaderboardEntry(BaseModel):
    user_id: str
    display_name: str
    profile_photo: Optional[str] = None
    points: int
    completions: int
    rank: int
