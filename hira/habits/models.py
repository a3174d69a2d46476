from typing import List, Optional
from enum import Enum

from pydantic import BaseModel


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class HabitRecord(BaseModel):
    id: str
    name: str
    category: Optional[str] = None
    emoji: Optional[str] = None
    created_at: Optional[str] = None

    # One ISO date per completion event; repeats on multi-per-day habits
    completed_dates: List[str] = []
    photos: List[str] = []  # HabitPhoto ids

    total_points: int = 0

    reminder_time: Optional[str] = None  # HH:MM
    # Commitment window: [start_date, start_date + total_days)
    start_date: Optional[str] = None
    total_days: Optional[int] = None

    # Weak reference: the challenge may be gone while the habit lives on
    challenge_id: Optional[str] = None
    # Set on other participants' habits; local habits leave it unset
    owner_id: Optional[str] = None

    priority: Optional[Priority] = None
    times_per_day: Optional[int] = None


class HabitPhoto(BaseModel):
    id: str
    habit_id: str
    photo_data: str  # base64
    timestamp: str
    date: str
