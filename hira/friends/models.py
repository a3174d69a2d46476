from typing import Optional

from pydantic import BaseModel


class Friend(BaseModel):
    id: str
    name: str
    phone_number: Optional[str] = None
    email: Optional[str] = None
    profile_photo: Optional[str] = None

    total_points: int = 0
    weekly_points: int = 0  # Hira earned this week
    tasks_done: int = 0  # tasks completed this week
    challenges_done: int = 0

    joined_at: Optional[str] = None
    is_synced_from_contacts: bool = False
