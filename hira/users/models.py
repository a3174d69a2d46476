from typing import List, Optional

from pydantic import BaseModel


class UserRecord(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    profile_photo: Optional[str] = None  # base64

    total_points: int = 0
    joined_at: Optional[str] = None
    completed_challenges: List[str] = []

    # Onboarding answers
    has_completed_onboarding: bool = False
    age: Optional[int] = None
    gender: Optional[str] = None
    college_or_profession: Optional[str] = None
    hobbies: List[str] = []
