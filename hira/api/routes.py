"""
API routes for the user profile and progress.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from hira.core.config import CALENDAR_WINDOW_DAYS
from hira.core.deps import get_current_user, get_store
from hira.habits.repository import get_habits, get_photos
from hira.progress.calendar import (
    build_calendar, days_active, longest_streak, skipped_days, total_completions, weekly_activity,
)
from hira.progress.share_image import calendar_png
from hira.progress.wisdom import daily_wisdom
from hira.rewards.repository import rupee_value
from hira.store.records import RecordStore
from hira.users.models import UserRecord
from hira.users.repository import complete_onboarding

router = APIRouter(prefix="/api", tags=["api"])


class OnboardingAnswers(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    college_or_profession: Optional[str] = None
    hobbies: Optional[List[str]] = None


def build_progress(store: RecordStore) -> dict:
    habits = get_habits(store)
    return {
        "calendar": [d.model_dump() for d in build_calendar(habits, CALENDAR_WINDOW_DAYS)],
        "streak": longest_streak(habits),
        "skipped": skipped_days(habits),
        "days_active": days_active(habits),
        "total_completions": total_completions(habits),
        "total_photos": len(get_photos(store)),
        "weekly_activity": [w.model_dump() for w in weekly_activity(habits)],
        "wisdom": daily_wisdom(),
    }


@router.get("/me")
def get_me(user: UserRecord = Depends(get_current_user)):
    return {
        **user.model_dump(mode="json"),
        "rupee_value": rupee_value(user.total_points),
    }


@router.post("/me/onboarding")
def finish_onboarding(
    data: OnboardingAnswers,
    store: RecordStore = Depends(get_store),
):
    user = complete_onboarding(store, data.model_dump(exclude_none=True))
    return user.model_dump(mode="json")


@router.get("/me/calendar.png")
def get_me_calendar_image(
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    calendar = build_calendar(get_habits(store), CALENDAR_WINDOW_DAYS)
    return Response(content=calendar_png(calendar, user), media_type="image/png")


@router.get("/me/progress")
def get_me_progress(
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    """
    Return the activity calendar, streak and skip counts for the profile page.
    """
    return {
        "name": user.name,
        "total_points": user.total_points,
        **build_progress(store),
    }
