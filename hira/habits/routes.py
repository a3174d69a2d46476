from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from hira.core.dates import parse_day, to_iso
from hira.core.deps import get_store, to_http
from hira.core.errors import HiraError
from hira.habits import repository
from hira.habits.models import Priority
from hira.progress.calendar import completion_rate, is_fully_completed, today_completions
from hira.store.records import RecordStore

router = APIRouter(prefix="/api/habits", tags=["habits"])


class HabitCreate(BaseModel):
    name: str
    category: Optional[str] = None
    emoji: Optional[str] = None
    reminder_time: Optional[str] = None
    total_days: Optional[int] = Field(None, ge=1)
    start_date: Optional[str] = None
    priority: Optional[Priority] = None
    times_per_day: Optional[int] = Field(1, ge=1)


class HabitUpdate(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    emoji: Optional[str] = None
    reminder_time: Optional[str] = None
    total_days: Optional[int] = Field(None, ge=1)
    start_date: Optional[str] = None
    priority: Optional[Priority] = None
    times_per_day: Optional[int] = Field(None, ge=1)


class PhotoCreate(BaseModel):
    photo_data: str
    date: Optional[str] = None


def _habit_view(habit, today=None) -> dict:
    return {
        **habit.model_dump(mode="json"),
        "today_completions": today_completions(habit, today),
        "completed_today": is_fully_completed(habit, today),
        "completion_rate": completion_rate(habit),
    }


@router.get("")
def list_habits(store: RecordStore = Depends(get_store)):
    """Habits still to do today first, then finished ones."""
    habits = repository.get_habits(store)
    views = [_habit_view(h) for h in habits]
    return sorted(views, key=lambda v: v["completed_today"])


@router.post("", status_code=201)
def create_habit(data: HabitCreate, store: RecordStore = Depends(get_store)):
    if not data.name.strip():
        raise HTTPException(status_code=400, detail="Habit name is required")
    try:
        fields = data.model_dump(exclude={"name"}, exclude_none=True)
        if "start_date" in fields:
            fields["start_date"] = to_iso(parse_day(fields["start_date"]))
        habit = repository.create_habit(store, data.name.strip(), **fields)
    except HiraError as exc:
        raise to_http(exc)
    return _habit_view(habit)


@router.get("/{habit_id}")
def get_habit(habit_id: str, store: RecordStore = Depends(get_store)):
    try:
        habit = repository.get_habit(store, habit_id)
    except HiraError as exc:
        raise to_http(exc)
    return {
        **_habit_view(habit),
        "photo_items": [p.model_dump(mode="json") for p in repository.photos_for(store, habit_id)],
    }


@router.patch("/{habit_id}")
def update_habit(habit_id: str, data: HabitUpdate, store: RecordStore = Depends(get_store)):
    try:
        updates = data.model_dump(exclude_unset=True)
        if updates.get("start_date"):
            updates["start_date"] = to_iso(parse_day(updates["start_date"]))
        habit = repository.update_habit(store, habit_id, updates)
    except HiraError as exc:
        raise to_http(exc)
    return _habit_view(habit)


@router.delete("/{habit_id}")
def delete_habit(habit_id: str, store: RecordStore = Depends(get_store)):
    try:
        repository.delete_habit(store, habit_id)
    except HiraError as exc:
        raise to_http(exc)
    return {"status": "success"}


@router.post("/{habit_id}/complete")
def complete_habit(habit_id: str, store: RecordStore = Depends(get_store)):
    try:
        habit = repository.complete_habit(store, habit_id)
    except HiraError as exc:
        raise to_http(exc)
    view = _habit_view(habit)
    return {
        "status": "success",
        "habit": view,
        # the share modal is shown only once the day's goal is met
        "show_completion": view["completed_today"],
    }


@router.get("/{habit_id}/photos")
def list_photos(habit_id: str, store: RecordStore = Depends(get_store)):
    try:
        repository.get_habit(store, habit_id)
    except HiraError as exc:
        raise to_http(exc)
    return [p.model_dump(mode="json") for p in repository.photos_for(store, habit_id)]


@router.post("/{habit_id}/photos", status_code=201)
def add_photo(habit_id: str, data: PhotoCreate, store: RecordStore = Depends(get_store)):
    try:
        photo = repository.add_photo(store, habit_id, data.photo_data, data.date)
    except HiraError as exc:
        raise to_http(exc)
    return photo.model_dump(mode="json")
