"""
Habit and photo records.
Completing a habit appends today's date, credits the habit and the user,
and is refused once today's completions reach times_per_day.
"""
import logging
import uuid
from typing import Optional

from hira.core.config import HIRA_PER_COMPLETION
from hira.core.dates import DayLike, now_iso, parse_day, to_iso, today as _today
from hira.core.errors import AlreadyCompletedError, NotFoundError
from hira.habits.models import HabitPhoto, HabitRecord
from hira.progress.calendar import today_completions
from hira.store import records
from hira.store.records import RecordStore
from hira.users.repository import add_points

logger = logging.getLogger(__name__)


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


# ---------------------------------------------------------------------------
# HABITS
# ---------------------------------------------------------------------------

def get_habits(store: RecordStore) -> list[HabitRecord]:
    return [HabitRecord.model_validate(h) for h in store.get(records.HABITS) or []]


def save_habits(store: RecordStore, habits: list[HabitRecord]) -> None:
    store.set(records.HABITS, [h.model_dump(mode="json") for h in habits])


def get_habit(store: RecordStore, habit_id: str) -> HabitRecord:
    habit = next((h for h in get_habits(store) if h.id == habit_id), None)
    if habit is None:
        raise NotFoundError("Habit", habit_id)
    return habit


def add_habit(store: RecordStore, habit: HabitRecord) -> HabitRecord:
    habits = get_habits(store)
    habits.append(habit)
    save_habits(store, habits)
    logger.info("Added habit id=%s name=%r", habit.id, habit.name)
    return habit


def create_habit(store: RecordStore, name: str, **fields) -> HabitRecord:
    habit = HabitRecord(
        id=new_id("habit"),
        name=name,
        created_at=now_iso(),
        completed_dates=[],
        photos=[],
        total_points=0,
        **fields,
    )
    return add_habit(store, habit)


def update_habit(store: RecordStore, habit_id: str, updates: dict) -> HabitRecord:
    habits = get_habits(store)
    for index, habit in enumerate(habits):
        if habit.id == habit_id:
            merged = habit.model_dump()
            merged.update(updates)
            merged["id"] = habit.id  # ids never change
            habits[index] = HabitRecord.model_validate(merged)
            save_habits(store, habits)
            return habits[index]
    raise NotFoundError("Habit", habit_id)


def delete_habit(store: RecordStore, habit_id: str) -> None:
    habits = get_habits(store)
    remaining = [h for h in habits if h.id != habit_id]
    if len(remaining) == len(habits):
        raise NotFoundError("Habit", habit_id)
    save_habits(store, remaining)
    logger.info("Deleted habit id=%s", habit_id)


def complete_habit(
    store: RecordStore,
    habit_id: str,
    today: Optional[DayLike] = None,
) -> HabitRecord:
    day = parse_day(today) if today is not None else _today()
    habit = get_habit(store, habit_id)

    if today_completions(habit, day) >= (habit.times_per_day or 1):
        raise AlreadyCompletedError(f"{habit.name} already completed today")

    habit = update_habit(store, habit_id, {
        "completed_dates": [*habit.completed_dates, to_iso(day)],
        "total_points": habit.total_points + HIRA_PER_COMPLETION,
    })
    user = add_points(store, HIRA_PER_COMPLETION)
    logger.info(
        "Completed habit id=%s day=%s habit_hira=%s user_hira=%s",
        habit.id, to_iso(day), habit.total_points, user.total_points,
    )
    return habit


# ---------------------------------------------------------------------------
# PHOTOS
# ---------------------------------------------------------------------------

def get_photos(store: RecordStore) -> list[HabitPhoto]:
    return [HabitPhoto.model_validate(p) for p in store.get(records.PHOTOS) or []]


def save_photos(store: RecordStore, photos: list[HabitPhoto]) -> None:
    store.set(records.PHOTOS, [p.model_dump(mode="json") for p in photos])


def add_photo(
    store: RecordStore,
    habit_id: str,
    photo_data: str,
    today: Optional[DayLike] = None,
) -> HabitPhoto:
    """Attach photo proof to a habit for the given day."""
    habit = get_habit(store, habit_id)
    day = parse_day(today) if today is not None else _today()

    photo = HabitPhoto(
        id=new_id("photo"),
        habit_id=habit.id,
        photo_data=photo_data,
        timestamp=now_iso(),
        date=to_iso(day),
    )
    photos = get_photos(store)
    photos.append(photo)
    save_photos(store, photos)
    update_habit(store, habit.id, {"photos": [*habit.photos, photo.id]})
    return photo


def photos_for(store: RecordStore, habit_id: str) -> list[HabitPhoto]:
    return [p for p in get_photos(store) if p.habit_id == habit_id]
