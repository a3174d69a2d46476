"""
Streak & calendar aggregation over a user's habits.
Core rules:
  - Calendar: fixed trailing window ending today, oldest first
  - A habit counts once per date no matter how many same-day completions it has
  - Longest streak: distinct dates across all habits, sorted, consecutive = 1 day apart
  - Skipped: days where some habit was active but nothing at all was completed
All functions are pure; callers load the habits and pass "today" explicitly
when they need determinism.
"""
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from hira.core.dates import DayLike, iter_days, parse_day, to_iso, today as _today
from hira.habits.models import HabitRecord
from hira.progress.models import CalendarDay, WeekActivity

DEFAULT_WINDOW_DAYS = 30


def _resolve_today(value: Optional[DayLike]) -> date:
    return parse_day(value) if value is not None else _today()


def _completion_days(habit: HabitRecord) -> set[date]:
    return {parse_day(d) for d in habit.completed_dates}


def _all_completion_days(habits: Iterable[HabitRecord]) -> set[date]:
    days: set[date] = set()
    for habit in habits:
        days |= _completion_days(habit)
    return days


# ---------------------------------------------------------------------------
# CALENDAR
# ---------------------------------------------------------------------------

def activity_level(count: int) -> int:
    """Bucket a day's completion count: 0, 1, 2, 3-4, 5+ -> 0..4."""
    if count >= 5:
        return 4
    if count >= 3:
        return 3
    if count == 2:
        return 2
    if count == 1:
        return 1
    return 0


def build_calendar(
    habits: Sequence[HabitRecord],
    window_days: int = DEFAULT_WINDOW_DAYS,
    today: Optional[DayLike] = None,
) -> list[CalendarDay]:
    """Return one CalendarDay per date in the window ending at today, oldest first."""
    end = _resolve_today(today)
    per_habit = [_completion_days(h) for h in habits]

    days = []
    for offset in range(window_days - 1, -1, -1):
        day = end - timedelta(days=offset)
        count = sum(1 for completed in per_habit if day in completed)
        days.append(CalendarDay(date=to_iso(day), count=count, level=activity_level(count)))
    return days


# ---------------------------------------------------------------------------
# STREAKS
# ---------------------------------------------------------------------------

def longest_streak(habits: Sequence[HabitRecord]) -> int:
    """Longest run of consecutive calendar days with at least one completion."""
    dates = sorted(_all_completion_days(habits))
    if not dates:
        return 0

    best = current = 1
    for prev, curr in zip(dates, dates[1:]):
        if (curr - prev).days == 1:
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def _habit_start(habit: HabitRecord) -> Optional[date]:
    raw = habit.start_date or habit.created_at
    return parse_day(raw) if raw else None


def _is_active_on(habit: HabitRecord, day: date) -> bool:
    if habit.start_date and habit.total_days is not None:
        start = parse_day(habit.start_date)
        return 0 <= (day - start).days < habit.total_days
    return True


def skipped_days(habits: Sequence[HabitRecord], today: Optional[DayLike] = None) -> int:
    """Days from the earliest habit start through today with an active habit and no completion."""
    starts = [s for s in (_habit_start(h) for h in habits) if s is not None]
    if not starts:
        return 0

    end = _resolve_today(today)
    completed = _all_completion_days(habits)

    skipped = 0
    for day in iter_days(min(starts), end):
        if day in completed:
            continue
        if any(_is_active_on(h, day) for h in habits):
            skipped += 1
    return skipped


# ---------------------------------------------------------------------------
# PROFILE AGGREGATES
# ---------------------------------------------------------------------------

def days_active(habits: Sequence[HabitRecord]) -> int:
    return len(_all_completion_days(habits))


def total_completions(habits: Sequence[HabitRecord]) -> int:
    return sum(len(h.completed_dates) for h in habits)


def weekly_activity(
    habits: Sequence[HabitRecord],
    today: Optional[DayLike] = None,
    weeks: int = 5,
) -> list[WeekActivity]:
    """
    Share of days with any completion for each of the last `weeks` weeks.
    Weeks start on Sunday; the last one contains today.
    """
    end = _resolve_today(today)
    completed = _all_completion_days(habits)

    result = []
    for week in range(1, weeks + 1):
        anchor = end - timedelta(days=(weeks - week) * 7)
        # Python weekdays are Monday=0; step back to the Sunday on or before anchor
        week_start = anchor - timedelta(days=(anchor.weekday() + 1) % 7)
        done = sum(1 for i in range(7) if week_start + timedelta(days=i) in completed)
        result.append(WeekActivity(week=week, percentage=round(done / 7 * 100)))
    return result


def completion_rate(habit: HabitRecord) -> int:
    """Percent of the committed days completed; 0 without a commitment."""
    if not habit.total_days:
        return 0
    # half-up, so 12.5% shows as 13%
    return int(len(habit.completed_dates) / habit.total_days * 100 + 0.5)


def today_completions(habit: HabitRecord, today: Optional[DayLike] = None) -> int:
    day = _resolve_today(today)
    return sum(1 for d in habit.completed_dates if parse_day(d) == day)


def is_fully_completed(habit: HabitRecord, today: Optional[DayLike] = None) -> bool:
    return today_completions(habit, today) >= (habit.times_per_day or 1)


def goal_reached(habit: HabitRecord) -> bool:
    """A habit with a commitment window has been completed at least total_days times."""
    return bool(habit.total_days) and len(habit.completed_dates) >= habit.total_days
