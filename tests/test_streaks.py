from datetime import date

import pytest

from hira.core.errors import InvalidDateError
from hira.progress.calendar import days_active, longest_streak, skipped_days, total_completions


def test_no_habits_no_streak():
    assert longest_streak([]) == 0


def test_no_completions_no_streak(make_habit):
    assert longest_streak([make_habit(), make_habit()]) == 0


def test_single_day_is_streak_of_one(make_habit):
    assert longest_streak([make_habit(completed_dates=["2024-01-01"])]) == 1


def test_consecutive_days(make_habit):
    habit = make_habit(completed_dates=["2024-01-01", "2024-01-02", "2024-01-03"])
    assert longest_streak([habit]) == 3


def test_gap_breaks_streak(make_habit):
    habit = make_habit(completed_dates=["2024-01-01", "2024-01-03"])
    assert longest_streak([habit]) == 1


def test_unsorted_dates_across_habits(make_habit):
    habits = [
        make_habit(completed_dates=["2024-01-05", "2024-01-03"]),
        make_habit(completed_dates=["2024-01-04", "2024-01-04"]),
    ]
    assert longest_streak(habits) == 3


def test_streak_crosses_month_and_leap_day(make_habit):
    habit = make_habit(completed_dates=["2024-02-28", "2024-02-29", "2024-03-01", "2024-03-10"])
    assert longest_streak([habit]) == 3


def test_longest_run_wins(make_habit):
    habit = make_habit(completed_dates=[
        "2024-01-01", "2024-01-02",
        "2024-01-10", "2024-01-11", "2024-01-12", "2024-01-13",
        "2024-01-20",
    ])
    assert longest_streak([habit]) == 4


def test_invalid_date_raises(make_habit):
    with pytest.raises(InvalidDateError):
        longest_streak([make_habit(completed_dates=["2024-02-30"])])


def test_skipped_days_empty():
    assert skipped_days([], today=date(2024, 1, 5)) == 0


def test_skipped_days_from_created_at(make_habit):
    habit = make_habit(
        created_at="2024-01-01T07:00:00",
        completed_dates=["2024-01-01", "2024-01-03"],
    )
    # 2, 4 and 5 January had no completion
    assert skipped_days([habit], today=date(2024, 1, 5)) == 3


def test_skipped_days_limited_to_commitment_window(make_habit):
    habit = make_habit(start_date="2024-01-01", total_days=3)
    assert skipped_days([habit], today=date(2024, 1, 10)) == 3


def test_completion_on_any_habit_covers_the_day(make_habit):
    habits = [
        make_habit(start_date="2024-01-01", completed_dates=["2024-01-02"]),
        make_habit(start_date="2024-01-01", completed_dates=["2024-01-01"]),
    ]
    assert skipped_days(habits, today=date(2024, 1, 3)) == 1


def test_skipped_days_without_any_start(make_habit):
    assert skipped_days([make_habit()], today=date(2024, 1, 3)) == 0


def test_days_active_and_total_completions(make_habit):
    habits = [
        make_habit(completed_dates=["2024-01-01", "2024-01-01"]),
        make_habit(completed_dates=["2024-01-01", "2024-01-02"]),
    ]
    assert days_active(habits) == 2
    assert total_completions(habits) == 4


def test_huge_commitment_window_does_not_overflow(make_habit):
    habit = make_habit(start_date="2024-01-01", total_days=3_000_000, completed_dates=["2024-01-02"])
    assert skipped_days([habit], today=date(2024, 1, 4)) == 3
