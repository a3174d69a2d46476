"""
Demo seeding script for a local Hira database.

Purpose:
- Create the local user and the predefined challenges
- Add a few habits with a spread of past completions
- Join one challenge and sync the mock contacts
- SAFE to run multiple times (habits are matched by name)

Run manually:  python scripts/seed_demo_data.py
"""
from datetime import timedelta

from sqlalchemy.orm import Session

from hira.core.dates import to_iso, today
from hira.db.base import Base, engine
from hira.db.session import SessionLocal
from hira.challenges.repository import join_challenge
from hira.friends.repository import refresh_friend_stats, sync_contacts
from hira.habits.repository import create_habit, get_habits, update_habit
from hira.store.records import SqlRecordStore
from hira.users.repository import add_points, initialize_user

DEMO_HABITS = [
    # name, emoji, category, skip every Nth day of the last two weeks
    ("Morning Walk", "🚶", "Fitness", 3),
    ("Read 10 Pages", "📚", "Learning", 2),
    ("Drink Water", "💧", "Health", 5),
]


def seed_demo_data():
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()

    try:
        store = SqlRecordStore(db)
        user = initialize_user(store)

        existing = {h.name for h in get_habits(store)}
        created = 0
        skipped = 0
        now = today()

        for name, emoji, category, every in DEMO_HABITS:
            if name in existing:
                skipped += 1
                continue

            habit = create_habit(store, name, emoji=emoji, category=category, reminder_time="08:00")
            dates = [
                to_iso(now - timedelta(days=offset))
                for offset in range(14, 0, -1)
                if offset % every != 0
            ]
            update_habit(store, habit.id, {
                "completed_dates": dates,
                "total_points": len(dates),
            })
            add_points(store, len(dates))
            created += 1

        join_challenge(store, "predefined_7day_meditation", user.id)
        sync_contacts(store)
        refresh_friend_stats(store)

        print("✅ Demo seeding complete")
        print(f"   Habits created: {created}")
        print(f"   Skipped (already existed): {skipped}")

    except Exception as e:
        db.rollback()
        print("❌ Error while seeding demo data")
        print(str(e))
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_demo_data()
