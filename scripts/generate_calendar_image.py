#!/usr/bin/env python3
"""
Generate calendar.png, the shareable 30-day activity calendar
for the local user, from the configured database.
"""
from pathlib import Path
import sys

from hira.core.config import CALENDAR_WINDOW_DAYS
from hira.db.base import Base, engine
from hira.db.session import SessionLocal
from hira.habits.repository import get_habits
from hira.progress.calendar import build_calendar
from hira.progress.share_image import render_calendar_image
from hira.store.records import SqlRecordStore
from hira.users.repository import initialize_user


def generate_calendar_image(output: Path):
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        store = SqlRecordStore(db)
        user = initialize_user(store)
        calendar = build_calendar(get_habits(store), CALENDAR_WINDOW_DAYS)
        render_calendar_image(calendar, user).save(output, "PNG")
    finally:
        db.close()

    active = sum(1 for d in calendar if d.count)
    print(f"✅ Generated {output}")
    print(f"   Size: {output.stat().st_size} bytes")
    print(f"   Active days: {active}/{len(calendar)}")


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent.parent / "static" / "calendar.png"
    generate_calendar_image(target)
