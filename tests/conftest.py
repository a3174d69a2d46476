import os
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Point the engine at a throwaway SQLite file before the app is imported.
os.environ["DATABASE_URL"] = f"sqlite:///{Path(tempfile.gettempdir()) / 'hira_test.db'}"

from hira.core.deps import get_store  # noqa: E402
from hira.habits.models import HabitRecord  # noqa: E402
from hira.main import app  # noqa: E402
from hira.store.records import MemoryRecordStore  # noqa: E402


@pytest.fixture
def store():
    return MemoryRecordStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_habit():
    counter = {"n": 0}

    def _make(**fields):
        counter["n"] += 1
        fields.setdefault("id", f"habit_{counter['n']}")
        fields.setdefault("name", f"Habit {counter['n']}")
        return HabitRecord(**fields)

    return _make
