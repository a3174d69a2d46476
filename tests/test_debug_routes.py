from hira.db.base import describe_database
from hira.store import records
from hira.web.debug_routes import db_diagnostics, debug_records


def test_debug_records_sizes(store):
    store.set(records.HABITS, [{"id": "a"}, {"id": "b"}])
    store.set(records.USER, {"id": "user_1", "name": "You"})

    assert debug_records(store) == {records.HABITS: 2, records.USER: 2}


def test_db_diagnostics_reports_sqlite_file():
    info = db_diagnostics()

    assert info == describe_database()
    assert info["backend"] == "sqlite"
    assert info["sqlite_path"].endswith("hira_test.db")
