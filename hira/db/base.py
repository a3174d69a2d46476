import os
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Absolute path to project root
BASE_DIR = Path(__file__).resolve().parent.parent.parent


def _build_database_url() -> str:
    """
    Determine the database URL.

    - Prefer DATABASE_URL from the environment.
    - Fallback to a local SQLite file for development.
    - Normalize legacy postgres:// URLs to SQLAlchemy's postgresql+psycopg2://.
    """
    url = os.getenv("DATABASE_URL", "sqlite:///./hira.db").strip()

    if url.startswith("postgres://"):
        # SQLAlchemy 2.x expects a driver-qualified URL
        url = url.replace("postgres://", "postgresql+psycopg2://", 1)

    return url


DATABASE_URL = _build_database_url()

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    # Needed for SQLite when used with FastAPI in a single process
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=connect_args, future=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def describe_database() -> dict:
    """Backend, password-free URL and, for SQLite, the file on disk."""
    url = engine.url
    backend = url.get_backend_name()
    info = {
        "backend": backend,
        "url": url.render_as_string(hide_password=True),
    }
    if backend == "sqlite":
        db_path = Path(url.database or "").resolve()
        exists = db_path.exists()
        info.update(
            {
                "sqlite_path": str(db_path),
                "sqlite_exists": exists,
                "sqlite_size_bytes": db_path.stat().st_size if exists else 0,
            }
        )
    else:
        info.update({"database": url.database, "host": url.host, "port": url.port})
    return info


def log_diagnostics():
    """Print the database backend once at startup."""
    try:
        info = describe_database()
        print(f"[DB] Using database backend={info['backend']} url={info['url']}", flush=True)
        if info["backend"] == "sqlite":
            print(
                f"[DB] SQLite path={info['sqlite_path']} exists={info['sqlite_exists']} "
                f"size_bytes={info['sqlite_size_bytes']}",
                flush=True,
            )
    except Exception as exc:
        # Never crash app on logging
        print("[DB] Failed to log DB diagnostics:", repr(exc), flush=True)
