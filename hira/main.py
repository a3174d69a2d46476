import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from hira.core.config import ENABLE_DEBUG_ROUTES
from hira.db.base import Base, engine, log_diagnostics
from hira.store.models import Record  # noqa: F401  (registers the records table)

from hira.api.routes import router as api_router
from hira.habits.routes import router as habit_router
from hira.challenges.routes import router as challenge_router
from hira.rewards.routes import router as reward_router
from hira.friends.routes import router as friend_router
from hira.web.routes import router as web_router
from hira.web.debug_routes import router as debug_router

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: [%(name)s] %(message)s",
)

app = FastAPI(title="Hira", version="0.1.0")

# Mount static files directory
static_dir = Path(__file__).parent.parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

# Only expose debug routes when explicitly enabled.
if ENABLE_DEBUG_ROUTES:
    app.include_router(debug_router)

log_diagnostics()

# Create database tables (still useful in dev; in production prefer Alembic)
Base.metadata.create_all(bind=engine)

# Include routers
app.include_router(api_router)
app.include_router(habit_router)
app.include_router(challenge_router)
app.include_router(reward_router)
app.include_router(friend_router)
app.include_router(web_router)


@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/dashboard")
