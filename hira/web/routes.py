import logging

from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from hira.api.routes import build_progress
from hira.challenges.leaderboard import leaderboard_position, medal, rank
from hira.challenges.repository import challenges_for_user, get_challenge
from hira.challenges.routes import known_users
from hira.core.deps import get_current_user, get_store
from hira.core.errors import HiraError, NotFoundError
from hira.db.base import BASE_DIR
from hira.habits.repository import complete_habit, get_habits
from hira.progress.calendar import is_fully_completed, today_completions
from hira.rewards.repository import rupee_value
from hira.store.records import RecordStore
from hira.users.models import UserRecord

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.globals["medal"] = medal

logger = logging.getLogger(__name__)

router = APIRouter(tags=["web"])


# ======================================================
# DASHBOARD
# ======================================================
@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(
    request: Request,
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    habits = get_habits(store)
    pending = [h for h in habits if not is_fully_completed(h)]
    done = [h for h in habits if is_fully_completed(h)]
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "user": user,
            "rupees": rupee_value(user.total_points),
            "pending": pending,
            "done": done,
            "today_completions": {h.id: today_completions(h) for h in habits},
        },
    )


# ======================================================
# PROFILE
# ======================================================
@router.get("/profile", response_class=HTMLResponse)
def profile(
    request: Request,
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    users = known_users(store, user)
    habits = get_habits(store)
    joined = [
        (c, leaderboard_position(c, user.id, users, habits))
        for c in challenges_for_user(store, user.id)
    ]
    return templates.TemplateResponse(
        request,
        "profile.html",
        {
            "user": user,
            "progress": build_progress(store),
            "joined": joined,
        },
    )


# ======================================================
# CHALLENGE LEADERBOARD
# ======================================================
@router.get("/challenge/{challenge_id}", response_class=HTMLResponse)
def challenge_leaderboard(
    challenge_id: str,
    request: Request,
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    try:
        challenge = get_challenge(store, challenge_id)
    except NotFoundError:
        return RedirectResponse(url="/dashboard", status_code=303)

    board = rank(challenge, known_users(store, user), get_habits(store))
    return templates.TemplateResponse(
        request,
        "leaderboard.html",
        {
            "user": user,
            "challenge": challenge,
            "board": board,
            "you": next((e for e in board if e.user_id == user.id), None),
        },
    )


@router.post("/habits/{habit_id}/complete")
def complete_habit_form(habit_id: str, store: RecordStore = Depends(get_store)):
    """Form post from the dashboard; completes and goes back."""
    try:
        complete_habit(store, habit_id)
    except HiraError as exc:
        logger.info("Completion refused habit=%s: %s", habit_id, exc)
    return RedirectResponse(url="/dashboard", status_code=303)
