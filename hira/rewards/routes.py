from fastapi import APIRouter, Depends
from pydantic import BaseModel

from hira.core.deps import get_current_user, get_store, to_http
from hira.core.errors import HiraError
from hira.rewards import repository
from hira.store.records import RecordStore
from hira.users.models import UserRecord

router = APIRouter(prefix="/api", tags=["rewards"])


class CashRedeem(BaseModel):
    amount: int


@router.get("/rewards")
def list_rewards(
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    rewards = repository.get_rewards(store)
    return {
        "balance": user.total_points,
        "rewards": [r.model_dump(mode="json") for r in rewards],
        "quick_rewards": [r.model_dump(mode="json") for r in repository.affordable_rewards(rewards, user.total_points)[:3]],
    }


@router.post("/rewards/{reward_id}/unlock")
def unlock_reward(reward_id: str, store: RecordStore = Depends(get_store)):
    try:
        reward = repository.unlock_reward(store, reward_id)
    except HiraError as exc:
        raise to_http(exc)
    return {"status": "success", "reward": reward.model_dump(mode="json")}


@router.get("/cash/options")
def cash_options(
    store: RecordStore = Depends(get_store),
    user: UserRecord = Depends(get_current_user),
):
    return {
        "balance": user.total_points,
        "rupee_value": repository.rupee_value(user.total_points),
        "unlocked": repository.cash_unlocked(store),
        "options": [o.model_dump() for o in repository.cash_options(user.total_points)],
    }


@router.post("/cash/redeem")
def redeem_cash(data: CashRedeem, store: RecordStore = Depends(get_store)):
    """Simulated: deducts Hira and records the request, no payout happens."""
    try:
        redemption = repository.redeem_cash(store, data.amount)
    except HiraError as exc:
        raise to_http(exc)
    return {"status": "success", "redemption": redemption.model_dump(mode="json")}
