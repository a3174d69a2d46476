"""
Rewards and simulated cash redemption.
Both spend the local user's Hira balance; nothing leaves the app.
"""
import logging
import math

from hira.core.config import HIRA_TO_RUPEE
from hira.core.dates import now_iso
from hira.core.errors import (
    CashRedemptionLockedError,
    InsufficientHiraError,
    NotFoundError,
    RewardAlreadyUnlockedError,
)
from hira.habits.repository import get_habits, new_id
from hira.progress.calendar import goal_reached
from hira.rewards.models import CashOption, CashRedemption, Reward
from hira.store import records
from hira.store.records import RecordStore
from hira.users.repository import initialize_user, save_user

logger = logging.getLogger(__name__)

CASH_AMOUNTS = [10, 25, 50, 100]  # rupees


def default_rewards() -> list[Reward]:
    return [
        Reward(
            id="cult_fit_10",
            title="Cult.fit 10% Off",
            description="Get 10% off on your next Cult.fit subscription",
            cost=50,
            category="fitness",
            discount_code="HIRA10",
        ),
        Reward(
            id="kindle_15",
            title="Amazon Kindle 15% Off",
            description="15% discount on Kindle books",
            cost=75,
            category="reading",
            discount_code="HIRA15",
        ),
        Reward(
            id="spotify_1month",
            title="Spotify Premium 1 Month",
            description="Free 1 month Spotify Premium",
            cost=100,
            category="music",
            discount_code="HIRASPOTIFY",
        ),
        Reward(
            id="udemy_course",
            title="Udemy Course 20% Off",
            description="20% off on any Udemy course",
            cost=120,
            category="learning",
            discount_code="HIRA20",
        ),
    ]


def get_rewards(store: RecordStore) -> list[Reward]:
    data = store.get(records.REWARDS)
    if data is None:
        return default_rewards()
    return [Reward.model_validate(r) for r in data]


def save_rewards(store: RecordStore, rewards: list[Reward]) -> None:
    store.set(records.REWARDS, [r.model_dump(mode="json") for r in rewards])


def unlock_reward(store: RecordStore, reward_id: str) -> Reward:
    rewards = get_rewards(store)
    reward = next((r for r in rewards if r.id == reward_id), None)
    if reward is None:
        raise NotFoundError("Reward", reward_id)
    if reward.unlocked:
        raise RewardAlreadyUnlockedError(f"{reward.title} is already unlocked")

    user = initialize_user(store)
    if user.total_points < reward.cost:
        raise InsufficientHiraError(reward.cost, user.total_points)

    reward.unlocked = True
    reward.unlocked_at = now_iso()
    user.total_points -= reward.cost

    save_rewards(store, rewards)
    save_user(store, user)
    logger.info("Unlocked reward id=%s cost=%s balance=%s", reward.id, reward.cost, user.total_points)
    return reward


def affordable_rewards(rewards: list[Reward], balance: int) -> list[Reward]:
    return [r for r in rewards if not r.unlocked and r.cost <= balance]


# ---------------------------------------------------------------------------
# CASH (simulated)
# ---------------------------------------------------------------------------

def rupee_value(points: int) -> float:
    return points * HIRA_TO_RUPEE


def cash_cost(amount: int) -> int:
    """Hira needed for a rupee amount, rounded up."""
    return math.ceil(amount / HIRA_TO_RUPEE)


def cash_options(balance: int) -> list[CashOption]:
    return [
        CashOption(amount=amount, cost=cash_cost(amount), affordable=cash_cost(amount) <= balance)
        for amount in CASH_AMOUNTS
    ]


def cash_unlocked(store: RecordStore) -> bool:
    return any(goal_reached(h) for h in get_habits(store))


def get_redemptions(store: RecordStore) -> list[CashRedemption]:
    return [CashRedemption.model_validate(r) for r in store.get(records.CASH_REDEMPTIONS) or []]


def redeem_cash(store: RecordStore, amount: int) -> CashRedemption:
    if amount not in CASH_AMOUNTS:
        raise NotFoundError("Cash option", str(amount))
    if not cash_unlocked(store):
        raise CashRedemptionLockedError("Cash redemption is only allowed after completing an entire habit goal")

    cost = cash_cost(amount)
    user = initialize_user(store)
    if user.total_points < cost:
        raise InsufficientHiraError(cost, user.total_points)

    user.total_points -= cost
    redemption = CashRedemption(id=new_id("cash"), amount=amount, cost=cost, redeemed_at=now_iso())

    save_user(store, user)
    store.set(
        records.CASH_REDEMPTIONS,
        [r.model_dump(mode="json") for r in get_redemptions(store)] + [redemption.model_dump(mode="json")],
    )
    logger.info("Simulated cash redemption amount=%s cost=%s balance=%s", amount, cost, user.total_points)
    return redemption
