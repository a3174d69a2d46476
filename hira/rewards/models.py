from typing import Optional

from pydantic import BaseModel


class Reward(BaseModel):
    id: str
    title: str
    description: str
    cost: int  # Hira
    category: str
    discount_code: Optional[str] = None
    unlocked: bool = False
    unlocked_at: Optional[str] = None


class CashRedemption(BaseModel):
    """A simulated payout; no money actually moves."""
    id: str
    amount: int  # rupees
    cost: int  # Hira
    redeemed_at: str


class CashOption(BaseModel):
    amount: int
    cost: int
    affordable: bool
