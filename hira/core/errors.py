"""
Domain errors raised by repositories and date parsing.
Routes translate these into HTTP responses.
"""


class HiraError(Exception):
    """Base class for expected, user-facing failures."""


class InvalidDateError(HiraError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid ISO date: {value!r}")


class NotFoundError(HiraError):
    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found: {record_id}")


class AlreadyCompletedError(HiraError):
    """Habit already reached its completions for today."""


class InsufficientHiraError(HiraError):
    def __init__(self, needed: int, available: int):
        self.needed = needed
        self.available = available
        super().__init__(f"Need {needed} Hira, have {available}")


class RewardAlreadyUnlockedError(HiraError):
    pass


class CashRedemptionLockedError(HiraError):
    """Cash can only be redeemed after a full habit goal is completed."""
