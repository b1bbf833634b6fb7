"""
Account type policy
"""

from enum import Enum
from typing import Optional

from shared_calendar.models.priority import Priority


class AccountType(str, Enum):
    """Kinds of calendar accounts"""

    MANAGER = "manager"
    STAFF = "staff"
    GUEST = "guest"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def classify(cls, token: str) -> Optional["AccountType"]:
        """Parse a type token, returning None when it is unknown"""
        try:
            return cls(token)
        except ValueError:
            return None

    @classmethod
    def is_type_valid(cls, token: str) -> bool:
        return cls.classify(token) is not None


# Priorities each account type may promote
PROMOTION_RIGHTS = {
    AccountType.MANAGER: frozenset({Priority.HIGH, Priority.MID}),
    AccountType.STAFF: frozenset({Priority.MID}),
    AccountType.GUEST: frozenset(),
}


def can_promote(account_type: AccountType, priority: Priority) -> bool:
    """Whether an account of this type may create an event of this priority"""
    return priority in PROMOTION_RIGHTS[account_type]


def can_promote_any(account_type: AccountType) -> bool:
    return bool(PROMOTION_RIGHTS[account_type])
