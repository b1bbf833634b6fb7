"""
Results returned by scheduling operations
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class Reason(str, Enum):
    """Why a request was turned down"""

    ACCOUNT_NOT_FOUND = "account-not-found"
    ACCOUNT_EXISTS = "account-exists"
    INVALID_TYPE = "invalid-type"
    INVALID_PRIORITY = "invalid-priority"
    INVALID_DATE = "invalid-date"
    GUEST_FORBIDDEN = "guest-forbidden"
    STAFF_HIGH_FORBIDDEN = "staff-high-forbidden"
    EVENT_EXISTS = "event-exists"
    EVENT_NOT_FOUND = "event-not-found"
    BUSY_ON_DATE = "busy-on-date"
    NOT_INVITED = "not-invited"
    ALREADY_INVITED = "already-invited"
    ALREADY_RESPONDED = "already-responded"
    INVALID_RESPONSE = "invalid-response"
    ALREADY_ATTENDING = "already-attending-conflict"


class CascadeAction(str, Enum):
    REMOVED = "removed"
    REJECTED = "rejected"


@dataclass
class CascadeEffect:
    """One automatic change made while resolving a conflict"""

    action: CascadeAction
    event_name: str
    promoter_name: str

    def describe(self) -> str:
        return f"{self.event_name} promoted by {self.promoter_name} was {self.action.value}."


@dataclass
class Outcome:
    """Success or reported failure of one operation"""

    ok: bool
    message: str
    reason: Optional[Reason] = None
    data: Any = None
    cascade: List[CascadeEffect] = field(default_factory=list)

    @classmethod
    def success(cls, message: str, data: Any = None, cascade: Optional[List[CascadeEffect]] = None) -> "Outcome":
        return cls(ok=True, message=message, data=data, cascade=list(cascade or []))

    @classmethod
    def fail(cls, reason: Reason, message: str) -> "Outcome":
        return cls(ok=False, message=message, reason=reason)

    def lines(self) -> List[str]:
        """The message followed by one line per cascade effect"""
        return [self.message] + [effect.describe() for effect in self.cascade]
