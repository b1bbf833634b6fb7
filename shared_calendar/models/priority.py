"""
Event priority and invitation response tokens
"""

from enum import Enum
from typing import Optional


class Priority(str, Enum):
    """Event priority tier"""

    HIGH = "high"
    MID = "mid"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: str) -> Optional["Priority"]:
        try:
            return cls(token)
        except ValueError:
            return None


class InvitationResponse(str, Enum):
    """Answer an invitee gives to an invitation"""

    ACCEPT = "accept"
    REJECT = "reject"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: str) -> Optional["InvitationResponse"]:
        try:
            return cls(token)
        except ValueError:
            return None


# Status shown for an invitee who has not answered yet
NO_ANSWER = "no_answer"
