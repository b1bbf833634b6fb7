"""
Calendar domain models
"""

from .priority import Priority, InvitationResponse
from .account_type import AccountType
from .event import Event, When
from .ranking import EventRanking
from .event_index import EventIndex
from .account import Account
from .directory import Directory

__all__ = [
    "Priority",
    "InvitationResponse",
    "AccountType",
    "Event",
    "When",
    "EventRanking",
    "EventIndex",
    "Account",
    "Directory",
]
