"""
Pydantic schemas package
"""

from .common import *
from .account import *
from .event import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "AccountCreate",
    "AccountResponse",
    "EventWhen",
    "EventCreate",
    "EventSummary",
    "EventDetail",
    "InviteeStatus",
    "InvitationCreate",
    "InvitationReply",
    "TopicMatch",
]
