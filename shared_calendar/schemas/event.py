"""
Event-related Pydantic schemas
"""

from typing import List
from pydantic import BaseModel, Field

class EventWhen(BaseModel):
    """Date-hour slot of an event"""
    year: int
    month: int
    day: int
    hour: int

class EventCreate(EventWhen):
    """Schema for creating an event"""
    name: str = Field(..., min_length=1, pattern=r"^[^/]+$")
    priority: str
    topics: List[str] = []

class EventSummary(BaseModel):
    """Event with its invitation counters"""
    name: str
    promoter: str
    priority: str
    when: EventWhen
    topics: List[str]
    invited: int
    accepted: int
    rejected: int
    unanswered: int

class InviteeStatus(BaseModel):
    """Answer of one invitee: accept, reject or no_answer"""
    name: str
    status: str

class EventDetail(BaseModel):
    """Event with the answer of every invitee"""
    name: str
    promoter: str
    priority: str
    when: EventWhen
    topics: List[str]
    invitees: List[InviteeStatus]

class InvitationCreate(BaseModel):
    """Schema for inviting an account"""
    invitee: str

class InvitationReply(BaseModel):
    """Schema for answering an invitation"""
    invitee: str
    response: str

class TopicMatch(BaseModel):
    """Event found by a topic search"""
    name: str
    promoter: str
    topics: List[str]
    matching_topics: int
