"""
Event and invitation API routes
"""

from fastapi import APIRouter, Depends

from shared_calendar.api.deps import get_engine
from shared_calendar.schemas.event import (
    EventCreate,
    EventDetail,
    EventSummary,
    InvitationCreate,
    InvitationReply,
)
from shared_calendar.services.scheduling_engine import SchedulingEngine
from shared_calendar.utils.responses import outcome_response

router = APIRouter()

@router.post("/{promoter}/events")
async def create_event(
    promoter: str,
    event_data: EventCreate,
    engine: SchedulingEngine = Depends(get_engine)
):
    """Schedule an event promoted by an account"""
    with engine.lock:
        outcome = engine.create_event(
            promoter,
            event_data.name,
            event_data.priority,
            event_data.year,
            event_data.month,
            event_data.day,
            event_data.hour,
            event_data.topics
        )
    if not outcome.ok:
        return outcome_response(outcome)
    return outcome_response(
        outcome,
        data=EventSummary(**outcome.data).model_dump(),
        status_code=201
    )

@router.get("/{promoter}/events/{event_name}")
async def get_event_details(
    promoter: str,
    event_name: str,
    engine: SchedulingEngine = Depends(get_engine)
):
    """Show an event and the answer of every invitee"""
    with engine.lock:
        outcome = engine.event_detail(promoter, event_name)
    if not outcome.ok:
        return outcome_response(outcome)
    return outcome_response(outcome, data=EventDetail(**outcome.data).model_dump())

@router.post("/{promoter}/events/{event_name}/invitations")
async def invite_account(
    promoter: str,
    event_name: str,
    invitation: InvitationCreate,
    engine: SchedulingEngine = Depends(get_engine)
):
    """Invite an account to an event"""
    with engine.lock:
        outcome = engine.invite(promoter, event_name, invitation.invitee)
    if not outcome.ok:
        return outcome_response(outcome)
    return outcome_response(outcome, data=EventSummary(**outcome.data).model_dump())

@router.post("/{promoter}/events/{event_name}/responses")
async def reply_to_invitation(
    promoter: str,
    event_name: str,
    reply: InvitationReply,
    engine: SchedulingEngine = Depends(get_engine)
):
    """Accept or reject an invitation"""
    with engine.lock:
        outcome = engine.respond(reply.invitee, promoter, event_name, reply.response)
    if not outcome.ok:
        return outcome_response(outcome)
    return outcome_response(outcome, data=EventSummary(**outcome.data).model_dump())
