"""
Account API routes
"""

from fastapi import APIRouter, Depends

from shared_calendar.api.deps import get_engine
from shared_calendar.schemas.account import AccountCreate, AccountResponse
from shared_calendar.schemas.event import EventSummary
from shared_calendar.services.scheduling_engine import SchedulingEngine
from shared_calendar.utils.responses import outcome_response

router = APIRouter()

@router.post("")
async def register_account(
    account_data: AccountCreate,
    engine: SchedulingEngine = Depends(get_engine)
):
    """Register a new account"""
    with engine.lock:
        outcome = engine.register(account_data.name, account_data.type)
    if not outcome.ok:
        return outcome_response(outcome)
    return outcome_response(
        outcome,
        data=AccountResponse(**outcome.data).model_dump(),
        status_code=201
    )

@router.get("")
async def list_accounts(engine: SchedulingEngine = Depends(get_engine)):
    """List all accounts sorted by name"""
    with engine.lock:
        outcome = engine.list_accounts()
    return outcome_response(
        outcome,
        data=[AccountResponse(**item).model_dump() for item in outcome.data]
    )

@router.get("/{name}/events")
async def list_account_events(
    name: str,
    engine: SchedulingEngine = Depends(get_engine)
):
    """List the events an account promotes or is invited to"""
    with engine.lock:
        outcome = engine.account_events(name)
    if not outcome.ok:
        return outcome_response(outcome)
    return outcome_response(
        outcome,
        data=[EventSummary(**item).model_dump() for item in outcome.data]
    )
