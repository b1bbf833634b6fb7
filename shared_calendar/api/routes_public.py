"""
Public API routes
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from shared_calendar.api.deps import get_engine
from shared_calendar.schemas.event import TopicMatch
from shared_calendar.services.scheduling_engine import SchedulingEngine
from shared_calendar.utils.responses import outcome_response

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}

@router.get("/topics")
async def search_topics(
    topic: List[str] = Query(...),
    engine: SchedulingEngine = Depends(get_engine)
):
    """Events covering any of the topics, most relevant first"""
    with engine.lock:
        outcome = engine.search_topics(topic)
    return outcome_response(
        outcome,
        data=[TopicMatch(**item).model_dump() for item in outcome.data]
    )
