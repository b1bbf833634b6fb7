"""
Shared dependencies for API routes
"""

from fastapi import Request

from shared_calendar.services.scheduling_engine import SchedulingEngine

def get_engine(request: Request) -> SchedulingEngine:
    """Scheduling engine owned by the running application"""
    return request.app.state.engine
