"""
Shared Calendar - FastAPI Backend
Main application entry point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from shared_calendar.core.config import settings
from shared_calendar.services.scheduling_engine import SchedulingEngine
from shared_calendar.api import routes_accounts, routes_events, routes_public

# Configure logging
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Calendar state lives for the life of the process
    app.state.engine = SchedulingEngine()
    logger.info("Scheduling engine ready")
    yield
    logger.info("Application shutdown")

def create_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Accounts, events and invitations in a shared calendar",
        version="1.0.0",
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(routes_public.router, tags=["public"])
    app.include_router(routes_accounts.router, prefix="/accounts", tags=["accounts"])
    app.include_router(routes_events.router, prefix="/accounts", tags=["events"])
    return app

# Create FastAPI application
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
