"""
FastAPI application factory and entry point.

This module creates and configures the FastAPI application:
  1. Lifespan manager — configures logging on startup, empties the store on shutdown
  2. CORS middleware — allows front desk UI origins to make cross-origin requests
  3. Exception handlers — maps domain errors to HTTP responses
  4. Router registration — mounts the members, employees and keycards endpoints

Running locally:
    uvicorn facility_api.main:app --reload

All records live in process memory, so restarting the server (including
every --reload) starts from an empty facility.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from facility_api.config import settings
from facility_api.exceptions import register_exception_handlers
from facility_api.logging_config import setup_logging
from facility_api.routers import employees, keycards, members
from facility_api.store import get_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
      Configures the facility_api loggers at settings.LOG_LEVEL.

    Shutdown:
      Clears the in-memory store. Nothing is persisted, so this only makes
      the loss of state explicit (and keeps repeated test startups clean).
    """
    # --- Startup ---
    setup_logging("DEBUG" if settings.DEBUG else None)
    logger.info("%s %s starting", settings.APP_NAME, settings.APP_VERSION)
    yield
    # --- Shutdown ---
    get_store().clear()
    logger.info("%s stopped", settings.APP_NAME)


# Create the FastAPI application instance
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Facility membership, staff and keycard access API",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

# CORS: Allow specified front desk origins to make requests.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(members.router, prefix="/members", tags=["Members"])
app.include_router(employees.router, prefix="/employees", tags=["Employees"])
app.include_router(keycards.router, prefix="/keycards", tags=["Keycards"])


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint for deployment probes.

    Returns a simple JSON response indicating the service is running.
    """
    return {"status": "ok", "version": settings.APP_VERSION}
