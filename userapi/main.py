"""userapi — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Handler failures serialized by DispatchContext; global handlers cover the rest
    - SymbolicError debug flag set once, at startup, from settings
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py, registered here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userapi.api.error_handlers import register_error_handlers
from userapi.api.routes import auth, health, users
from userapi.config import get_settings
from userapi.core.symbolic_error import SymbolicError
from userapi.infrastructure.database import init_db
from userapi.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    SymbolicError.set_debug(settings.symbolic_error_debug)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("userapi started")
    yield
    logger.info("userapi shutting down")


app = FastAPI(title="userapi", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(auth.router)

register_error_handlers(app)
