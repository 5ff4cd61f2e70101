"""Keyforge API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map KeyforgeError → {"success": false, "error": ...}
    - CORS configured from settings (not hardcoded)
    - No state survives a request: no database, no cache, no session store

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Routes mounted at the root (/keypair, /token/*, ...) to keep the public
      paths clients already call
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from keyforge.api.error_handlers import register_error_handlers
from keyforge.api.routes import health, keypair, message, send, token
from keyforge.config import get_settings
from keyforge.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Keyforge API started")
    yield
    logger.info("Keyforge API shutting down")


app = FastAPI(
    title="Keyforge API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration (ExMA: no convention-over-config)
app.include_router(health.router)
app.include_router(keypair.router)
app.include_router(token.router)
app.include_router(message.router)
app.include_router(send.router)

register_error_handlers(app)
