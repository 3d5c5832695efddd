from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from .config import Settings, validate_settings
from .core.database import Database
from .core.events import EventBus
from .core.events.handlers import register_event_handlers
from .core.logging_config import setup_logging
from .core.telemetry import setup_telemetry
from .clients import EmailClient
from .api.routes import auth, documents, shares, search, users
from .api.exceptions import (
    inkwell_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .exceptions import InkwellException
import logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and everything it owns

    Run with ``uvicorn inkwell.main:create_app --factory``.
    """
    settings = settings or Settings()

    # Setup logging first
    setup_logging(settings)
    validate_settings(settings)

    app = FastAPI(title="Inkwell API", version="1.0.0")

    # One database handle and one event bus per application
    database = Database(settings.database_url, echo=settings.debug)
    database.create_all()
    event_bus = EventBus()
    register_event_handlers(event_bus, EmailClient(settings))

    app.state.settings = settings
    app.state.database = database
    app.state.event_bus = event_bus

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(InkwellException, inkwell_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(auth.router, prefix="/api")
    app.include_router(documents.router, prefix="/api")
    app.include_router(shares.router, prefix="/api")
    app.include_router(search.router, prefix="/api")
    app.include_router(users.router, prefix="/api")

    @app.get("/")
    def root():
        return {"message": "Inkwell API"}

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    if settings.telemetry_enabled:
        setup_telemetry(app, settings, database.engine)

    logger.info("Application created")
    return app
