"""
Main FastAPI application entry point.
Configures the ledger, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
import logging

from .config import settings
from .database import build_engine, build_session_factory, init_db
from .exceptions import AppException, register_exception_handlers
from .core.events import EventBus, log_event
from .core.ledger import Ledger
from .core.middleware import setup_middlewares
from .core.security import normalize_address
from .identity.router import router as users_router, auth_router
from .identity.service import bootstrap_admin_if_needed
from .records.router import router as records_router
from .access.router import router as access_router
from .audit.router import router as audit_router
from .emergency.router import router as emergency_router, stats_router

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

def create_app(engine: Optional[Engine] = None, clock=None, events: Optional[EventBus] = None) -> FastAPI:
    """
    Build the application around its own ledger.

    Args:
        engine: Database engine (built from DATABASE_URL when omitted)
        clock: Authoritative time source (wall clock when omitted)
        events: Notification channel (a new bus when omitted)

    Returns:
        FastAPI: Configured application; its ledger is at ``app.state.ledger``
    """
    engine = engine or build_engine(settings.database_url)

    # Create database tables if they don't exist
    init_db(engine)

    ledger = Ledger(build_session_factory(engine), clock=clock, events=events)
    ledger.events.subscribe(log_event)

    logger.info("🚀 Starting MedChain Access Ledger...")
    try:
        bootstrap_admin_if_needed(ledger, normalize_address(settings.admin_address))
    except (AppException, ValueError) as e:
        logger.error(f"❌ Bootstrap process failed: {str(e)}")

    app = FastAPI(
        title="MedChain Access Ledger",
        description="Patient-controlled access to medical records with an immutable audit trail",
        version="1.0.0"
    )
    app.state.ledger = ledger

    # Register exception handlers
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup custom middleware
    setup_middlewares(app)

    # Include routers
    app.include_router(auth_router, prefix="/api/v1/auth", tags=["Authentication"])
    app.include_router(users_router, prefix="/api/v1/users", tags=["Identity"])
    app.include_router(records_router, prefix="/api/v1/records", tags=["Records"])
    app.include_router(access_router, prefix="/api/v1/access", tags=["Access"])
    app.include_router(audit_router, prefix="/api/v1/audit", tags=["Audit"])
    app.include_router(emergency_router, prefix="/api/v1/emergency", tags=["Emergency"])
    app.include_router(stats_router, prefix="/api/v1/stats", tags=["Emergency"])

    @app.get("/")
    def root():
        """
        Root endpoint for API health check.

        Returns:
            dict: Welcome message and version
        """
        return {"message": "Welcome to MedChain Access Ledger", "version": app.version}

    @app.get("/health")
    def health_check():
        """
        Health check endpoint for monitoring.

        Returns:
            dict: Health status information
        """
        return {"status": "healthy", "database": "connected"}

    return app

app = create_app()
