"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.orm import Session
from fastapi.middleware.cors import CORSMiddleware
import logging

from . import __version__
from .config import settings
from .database import Base, SessionLocal, engine, get_db
from .exceptions import register_exception_handlers
from .core.middleware import setup_middlewares
from .auth.models import RefreshToken  # noqa: F401  registers the table on Base
from .auth.router import router as auth_router
from .auth.service import sweep_expired_tokens
from .users.router import router as users_router
from .dashboards.router import router as dashboards_router

# Configure logging
logging.basicConfig(level=logging.DEBUG if settings.is_development else logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and clear out expired refresh tokens before serving."""
    logger.info("Starting Health Diary API...")

    # Create database tables if they don't exist
    Base.metadata.create_all(bind=engine)

    if settings.sweep_expired_tokens_on_startup:
        db = SessionLocal()
        try:
            sweep_expired_tokens(db)
        except Exception as e:
            logger.error(f"Expired token sweep failed: {str(e)}")
        finally:
            db.close()

    yield

    logger.info("Shutting down Health Diary API")
    engine.dispose()


# Create FastAPI application
app = FastAPI(
    title="Health Diary API",
    description="API for the Health Diary monitoring application",
    version=__version__,
    lifespan=lifespan
)

# Register exception handlers
register_exception_handlers(app)

# Configure CORS middleware
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
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(dashboards_router)

# Root endpoint
@app.get("/")
def root():
    """
    Root endpoint for API health check.

    Returns:
        dict: Service name, version and where the docs live
    """
    return {
        "message": "Health Diary Monitoring API",
        "version": __version__,
        "status": "running",
        "docs": "/docs"
    }

# Health check endpoint
@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint for monitoring.

    Returns:
        dict: Health status information
    """
    db.execute(text("SELECT 1"))
    return {"status": "healthy", "database": "connected"}


def serve():
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
