import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import DatabaseConnectionChecker, SessionLocal, engine, init_db
from app.core.logging_config import setup_logging
from app.crud.job import JobRepository
from app.services.job_service import JobService
from app.api.endpoints import health, jobs

# Configure logging
setup_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
logger = logging.getLogger(__name__)


def seed_default_jobs() -> None:
    """Insert the default job listings if the jobs table is empty."""
    db = SessionLocal()
    try:
        JobService(JobRepository(db)).seed_if_empty()
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up Veridia Hiring API...")

    if settings.DATABASE_ENABLED:
        logger.info("Waiting for database...")
        checker = DatabaseConnectionChecker(engine, validation_timeout=settings.DB_VALIDATION_TIMEOUT)
        checker.wait_until_available(settings.DB_WAIT_MAX_RETRIES, settings.DB_WAIT_DELAY_MS)

        logger.info("Initializing database...")
        init_db(engine)
        seed_default_jobs()
        logger.info("Database initialized successfully")
    else:
        logger.warning("DATABASE_ENABLED is false, skipping database initialization")

    yield

    # Shutdown
    logger.info("Shutting down Veridia Hiring API...")
    engine.dispose()


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Job listings API for the Veridia careers site",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=settings.CORS_ALLOWED_METHODS,
    allow_headers=["*"],
    expose_headers=settings.CORS_EXPOSED_HEADERS,
    max_age=settings.CORS_MAX_AGE,
)

# Include routers
app.include_router(jobs.router, prefix=settings.API_V1_STR)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return {
        "message": "Veridia Hiring API",
        "version": "1.0.0",
        "status": "healthy"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
