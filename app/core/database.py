import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)


class DatabaseUnavailableError(RuntimeError):
    """Raised when the database never became reachable during startup."""
    pass


def get_engine(database_url: Optional[str] = None) -> Engine:
    """
    Create the SQLAlchemy engine backed by a QueuePool.

    Args:
        database_url: Optional URL override (defaults to settings.DATABASE_URL)

    Returns:
        Configured Engine
    """
    return create_engine(
        database_url or settings.DATABASE_URL,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        echo=settings.DB_ECHO,
    )


# Create SQLAlchemy engine
engine = get_engine()

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Optional[Engine] = None):
    """
    Initialize database.

    Imports the models so they register on Base.metadata, then creates
    any missing tables. Existing tables are left untouched.
    """
    from app.models import job  # noqa: F401 - register models
    Base.metadata.create_all(bind=bind or engine)


class DatabaseConnectionChecker:
    """
    Checks whether the pooled database is reachable.

    Used at startup to block until the database accepts connections, and by
    the detailed health endpoint.
    """

    def __init__(self, engine: Engine, validation_timeout: float = 5.0):
        self.engine = engine
        self.validation_timeout = validation_timeout

    def _ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def is_available(self) -> bool:
        """
        Acquire a connection and run a test query within the validation timeout.

        Each call runs on its own worker, so a hung attempt never delays
        the next check.

        Returns:
            True if the database answered, False otherwise (never raises)
        """
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="db_check")
        future = executor.submit(self._ping)
        try:
            future.result(timeout=self.validation_timeout)
            return True
        except FutureTimeoutError:
            logger.warning(f"Database validation timed out after {self.validation_timeout}s")
            return False
        except Exception as e:
            logger.debug(f"Database not available: {e}")
            return False
        finally:
            executor.shutdown(wait=False)

    def wait_until_available(self, max_retries: int, delay_millis: int) -> None:
        """
        Poll is_available() at a fixed interval.

        Args:
            max_retries: Maximum number of attempts
            delay_millis: Delay between attempts in milliseconds

        Raises:
            DatabaseUnavailableError: If every attempt failed
        """
        attempts = 0
        while attempts < max_retries:
            if self.is_available():
                logger.info("Database is available")
                return
            attempts += 1
            logger.warning(f"Database not available (attempt {attempts}/{max_retries}), retrying in {delay_millis}ms")
            time.sleep(delay_millis / 1000.0)

        raise DatabaseUnavailableError(f"Database not available after {max_retries} attempts")
