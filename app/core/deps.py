"""
FastAPI dependencies that compose services for each request.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import DatabaseConnectionChecker, engine, get_db
from app.core.security import PasswordEncoder, password_encoder
from app.crud.job import JobRepository
from app.services.email_service import EmailService, email_service
from app.services.job_service import JobService


def get_job_service(db: Session = Depends(get_db)) -> JobService:
    """JobService bound to the request's database session."""
    return JobService(JobRepository(db))


def get_email_service() -> EmailService:
    """SMTP sender configured from the MAIL_* settings."""
    return email_service


def get_password_encoder() -> PasswordEncoder:
    """bcrypt encoder using PASSWORD_BCRYPT_ROUNDS."""
    return password_encoder


_connection_checker = DatabaseConnectionChecker(engine, validation_timeout=settings.DB_VALIDATION_TIMEOUT)


def get_connection_checker() -> DatabaseConnectionChecker:
    """Shared checker for the application engine."""
    return _connection_checker
