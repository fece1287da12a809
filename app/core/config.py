from pydantic_settings import BaseSettings
from typing import List, Optional
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "Veridia Hiring API"

    # Datasource Settings
    DATASOURCE_URL: str = "postgresql://localhost:5432/veridia_hiring"
    DATASOURCE_USERNAME: Optional[str] = None
    DATASOURCE_PASSWORD: Optional[str] = None
    DATABASE_ENABLED: bool = True

    # Connection pool
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: int = 60  # seconds to wait for a free connection
    DB_POOL_RECYCLE: int = 1200  # max connection lifetime in seconds
    DB_VALIDATION_TIMEOUT: float = 5.0
    DB_ECHO: bool = False

    # Startup wait for the database
    DB_WAIT_MAX_RETRIES: int = 30
    DB_WAIT_DELAY_MS: int = 2000

    @property
    def DATABASE_URL(self) -> str:
        url = make_url(self.DATASOURCE_URL)
        if self.DATASOURCE_USERNAME:
            url = url.set(username=self.DATASOURCE_USERNAME)
        if self.DATASOURCE_PASSWORD:
            url = url.set(password=self.DATASOURCE_PASSWORD)
        return url.render_as_string(hide_password=False)

    # Mail Settings (SMTP with auth + STARTTLS)
    MAIL_HOST: str = "localhost"
    MAIL_PORT: int = 587
    MAIL_USERNAME: str = "test@example.com"
    MAIL_PASSWORD: str = "test"
    MAIL_DEBUG: bool = False

    # CORS Settings - comma-separated list of origins
    CORS_ALLOWED_ORIGINS: str = (
        "http://localhost:5173,http://localhost:5174,"
        "http://localhost:3000,http://127.0.0.1:5173"
    )
    CORS_ALLOWED_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"]
    CORS_EXPOSED_HEADERS: List[str] = ["Authorization", "Content-Type", "Accept"]
    CORS_MAX_AGE: int = 3600

    @property
    def BACKEND_CORS_ORIGINS(self) -> List[str]:
        """Parse CORS origins from the comma-separated setting"""
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(",") if origin.strip()]

    # Password encoder (bcrypt cost factor)
    PASSWORD_BCRYPT_ROUNDS: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
