"""
Runtime Configuration

Reads application settings from environment variables once at import time.

Includes:
- Server binding and CORS origins
- Database URL resolution (DATABASE_URL, DB_* parts, or local SQLite file)
- JWT signing parameters
- Log file location
"""
import os
import logging
from pathlib import Path
from urllib.parse import quote_plus

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path.home() / ".cms-api"
_DEV_JWT_SECRET = "dev-secret-change-me"


def _env(key: str, default: str | None = None) -> str | None:
    value = os.environ.get(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _env_int(key: str, default: int) -> int:
    value = _env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key}={value!r}, using default {default}")
        return default


def build_database_url() -> str:
    """
    Resolve the SQLAlchemy database URL.

    Priority:
        1. DATABASE_URL as given
        2. PostgreSQL URL assembled from DB_HOST, DB_PORT, DB_USERNAME, DB_PASSWORD, DB_NAME
        3. SQLite file at SQLITE_PATH (defaults to ~/.cms-api/cms.db)

    Returns:
        Database URL string
    """
    url = _env("DATABASE_URL")
    if url:
        return url

    host = _env("DB_HOST")
    if host:
        port = _env("DB_PORT", "5432")
        user = quote_plus(_env("DB_USERNAME", "postgres"))
        password = quote_plus(_env("DB_PASSWORD", ""))
        name = _env("DB_NAME", "cms")
        return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}"

    sqlite_path = Path(_env("SQLITE_PATH", str(DEFAULT_DATA_DIR / "cms.db"))).expanduser()
    sqlite_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{sqlite_path}"


class Settings:
    """Application settings loaded from the environment."""

    def __init__(self):
        self.app_name = _env("APP_NAME", "CMS API")
        self.environment = _env("ENVIRONMENT", "development").lower()
        self.host = _env("HOST", "0.0.0.0")
        self.port = _env_int("PORT", 8080)

        frontend_urls = _env("FRONTEND_URLS", "")
        self.frontend_urls = [u.strip() for u in frontend_urls.split(",") if u.strip()]

        self.database_url = build_database_url()

        self.jwt_secret = _env("JWT_SECRET_KEY")
        if not self.jwt_secret:
            if self.is_production:
                raise ConfigurationError(
                    "JWT_SECRET_KEY must be set when ENVIRONMENT=production",
                    missing_keys=["JWT_SECRET_KEY"]
                )
            logger.warning("JWT_SECRET_KEY is not set, using an insecure development secret")
            self.jwt_secret = _DEV_JWT_SECRET
        self.jwt_algorithm = _env("JWT_ALGORITHM", "HS256")
        self.jwt_expires_in = _env_int("JWT_EXPIRES_SECONDS", 2 * 60 * 60)

        self.log_dir = Path(_env("LOG_DIR", str(DEFAULT_DATA_DIR / "logs"))).expanduser()
        self.log_level = _env("LOG_LEVEL", "INFO").upper()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def cors_origins(self) -> list[str]:
        """Allowed CORS origins: everything in development, FRONTEND_URLS in production."""
        if self.is_production:
            return self.frontend_urls
        return ["*"]


settings = Settings()
