from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "CAPI Onboarding Tracker API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Persistence: an empty URL selects the in-memory store
    database_url: str = ""
    seed_demo_data: bool = True

    # Static data (relative to backend directory)
    catalog_file: str = "data/catalog.yaml"
    tips_file: str = "data/tips.yaml"
    docs_dir: str = "docs"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # row stores (memory / database)
    log_level_progress: str = "INFO"         # progress tracking and propagation

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    def resolve_path(self, value: str) -> Path:
        """Resolve a configured path; relative paths are taken from the backend directory."""
        path = Path(value)
        return path if path.is_absolute() else _BACKEND_DIR / path


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
