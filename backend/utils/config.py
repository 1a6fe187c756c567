"""
QML Script IntelliSense Configuration Module.

Centralizes all configuration settings using Pydantic Settings.
Requires Python 3.11+.
"""

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load .env file into os.environ at module import time
# This ensures nested BaseSettings classes can read the values
_env_file = Path(__file__).parent.parent / ".env"
if _env_file.exists():
    load_dotenv(_env_file)
else:
    # Try current working directory
    load_dotenv()


def _default_exclude_patterns() -> list[str]:
    from resolver.constants import DEFAULT_EXCLUDE_PATTERNS

    return list(DEFAULT_EXCLUDE_PATTERNS)


class WorkspaceSettings(BaseSettings):
    """Workspace scanning settings."""

    model_config = SettingsConfigDict(env_prefix="WORKSPACE_")

    root: Path | None = Field(default=None, description="Workspace root directory")
    max_script_files: int = Field(
        default=500, ge=1, description="Auto-import candidate bound"
    )
    max_markup_files: int = Field(
        default=1000, ge=1, description="Reference search bound"
    )
    min_import_prefix: int = Field(default=2, ge=1, le=32)

    exclude_patterns: list[str] = Field(
        default_factory=_default_exclude_patterns,
        description="Directory name patterns skipped during enumeration",
    )

    @field_validator("exclude_patterns", mode="before")
    @classmethod
    def parse_exclude_patterns(cls, v: str | list[str]) -> list[str]:
        """Parse exclude patterns from comma-separated string or list."""
        if isinstance(v, str):
            return [p.strip() for p in v.split(",") if p.strip()]
        return v


class WatcherSettings(BaseSettings):
    """File watcher configuration settings."""

    model_config = SettingsConfigDict(env_prefix="WATCHER_")

    recursive: bool = Field(default=True)
    enabled: bool = Field(default=True)


class APISettings(BaseSettings):
    """API server configuration settings."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8765, ge=1, le=65535)
    debug: bool = Field(default=False)
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Allowed CORS origins",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="INFO")
    format: str = Field(default="json")  # "json" or "console"


class Settings(BaseSettings):
    """Main application settings aggregating all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="QMLScriptIntelliSense")
    app_version: str = Field(default="0.1.0")
    environment: str = Field(default="development")

    # Sub-settings
    workspace: WorkspaceSettings = Field(default_factory=WorkspaceSettings)
    watcher: WatcherSettings = Field(default_factory=WatcherSettings)
    api: APISettings = Field(default_factory=APISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() in ("development", "dev", "local")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns singleton instance of Settings for performance.
    Use dependency injection in FastAPI routes.
    """
    return Settings()
