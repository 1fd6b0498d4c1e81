"""
Glossary-Term-Service - Application Configuration

Patterns Applied:
- Pydantic Settings with SettingsConfigDict
- Environment variable prefix GLS_ for Glossary-Term-Service

Anti-Patterns Avoided:
- Hardcoded catalog location (overridable via GLS_CATALOG_PATH)
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent.parent / "catalog" / "data"

DEFAULT_CATALOG_PATH = DATA_DIR / "glossary_catalog.json"
DEFAULT_DISPLAY_NAMES_PATH = DATA_DIR / "category_display_names.yaml"

DEVELOPMENT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables with GLS_ prefix.
    Example: GLS_PORT=8080, GLS_ENVIRONMENT=production

    List values (GLS_CORS_ORIGINS) are read as JSON arrays.
    """

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # Application metadata
    service_name: str = "glossary-term-service"
    version: str = "0.1.0"
    environment: str = "development"

    # Logging configuration
    log_level: str = "INFO"
    log_json: bool = True

    # Catalog sources
    catalog_path: Path = DEFAULT_CATALOG_PATH
    display_names_path: Path = DEFAULT_DISPLAY_NAMES_PATH

    # HTTP plumbing
    cors_origins: list[str] | None = Field(
        default=None,
        description="Allowed CORS origins; None picks the environment default",
    )
    gzip_minimum_size: int = 1000

    # Tracing configuration
    tracing_enabled: bool = False
    tracing_console_export: bool = True

    model_config = SettingsConfigDict(
        env_prefix="GLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        """Whether error details may be exposed to clients."""
        return self.environment == "development"

    def resolved_cors_origins(self) -> list[str]:
        """Return configured CORS origins, or the per-environment default."""
        if self.cors_origins is not None:
            return self.cors_origins
        return list(DEVELOPMENT_CORS_ORIGINS) if self.is_development else []


def get_settings() -> Settings:
    """Get application settings instance.

    Returns:
        Settings instance with values from environment
    """
    return Settings()
