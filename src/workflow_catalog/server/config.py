"""Configuration for the catalog API server.

Loaded from environment variables and a local `.env` file (if present).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Settings for the REST API.

    Environment variables:
    - CATALOG_HOST           (optional)
    - PORT                   (optional)
    - LOG_LEVEL              (optional)
    - CATALOG_CORS_ORIGINS   (optional)
    - CATALOG_STATIC_DIR     (optional)
    - CATALOG_MAX_PER_PAGE   (optional)
    """

    host: str = Field(default="127.0.0.1", validation_alias="CATALOG_HOST")
    port: int = Field(default=8000, validation_alias="PORT", ge=1, le=65535)

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    cors_origins: str = Field(
        default="*",
        validation_alias="CATALOG_CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins.",
    )

    # Root document and assets for the catalog browser page.
    static_dir: Path = Field(default=Path("static"), validation_alias="CATALOG_STATIC_DIR")

    max_per_page: int = Field(
        default=100,
        validation_alias="CATALOG_MAX_PER_PAGE",
        description="Upper bound applied to the `per_page` listing parameter.",
        ge=1,
        le=1000,
    )

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    def parsed_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
