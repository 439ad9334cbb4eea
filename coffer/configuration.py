"""Mini README: Centralised configuration models and helpers for Coffer.

Structure:
    * CofferSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``COFFER_`` environment variables (or a
    local ``.env`` file) for the bind address, the URL prefix the routes are
    mounted under, the wallet secret and the wallet's opening balance.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class CofferSettings(BaseSettings):
    """Runtime configuration for the Coffer service."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8080,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )
    context_path: str = Field(
        "",
        description="URL prefix every route is mounted under, e.g. '/spring-web-mvc'.",
    )
    wallet_secret: str = Field(
        "secret",
        description="Value the 'key' header must carry to modify the wallet.",
    )
    starting_gold: int = Field(10, ge=0, description="Opening gold balance.")
    starting_silver: int = Field(23, ge=0, lt=100, description="Opening silver balance.")
    starting_copper: int = Field(67, ge=0, lt=100, description="Opening copper balance.")

    class Config:
        env_prefix = "COFFER_"
        env_file = ".env"
        case_sensitive = False

    @validator("context_path", pre=True)
    def _normalise_context_path(cls, value: Optional[str]) -> str:
        """Collapse the prefix to '' or '/segment' without a trailing slash."""

        path = (value or "").strip().strip("/")
        return f"/{path}" if path else ""


@lru_cache()
def get_settings() -> CofferSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return CofferSettings()
