"""Client configuration using pydantic-settings.

Values are read from ``JUPITER_*`` environment variables or a ``.env`` file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class JupiterSettings(BaseSettings):
    """Immutable client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JUPITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # ======================
    # Endpoints
    # ======================
    quote_api_url: str = Field(
        default="https://quote-api.jup.ag/v6", description="Quote/swap API base URL"
    )
    price_api_url: str = Field(
        default="https://price.jup.ag/v6", description="Price API base URL"
    )

    # ======================
    # HTTP
    # ======================
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    api_key: Optional[str] = Field(
        default=None, description="Optional API key for higher rate limits"
    )

    def get_headers(self) -> dict:
        """Get API headers."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "quote_api_url": self.quote_api_url,
            "price_api_url": self.price_api_url,
            "timeout": self.timeout,
            "api_key": "***" if self.api_key else "(not set)",
        }


@lru_cache
def get_settings() -> JupiterSettings:
    """Get cached settings instance."""
    return JupiterSettings()
