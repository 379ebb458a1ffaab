"""
Application Settings

Configuration classes using Pydantic for validation.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main library settings."""

    model_config = SettingsConfigDict(
        env_prefix="ATPROTO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from .env
    )

    chat_proxy_did: str = Field(
        default="did:web:api.bsky.chat#bsky_chat",
        description="Service DID placed in the atproto-proxy header for chat calls"
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds"
    )
    user_agent: str = Field(
        default="atproto-kit/0.1.0",
        min_length=1,
        description="User-Agent header sent with every request"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )

    @field_validator("chat_proxy_did")
    @classmethod
    def validate_proxy_did(cls, v: str) -> str:
        """Validate the proxy target: `<did>#<service id>`."""
        if not v.startswith("did:") or "#" not in v:
            raise ValueError(
                f"Invalid chat proxy: {v}. Expected '<did>#<service id>'"
            )
        return v
