"""Client configuration with environment variable loading.

Pydantic-based configuration for reaching the chat backend.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:5000"


class ClientConfig(BaseModel):
    """Configuration for the chat backend client.

    Environment values are validated like explicit arguments, so a bad
    variable fails with a ValidationError naming the field.

    Attributes:
        api_base_url: Base URL the chat-start, chat and upload paths hang off.
        request_timeout: Per-request timeout in seconds (None waits forever).
        start_delay: Pause in seconds between a successful session start
            and hiding the overlay.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL),
        validate_default=True,
        description="Base URL of the chat backend",
    )
    request_timeout: float | None = Field(
        default_factory=lambda: os.getenv("REQUEST_TIMEOUT"),
        validate_default=True,
        gt=0.0,
        description="Request timeout in seconds (None disables the timeout)",
    )
    start_delay: float = Field(
        default_factory=lambda: os.getenv("START_DELAY", "2.0"),
        validate_default=True,
        ge=0.0,
        description="Delay before the session overlay is hidden",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("request_timeout", "start_delay", mode="before")
    @classmethod
    def strip_number(cls, v: object) -> object:
        """Strip environment strings; a blank timeout means no timeout."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If API_BASE_URL is not an http(s) URL, or
            REQUEST_TIMEOUT / START_DELAY are not valid numbers.
    """
    return ClientConfig()
