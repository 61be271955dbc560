"""API configuration settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from ..remote import DEFAULT_ENDPOINT, DEFAULT_MODEL


@dataclass
class APIConfig:
    """Configuration for the Medicina Digital API."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # CORS settings
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = field(default_factory=lambda: ["*"])

    # Text assist settings
    # Without an API key the assist stays disabled: drafts come back empty
    # and refine returns the input text.
    assist_endpoint: str = DEFAULT_ENDPOINT
    assist_api_key: str = ""
    assist_model: str = DEFAULT_MODEL
    assist_timeout: float = 30.0
    assist_retries: int = 1

    @property
    def assist_enabled(self) -> bool:
        return bool(self.assist_api_key)

    @classmethod
    def from_env(cls) -> APIConfig:
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("MEDICINA_HOST", "0.0.0.0"),
            port=int(os.getenv("MEDICINA_PORT", "8000")),
            debug=os.getenv("MEDICINA_DEBUG", "").lower() in ("true", "1", "yes"),
            log_level=os.getenv("MEDICINA_LOG_LEVEL", "INFO").upper(),
            cors_origins=os.getenv("MEDICINA_CORS_ORIGINS", "*").split(","),
            assist_endpoint=os.getenv("MEDICINA_ASSIST_ENDPOINT", DEFAULT_ENDPOINT),
            assist_api_key=os.getenv("MEDICINA_ASSIST_API_KEY") or os.getenv("GEMINI_API_KEY", ""),
            assist_model=os.getenv("MEDICINA_ASSIST_MODEL", DEFAULT_MODEL),
            assist_timeout=float(os.getenv("MEDICINA_ASSIST_TIMEOUT", "30")),
            assist_retries=int(os.getenv("MEDICINA_ASSIST_RETRIES", "1")),
        )


# Global config instance
_config: APIConfig | None = None


def get_config() -> APIConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = APIConfig.from_env()
    return _config
