# ==============================================================================
# Application Configuration
# ==============================================================================
"""
Configuration management using pydantic-settings.

All configuration is loaded from environment variables, with support for
.env files via python-dotenv.
"""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sessionwindows.core.windows import SessionWindowSpec

# Load .env file before any settings are instantiated
load_dotenv()


class SessionWindowSettings(BaseSettings):
    """Session window parameters.

    Values are plain integers in milliseconds. They are not range-checked
    here; to_spec() runs them through the same validation as every other
    caller so that a bad environment produces the same InvalidArgument.
    """

    model_config = SettingsConfigDict(env_prefix="SESSION_WINDOW_")

    gap_ms: int = Field(default=5 * 60 * 1000, description="Inactivity gap in milliseconds")
    max_span_ms: int = Field(
        default=10 * 60 * 1000, description="Maximum session span in milliseconds"
    )
    grace_ms: int = Field(default=0, description="Grace period in milliseconds")

    def to_spec(self) -> SessionWindowSpec:
        """Build a validated SessionWindowSpec from these settings.

        Raises:
            InvalidArgument: If any configured value is out of range
        """
        return SessionWindowSpec.with_gap_max_span_and_grace(
            self.gap_ms, self.max_span_ms, self.grace_ms
        )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        extra="ignore",
    )

    # Nested settings
    window: SessionWindowSettings = Field(default_factory=SessionWindowSettings)

    # General settings
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once and cached for subsequent calls.
    """
    return Settings()
