"""Library defaults with environment variable support."""
import codecs
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class HelperSettings(BaseSettings):
    """Defaults used by helperkit functions.

    All settings can be overridden via environment variables with HELPERKIT_ prefix.
    Example: HELPERKIT_INPUT_ENCODING=latin-1 changes the default input encoding.
    """

    model_config = SettingsConfigDict(
        env_prefix="HELPERKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    input_encoding: str = Field(
        default="utf-8",
        description="Encoding assumed for byte input when callers pass none",
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Minimum level used by configure_logging()",
    )

    @field_validator("input_encoding")
    @classmethod
    def validate_input_encoding(cls, v: str) -> str:
        """Ensure the encoding is known to the codec registry."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v


@lru_cache(maxsize=1)
def get_settings() -> HelperSettings:
    """Return the process-wide settings, loaded once."""
    return HelperSettings()
