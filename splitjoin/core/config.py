from typing import Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from splitjoin.core.line_processor import RangeErrorPolicy

# loguru's built-in level names, least to most severe
LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class SplitJoinSettings(BaseSettings):
    """splitjoin runtime settings, read from SPLITJOIN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPLITJOIN_", env_file=".env", extra="ignore"
    )

    log_level: LogLevel = Field(
        "WARNING", description="Minimum level of diagnostics written to stderr."
    )
    strict_range: bool = Field(
        True,
        description="Reject range specifications containing more than one ':'.",
    )
    on_range_error: RangeErrorPolicy = Field(
        RangeErrorPolicy.ABORT,
        description="Handling of lines whose field count cannot satisfy the range.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def env_name(cls, field_name: str) -> str:
        """Environment variable that sets ``field_name``."""
        return f"{cls.model_config['env_prefix']}{field_name.upper()}"
