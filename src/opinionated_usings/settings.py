"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import codecs
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from opinionated_usings.inspection.checks import SortKey


class Settings(BaseSettings):
    """Configuration for the using-directive checker.

    Values are read from ``OPINIONATED_USINGS_*`` environment variables and
    from a ``.env`` file in the working directory. Command-line flags take
    precedence over both.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPINIONATED_USINGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Scanning
    workers: int = Field(1, ge=1)  # files inspected in parallel
    encoding: str = "utf-8-sig"  # undecodable bytes are replaced, not fatal
    sort_key: SortKey = SortKey.NAME

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        upper_value = value.upper()
        if upper_value not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return upper_value

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding: {value!r}") from None
        return value
