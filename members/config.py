"""Runtime settings read from the environment.

Environment Variable Format:
    MEMBERS__<KEY>=<VALUE>

Examples:
    MEMBERS__STRICT_FACTS=1
    MEMBERS__LOG_LEVEL=DEBUG
    MEMBERS__PORT=8080
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
	model_config = SettingsConfigDict(env_prefix="MEMBERS__", extra="ignore")

	strict_facts: bool = Field(
		default=False,
		description="Raise on null facts instead of logging and skipping them.",
	)
	log_level: LogLevel = "WARNING"
	quiet: bool = Field(default=False, description="Suppress console logging.")
	host: str = "127.0.0.1"
	port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
	return Settings()
