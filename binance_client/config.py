import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

from binance_client.constants import DEFAULT_LOG_LEVEL, DEFAULT_TIMEOUT

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class Settings(BaseSettings):
    # Binance.US API credentials (HMAC key pair)
    api_key: str = ""
    secret_key: str = ""

    # Connection
    base_url: Optional[str] = None  # Overrides the random pick from BASE_URLS
    timeout: float = DEFAULT_TIMEOUT

    # Level HTTP traffic is logged at; headers/bodies only at "debug"
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.lower()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v:
            return v.rstrip("/")
        return v or None

    @property
    def log_level_value(self) -> int:
        return LOG_LEVELS[self.log_level]

    class Config:
        env_prefix = "BINANCE_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
