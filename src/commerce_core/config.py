import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from commerce_core.domain.value_objects.currencies import FRACTION_DIGITS


class Settings(BaseSettings):
    """Runtime configuration, read from ``COMMERCE_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(env_prefix="COMMERCE_", env_file=".env", extra="ignore")

    # Domain
    settlement_currency: str = "KRW"

    # References
    order_number_prefix: str = "ORD"
    transaction_id_prefix: str = "TXN"

    # Runtime
    log_level: str = "INFO"
    event_logging_enabled: bool = True
    locking_enabled: bool = True

    @field_validator("settlement_currency")
    @classmethod
    def check_currency(cls, v: str) -> str:
        code = v.strip().upper()
        if code not in FRACTION_DIGITS:
            raise ValueError(f"Unsupported settlement currency: {v}")
        return code

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("order_number_prefix", "transaction_id_prefix")
    @classmethod
    def check_prefix(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Reference prefix cannot be empty")
        return v.strip()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
