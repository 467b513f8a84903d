from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_FAILURE_POLICIES: tuple[str, str] = ('raise', 'identity')
ALLOWED_LOG_LEVELS: tuple[str, ...] = ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        env_prefix='RECO_LTR_',
        case_sensitive=False,
        extra='ignore',
    )

    placeholder_sigil: str = Field(default='$')
    reject_unbounded_range: bool = Field(default=True)
    request_failure_policy: str = Field(default='raise')
    log_level: str = Field(default='INFO')
    log_json: bool = Field(default=True)

    @field_validator('placeholder_sigil')
    @classmethod
    def validate_sigil(cls, value: str) -> str:
        if len(value) != 1 or value.isalnum() or value.isspace() or value in '+-.':
            raise ValueError('placeholder_sigil must be a single symbol that cannot start a number')
        return value

    @field_validator('request_failure_policy')
    @classmethod
    def validate_failure_policy(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in ALLOWED_FAILURE_POLICIES:
            raise ValueError(f"Invalid request_failure_policy '{value}'. Allowed values: raise, identity")
        return normalized

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in ALLOWED_LOG_LEVELS:
            raise ValueError(f"Invalid log_level '{value}'")
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
