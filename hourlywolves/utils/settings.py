"""
hourlywolves Configuration Settings.

Uses Pydantic Settings for the ambient options read from the environment,
and a plain Pydantic model for the per-run options given on the command line.

Optional environment variables (with defaults):
- HOURLYWOLVES_DEBUG: Enable debug logging (default: false)
"""
from functools import lru_cache

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hourlywolves.api.asset_api import DEFAULT_HOST
from hourlywolves.exceptions import ConfigurationError, UrlResolutionError
from hourlywolves.schedule import DEFAULT_SCHEDULE
from hourlywolves.utils.validation import validate_http_url


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    # Debug settings
    debug: bool = Field(default=False, alias='HOURLYWOLVES_DEBUG')


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class DispatchConfig(BaseModel):
    """Options for one run of the dispatcher."""

    webhook_url: str
    host: str = DEFAULT_HOST
    schedule: str = DEFAULT_SCHEDULE
    run_now: bool = False

    @field_validator('webhook_url', 'host')
    @classmethod
    def check_http_url(cls, value: str, info: ValidationInfo) -> str:
        try:
            validate_http_url(value, info.field_name)
        except UrlResolutionError as e:
            raise ValueError(str(e)) from e
        return value


def build_dispatch_config(**options) -> DispatchConfig:
    """
    Validate run options.

    :raises ConfigurationError: If any option is invalid
    """
    try:
        return DispatchConfig(**options)
    except ValidationError as e:
        errors = '; '.join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        raise ConfigurationError(f"Invalid configuration: {errors}") from e
