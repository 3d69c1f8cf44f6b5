"""Gateway settings - API credential and model selection."""

from __future__ import annotations

import re

from pydantic import Field, field_validator
from pydantic import ValidationError as SettingsError
from pydantic_settings import BaseSettings, SettingsConfigDict

import config
from core.errors import ConfigurationError

MISSING_KEY_MESSAGE = (
    "OPENAI_API_KEY not found. Create a .env file with:\n"
    "OPENAI_API_KEY=sk-your-api-key-here"
)


class GatewaySettings(BaseSettings):
    """Pydantic config for the model gateway. Loaded once at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="YT_",
        extra="ignore",
        populate_by_name=True,
    )

    openai_api_key: str = Field(
        validation_alias="OPENAI_API_KEY",
        min_length=1,
        description="Credential for the hosted model",
    )
    title_model: str = Field(default=config.TITLE_MODEL)
    metadata_model: str = Field(default=config.METADATA_MODEL)
    style_model: str = Field(default=config.STYLE_MODEL)
    image_model: str = Field(default=config.IMAGE_MODEL)
    image_size: str = Field(
        default=config.IMAGE_SIZE,
        description="Size requested from the Images API before fitting to the thumbnail frame",
    )
    image_quality: str = Field(default=config.IMAGE_QUALITY)
    title_count: int = Field(default=config.TITLE_COUNT, ge=1)
    description_preamble_patterns: list[str] = Field(
        default_factory=lambda: list(config.DESCRIPTION_PREAMBLE_PATTERNS),
        description="Regexes for echoed preambles stripped from the start of descriptions",
    )

    @field_validator("description_preamble_patterns")
    @classmethod
    def _patterns_compile(cls, patterns: list[str]) -> list[str]:
        for pattern in patterns:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid regex {pattern!r}: {e}") from e
        return patterns


def _is_key_error(error: dict) -> bool:
    loc = error.get("loc") or ()
    return bool(loc) and str(loc[0]).lower() == "openai_api_key"


def load_settings(**overrides) -> GatewaySettings:
    """Load settings from env/.env, failing fast on a missing key or bad value."""
    try:
        return GatewaySettings(**overrides)
    except SettingsError as e:
        errors = e.errors()
        if any(_is_key_error(err) for err in errors):
            raise ConfigurationError(MISSING_KEY_MESSAGE) from e
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors
        )
        raise ConfigurationError(f"Invalid configuration: {details}") from e
