"""Configuration for clean-bloc applications.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from clean_bloc.core.bloc import EventPolicy


class AppSettings(BaseSettings):
    """Settings for the example application.

    Environment variables:
    - CLEAN_BLOC_API_BASE_URL          (optional)
    - CLEAN_BLOC_HTTP_TIMEOUT_SECONDS  (optional)
    - CLEAN_BLOC_EVENT_POLICY          (optional)
    - CLEAN_BLOC_LOG_TRANSITIONS       (optional)
    - LOG_LEVEL                        (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `AppSettings(_env_file=path_to_env)`.
    """

    api_base_url: str = Field(
        default="http://localhost:8080",
        validation_alias="CLEAN_BLOC_API_BASE_URL",
        description="Base URL of the REST API user profiles are fetched from",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        validation_alias="CLEAN_BLOC_HTTP_TIMEOUT_SECONDS",
        description="Timeout applied to every HTTP request",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    event_policy: EventPolicy = Field(
        default=EventPolicy.SEQUENTIAL,
        validation_alias="CLEAN_BLOC_EVENT_POLICY",
        description=(
            "How blocs treat events that arrive while a previous event is still being "
            "handled: sequential (queue), droppable (ignore), restartable (cancel previous)."
        ),
    )
    log_transitions: bool = Field(
        default=True,
        validation_alias="CLEAN_BLOC_LOG_TRANSITIONS",
        description="Attach a logging observer to blocs built by the container",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("CLEAN_BLOC_API_BASE_URL must not be empty")
        return value
