"""
promptable.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API host, logging, and prompt defaults.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Single settings object shared by the API host and every mounted component.
    """

    model_config = SettingsConfigDict(env_prefix="PROMPTABLE_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "promptable"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Name of the modal surface the prompt is rendered into.
    modal_name: str = "promptable"

    # Prompt defaults, restored after every confirm/cancel.
    prompt_question: str = "Are you sure you wish to proceed?"
    prompt_body: str | None = None
    prompt_cancel_label: str = "Cancel"
    prompt_confirm_label: str = "Delete"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Components receive the settings object at mount time; tests pass `Settings(env="test")`.
