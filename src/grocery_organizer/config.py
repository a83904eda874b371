"""Application configuration."""

import os
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

AnalysisMode = Literal["organize", "describe"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str = Field(min_length=1)
    openai_model: str = "gpt-4o-mini"
    analysis_mode: AnalysisMode = "organize"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
