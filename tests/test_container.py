"""Tests for container wiring and startup configuration."""

import asyncio

import pytest
from pydantic import ValidationError

from grocery_organizer.adapters.openai_chat_client import OpenAIChatClient
from grocery_organizer.config import Settings
from grocery_organizer.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert isinstance(container.analysis_service.client, OpenAIChatClient)
    assert container.analysis_service.model == "gpt-4o-mini"
    asyncio.run(container.close_resources())


def test_build_container_fails_without_api_key(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(ValidationError):
        build_container()


def test_settings_reject_empty_api_key() -> None:
    with pytest.raises(ValidationError):
        Settings(openai_api_key="")


def test_settings_read_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "env-key")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o")
    monkeypatch.setenv("ANALYSIS_MODE", "describe")

    settings = Settings()

    assert settings.openai_api_key == "env-key"
    assert settings.openai_model == "gpt-4o"
    assert settings.analysis_mode == "describe"
