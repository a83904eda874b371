"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from grocery_organizer.adapters.openai_chat_client import OpenAIChatClient
from grocery_organizer.config import Settings
from grocery_organizer.services.analysis import AnalysisService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: AnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Raises ``pydantic.ValidationError`` when the OpenAI credential is missing,
    so a misconfigured process fails before it serves any request.
    """
    resolved_settings = settings or Settings()
    openai_client = OpenAIChatClient.create(resolved_settings.openai_api_key)
    analysis_service = AnalysisService(
        client=openai_client,
        model=resolved_settings.openai_model,
        default_mode=resolved_settings.analysis_mode,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )
