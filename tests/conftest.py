"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from grocery_organizer.config import Settings
from grocery_organizer.containers import AppContainer
from grocery_organizer.services.analysis import AnalysisService, ChatCompletionClient
from tests.upload_harness import GroceryApiClient, GroceryApiResponse, SelectedFile

ORGANIZED_RESPONSE = (
    "Here is your list sorted by fragility:\n"
    '{"grocery_list": ["eggs", "bread", "tomatoes", "canned beans"]}'
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"grocery-list-pixels"


@dataclass
class FakeChatClient(ChatCompletionClient):
    """Fake chat client that records calls and returns a fixed reply."""

    content: str | None = ORGANIZED_RESPONSE
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        self.calls.append(
            {
                "model": model,
                "messages": messages,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return self.content


@dataclass
class FakeGroceryApiClient(GroceryApiClient):
    """Fake endpoint client returning a canned response."""

    response: GroceryApiResponse = field(
        default_factory=lambda: GroceryApiResponse(
            status_code=200, result=ORGANIZED_RESPONSE
        )
    )
    error: Exception | None = None
    uploads: list[tuple[SelectedFile, str | None]] = field(default_factory=list)

    async def analyze(
        self, file: SelectedFile, mode: str | None = None
    ) -> GroceryApiResponse:
        self.uploads.append((file, mode))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def chat_client() -> FakeChatClient:
    return FakeChatClient()


@pytest.fixture
def container(settings: Settings, chat_client: FakeChatClient) -> AppContainer:
    analysis_service = AnalysisService(
        client=chat_client,
        model=settings.openai_model,
        default_mode=settings.analysis_mode,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )


@pytest.fixture
def image_file() -> SelectedFile:
    return SelectedFile(filename="list.png", media_type="image/png", content=PNG_BYTES)
