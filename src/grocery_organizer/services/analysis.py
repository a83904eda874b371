"""Image analysis service using chat-completion LLMs."""

import logging
from dataclasses import dataclass
from typing import Protocol

from grocery_organizer.config import AnalysisMode
from grocery_organizer.domain.analysis import AnalysisProfile, ImageUpload

logger = logging.getLogger(__name__)

NO_RESPONSE_FALLBACK = "No response generated."

ORGANIZE_SYSTEM_PROMPT = (
    "You organize grocery lists for safe packing. "
    "Read every item on the grocery list in the image and sort the items "
    "from most fragile to least fragile. "
    "Respond with exactly one JSON object of the form "
    '{"grocery_list": ["item", ...]} containing one ordered array of item '
    "names and nothing else."
)

PROFILES: dict[str, AnalysisProfile] = {
    "organize": AnalysisProfile(
        system_prompt=ORGANIZE_SYSTEM_PROMPT,
        user_prompt="Organize the grocery list in this image.",
        max_tokens=500,
        temperature=0.7,
    ),
    "describe": AnalysisProfile(
        user_prompt="What's in this image?",
        max_tokens=300,
        temperature=0.2,
    ),
}


class ChatCompletionClient(Protocol):
    """Interface for LLM chat completions."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        """Return the first choice's text, or None when there is none."""


@dataclass
class AnalysisService:
    """Service that builds prompts for an upload and relays the model text."""

    client: ChatCompletionClient
    model: str
    default_mode: AnalysisMode = "organize"

    def has_mode(self, mode: str) -> bool:
        return mode in PROFILES

    async def analyze(self, upload: ImageUpload, mode: str | None = None) -> str:
        """Send the image to the model using the profile for ``mode``."""
        resolved_mode = mode or self.default_mode
        profile = PROFILES[resolved_mode]
        messages = build_messages(profile, upload.to_data_url())
        content = await self.client.complete(
            model=self.model,
            messages=messages,
            max_tokens=profile.max_tokens,
            temperature=profile.temperature,
        )
        logger.info(
            "Analyzed %s upload with %s profile", upload.media_type, resolved_mode
        )
        return content or NO_RESPONSE_FALLBACK


def build_messages(
    profile: AnalysisProfile, image_data_url: str
) -> list[dict[str, object]]:
    """Build the role-tagged chat messages for an image prompt."""
    messages: list[dict[str, object]] = []
    if profile.system_prompt:
        messages.append({"role": "system", "content": profile.system_prompt})
    messages.append(
        {
            "role": "user",
            "content": [
                {"type": "text", "text": profile.user_prompt},
                {"type": "image_url", "image_url": {"url": image_data_url}},
            ],
        }
    )
    return messages
