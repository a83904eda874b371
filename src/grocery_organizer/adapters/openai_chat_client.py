"""OpenAI Chat Completions client for image prompts."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from grocery_organizer.services.analysis import ChatCompletionClient


@dataclass
class OpenAIChatClient(ChatCompletionClient):
    """Chat completion client backed by the OpenAI API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIChatClient":
        """Create an OpenAI chat client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        """Call the Chat Completions API and return the first message text."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
