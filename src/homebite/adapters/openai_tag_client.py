"""OpenAI-compatible chat completions client for tag suggestions."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from homebite.services.tagging import TagSuggestionClient


@dataclass
class OpenAITagClient(TagSuggestionClient):
    """Tag client backed by a chat completions gateway."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, base_url: str | None, timeout: float
    ) -> "OpenAITagClient":
        """Create a client for the configured gateway."""
        return cls(
            client=AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        )

    async def call_tool(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        tool: dict[str, object],
    ) -> dict[str, object]:
        """Force a tool call and return its decoded arguments."""
        tool_name = tool["function"]["name"]
        response = await self.client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            tools=[tool],
            tool_choice={"type": "function", "function": {"name": tool_name}},
        )
        if not response.choices:
            raise RuntimeError("Model returned no choices")
        tool_calls = response.choices[0].message.tool_calls or []
        if not tool_calls or not tool_calls[0].function.arguments:
            return {}
        return json.loads(tool_calls[0].function.arguments)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
