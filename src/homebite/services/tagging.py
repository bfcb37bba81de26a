"""Dietary tag suggestions using LLMs."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel

from homebite.domain.tags import DIETARY_TAGS, filter_known_tags

SUGGEST_TAGS_TOOL: dict[str, object] = {
    "type": "function",
    "function": {
        "name": "suggest_tags",
        "description": "Return dietary tags for the dish",
        "parameters": {
            "type": "object",
            "properties": {
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Array of dietary tags that apply to this dish",
                }
            },
            "required": ["tags"],
            "additionalProperties": False,
        },
    },
}

_logger = logging.getLogger(__name__)


class TagSuggestion(BaseModel):
    """Structured output of the tagging tool call."""

    tags: list[str] = []


class TagSuggestionClient(Protocol):
    """Interface for LLM tool-call completions."""

    async def call_tool(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        tool: dict[str, object],
    ) -> dict[str, object]:
        """Force a call to ``tool`` and return its parsed arguments."""


@dataclass
class TagSuggestionService:
    """Service that asks a model for dietary tags and filters the result."""

    client: TagSuggestionClient
    model: str

    async def suggest(self, dish_name: str, description: str | None) -> list[str]:
        """Return advisory tags for a dish; empty when unavailable."""
        if not dish_name.strip():
            return []
        try:
            raw = await self.client.call_tool(
                model=self.model,
                system_prompt=build_system_prompt(),
                user_prompt=_build_user_prompt(dish_name, description),
                tool=SUGGEST_TAGS_TOOL,
            )
            suggestion = TagSuggestion.model_validate(raw)
        except Exception:
            _logger.exception("Tag suggestion failed", extra={"dish_name": dish_name})
            return []
        return filter_known_tags(suggestion.tags)


# regional dishes whose ingredients the name alone does not reveal
DISH_HINTS = (
    "Common French dishes: Coq au Vin (contains wine, chicken), "
    "Quiche (eggs, dairy, often meat), Cassoulet (meat, beans), "
    "Couscous (can be vegetarian), Croque Monsieur (dairy, eggs, meat)."
)


def build_system_prompt() -> str:
    """System prompt listing the allowed vocabulary."""
    vocabulary = "\n".join(f"- {tag}" for tag in DIETARY_TAGS)
    return (
        "You are a food analysis expert. Analyze the given dish name and "
        "description to identify dietary tags.\n"
        "Return ONLY valid dietary tags from this list:\n"
        f"{vocabulary}\n\n"
        "Be conservative and only include tags you're confident about based "
        "on the dish name and description.\n"
        f"{DISH_HINTS}"
    )


def _build_user_prompt(dish_name: str, description: str | None) -> str:
    return (
        "Analyze this dish:\n"
        f"Name: {dish_name}\n"
        f"Description: {description or 'No description provided'}"
    )
