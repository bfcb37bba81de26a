"""Public profile data shown next to meals and orders."""

from dataclasses import dataclass
from uuid import UUID

# feed cards fall back to this when the cook has no display name
ANONYMOUS_COOK_NAME = "Anonymous Cook"
ORDER_COOK_NAME = "Cook"
ORDER_EATER_NAME = "Customer"


@dataclass(frozen=True)
class CookProfile:
    """Display fields from a user's profile row."""

    user_id: UUID
    display_name: str | None = None
    avatar_url: str | None = None
    neighborhood: str | None = None
    nationality: str | None = None


def display_name_or(profile: CookProfile | None, fallback: str) -> str:
    """Return the profile's display name, or the fallback when missing."""
    if profile is None or not profile.display_name:
        return fallback
    return profile.display_name
