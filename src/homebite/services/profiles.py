"""User profiles: public display fields and dietary preferences."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Protocol
from uuid import UUID

from homebite.domain.profiles import CookProfile
from homebite.domain.recommendations import DietaryPreferences


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profiles(self, user_ids: Iterable[UUID]) -> dict[UUID, CookProfile]:
        """Return display profiles keyed by user id; unknown ids are absent."""

    def save_profile(self, profile: CookProfile) -> CookProfile:
        """Create or update a user's display fields."""

    def get_dietary_preferences(self, user_id: UUID) -> dict[str, object] | None:
        """Return the raw stored preferences, if any."""

    def set_dietary_preferences(
        self, user_id: UUID, payload: dict[str, object]
    ) -> None:
        """Store raw preferences for a user."""


@dataclass
class ProfileService:
    """Service for reading and saving profiles and dietary preferences."""

    repository: ProfileRepository

    def get_profiles(self, user_ids: Iterable[UUID]) -> dict[UUID, CookProfile]:
        """Return profiles for the given users, fetched in one call."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        return self.repository.get_profiles(unique_ids)

    def get_profile(self, user_id: UUID) -> CookProfile:
        """Return a user's profile, or an empty one."""
        return self.get_profiles([user_id]).get(user_id) or CookProfile(user_id)

    def save_profile(self, profile: CookProfile) -> CookProfile:
        """Store display fields with blank values cleared."""
        return self.repository.save_profile(
            CookProfile(
                user_id=profile.user_id,
                display_name=_clean(profile.display_name),
                avatar_url=_clean(profile.avatar_url),
                neighborhood=_clean(profile.neighborhood),
                nationality=_clean(profile.nationality),
            )
        )

    def get_preferences(self, user_id: UUID) -> DietaryPreferences:
        """Return stored preferences or empty ones."""
        raw = self.repository.get_dietary_preferences(user_id)
        return preferences_from_payload(raw or {})

    def save_preferences(self, user_id: UUID, preferences: DietaryPreferences) -> None:
        """Persist preferences for a user."""
        self.repository.set_dietary_preferences(
            user_id, preferences_to_payload(preferences)
        )


def preferences_from_payload(payload: dict[str, object]) -> DietaryPreferences:
    """Build preferences from the stored JSON shape."""
    return DietaryPreferences(
        allergies=_to_labels(payload.get("allergies")),
        restrictions=_to_labels(payload.get("restrictions")),
        max_budget=_to_budget(payload.get("maxBudget")),
    )


def preferences_to_payload(preferences: DietaryPreferences) -> dict[str, object]:
    """Serialize preferences to the stored JSON shape."""
    return {
        "allergies": list(preferences.allergies),
        "restrictions": list(preferences.restrictions),
        "maxBudget": (
            float(preferences.max_budget)
            if preferences.max_budget is not None
            else None
        ),
    }


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def _to_labels(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(item) for item in value if item)


def _to_budget(value: object) -> Decimal | None:
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        return None
    try:
        budget = Decimal(str(value))
    except InvalidOperation:
        return None
    if not budget.is_finite():
        return None
    # zero or negative budgets mean "no budget"
    return budget if budget > 0 else None
