"""Supabase repository for user profiles."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from supabase import Client

from homebite.domain.profiles import CookProfile
from homebite.services.profiles import ProfileRepository

_PROFILE_COLUMNS = "user_id, display_name, avatar_url, neighborhood, nationality"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase-backed profiles and dietary preferences."""

    client: Client

    def get_profiles(self, user_ids: Iterable[UUID]) -> dict[UUID, CookProfile]:
        """Fetch display fields for several users with one query."""
        ids = [str(user_id) for user_id in user_ids]
        if not ids:
            return {}
        response = (
            self.client.table("profiles")
            .select(_PROFILE_COLUMNS)
            .in_("user_id", ids)
            .execute()
        )
        profiles = (parse_profile(row) for row in response.data or [])
        return {profile.user_id: profile for profile in profiles}

    def save_profile(self, profile: CookProfile) -> CookProfile:
        """Upsert display fields, creating the profile row if needed."""
        response = (
            self.client.table("profiles")
            .upsert(
                {
                    "user_id": str(profile.user_id),
                    "display_name": profile.display_name,
                    "avatar_url": profile.avatar_url,
                    "neighborhood": profile.neighborhood,
                    "nationality": profile.nationality,
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile")
        return parse_profile(response.data[0])

    def get_dietary_preferences(self, user_id: UUID) -> dict[str, object] | None:
        """Return the stored preferences JSON."""
        response = (
            self.client.table("profiles")
            .select("dietary_preferences")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("dietary_preferences")
        return value if isinstance(value, dict) else None

    def set_dietary_preferences(
        self, user_id: UUID, payload: dict[str, object]
    ) -> None:
        """Store the preferences JSON, creating the profile row if needed."""
        self.client.table("profiles").upsert(
            {"user_id": str(user_id), "dietary_preferences": payload},
            on_conflict="user_id",
        ).execute()


def parse_profile(row: dict[str, Any]) -> CookProfile:
    """Parse a profiles row."""
    return CookProfile(
        user_id=UUID(str(row["user_id"])),
        display_name=row.get("display_name"),
        avatar_url=row.get("avatar_url"),
        neighborhood=row.get("neighborhood"),
        nationality=row.get("nationality"),
    )
