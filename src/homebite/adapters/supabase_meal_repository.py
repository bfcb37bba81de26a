"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from supabase import Client

from homebite.domain.meals import Meal, MealDraft
from homebite.services.meals import MealRepository

_MEAL_COLUMNS = (
    "id, cook_id, dish_name, description, price, total_portions, "
    "remaining_portions, image_url, tags, created_at"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def create_meal(self, cook_id: UUID, draft: MealDraft) -> Meal:
        """Create a meal row with all portions remaining."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "cook_id": str(cook_id),
                    "dish_name": draft.dish_name.strip(),
                    "description": draft.description or None,
                    "price": float(draft.price),
                    "total_portions": draft.total_portions,
                    "remaining_portions": draft.total_portions,
                    "image_url": draft.image_url or None,
                    "tags": list(draft.tags),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return parse_meal(response.data[0])

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_meal(response.data[0])

    def list_meals(self, cook_id: UUID | None = None) -> list[Meal]:
        """Return meals newest first."""
        query = self.client.table("meals").select(_MEAL_COLUMNS)
        if cook_id is not None:
            query = query.eq("cook_id", str(cook_id))
        response = query.order("created_at", desc=True).execute()
        return [parse_meal(row) for row in response.data or []]


def parse_meal(row: dict[str, object]) -> Meal:
    """Build a Meal from a meals row."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.now(tz=UTC)
    )
    return Meal(
        id=UUID(row["id"]),
        cook_id=UUID(row["cook_id"]),
        dish_name=str(row.get("dish_name", "")),
        description=row.get("description"),
        price=Decimal(str(row.get("price", 0))),
        total_portions=int(row.get("total_portions", 0)),
        remaining_portions=int(row.get("remaining_portions", 0)),
        created_at=created_at,
        image_url=row.get("image_url"),
        tags=tuple(row.get("tags") or ()),
    )
