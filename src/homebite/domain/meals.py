"""Domain models for meals."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from homebite.domain.profiles import ANONYMOUS_COOK_NAME


@dataclass(frozen=True)
class Meal:
    """A cook-posted dish with a finite number of portions."""

    id: UUID
    cook_id: UUID
    dish_name: str
    description: str | None
    price: Decimal
    total_portions: int
    remaining_portions: int
    created_at: datetime
    image_url: str | None = None
    tags: tuple[str, ...] = ()

    @property
    def is_sold_out(self) -> bool:
        return self.remaining_portions <= 0


@dataclass(frozen=True)
class MealDraft:
    """Cook input for posting a new meal."""

    dish_name: str
    price: Decimal
    total_portions: int
    description: str | None = None
    image_url: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MealListing:
    """Meal joined with its cook's profile and aggregated rating for the feed."""

    meal: Meal
    cook_rating: float | None
    cook_rating_count: int
    cook_name: str = ANONYMOUS_COOK_NAME
    cook_avatar: str | None = None
    neighborhood: str | None = None
    nationality: str | None = None
