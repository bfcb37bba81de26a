"""Domain models for dietary preferences and recommendations."""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class DietaryPreferences:
    """Eater-scoped preferences used to rank the feed."""

    allergies: tuple[str, ...] = ()
    restrictions: tuple[str, ...] = ()
    max_budget: Decimal | None = None

    @property
    def is_empty(self) -> bool:
        return not self.allergies and not self.restrictions and self.max_budget is None


@dataclass(frozen=True)
class CandidateMeal:
    """Meal fields the scorer looks at."""

    id: UUID | str
    dish_name: str
    description: str | None
    price: Decimal
    tags: tuple[str, ...]
    remaining_portions: int
    # index in the caller's meal list; ids are not guaranteed unique
    position: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Recommendation:
    """A scored meal with a short explanation."""

    meal: CandidateMeal
    reason: str
    score: int
