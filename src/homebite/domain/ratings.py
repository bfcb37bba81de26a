"""Domain models for cook ratings."""

from dataclasses import dataclass
from uuid import UUID

MIN_SCORE = 1
MAX_SCORE = 5


@dataclass(frozen=True)
class Rating:
    """A single eater score for a completed order."""

    id: UUID
    order_id: UUID
    cook_id: UUID
    eater_id: UUID
    score: int


@dataclass(frozen=True)
class CookRating:
    """Aggregated rating for a cook."""

    cook_id: UUID
    average: float
    count: int
