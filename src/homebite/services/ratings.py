"""Cook ratings."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from homebite.domain.errors import InvalidScoreError, NotEligibleError, NotFoundError
from homebite.domain.orders import OrderStatus
from homebite.domain.ratings import MAX_SCORE, MIN_SCORE, CookRating, Rating
from homebite.services.orders import OrderRepository

_logger = logging.getLogger(__name__)


class RatingRepository(Protocol):
    """Persistence interface for ratings."""

    def create_rating(
        self, order_id: UUID, cook_id: UUID, eater_id: UUID, score: int
    ) -> Rating:
        """Create a rating; raise DuplicateRatingError if the order is rated."""

    def list_scores(self, cook_id: UUID | None = None) -> list[tuple[UUID, int]]:
        """Return (cook_id, score) pairs, optionally for one cook."""


@dataclass
class RatingService:
    """Service for submitting and aggregating ratings."""

    repository: RatingRepository
    order_repository: OrderRepository

    def submit_rating(
        self, order_id: UUID, cook_id: UUID, eater_id: UUID, score: int
    ) -> Rating:
        """Rate a picked-up order once."""
        if isinstance(score, bool) or not isinstance(score, int):
            raise InvalidScoreError()
        if not MIN_SCORE <= score <= MAX_SCORE:
            raise InvalidScoreError()
        order = self.order_repository.get_order(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        if order.cook_id != cook_id or order.eater_id != eater_id:
            raise NotEligibleError("Order does not belong to this cook and eater")
        if order.status is not OrderStatus.PICKED_UP:
            raise NotEligibleError("Only picked up orders can be rated")
        rating = self.repository.create_rating(order_id, cook_id, eater_id, score)
        _logger.info("Rating saved: order_id=%s score=%s", order_id, score)
        return rating

    def get_cook_rating(self, cook_id: UUID) -> CookRating | None:
        """Return the cook's mean score, or None when unrated."""
        scores = [score for _, score in self.repository.list_scores(cook_id)]
        if not scores:
            return None
        return CookRating(
            cook_id=cook_id, average=sum(scores) / len(scores), count=len(scores)
        )

    def get_cook_ratings(self) -> dict[UUID, CookRating]:
        """Return aggregated ratings for every rated cook."""
        totals: dict[UUID, tuple[int, int]] = {}
        for cook_id, score in self.repository.list_scores():
            current_sum, current_count = totals.get(cook_id, (0, 0))
            totals[cook_id] = (current_sum + score, current_count + 1)
        return {
            cook_id: CookRating(cook_id=cook_id, average=total / count, count=count)
            for cook_id, (total, count) in totals.items()
        }
