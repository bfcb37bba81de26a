"""Supabase repository for ratings."""

from dataclasses import dataclass
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from homebite.domain.errors import DuplicateRatingError
from homebite.domain.ratings import Rating
from homebite.services.ratings import RatingRepository

UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseRatingRepository(RatingRepository):
    """Supabase implementation for ratings."""

    client: Client

    def create_rating(
        self, order_id: UUID, cook_id: UUID, eater_id: UUID, score: int
    ) -> Rating:
        """Insert a rating; the unique index on order_id rejects repeats."""
        try:
            response = (
                self.client.table("ratings")
                .insert(
                    {
                        "order_id": str(order_id),
                        "cook_id": str(cook_id),
                        "eater_id": str(eater_id),
                        "rating": score,
                    }
                )
                .execute()
            )
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise DuplicateRatingError() from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create rating")
        row = response.data[0]
        return Rating(
            id=UUID(row["id"]),
            order_id=UUID(row["order_id"]),
            cook_id=UUID(row["cook_id"]),
            eater_id=UUID(row["eater_id"]),
            score=int(row["rating"]),
        )

    def list_scores(self, cook_id: UUID | None = None) -> list[tuple[UUID, int]]:
        """Return (cook_id, score) pairs."""
        query = self.client.table("ratings").select("cook_id, rating")
        if cook_id is not None:
            query = query.eq("cook_id", str(cook_id))
        response = query.execute()
        return [
            (UUID(row["cook_id"]), int(row["rating"])) for row in response.data or []
        ]
