"""Meal posting and the browse feed."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from homebite.domain.errors import InvalidInputError, NotFoundError
from homebite.domain.meals import Meal, MealDraft, MealListing
from homebite.domain.profiles import ANONYMOUS_COOK_NAME, display_name_or
from homebite.services.profiles import ProfileService
from homebite.services.ratings import RatingService

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def create_meal(self, cook_id: UUID, draft: MealDraft) -> Meal:
        """Create a meal with all portions remaining and return it."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""

    def list_meals(self, cook_id: UUID | None = None) -> list[Meal]:
        """Return meals newest first, optionally for one cook."""


@dataclass
class MealService:
    """Application service for meals."""

    repository: MealRepository
    rating_service: RatingService
    profile_service: ProfileService | None = None

    def post_meal(self, cook_id: UUID, draft: MealDraft) -> Meal:
        """Validate and publish a new meal."""
        if not draft.dish_name.strip():
            raise InvalidInputError("Dish name is required")
        if draft.price < 0:
            raise InvalidInputError("Price cannot be negative")
        if draft.total_portions < 1:
            raise InvalidInputError("A meal needs at least one portion")
        meal = self.repository.create_meal(cook_id, draft)
        _logger.info(
            "Meal posted: meal_id=%s cook_id=%s portions=%s",
            meal.id,
            cook_id,
            meal.total_portions,
        )
        return meal

    def get_meal(self, meal_id: UUID) -> Meal:
        """Return a meal or raise NotFoundError."""
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise NotFoundError(f"Meal {meal_id} not found")
        return meal

    def list_meals(self, cook_id: UUID | None = None) -> list[Meal]:
        """Return meals newest first."""
        return self.repository.list_meals(cook_id=cook_id)

    def list_feed(self) -> list[MealListing]:
        """Return all meals with their cook's profile and rating attached."""
        meals = self.repository.list_meals()
        ratings = self.rating_service.get_cook_ratings()
        profiles = (
            self.profile_service.get_profiles(meal.cook_id for meal in meals)
            if self.profile_service is not None
            else {}
        )
        listings = []
        for meal in meals:
            rating = ratings.get(meal.cook_id)
            profile = profiles.get(meal.cook_id)
            listings.append(
                MealListing(
                    meal=meal,
                    cook_rating=rating.average if rating else None,
                    cook_rating_count=rating.count if rating else 0,
                    cook_name=display_name_or(profile, ANONYMOUS_COOK_NAME),
                    cook_avatar=profile.avatar_url if profile else None,
                    neighborhood=profile.neighborhood if profile else None,
                    nationality=profile.nationality if profile else None,
                )
            )
        return listings
