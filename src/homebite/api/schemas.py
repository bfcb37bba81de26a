"""Pydantic models for API payloads."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from homebite.domain.meals import Meal, MealDraft, MealListing
from homebite.domain.orders import Order, OrderStatus, status_label
from homebite.domain.profiles import CookProfile
from homebite.domain.recommendations import CandidateMeal, DietaryPreferences


class MealCreateRequest(BaseModel):
    """Cook input for a new meal."""

    dish_name: str
    description: str | None = None
    price: Decimal = Field(ge=0)
    total_portions: int = Field(ge=1)
    image_url: str | None = None
    tags: list[str] = []

    def to_draft(self) -> MealDraft:
        return MealDraft(
            dish_name=self.dish_name,
            description=self.description,
            price=self.price,
            total_portions=self.total_portions,
            image_url=self.image_url,
            tags=tuple(self.tags),
        )


class MealResponse(BaseModel):
    """Meal as shown to clients."""

    id: UUID
    cook_id: UUID
    dish_name: str
    description: str | None
    price: float
    total_portions: int
    remaining_portions: int
    image_url: str | None
    tags: list[str]
    created_at: datetime
    cook_rating: float | None = None
    cook_rating_count: int = 0
    cook_name: str | None = None
    cook_avatar: str | None = None
    neighborhood: str | None = None
    nationality: str | None = None

    @classmethod
    def from_meal(cls, meal: Meal) -> "MealResponse":
        return cls(
            id=meal.id,
            cook_id=meal.cook_id,
            dish_name=meal.dish_name,
            description=meal.description,
            price=float(meal.price),
            total_portions=meal.total_portions,
            remaining_portions=meal.remaining_portions,
            image_url=meal.image_url,
            tags=list(meal.tags),
            created_at=meal.created_at,
        )

    @classmethod
    def from_listing(cls, listing: MealListing) -> "MealResponse":
        return cls.from_meal(listing.meal).model_copy(
            update={
                "cook_rating": listing.cook_rating,
                "cook_rating_count": listing.cook_rating_count,
                "cook_name": listing.cook_name,
                "cook_avatar": listing.cook_avatar,
                "neighborhood": listing.neighborhood,
                "nationality": listing.nationality,
            }
        )


class OrderResponse(BaseModel):
    """Order as shown to clients."""

    id: UUID
    meal_id: UUID
    eater_id: UUID
    cook_id: UUID
    status: OrderStatus
    status_label: str
    created_at: datetime
    dish_name: str | None = None
    price: float | None = None
    cook_name: str | None = None
    eater_name: str | None = None

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            meal_id=order.meal_id,
            eater_id=order.eater_id,
            cook_id=order.cook_id,
            status=order.status,
            status_label=status_label(order.status),
            created_at=order.created_at,
            dish_name=order.dish_name,
            price=float(order.price) if order.price is not None else None,
            cook_name=order.cook_name,
            eater_name=order.eater_name,
        )


class StatusUpdateRequest(BaseModel):
    """Requested order status."""

    status: OrderStatus


class RatingRequest(BaseModel):
    """Eater score for a picked-up order."""

    score: int | float
    cook_id: UUID | None = None


class PreferencesPayload(BaseModel):
    """Dietary preferences in the client JSON shape."""

    model_config = ConfigDict(populate_by_name=True)

    allergies: list[str] = []
    restrictions: list[str] = []
    max_budget: float | None = Field(
        default=None, alias="maxBudget", allow_inf_nan=False
    )

    def to_domain(self) -> DietaryPreferences:
        budget = (
            Decimal(str(self.max_budget))
            if self.max_budget is not None and self.max_budget > 0
            else None
        )
        return DietaryPreferences(
            allergies=tuple(self.allergies),
            restrictions=tuple(self.restrictions),
            max_budget=budget,
        )

    @classmethod
    def from_domain(cls, preferences: DietaryPreferences) -> "PreferencesPayload":
        return cls(
            allergies=list(preferences.allergies),
            restrictions=list(preferences.restrictions),
            max_budget=(
                float(preferences.max_budget)
                if preferences.max_budget is not None
                else None
            ),
        )


class RecommendationMeal(BaseModel):
    """Meal fields sent for scoring; extra fields are echoed back."""

    model_config = ConfigDict(extra="allow")

    id: str
    dish_name: str
    description: str | None = None
    price: float
    tags: list[str] | None = None
    remaining_portions: int

    def to_candidate(self, position: int | None = None) -> CandidateMeal:
        return CandidateMeal(
            id=self.id,
            dish_name=self.dish_name,
            description=self.description,
            price=Decimal(str(self.price)),
            tags=tuple(self.tags or ()),
            remaining_portions=self.remaining_portions,
            position=position,
        )


class RecommendationRequest(BaseModel):
    """Visible meals plus the eater's preferences."""

    meals: list[RecommendationMeal] | None = None
    preferences: PreferencesPayload = PreferencesPayload()


class TagSuggestRequest(BaseModel):
    """Dish to analyze for dietary tags."""

    model_config = ConfigDict(populate_by_name=True)

    dish_name: str = Field(default="", alias="dishName")
    description: str | None = None


class ProfilePayload(BaseModel):
    """Public profile fields shown on meal cards and orders."""

    display_name: str | None = Field(default=None, max_length=80)
    avatar_url: str | None = None
    neighborhood: str | None = Field(default=None, max_length=80)
    nationality: str | None = Field(default=None, max_length=80)

    def to_domain(self, user_id: UUID) -> CookProfile:
        return CookProfile(
            user_id=user_id,
            display_name=self.display_name,
            avatar_url=self.avatar_url,
            neighborhood=self.neighborhood,
            nationality=self.nationality,
        )

    @classmethod
    def from_domain(cls, profile: CookProfile) -> "ProfilePayload":
        return cls(
            display_name=profile.display_name,
            avatar_url=profile.avatar_url,
            neighborhood=profile.neighborhood,
            nationality=profile.nationality,
        )
