"""Profile, dietary preference, recommendation and tag suggestion endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from homebite.api.auth import current_user_id
from homebite.api.schemas import (
    PreferencesPayload,
    ProfilePayload,
    RecommendationMeal,
    RecommendationRequest,
    TagSuggestRequest,
)
from homebite.domain.recommendations import CandidateMeal, Recommendation
from homebite.services.recommendations import recommend

if TYPE_CHECKING:
    from homebite.containers import AppContainer

router = APIRouter(tags=["assistant"])


@router.post("/recommendations")
async def recommendations(
    payload: RecommendationRequest, request: Request
) -> dict[str, object]:
    """Score the given meals against the given preferences."""
    container: AppContainer = request.app.state.container
    meals = payload.meals
    candidates = (
        [meal.to_candidate(position) for position, meal in enumerate(meals)]
        if meals is not None
        else None
    )
    ranked = recommend(
        candidates,
        payload.preferences.to_domain(),
        limit=container.settings.recommendation_limit,
    )
    return {"recommendations": [_serialize(item, meals) for item in ranked]}


@router.get("/me/recommendations")
async def my_recommendations(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Score the live feed against the caller's stored preferences."""
    container: AppContainer = request.app.state.container
    preferences = container.profile_service.get_preferences(user_id)
    if preferences.is_empty:
        return {"recommendations": []}
    candidates = [
        CandidateMeal(
            id=str(meal.id),
            dish_name=meal.dish_name,
            description=meal.description,
            price=meal.price,
            tags=meal.tags,
            remaining_portions=meal.remaining_portions,
        )
        for meal in container.meal_service.list_meals()
    ]
    ranked = recommend(
        candidates, preferences, limit=container.settings.recommendation_limit
    )
    return {"recommendations": [_serialize(item) for item in ranked]}


@router.get("/me/profile")
async def get_profile(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> ProfilePayload:
    """Return the caller's public profile."""
    container: AppContainer = request.app.state.container
    return ProfilePayload.from_domain(container.profile_service.get_profile(user_id))


@router.put("/me/profile")
async def save_profile(
    payload: ProfilePayload,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> ProfilePayload:
    """Replace the caller's public profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.save_profile(payload.to_domain(user_id))
    return ProfilePayload.from_domain(profile)


@router.get("/me/preferences")
async def get_preferences(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> PreferencesPayload:
    """Return the caller's dietary preferences."""
    container: AppContainer = request.app.state.container
    return PreferencesPayload.from_domain(
        container.profile_service.get_preferences(user_id)
    )


@router.put("/me/preferences")
async def save_preferences(
    payload: PreferencesPayload,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> PreferencesPayload:
    """Replace the caller's dietary preferences."""
    container: AppContainer = request.app.state.container
    preferences = payload.to_domain()
    container.profile_service.save_preferences(user_id, preferences)
    return PreferencesPayload.from_domain(preferences)


@router.post("/tags/suggest")
async def suggest_tags(
    payload: TagSuggestRequest, request: Request
) -> dict[str, list[str]]:
    """Suggest dietary tags for a dish; empty when the model is unavailable."""
    container: AppContainer = request.app.state.container
    tags = await container.tag_service.suggest(payload.dish_name, payload.description)
    return {"tags": tags}


def _serialize(
    item: Recommendation, source: list[RecommendationMeal] | None = None
) -> dict[str, object]:
    meal = item.meal
    if source is not None and meal.position is not None:
        fields = source[meal.position].model_dump(mode="json")
    else:
        fields = {
            "id": str(meal.id),
            "dish_name": meal.dish_name,
            "description": meal.description,
            "price": float(meal.price),
            "tags": list(meal.tags),
            "remaining_portions": meal.remaining_portions,
        }
    fields["aiReason"] = item.reason
    fields["matchScore"] = item.score
    return fields
