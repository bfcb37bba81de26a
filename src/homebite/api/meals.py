"""Meal feed, posting and ordering endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from homebite.api.auth import current_user_id
from homebite.api.schemas import MealCreateRequest, MealResponse

if TYPE_CHECKING:
    from homebite.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


@router.get("")
async def list_feed(request: Request) -> dict[str, object]:
    """Return all meals newest first with cook ratings."""
    container: AppContainer = request.app.state.container
    listings = container.meal_service.list_feed()
    return {"meals": [MealResponse.from_listing(listing) for listing in listings]}


@router.get("/mine")
async def list_my_meals(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the caller's own meals."""
    container: AppContainer = request.app.state.container
    meals = container.meal_service.list_meals(cook_id=user_id)
    return {"meals": [MealResponse.from_meal(meal) for meal in meals]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def post_meal(
    payload: MealCreateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> MealResponse:
    """Publish a meal for the calling cook."""
    container: AppContainer = request.app.state.container
    meal = container.meal_service.post_meal(user_id, payload.to_draft())
    return MealResponse.from_meal(meal)


@router.get("/{meal_id}")
async def get_meal(meal_id: UUID, request: Request) -> MealResponse:
    """Return a single meal."""
    container: AppContainer = request.app.state.container
    return MealResponse.from_meal(container.meal_service.get_meal(meal_id))


@router.post("/{meal_id}/orders", status_code=status.HTTP_201_CREATED)
async def place_order(
    meal_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, str]:
    """Order one portion of a meal."""
    container: AppContainer = request.app.state.container
    order_id = container.order_service.place_order(eater_id=user_id, meal_id=meal_id)
    return {"order_id": str(order_id)}
