"""Order lifecycle and rating endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from homebite.api.auth import current_user_id
from homebite.api.schemas import OrderResponse, RatingRequest, StatusUpdateRequest
from homebite.domain.errors import NotEligibleError

if TYPE_CHECKING:
    from homebite.containers import AppContainer

router = APIRouter(tags=["orders"])


@router.get("/orders")
async def list_orders(
    request: Request,
    role: Literal["eater", "cook"] = "eater",
    pending: bool = False,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return the caller's orders as eater or cook."""
    container: AppContainer = request.app.state.container
    service = container.order_service
    if role == "cook":
        orders = (
            service.list_pending_for_cook(user_id)
            if pending
            else service.list_orders(cook_id=user_id)
        )
    else:
        orders = service.list_orders(eater_id=user_id)
    return {"orders": [OrderResponse.from_order(order) for order in orders]}


@router.get("/orders/{order_id}")
async def get_order(
    order_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> OrderResponse:
    """Return one order to its cook or eater."""
    container: AppContainer = request.app.state.container
    order = container.order_service.get_order(order_id)
    if user_id not in (order.cook_id, order.eater_id):
        raise NotEligibleError("Order belongs to another user")
    return OrderResponse.from_order(order)


@router.post("/orders/{order_id}/status")
async def advance_status(
    order_id: UUID,
    payload: StatusUpdateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> OrderResponse:
    """Move an order along its lifecycle."""
    container: AppContainer = request.app.state.container
    order = container.order_service.advance_status(
        order_id, payload.status, actor_id=user_id
    )
    return OrderResponse.from_order(order)


@router.post("/orders/{order_id}/rating", status_code=status.HTTP_201_CREATED)
async def submit_rating(
    order_id: UUID,
    payload: RatingRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Rate the cook of a picked-up order."""
    container: AppContainer = request.app.state.container
    cook_id = payload.cook_id
    if cook_id is None:
        cook_id = container.order_service.get_order(order_id).cook_id
    rating = container.rating_service.submit_rating(
        order_id=order_id,
        cook_id=cook_id,
        eater_id=user_id,
        score=payload.score,
    )
    return {"id": str(rating.id), "order_id": str(order_id), "score": rating.score}


@router.get("/cooks/{cook_id}/rating")
async def cook_rating(cook_id: UUID, request: Request) -> dict[str, object]:
    """Return a cook's average score and count."""
    container: AppContainer = request.app.state.container
    rating = container.rating_service.get_cook_rating(cook_id)
    if rating is None:
        return {"cook_id": str(cook_id), "average": None, "count": 0}
    return {
        "cook_id": str(cook_id),
        "average": rating.average,
        "count": rating.count,
    }
