"""Supabase repository for orders."""

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from homebite.domain.errors import NotFoundError, SoldOutError
from homebite.domain.orders import Order, OrderStatus
from homebite.services.orders import OrderRepository

_ORDER_COLUMNS = (
    "id, meal_id, eater_id, cook_id, status, created_at, meals(dish_name, price)"
)

# raised by the place_order database function
SOLD_OUT_MESSAGE = "No portions remaining"
MEAL_NOT_FOUND_MESSAGE = "Meal not found"


@dataclass
class SupabaseOrderRepository(OrderRepository):
    """Supabase implementation for orders."""

    client: Client

    def place_order(self, eater_id: UUID, meal_id: UUID) -> UUID:
        """Call the place_order function, which decrements and inserts atomically."""
        try:
            response = self.client.rpc(
                "place_order",
                {"p_meal_id": str(meal_id), "p_eater_id": str(eater_id)},
            ).execute()
        except APIError as exc:
            message = exc.message or ""
            if SOLD_OUT_MESSAGE in message:
                raise SoldOutError() from exc
            if MEAL_NOT_FOUND_MESSAGE in message:
                raise NotFoundError(f"Meal {meal_id} not found") from exc
            raise
        order_id = _parse_rpc_id(response.data)
        if order_id is None:
            raise RuntimeError("Failed to place order")
        return order_id

    def get_order(self, order_id: UUID) -> Order | None:
        """Return an order by id."""
        response = (
            self.client.table("orders")
            .select(_ORDER_COLUMNS)
            .eq("id", str(order_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_order(response.data[0])

    def list_orders(
        self, cook_id: UUID | None = None, eater_id: UUID | None = None
    ) -> list[Order]:
        """Return orders newest first."""
        query = self.client.table("orders").select(_ORDER_COLUMNS)
        if cook_id is not None:
            query = query.eq("cook_id", str(cook_id))
        if eater_id is not None:
            query = query.eq("eater_id", str(eater_id))
        response = query.order("created_at", desc=True).execute()
        return [parse_order(row) for row in response.data or []]

    def update_status(
        self, order_id: UUID, current: OrderStatus, requested: OrderStatus
    ) -> bool:
        """Conditionally update the status; False when no row matched."""
        response = (
            self.client.table("orders")
            .update({"status": requested.value})
            .eq("id", str(order_id))
            .eq("status", current.value)
            .execute()
        )
        return bool(response.data)


def parse_order(row: dict[str, object]) -> Order:
    """Build an Order from an orders row with the embedded meal."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.now(tz=UTC)
    )
    meal = row.get("meals") if isinstance(row.get("meals"), dict) else {}
    price = meal.get("price")
    return Order(
        id=UUID(row["id"]),
        meal_id=UUID(row["meal_id"]),
        eater_id=UUID(row["eater_id"]),
        cook_id=UUID(row["cook_id"]),
        status=OrderStatus(row["status"]),
        created_at=created_at,
        dish_name=meal.get("dish_name"),
        price=Decimal(str(price)) if price is not None else None,
    )


def _parse_rpc_id(data: object) -> UUID | None:
    if isinstance(data, list):
        data = data[0] if data else None
    if isinstance(data, dict):
        data = data.get("place_order") or data.get("id")
    if isinstance(data, str):
        try:
            return UUID(data)
        except ValueError:
            return None
    return None
