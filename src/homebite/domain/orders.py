"""Order lifecycle domain models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID


class OrderStatus(str, Enum):
    """Order lifecycle states."""

    PLACED = "placed"
    PACKING = "packing"
    READY = "ready"
    PICKED_UP = "picked_up"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({OrderStatus.PICKED_UP, OrderStatus.CANCELLED})

_NEXT_STATUS: dict[OrderStatus, OrderStatus] = {
    OrderStatus.PLACED: OrderStatus.PACKING,
    OrderStatus.PACKING: OrderStatus.READY,
    OrderStatus.READY: OrderStatus.PICKED_UP,
}

_STATUS_LABELS: dict[OrderStatus, str] = {
    OrderStatus.PLACED: "Order placed",
    OrderStatus.PACKING: "Packing in progress",
    OrderStatus.READY: "Ready for pickup!",
    OrderStatus.PICKED_UP: "Order completed",
    OrderStatus.CANCELLED: "Order cancelled",
}


def next_status(current: OrderStatus) -> OrderStatus | None:
    """Return the single forward successor of a status, if any."""
    return _NEXT_STATUS.get(current)


def can_transition(current: OrderStatus, requested: OrderStatus) -> bool:
    """Return True when moving from current to requested is allowed."""
    if current.is_terminal:
        return False
    if requested is OrderStatus.CANCELLED:
        return True
    return _NEXT_STATUS.get(current) is requested


def status_label(status: OrderStatus) -> str:
    """Human-readable message for a status."""
    return _STATUS_LABELS[status]


@dataclass(frozen=True)
class Order:
    """An eater's claim on one portion of a meal."""

    id: UUID
    meal_id: UUID
    eater_id: UUID
    cook_id: UUID
    status: OrderStatus
    created_at: datetime
    dish_name: str | None = None
    price: Decimal | None = None
    cook_name: str | None = None
    eater_name: str | None = None
