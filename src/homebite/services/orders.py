"""Order placement and status lifecycle."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from homebite.domain.errors import (
    InvalidTransitionError,
    NotEligibleError,
    NotFoundError,
)
from homebite.domain.orders import Order, OrderStatus, can_transition
from homebite.domain.profiles import (
    ORDER_COOK_NAME,
    ORDER_EATER_NAME,
    display_name_or,
)
from homebite.services.profiles import ProfileService

_logger = logging.getLogger(__name__)


class OrderRepository(Protocol):
    """Persistence interface for orders."""

    def place_order(self, eater_id: UUID, meal_id: UUID) -> UUID:
        """Atomically take one portion and create a placed order.

        Raises SoldOutError when no portion remains and NotFoundError when
        the meal does not exist.
        """

    def get_order(self, order_id: UUID) -> Order | None:
        """Return an order by id, if present."""

    def list_orders(
        self, cook_id: UUID | None = None, eater_id: UUID | None = None
    ) -> list[Order]:
        """Return orders newest first, optionally filtered."""

    def update_status(
        self, order_id: UUID, current: OrderStatus, requested: OrderStatus
    ) -> bool:
        """Set the status only if it still equals current; return success."""


@dataclass
class OrderService:
    """Application service for the order lifecycle."""

    repository: OrderRepository
    profile_service: ProfileService | None = None

    def place_order(self, eater_id: UUID, meal_id: UUID) -> UUID:
        """Claim one portion of a meal for an eater."""
        order_id = self.repository.place_order(eater_id, meal_id)
        _logger.info(
            "Order placed: order_id=%s meal_id=%s eater_id=%s",
            order_id,
            meal_id,
            eater_id,
        )
        return order_id

    def get_order(self, order_id: UUID) -> Order:
        """Return an order or raise NotFoundError."""
        order = self.repository.get_order(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        return self._with_names([order])[0]

    def advance_status(
        self,
        order_id: UUID,
        requested: OrderStatus,
        actor_id: UUID | None = None,
    ) -> Order:
        """Move an order to the requested status.

        Only the next forward status, or cancellation from a non-terminal
        status, is accepted. When ``actor_id`` is given it must be the
        order's cook.
        """
        order = self.get_order(order_id)
        if actor_id is not None and actor_id != order.cook_id:
            raise NotEligibleError("Only the cook can update this order")
        if not can_transition(order.status, requested):
            raise InvalidTransitionError(
                f"Cannot move order from {order.status.value} to {requested.value}"
            )
        if not self.repository.update_status(order_id, order.status, requested):
            # another writer moved the order after we read it
            raise InvalidTransitionError(
                f"Order {order_id} is no longer {order.status.value}"
            )
        _logger.info(
            "Order status updated: order_id=%s %s -> %s",
            order_id,
            order.status.value,
            requested.value,
        )
        return replace(order, status=requested)

    def list_orders(
        self, cook_id: UUID | None = None, eater_id: UUID | None = None
    ) -> list[Order]:
        """Return orders newest first."""
        return self._with_names(
            self.repository.list_orders(cook_id=cook_id, eater_id=eater_id)
        )

    def list_pending_for_cook(self, cook_id: UUID) -> list[Order]:
        """Return a cook's orders that still need action."""
        return self._with_names(
            [
                order
                for order in self.repository.list_orders(cook_id=cook_id)
                if not order.status.is_terminal
            ]
        )

    def _with_names(self, orders: list[Order]) -> list[Order]:
        """Attach cook and eater display names from their profiles."""
        if self.profile_service is None or not orders:
            return orders
        profiles = self.profile_service.get_profiles(_parties(orders))
        return [
            replace(
                order,
                cook_name=display_name_or(
                    profiles.get(order.cook_id), ORDER_COOK_NAME
                ),
                eater_name=display_name_or(
                    profiles.get(order.eater_id), ORDER_EATER_NAME
                ),
            )
            for order in orders
        ]


def _parties(orders: Iterable[Order]) -> list[UUID]:
    user_ids: list[UUID] = []
    for order in orders:
        user_ids.extend((order.cook_id, order.eater_id))
    return user_ids
