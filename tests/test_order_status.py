"""Tests for the order status transition table."""

import pytest

from homebite.domain.orders import (
    OrderStatus,
    can_transition,
    next_status,
    status_label,
)

ALLOWED = {
    (OrderStatus.PLACED, OrderStatus.PACKING),
    (OrderStatus.PACKING, OrderStatus.READY),
    (OrderStatus.READY, OrderStatus.PICKED_UP),
    (OrderStatus.PLACED, OrderStatus.CANCELLED),
    (OrderStatus.PACKING, OrderStatus.CANCELLED),
    (OrderStatus.READY, OrderStatus.CANCELLED),
}


@pytest.mark.parametrize("current", list(OrderStatus))
@pytest.mark.parametrize("requested", list(OrderStatus))
def test_transition_table(current: OrderStatus, requested: OrderStatus) -> None:
    assert can_transition(current, requested) == ((current, requested) in ALLOWED)


def test_next_status_chain() -> None:
    assert next_status(OrderStatus.PLACED) is OrderStatus.PACKING
    assert next_status(OrderStatus.READY) is OrderStatus.PICKED_UP
    assert next_status(OrderStatus.PICKED_UP) is None
    assert next_status(OrderStatus.CANCELLED) is None


def test_terminal_statuses() -> None:
    assert OrderStatus.PICKED_UP.is_terminal
    assert OrderStatus.CANCELLED.is_terminal
    assert not OrderStatus.READY.is_terminal


def test_status_labels() -> None:
    assert status_label(OrderStatus.READY) == "Ready for pickup!"
    assert status_label(OrderStatus.CANCELLED) == "Order cancelled"
