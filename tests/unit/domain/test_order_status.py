"""Tests for the order status transition table."""
import pytest

from food_ordering.domain.enums import ALLOWED_PREDECESSORS, OrderStatus, can_transition, transition
from food_ordering.domain.exceptions import InvalidStateTransition, OrderDomainException


@pytest.mark.parametrize(
    "current, target",
    [
        (None, OrderStatus.PENDING),
        (OrderStatus.PENDING, OrderStatus.PAID),
        (OrderStatus.PAID, OrderStatus.APPROVED),
        (OrderStatus.PENDING, OrderStatus.CANCELLING),
        (OrderStatus.PAID, OrderStatus.CANCELLING),
        (OrderStatus.CANCELLING, OrderStatus.CANCELLED),
    ],
)
def test_allowed_transitions(current, target):
    assert can_transition(current, target)
    assert transition(current, target) is target


def test_every_other_transition_is_rejected():
    states = [None, *OrderStatus]
    for target in OrderStatus:
        for current in states:
            if current in ALLOWED_PREDECESSORS[target]:
                continue
            with pytest.raises(InvalidStateTransition):
                transition(current, target)


def test_error_names_the_operation():
    with pytest.raises(OrderDomainException) as exc_info:
        transition(OrderStatus.APPROVED, OrderStatus.CANCELLING, "init_cancel")

    assert str(exc_info.value) == "Order is not in correct state for init_cancel operation!"
    assert exc_info.value.current is OrderStatus.APPROVED
    assert exc_info.value.target is OrderStatus.CANCELLING


def test_only_initialization_enters_pending():
    assert ALLOWED_PREDECESSORS[OrderStatus.PENDING] == frozenset({None})
