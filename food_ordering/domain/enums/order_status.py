"""
Order status values and the transition table between them.

    (new) -> PENDING -> PAID -> APPROVED
    PENDING/PAID -> CANCELLING -> CANCELLED
"""
from enum import Enum
from typing import Dict, FrozenSet, Optional

from ..exceptions import InvalidStateTransition


class OrderStatus(str, Enum):
    """Order status values."""

    PENDING = "PENDING"
    PAID = "PAID"
    APPROVED = "APPROVED"
    CANCELLING = "CANCELLING"
    CANCELLED = "CANCELLED"


# target status -> statuses it may be entered from (None = not yet initialized)
ALLOWED_PREDECESSORS: Dict[OrderStatus, FrozenSet[Optional[OrderStatus]]] = {
    OrderStatus.PENDING: frozenset({None}),
    OrderStatus.PAID: frozenset({OrderStatus.PENDING}),
    OrderStatus.APPROVED: frozenset({OrderStatus.PAID}),
    OrderStatus.CANCELLING: frozenset({OrderStatus.PENDING, OrderStatus.PAID}),
    OrderStatus.CANCELLED: frozenset({OrderStatus.CANCELLING}),
}


def can_transition(current: Optional[OrderStatus], target: OrderStatus) -> bool:
    return current in ALLOWED_PREDECESSORS[target]


def transition(
    current: Optional[OrderStatus],
    target: OrderStatus,
    operation: Optional[str] = None,
) -> OrderStatus:
    """
    Validate a status change.

    Args:
        current: Status the order is in now (None before initialization)
        target: Requested status
        operation: Operation name used in the error message

    Returns:
        The target status

    Raises:
        InvalidStateTransition: If ``current`` is not a valid predecessor of ``target``
    """
    if not can_transition(current, target):
        raise InvalidStateTransition(current, target, operation)
    return target
