from .order_status import ALLOWED_PREDECESSORS, OrderStatus, can_transition, transition

__all__ = ["ALLOWED_PREDECESSORS", "OrderStatus", "can_transition", "transition"]
