"""Application services."""
from .order_service import OrderApplicationService

__all__ = ["OrderApplicationService"]
