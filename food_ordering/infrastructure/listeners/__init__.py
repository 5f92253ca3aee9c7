from .order_created_listener import OrderCreatedEventApplicationListener

__all__ = ["OrderCreatedEventApplicationListener"]
