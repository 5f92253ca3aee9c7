"""Food ordering - order service (create, track and lifecycle of orders)."""

__version__ = "0.1.0"
