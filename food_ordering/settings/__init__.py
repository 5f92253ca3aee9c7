# Settings package
from food_ordering.settings.app import OrderServiceSettings, get_settings

__all__ = ["OrderServiceSettings", "get_settings"]
