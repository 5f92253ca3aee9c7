"""Customer entity."""
from dataclasses import dataclass

from ..value_objects import CustomerId


@dataclass(frozen=True)
class Customer:
    """Only existence matters to the order flow."""
    customer_id: CustomerId
