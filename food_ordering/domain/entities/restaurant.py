"""Restaurant catalog snapshot as seen by the order flow."""
from dataclasses import dataclass, field
from typing import List, Optional

from ..value_objects import Money, ProductId, RestaurantId


@dataclass(eq=False)
class Product:
    """Catalog product. Two products are the same product when their ids match."""
    product_id: ProductId
    name: Optional[str] = None
    price: Optional[Money] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.product_id == other.product_id

    def __hash__(self) -> int:
        return hash(self.product_id)

    def update_with_confirmed_name_and_price(self, name: str, price: Money) -> None:
        self.name = name
        self.price = price


@dataclass
class Restaurant:
    """
    Read-only snapshot of a restaurant fetched per request.

    Also used as the lookup projection (id plus requested product ids)
    passed to RestaurantRepository.find_restaurant_information.
    """
    restaurant_id: RestaurantId
    products: List[Product] = field(default_factory=list)
    active: bool = False
