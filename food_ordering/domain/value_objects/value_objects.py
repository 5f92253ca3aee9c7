"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import ClassVar
from uuid import UUID, uuid4


_CENTS = Decimal("0.01")


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable monetary amount in cents precision.

    Amounts are normalized to two decimal places so that prices compare and
    render consistently, e.g. ``250.00``. An amount that cannot be expressed
    in whole cents is rejected instead of rounded.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal

    ZERO: ClassVar["Money"]

    def __post_init__(self):
        amount = self.amount
        if isinstance(amount, bool):
            raise ValueError(f"Money amount must be numeric, got: {amount!r}")
        if not isinstance(amount, Decimal):
            # str() first: Decimal(0.1) would keep the binary float error
            try:
                amount = Decimal(str(amount))
            except InvalidOperation:
                raise ValueError(f"Money amount must be numeric, got: {amount!r}") from None
        if not amount.is_finite():
            raise ValueError(f"Money amount must be finite, got: {amount}")
        try:
            cents = amount.quantize(_CENTS)
        except InvalidOperation:
            raise ValueError(f"Money amount is out of range: {amount}") from None
        if cents != amount:
            raise ValueError(f"Money amount has sub-cent precision: {amount}")
        object.__setattr__(self, "amount", cents)

    def __str__(self) -> str:
        return str(self.amount)

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        return Money(self.amount - other.amount)

    def __mul__(self, quantity: int) -> "Money":
        return self.multiply(quantity)

    __rmul__ = __mul__

    def multiply(self, quantity: int) -> "Money":
        """Price for ``quantity`` units."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError(f"Quantity must be an integer, got: {quantity!r}")
        return Money(self.amount * quantity)

    def is_greater_than_zero(self) -> bool:
        return self.amount > 0

    def is_greater_than(self, other: "Money") -> bool:
        return self.amount > other.amount


Money.ZERO = Money(Decimal("0"))


@dataclass(frozen=True)
class BaseId:
    """UUID-backed identifier compared by value."""

    value: UUID

    def __post_init__(self):
        if isinstance(self.value, str):
            object.__setattr__(self, "value", UUID(self.value))
        elif not isinstance(self.value, UUID):
            raise ValueError(f"{type(self).__name__} requires a UUID, got: {self.value!r}")

    @classmethod
    def generate(cls):
        """Generate a new random identifier."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrderId(BaseId):
    """Internal primary key of an order."""


@dataclass(frozen=True)
class CustomerId(BaseId):
    pass


@dataclass(frozen=True)
class RestaurantId(BaseId):
    pass


@dataclass(frozen=True)
class ProductId(BaseId):
    pass


@dataclass(frozen=True)
class TrackingId(BaseId):
    """Identifier handed to callers for order status lookups."""


@dataclass(frozen=True)
class OrderItemId:
    """Position of an item inside its order, starting at 1."""

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 1:
            raise ValueError(f"Order item id must be a positive integer, got: {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StreetAddress:
    """Delivery address of an order."""

    id: UUID
    street: str
    postal_code: str
    city: str

    @classmethod
    def create(cls, street: str, postal_code: str, city: str) -> "StreetAddress":
        return cls(id=uuid4(), street=street, postal_code=postal_code, city=city)
