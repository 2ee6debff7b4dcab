from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from commerce_core.domain.exceptions import InvalidMoneyError, InvalidOrderItemError
from commerce_core.domain.value_objects.money import Money, to_decimal

if TYPE_CHECKING:
    from commerce_core.domain.entities.order import Order


@dataclass
class OrderItem:
    """Line item owned by exactly one Order.

    ``total_price`` is derived from ``unit_price * quantity`` and has no
    setter. Items compare by product, quantity and unit price; the owning
    order is not part of equality.

    A Money unit price is stored as its amount and its currency is kept in
    ``currency`` so the order total can refuse to mix it with another
    currency. Plain amounts leave ``currency`` as None and are read in the
    settlement currency.
    """

    product_name: str
    product_description: str
    quantity: int
    unit_price: Decimal
    order: Order | None = field(default=None, repr=False, compare=False)
    currency: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.product_name, str) or not self.product_name.strip():
            raise InvalidOrderItemError("Product name is required")
        if not isinstance(self.product_description, str) or not self.product_description.strip():
            raise InvalidOrderItemError("Product description is required")
        _validate_quantity(self.quantity)

        if self.currency is not None:
            try:
                self.currency = Money.zero(self.currency).currency
            except InvalidMoneyError as e:
                raise InvalidOrderItemError(str(e)) from e
        raw = self.unit_price
        if isinstance(raw, Money):
            if self.currency is not None and self.currency != raw.currency:
                raise InvalidOrderItemError(
                    f"Unit price is in {raw.currency}, item currency is {self.currency}"
                )
            self.currency = raw.currency
            raw = raw.amount
        try:
            unit_price = to_decimal(raw, "Unit price")
        except InvalidMoneyError as e:
            raise InvalidOrderItemError(str(e)) from e
        if unit_price < 0:
            raise InvalidOrderItemError(f"Unit price must be zero or greater, got {unit_price}")
        self.unit_price = unit_price

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity

    def update_quantity(self, new_quantity: int) -> None:
        """Replace the quantity; ``total_price`` follows.

        Raises:
            InvalidOrderItemError: If ``new_quantity`` is negative or not an int.
        """
        _validate_quantity(new_quantity)
        self.quantity = new_quantity

    def attach_to(self, order: Order) -> None:
        """Set the back-reference to the owning order."""
        if order is None:
            raise InvalidOrderItemError("Order is required")
        self.order = order


def _validate_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidOrderItemError(f"Quantity must be an integer, got {quantity!r}")
    if quantity < 0:
        raise InvalidOrderItemError(f"Quantity must be zero or greater, got {quantity}")
