"""Money value object.

Amounts are exact decimals rounded half-up to the currency's fraction digits
at construction, so two Money values that compare equal always have the
same scale.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, Overflow
from typing import Union

from commerce_core.domain.exceptions import CurrencyMismatchError, InvalidMoneyError
from commerce_core.domain.value_objects.currencies import FRACTION_DIGITS

SETTLEMENT_CURRENCY = "KRW"

# Money arithmetic runs in this context instead of the 28-digit default.
# Amounts needing more than MAX_DIGITS digits at their currency scale are rejected.
MAX_DIGITS = 1000
_CONTEXT = Context(prec=MAX_DIGITS, rounding=ROUND_HALF_UP)

AmountLike = Union[Decimal, int, str, float]


def to_decimal(value: AmountLike, label: str = "Amount") -> Decimal:
    """Convert a user-supplied number into an exact Decimal.

    Floats go through ``str`` so that 0.025 stays 0.025.

    Raises:
        InvalidMoneyError: If the value is None, a bool, or not numeric.
    """
    if value is None or isinstance(value, bool):
        raise InvalidMoneyError(f"{label} cannot be null")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise InvalidMoneyError(f"{label} is not a number: {value!r}") from e
    if not result.is_finite():
        raise InvalidMoneyError(f"{label} must be finite, got {value!r}")
    return result


def fraction_digits(currency: str) -> int:
    try:
        return FRACTION_DIGITS[currency]
    except KeyError as e:
        raise InvalidMoneyError(f"Unsupported currency: {currency}") from e


@dataclass(frozen=True, slots=True)
class Money:
    """Immutable amount + currency.

    Invariants:
      - amount >= 0
      - amount is quantized to the currency's fraction digits (ROUND_HALF_UP)
      - currency is an upper-case supported ISO code

    Arithmetic and ordered comparisons require equal currencies and raise
    CurrencyMismatchError otherwise. ``==`` is plain value equality and
    never raises; use ``is_equal_to`` for the currency-checked comparison.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        if self.currency is None:
            raise InvalidMoneyError("Currency cannot be null")
        currency = str(self.currency).strip().upper()
        digits = fraction_digits(currency)

        amount = to_decimal(self.amount)
        if amount < 0:
            raise InvalidMoneyError(f"Amount cannot be negative, got {amount}")

        try:
            quantized = amount.quantize(Decimal(1).scaleb(-digits), context=_CONTEXT)
        except InvalidOperation as e:
            raise InvalidMoneyError(f"Amount is too large: {amount:.6E}") from e
        if quantized.is_zero():
            quantized = quantized.copy_abs()
        object.__setattr__(self, "amount", quantized)
        object.__setattr__(self, "currency", currency)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, amount: AmountLike, currency: str) -> Money:
        return cls(amount=amount, currency=currency)  # type: ignore[arg-type]

    @classmethod
    def krw(cls, amount: AmountLike) -> Money:
        return cls.of(amount, "KRW")

    @classmethod
    def usd(cls, amount: AmountLike) -> Money:
        return cls.of(amount, "USD")

    @classmethod
    def zero(cls, currency: str = SETTLEMENT_CURRENCY) -> Money:
        return cls.of(0, currency)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._require_same_currency(other)
        return Money.of(_CONTEXT.add(self.amount, other.amount), self.currency)

    def subtract(self, other: Money) -> Money:
        """Subtract ``other``; the result may not go below zero."""
        self._require_same_currency(other)
        result = _CONTEXT.subtract(self.amount, other.amount)
        if result < 0:
            raise InvalidMoneyError(
                f"Result cannot be negative: {self} - {other}"
            )
        return Money.of(result, self.currency)

    def multiply(self, factor: AmountLike) -> Money:
        """Multiply by ``factor``, keeping the currency.

        The factor's sign is not checked; a product below zero fails the
        amount invariant of the new Money.
        """
        try:
            product = _CONTEXT.multiply(self.amount, to_decimal(factor, "Factor"))
        except Overflow as e:
            raise InvalidMoneyError(f"Amount is too large: {self} * {factor}") from e
        return Money.of(product, self.currency)

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        return self.subtract(other)

    def __mul__(self, factor: AmountLike) -> Money:
        return self.multiply(factor)

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def is_greater_than(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self.amount > other.amount

    def is_greater_than_or_equal(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self.amount >= other.amount

    def is_less_than(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self.amount < other.amount

    def is_equal_to(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self.amount == other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def _require_same_currency(self, other: Money) -> None:
        if other is None:
            raise InvalidMoneyError("Other amount cannot be null")
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                "Cannot perform operation on different currencies: "
                f"{self.currency} and {other.currency}"
            )

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"
