"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pos.domain.exceptions import ValidationError

CURRENCY = "INR"
CURRENCY_SYMBOL = "₹"

# Input amounts stay below 10**12 and quantities at or below 10**6, so
# parsing never builds huge integers and cent amounts stay exact as JSON
# numbers.
MAX_AMOUNT_DIGITS = 12
MAX_QUANTITY = 1_000_000


@dataclass(frozen=True)
class Money:
    """Monetary amount in the shop's currency.

    Uses Decimal so invoice totals and report revenue never pick up
    floating-point drift.
    """

    amount: Decimal
    currency: str = CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{CURRENCY_SYMBOL}{self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely.

        Floats go through ``str()`` first so ``199.5`` becomes
        ``Decimal("199.5")`` rather than its binary approximation.
        """
        if isinstance(amount, bool) or amount is None:
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            money = Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not money.is_zero and money.amount.adjusted() >= MAX_AMOUNT_DIGITS:
            raise ValidationError(
                f"Money amount must be below 1{'0' * MAX_AMOUNT_DIGITS}, got {amount!r}"
            )
        return money


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot sell zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")
        if self.value > MAX_QUANTITY:
            raise ValidationError(f"Quantity cannot exceed {MAX_QUANTITY}")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(raw: str | float | int) -> Quantity:
        """Coerce a JSON-ish value into a Quantity.

        Accepts ints, integral floats (``2.0``) and numeric strings
        (``"2"``); rejects booleans, fractional values and anything with
        more digits than MAX_QUANTITY before it is turned into an int.
        """
        if isinstance(raw, bool) or raw is None:
            raise ValidationError(f"Quantity must be a number, got {raw!r}")
        try:
            number = Decimal(str(raw).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Quantity must be a number, got {raw!r}") from exc
        if not number.is_finite():
            raise ValidationError(f"Quantity must be a whole number, got {raw!r}")
        if number and number.adjusted() >= len(str(MAX_QUANTITY)):
            raise ValidationError(f"Quantity cannot exceed {MAX_QUANTITY}")
        if number != number.to_integral_value():
            raise ValidationError(f"Quantity must be a whole number, got {raw!r}")
        return Quantity(int(number))
