"""Money: the one value object shared by the catalog and shopping lists.

Every price in the system is in reais, so there is no currency field.
Construction rejects anything that is not a finite, non-negative Decimal.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from camarim.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount in Brazilian reais.

    Uses Decimal so subtotals and list totals add up exactly. Zero is a
    valid amount (free items are allowed in the catalog).
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price must be a finite number, got {self.amount}")
        if self.amount < 0:
            raise ValidationError(f"Price cannot be negative, got {self.amount}")

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __str__(self) -> str:
        return f"R$ {self.amount:.2f}"

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: Money | str | float | int | Decimal) -> Money:
        """Coerce *amount* to Money, going through ``str`` for floats."""
        if isinstance(amount, Money):
            return amount
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
