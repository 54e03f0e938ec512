from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any, NamedTuple, Optional

from ..core.config import settings

_CENT = Decimal("0.01")
ZERO = Decimal("0.00")


class PriceBand(NamedTuple):
    """Inclusive [low, high] range a slider-driven price may take."""

    low: Decimal
    high: Decimal

    def clamp(self, value: Any) -> Decimal:
        amount = to_decimal(value, self.low)
        if amount < self.low:
            return self.low
        if amount > self.high:
            return self.high
        return amount


@dataclass(frozen=True)
class LineItem:
    label: str
    amount: Decimal


@dataclass
class FamilyEstimate:
    """Base line plus same-family add-ons for one service family.

    ``event_duration``/``event_hours`` are only set for event-duration
    sub-types, which are the ones eligible for studio rental.
    """

    base: LineItem
    addons: list[LineItem] = field(default_factory=list)
    event_duration: Optional[str] = None
    event_hours: int = 0

    @property
    def items(self) -> list[LineItem]:
        return [self.base, *self.addons]

    @property
    def subtotal(self) -> Decimal:
        return sum((it.amount for it in self.items), ZERO)


@dataclass
class QuoteBreakdown:
    items: list[LineItem]
    subtotal: Decimal
    currency: str

    @property
    def total(self) -> Decimal:
        return sum((it.amount for it in self.items), ZERO).quantize(_CENT, rounding=ROUND_HALF_UP)


def to_decimal(value: Any, default: Decimal = Decimal("0")) -> Decimal:
    if value is None:
        return default
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return default


def money(value: Any) -> Decimal:
    return to_decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def line(label: str, amount: Any) -> LineItem:
    return LineItem(label=label, amount=money(amount))


def empty_breakdown(items: Optional[list[LineItem]] = None) -> QuoteBreakdown:
    return QuoteBreakdown(items=list(items or []), subtotal=ZERO, currency=default_currency())


def default_currency() -> str:
    return (settings.DEFAULT_CURRENCY or "AED").upper()


def format_amount(value: Any, currency: Optional[str] = None) -> str:
    """Render an amount the way the quote preview does (``1,050 AED``).

    Whole amounts drop the cents; fractional ones keep two decimals.
    """
    amount = money(value)
    cur = currency or default_currency()
    if amount == amount.to_integral_value():
        return f"{amount:,.0f} {cur}"
    return f"{amount:,.2f} {cur}"


def plural(count: int, singular: str, plural_form: Optional[str] = None) -> str:
    word = singular if count == 1 else (plural_form or f"{singular}s")
    return f"{count} {word}"
