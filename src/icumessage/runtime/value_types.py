"""Value types accepted as message arguments.

Defines:
    - Money: Amount paired with an ISO 4217 currency code
    - Unit: Measurement paired with a CLDR unit identifier
    - MessageValue: Union of all argument value types

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal

__all__ = [
    "MessageValue",
    "Money",
    "Unit",
]


@dataclass(frozen=True, slots=True)
class Money:
    """Monetary amount for {price, money} arguments.

    Example:
        >>> Money(Decimal("12.50"), "EUR")
        Money(amount=Decimal('12.50'), currency='EUR')
    """

    amount: int | float | Decimal
    currency: str


@dataclass(frozen=True, slots=True)
class Unit:
    """Measurement for {distance, unit} arguments.

    Attributes:
        value: Numeric magnitude
        unit: CLDR unit identifier ("length-kilometer" or "kilometer")
    """

    value: int | float | Decimal
    unit: str


type MessageValue = (
    str
    | int
    | float
    | bool
    | Decimal
    | datetime
    | date
    | time
    | Money
    | Unit
    | None
    | Sequence["MessageValue"]
    | Mapping[str, "MessageValue"]
)
