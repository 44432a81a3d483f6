"""Enumerations for icumessage type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FormatType(StrEnum):
    """Argument format type of a simple format node.

    StrEnum provides automatic string conversion: str(FormatType.NUMBER) == "number"
    """

    NUMBER = "number"
    """{count, number} / {count, number, percent}"""

    SPELLOUT = "spellout"
    """{count, spellout} / {count, spellout, ordinal}"""

    DATE = "date"
    """{when, date, short}"""

    TIME = "time"
    """{when, time, long}"""

    DATETIME = "datetime"
    """{when, datetime, full}"""

    MONEY = "money"
    """{price, money, short}"""

    LIST = "list"
    """{names, list, or}"""

    UNIT = "unit"
    """{distance, unit, narrow}"""


class PluralType(StrEnum):
    """Plural rule mode used to categorize a number.

    StrEnum provides automatic string conversion: str(PluralType.CARDINAL) == "cardinal"
    """

    CARDINAL = "cardinal"
    """Quantity: 1 item, 2 items"""

    ORDINAL = "ordinal"
    """Rank: 1st, 2nd, 3rd"""


__all__ = [
    "FormatType",
    "PluralType",
]
