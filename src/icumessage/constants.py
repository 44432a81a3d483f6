"""Shared constants for icumessage.

Centralized configuration constants used across syntax and runtime
packages. Placing constants here avoids circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Branch keys
    "OTHER",
    "PLURAL_CATEGORIES",
    # Whitespace
    "WHITESPACE_CHARS",
    # Style names
    "DATE_TIME_WIDTHS",
    "LIST_STYLES",
    "UNIT_LENGTHS",
    "MONEY_STYLES",
    # Number patterns
    "INTEGER_FORMAT",
    "PERMILLE_FORMAT",
    # Locale
    "DEFAULT_LOCALE",
    "LOCALE_ENV_VAR",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum select/plural/selectordinal nesting, shared by the normalizer and
# the interpreter. Both recurse once per level; deeper trees would exhaust
# the Python stack.
MAX_DEPTH: int = 100

# ============================================================================
# BRANCH KEYS
# ============================================================================

# Mandatory fallback branch of every select, plural and selectordinal.
OTHER: str = "other"

# CLDR plural categories, in CLDR order.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# ============================================================================
# WHITESPACE
# ============================================================================

# Characters considered insignificant around nested plural/select blocks.
# Deliberately narrower than str.isspace(): \r, \f and Unicode spaces are content.
WHITESPACE_CHARS: frozenset[str] = frozenset(" \n\t")

# ============================================================================
# STYLE NAMES
# ============================================================================

DATE_TIME_WIDTHS: frozenset[str] = frozenset({"short", "medium", "long", "full"})

# ICU list style name -> Babel list style name. "and" is the default style.
LIST_STYLES: dict[str, str] = {
    "and": "standard",
    "standard": "standard",
    "standard_short": "standard-short",
    "standard_narrow": "standard-narrow",
    "or": "or",
    "or_short": "or-short",
    "or_narrow": "or-narrow",
    "unit": "unit",
    "unit_short": "unit-short",
    "unit_narrow": "unit-narrow",
}

UNIT_LENGTHS: frozenset[str] = frozenset({"long", "short", "narrow"})

MONEY_STYLES: frozenset[str] = frozenset({"short", "long"})

# ============================================================================
# NUMBER PATTERNS
# ============================================================================

# CLDR pattern rendering an integer with no grouping.
INTEGER_FORMAT: str = "#"

# CLDR pattern with the per-mille sign; Babel scales the value by 1000.
PERMILLE_FORMAT: str = "#,##0‰"

# ============================================================================
# LOCALE
# ============================================================================

DEFAULT_LOCALE: str = "en_US"

# Environment variable overriding the detected system locale.
LOCALE_ENV_VAR: str = "ICUMESSAGE_LOCALE"

MAX_LOCALE_CACHE_SIZE: int = 128
