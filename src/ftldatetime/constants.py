"""Shared constants for ftl-datetime.

This module provides centralized constants used across the runtime and
diagnostics packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- FTL surface: function and option names recognized in .ftl resources
- Input limits: bounds on untrusted language tags
- Fallback strings: readable output for failed placeables
- Bidi isolation: Unicode marks wrapped around formatted placeables

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # FTL surface
    "DATETIME_FUNCTION_NAME",
    "OPTION_DATE_STYLE",
    "OPTION_TIME_STYLE",
    # Input limits
    "MAX_LANGUAGE_TAG_LENGTH",
    # Fallback strings
    "FALLBACK_FUNCTION_ERROR",
    "FALLBACK_UNFORMATTABLE",
    # Bidi isolation
    "UNICODE_FSI",
    "UNICODE_PDI",
]

# ============================================================================
# FTL SURFACE
# ============================================================================

# Name under which the datetime function is registered in a function table.
DATETIME_FUNCTION_NAME: str = "DATETIME"

# Named arguments understood by DATETIME(). Spelled the way ECMA-402
# Intl.DateTimeFormat spells them, which is what translators write in FTL.
OPTION_DATE_STYLE: str = "dateStyle"
OPTION_TIME_STYLE: str = "timeStyle"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Language tags arrive from untrusted sources (Accept-Language headers, user
# profiles). BCP 47 recommends supporting at least 35 characters; 128 leaves
# room for extensions while keeping Babel lookups bounded.
MAX_LANGUAGE_TAG_LENGTH: int = 128

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Template pattern for a failed function call - use .format(name=...)
FALLBACK_FUNCTION_ERROR: str = "{{!{name}}}"  # e.g., {!DATETIME}

# Output for a custom value whose formatter could not be built or applied.
FALLBACK_UNFORMATTABLE: str = ""

# ============================================================================
# BIDI ISOLATION
# ============================================================================

# Per Unicode TR9, FSI/PDI keep interpolated text from reordering its
# surroundings when LTR and RTL scripts mix.
UNICODE_FSI: str = "\u2068"  # U+2068 FIRST STRONG ISOLATE
UNICODE_PDI: str = "\u2069"  # U+2069 POP DIRECTIONAL ISOLATE
