"""ftl-datetime - DATETIME() for Fluent (FTL) with CLDR date/time styles.

Formats naive date-times with dateStyle/timeStyle options, caching one
formatter per language and style, and attaching the system time zone when
a style displays it.

Public API:
    DateTimeBundle - Render boundary for one locale
    FluentDateTime - Date-time value passed to DATETIME()
    NaiveDateTime - Validated zone-less date-time (leap seconds allowed)
    DateLength, TimeLength - Style values for dateStyle/timeStyle
    add_datetime_support - Register DATETIME in a FunctionRegistry

Exceptions:
    FluentError - Base exception class
    FluentResolutionError - Function call and rendering errors
    FormatterConstructionError - Unusable language tag or locale data

Submodules:
    ftldatetime.runtime - Formatters, memoizers, function registry
    ftldatetime.diagnostics - Error types, codes and templates
"""

from .diagnostics import (
    FluentError,
    FluentResolutionError,
    FormatterConstructionError,
    OptionsMergeError,
)
from .enums import DateLength, TimeLength
from .runtime import (
    DateTimeBundle,
    FluentDateTime,
    FluentValue,
    FunctionRegistry,
    NaiveDateTime,
    add_datetime_support,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("ftl-datetime")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateLength",
    "DateTimeBundle",
    "FluentDateTime",
    "FluentError",
    "FluentResolutionError",
    "FluentValue",
    "FormatterConstructionError",
    "FunctionRegistry",
    "NaiveDateTime",
    "OptionsMergeError",
    "TimeLength",
    "__version__",
    "add_datetime_support",
]
