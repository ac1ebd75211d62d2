"""Runtime for DATETIME values: styles, formatters, caches, functions, bundle.

Layers, bottom-up:
    - fieldset / length: style bags compiled to formatter field sets
    - formatter: CLDR-backed DateTimeFormatter
    - timezone: local-zone attachment for zone-displaying formats
    - memoizer: per-language formatter caches
    - fluent_datetime: the FluentDateTime value and its options
    - function_bridge / functions: FunctionRegistry and DATETIME()
    - bundle: DateTimeBundle render boundary
"""

from .bundle import DateTimeBundle
from .fieldset import CompiledFieldSet, FieldSetBuilder
from .fluent_datetime import DateTimeOptions, FluentDateTime
from .formatter import DateTimeFormatter
from .function_bridge import FunctionRegistry, FunctionSignature
from .functions import (
    add_datetime_support,
    create_default_registry,
    datetime_function,
    get_shared_registry,
)
from .length import StyleBag
from .memoizer import ConcurrentIntlLangMemoizer, IntlLangMemoizer, IntlMemoizer, LangMemoizer
from .timezone import attach_timezone, get_system_timezone, resolve_local
from .value_types import FluentErrorValue, FluentType, FluentValue, NaiveDateTime

__all__ = [
    "CompiledFieldSet",
    "ConcurrentIntlLangMemoizer",
    "DateTimeBundle",
    "DateTimeFormatter",
    "DateTimeOptions",
    "FieldSetBuilder",
    "FluentDateTime",
    "FluentErrorValue",
    "FluentType",
    "FluentValue",
    "FunctionRegistry",
    "FunctionSignature",
    "IntlLangMemoizer",
    "IntlMemoizer",
    "LangMemoizer",
    "NaiveDateTime",
    "StyleBag",
    "add_datetime_support",
    "attach_timezone",
    "create_default_registry",
    "datetime_function",
    "get_shared_registry",
    "get_system_timezone",
    "resolve_local",
]
