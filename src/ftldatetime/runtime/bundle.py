"""DateTimeBundle: render boundary for DATETIME values in one locale.

A bundle owns the pieces a host engine needs to render FluentDateTime
values: a language memoizer holding cached formatters, and a function
registry containing DATETIME. It turns values and function calls into
strings using the collect-and-fallback convention:
    - every call returns (text, errors)
    - a failed function call renders as {!NAME}
    - a value whose formatter cannot be built or applied renders as ""
    - successful placeables are wrapped in FSI/PDI when use_isolating is on

With strict=True the first collected error is raised instead.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from types import TracebackType

from ftldatetime.constants import (
    FALLBACK_FUNCTION_ERROR,
    FALLBACK_UNFORMATTABLE,
    UNICODE_FSI,
    UNICODE_PDI,
)
from ftldatetime.diagnostics import (
    FieldSetError,
    FluentError,
    FluentResolutionError,
    FormattingError,
)

from .function_bridge import FunctionRegistry
from .functions import get_shared_registry
from .memoizer import ConcurrentIntlLangMemoizer, IntlLangMemoizer
from .value_types import FluentErrorValue, FluentType, FluentValue

__all__ = ["DateTimeBundle"]

logger = logging.getLogger(__name__)


class DateTimeBundle:
    """Formats DATETIME values and function calls for a single locale.

    Example:
        >>> from ftldatetime import FluentDateTime
        >>> bundle = DateTimeBundle("en-US", use_isolating=False)
        >>> value = FluentDateTime.parse("1989-11-09 23:30")
        >>> bundle.format_call("DATETIME", [value], {"dateStyle": "long"})
        ('November 9, 1989', ())
    """

    __slots__ = (
        "_function_registry",
        "_locale",
        "_lock",
        "_memoizer",
        "_strict",
        "_thread_safe",
        "_use_isolating",
    )

    @staticmethod
    def _validate_locale_format(locale: str) -> None:
        """Validate locale code format.

        Checks that locale is non-empty and contains only alphanumeric
        characters with optional underscore or hyphen separators. Whether
        CLDR has data for it is only known when a formatter is built.

        Raises:
            ValueError: If locale code is empty or has invalid format
        """
        if not locale or not isinstance(locale, str):
            msg = "Locale code cannot be empty"
            raise ValueError(msg)

        if not locale.replace("_", "").replace("-", "").isalnum():
            msg = f"Invalid locale code format: '{locale}'"
            raise ValueError(msg)

    def __init__(
        self,
        locale: str,
        /,
        *,
        thread_safe: bool = False,
        use_isolating: bool = True,
        strict: bool = False,
        functions: FunctionRegistry | None = None,
    ) -> None:
        """Initialize bundle for locale.

        Args:
            locale: BCP-47 or POSIX locale code [positional-only]
            thread_safe: Use a concurrent memoizer and guard the function
                table with an RLock (default: False)
            use_isolating: Wrap formatted placeables in Unicode bidi isolation
                marks (default: True)
            strict: Raise the first error instead of returning it
                (default: False)
            functions: Registry to copy (default: shared registry with DATETIME)

        Raises:
            ValueError: If locale code is empty or has invalid format
        """
        DateTimeBundle._validate_locale_format(locale)

        self._locale = locale
        self._use_isolating = use_isolating
        self._strict = strict
        self._thread_safe = thread_safe
        self._lock: threading.RLock | None = threading.RLock() if thread_safe else None
        self._memoizer: IntlLangMemoizer = (
            ConcurrentIntlLangMemoizer(locale) if thread_safe else IntlLangMemoizer(locale)
        )

        # Copy so bundles never share a mutable table.
        if functions is not None:
            self._function_registry = functions.copy()
        else:
            self._function_registry = get_shared_registry().copy()

        logger.info(
            "DateTimeBundle initialized for locale: %s (use_isolating=%s, strict=%s, thread_safe=%s)",
            locale,
            use_isolating,
            strict,
            thread_safe,
        )

    @property
    def locale(self) -> str:
        """Locale code for this bundle (read-only)."""
        return self._locale

    @property
    def use_isolating(self) -> bool:
        """Whether placeables are wrapped in FSI/PDI (read-only)."""
        return self._use_isolating

    @property
    def strict(self) -> bool:
        """Whether errors are raised instead of returned (read-only)."""
        return self._strict

    @property
    def is_thread_safe(self) -> bool:
        """Whether the bundle was built for concurrent use (read-only)."""
        return self._thread_safe

    @property
    def memoizer(self) -> IntlLangMemoizer:
        """Formatter cache for this bundle's locale."""
        return self._memoizer

    def __repr__(self) -> str:
        return (
            f"DateTimeBundle(locale={self._locale!r}, "
            f"functions={len(self._function_registry)}, "
            f"cached_formatters={len(self._memoizer)})"
        )

    def __enter__(self) -> DateTimeBundle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Drop cached formatters. Does not suppress exceptions."""
        self.clear_cache()
        logger.debug("DateTimeBundle context exited for locale: %s", self._locale)

    def add_function(self, name: str, func: Callable[..., FluentValue]) -> None:
        """Add a custom function to this bundle's registry.

        Raises:
            FunctionRegistrationError: If name is already registered
        """
        if self._lock is not None:
            with self._lock:
                self._function_registry.register(func, ftl_name=name)
        else:
            self._function_registry.register(func, ftl_name=name)
        logger.debug("Added custom function: %s", name)

    def has_function(self, name: str) -> bool:
        """Check whether name is callable through this bundle."""
        return name in self._function_registry

    def call_function(
        self,
        name: str,
        positional: Sequence[FluentValue] = (),
        named: Mapping[str, FluentValue] | None = None,
    ) -> FluentValue:
        """Call a registered function and return its raw result.

        Raises:
            FluentResolutionError: If the function is unknown or rejects its
                arguments
        """
        if self._lock is not None:
            with self._lock:
                return self._function_registry.call(name, positional, named or {})
        return self._function_registry.call(name, positional, named or {})

    def format_value(self, value: FluentValue) -> tuple[str, tuple[FluentError, ...]]:
        """Render a single value as a placeable.

        Args:
            value: Any function result or variable value

        Returns:
            Tuple of (text, errors)

        Raises:
            FluentError: In strict mode, the first error encountered
        """
        errors: list[FluentError] = []
        text = self._render(value, errors)
        return self._finish(text, errors)

    def format_call(
        self,
        name: str,
        positional: Sequence[FluentValue] = (),
        named: Mapping[str, FluentValue] | None = None,
    ) -> tuple[str, tuple[FluentError, ...]]:
        """Call name(*positional, **named) and render the result.

        Equivalent to what a host engine does for { NAME($x, opt: "v") }.

        Returns:
            Tuple of (text, errors). A failed call renders as {!NAME}.

        Raises:
            FluentError: In strict mode, the first error encountered
        """
        errors: list[FluentError] = []
        fallback = FALLBACK_FUNCTION_ERROR.format(name=name)
        try:
            result = self.call_function(name, positional, named)
        except FluentResolutionError as e:
            errors.append(e)
            return self._finish(fallback, errors)

        if isinstance(result, FluentErrorValue):
            errors.append(result.error)
            return self._finish(fallback, errors)
        return self._finish(self._render(result, errors), errors)

    def clear_cache(self) -> None:
        """Drop cached formatters; they are rebuilt on demand."""
        self._memoizer.clear()
        logger.debug("Formatter cache cleared for locale: %s", self._locale)

    def get_cache_stats(self) -> dict[str, int | str]:
        """Formatter cache metrics: language, size, hits, misses."""
        return self._memoizer.get_stats()

    def _render(self, value: FluentValue, errors: list[FluentError]) -> str:
        match value:
            case FluentType():
                try:
                    text = value.format(self._memoizer)
                except FieldSetError as e:
                    logger.exception("Internal field-set error for %r", value)
                    errors.append(e)
                    return FALLBACK_UNFORMATTABLE
                except FormattingError as e:
                    errors.append(e)
                    return e.fallback_value
                except FluentError as e:
                    errors.append(e)
                    return FALLBACK_UNFORMATTABLE
            case FluentErrorValue():
                errors.append(value.error)
                return FALLBACK_UNFORMATTABLE
            case None:
                return ""
            case bool():
                text = "true" if value else "false"
            case _:
                text = str(value)
        return self._isolate(text)

    def _isolate(self, text: str) -> str:
        if self._use_isolating and text:
            return f"{UNICODE_FSI}{text}{UNICODE_PDI}"
        return text

    def _finish(
        self, text: str, errors: list[FluentError]
    ) -> tuple[str, tuple[FluentError, ...]]:
        if errors:
            logger.warning("Rendering errors for locale %s: %d error(s)", self._locale, len(errors))
            for err in errors:
                logger.debug("  - %s: %s", type(err).__name__, err)
            if self._strict:
                raise errors[0]
        return (text, tuple(errors))
