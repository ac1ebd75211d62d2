"""The DATETIME() function and default function tables.

DATETIME() takes a FluentDateTime and returns a copy with the call site's
named arguments merged into its options. It never formats; the host renders
the returned value later through FluentType.format().

Failures are reported as FluentErrorValue rather than raised, so a host can
render its fallback for the placeable and carry on:
    - no positional argument
    - a first positional argument that is not a FluentDateTime
    - an option merge failure (bad dateStyle/timeStyle)

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading

from ftldatetime.constants import DATETIME_FUNCTION_NAME
from ftldatetime.diagnostics import ErrorTemplate, FluentResolutionError, OptionsMergeError

from .fluent_datetime import FluentDateTime
from .function_bridge import FunctionRegistry
from .value_types import FluentErrorValue, FluentValue

__all__ = [
    "add_datetime_support",
    "create_default_registry",
    "datetime_function",
    "get_shared_registry",
]

logger = logging.getLogger(__name__)


def datetime_function(*positional: FluentValue, **named: FluentValue) -> FluentValue:
    """DATETIME($value, dateStyle: ..., timeStyle: ...).

    Only the first positional argument is used; any further ones are ignored.

    Args:
        *positional: Call-site positional arguments
        **named: Call-site named arguments, FTL spelling

    Returns:
        New FluentDateTime with merged options, or FluentErrorValue
    """
    if not positional:
        return FluentErrorValue(
            FluentResolutionError(ErrorTemplate.argument_required(DATETIME_FUNCTION_NAME, "value"))
        )

    value = positional[0]
    if not isinstance(value, FluentDateTime):
        return FluentErrorValue(
            FluentResolutionError(
                ErrorTemplate.type_mismatch(
                    DATETIME_FUNCTION_NAME, "value", "FluentDateTime", type(value).__name__
                )
            )
        )

    try:
        return value.with_args(named)
    except OptionsMergeError as e:
        logger.debug("%s options rejected: %s", DATETIME_FUNCTION_NAME, e)
        return FluentErrorValue(e)


def add_datetime_support(registry: FunctionRegistry) -> None:
    """Register DATETIME in registry.

    Raises:
        FunctionRegistrationError: If DATETIME is already registered or the
            registry is frozen
    """
    registry.register(datetime_function, ftl_name=DATETIME_FUNCTION_NAME)


def create_default_registry() -> FunctionRegistry:
    """New mutable registry with DATETIME registered.

    Each call returns an independent instance, so callers may add their own
    functions without affecting anyone else.
    """
    registry = FunctionRegistry()
    add_datetime_support(registry)
    return registry


# Lazily built on first access to avoid import-time side effects.
_SHARED_REGISTRY: FunctionRegistry | None = None
_SHARED_REGISTRY_LOCK = threading.Lock()


def get_shared_registry() -> FunctionRegistry:
    """Frozen process-wide registry with DATETIME registered.

    Safe to share across bundles and threads. register() on it raises
    FunctionRegistrationError; use copy() or create_default_registry() to
    customize.
    """
    global _SHARED_REGISTRY  # noqa: PLW0603 - lazy module-level singleton
    if _SHARED_REGISTRY is None:
        with _SHARED_REGISTRY_LOCK:
            if _SHARED_REGISTRY is None:
                registry = create_default_registry()
                registry.freeze()
                _SHARED_REGISTRY = registry
    return _SHARED_REGISTRY
