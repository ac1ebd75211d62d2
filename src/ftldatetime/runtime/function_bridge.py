"""Function table a host engine consults when it meets FUNC(...) in FTL.

Maps FTL function names to Python callables and bridges argument naming:
    - FTL: camelCase named arguments (dateStyle, timeStyle)
    - Python: snake_case keyword parameters (PEP 8)

Parameters a function declares explicitly are mapped automatically. A
function that takes **named instead receives the FTL spellings unchanged,
which is how DATETIME() sees dateStyle and timeStyle.

Registries can be frozen. A frozen registry rejects register() and is safe
to share between bundles and threads; copy() yields a mutable one.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from inspect import Parameter, signature
from types import MappingProxyType

from ftldatetime.diagnostics import (
    ErrorTemplate,
    FluentResolutionError,
    FunctionRegistrationError,
)

from .value_types import FluentValue

__all__ = ["FunctionRegistry", "FunctionSignature"]

logger = logging.getLogger(__name__)

_PASSTHROUGH_KINDS = frozenset({Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD})


@dataclass(frozen=True, slots=True)
class FunctionSignature:
    """Registered function and its calling-convention mapping.

    Attributes:
        python_name: Function name in Python
        ftl_name: Function name in FTL (UPPERCASE)
        param_mapping: FTL camelCase name -> Python parameter name
        callable: The Python function
    """

    python_name: str
    ftl_name: str
    param_mapping: Mapping[str, str]
    callable: Callable[..., FluentValue]


class FunctionRegistry:
    """Named functions callable from FTL.

    Supports dict-like introspection (len, in, iteration) in registration
    order.

    Example:
        >>> registry = FunctionRegistry()
        >>> registry.register(lambda value: value, ftl_name="IDENTITY")
        >>> "IDENTITY" in registry
        True
        >>> registry.register(lambda value: value, ftl_name="IDENTITY")
        Traceback (most recent call last):
        ...
        ftldatetime.diagnostics.errors.FunctionRegistrationError: ...
    """

    __slots__ = ("_frozen", "_functions")

    def __init__(self) -> None:
        self._functions: dict[str, FunctionSignature] = {}
        self._frozen = False

    def register(
        self,
        func: Callable[..., FluentValue],
        *,
        ftl_name: str | None = None,
        replace: bool = False,
    ) -> None:
        """Register a Python function for FTL use.

        Args:
            func: Function called as func(*positional, **named)
            ftl_name: FTL name (default: func.__name__.upper())
            replace: Overwrite an existing registration of the same name

        Raises:
            FunctionRegistrationError: If the registry is frozen, or the name
                is taken and replace is False
        """
        python_name = getattr(func, "__name__", "unknown")
        if ftl_name is None:
            ftl_name = python_name.upper()

        if self._frozen:
            raise FunctionRegistrationError(ErrorTemplate.registry_frozen(ftl_name))
        if ftl_name in self._functions and not replace:
            raise FunctionRegistrationError(ErrorTemplate.function_already_registered(ftl_name))

        param_mapping: dict[str, str] = {}
        for param in signature(func).parameters.values():
            if param.kind in _PASSTHROUGH_KINDS:
                continue
            param_mapping[self._to_camel_case(param.name.lstrip("_"))] = param.name

        self._functions[ftl_name] = FunctionSignature(
            python_name=python_name,
            ftl_name=ftl_name,
            param_mapping=MappingProxyType(param_mapping),
            callable=func,
        )
        logger.debug("Registered FTL function %s -> %s", ftl_name, python_name)

    def call(
        self,
        ftl_name: str,
        positional: Sequence[FluentValue],
        named: Mapping[str, FluentValue],
    ) -> FluentValue:
        """Call a registered function with FTL arguments.

        Args:
            ftl_name: Function name from FTL (e.g., "DATETIME")
            positional: Positional arguments
            named: Named arguments, FTL spelling

        Returns:
            The function's result, possibly a FluentErrorValue

        Raises:
            FluentResolutionError: If the function is unknown, or raised
                TypeError/ValueError on its arguments
        """
        func_sig = self._functions.get(ftl_name)
        if func_sig is None:
            raise FluentResolutionError(ErrorTemplate.function_not_found(ftl_name))

        python_kwargs = {
            func_sig.param_mapping.get(name, name): value for name, value in named.items()
        }

        # TypeError/ValueError mean bad arguments. Anything else is a bug in
        # the function and propagates.
        try:
            return func_sig.callable(*positional, **python_kwargs)
        except (TypeError, ValueError) as e:
            raise FluentResolutionError(ErrorTemplate.function_failed(ftl_name, str(e))) from e

    def has_function(self, ftl_name: str) -> bool:
        """Check if a function is registered under ftl_name."""
        return ftl_name in self._functions

    def get_function_info(self, ftl_name: str) -> FunctionSignature | None:
        """Registration metadata, or None if not found."""
        return self._functions.get(ftl_name)

    def list_functions(self) -> list[str]:
        """FTL names in registration order."""
        return list(self._functions)

    def freeze(self) -> None:
        """Reject further registrations. Irreversible; use copy() to extend."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """Whether register() is rejected."""
        return self._frozen

    def copy(self) -> FunctionRegistry:
        """Mutable shallow copy; signatures are shared, the table is not."""
        new_registry = FunctionRegistry()
        new_registry._functions = self._functions.copy()
        return new_registry

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, ftl_name: object) -> bool:
        return ftl_name in self._functions

    def __repr__(self) -> str:
        state = ", frozen" if self._frozen else ""
        return f"FunctionRegistry(functions={len(self._functions)}{state})"

    @staticmethod
    def _to_camel_case(snake_case: str) -> str:
        """Convert Python snake_case to FTL camelCase.

        Examples:
            >>> FunctionRegistry._to_camel_case("date_style")
            'dateStyle'
            >>> FunctionRegistry._to_camel_case("value")
            'value'
        """
        head, *rest = snake_case.split("_")
        return head + "".join(part.capitalize() for part in rest)
