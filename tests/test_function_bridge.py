"""Tests for FunctionRegistry registration, calling and freezing."""

from __future__ import annotations

import pytest

from ftldatetime.diagnostics import DiagnosticCode, FluentResolutionError, FunctionRegistrationError
from ftldatetime.runtime.function_bridge import FunctionRegistry, FunctionSignature
from ftldatetime.runtime.value_types import FluentValue


def pad(value: str, *, fill_char: str = " ", min_width: int = 0) -> str:
    """snake_case keywords exposed as fillChar / minWidth."""
    return value.rjust(min_width, fill_char)


def echo_named(*positional: FluentValue, **named: FluentValue) -> str:
    return ",".join(sorted(named))


def strict_positive(value: int) -> int:
    if value <= 0:
        msg = "must be positive"
        raise ValueError(msg)
    return value


class TestRegistration:
    """register() builds signatures and guards names."""

    def test_default_name_is_uppercase(self) -> None:
        registry = FunctionRegistry()
        registry.register(pad)
        assert registry.has_function("PAD")
        info = registry.get_function_info("PAD")
        assert isinstance(info, FunctionSignature)
        assert info.python_name == "pad"

    def test_param_mapping_camel_case(self) -> None:
        registry = FunctionRegistry()
        registry.register(pad, ftl_name="PAD")
        info = registry.get_function_info("PAD")
        assert info is not None
        assert info.param_mapping["fillChar"] == "fill_char"
        assert info.param_mapping["minWidth"] == "min_width"

    def test_var_keyword_not_mapped(self) -> None:
        registry = FunctionRegistry()
        registry.register(echo_named, ftl_name="ECHO")
        info = registry.get_function_info("ECHO")
        assert info is not None
        assert dict(info.param_mapping) == {}

    def test_duplicate_rejected(self) -> None:
        registry = FunctionRegistry()
        registry.register(pad, ftl_name="PAD")
        with pytest.raises(FunctionRegistrationError) as exc_info:
            registry.register(strict_positive, ftl_name="PAD")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.FUNCTION_ALREADY_REGISTERED
        assert registry.get_function_info("PAD").python_name == "pad"  # type: ignore[union-attr]

    def test_replace_allowed_explicitly(self) -> None:
        registry = FunctionRegistry()
        registry.register(pad, ftl_name="PAD")
        registry.register(strict_positive, ftl_name="PAD", replace=True)
        assert registry.get_function_info("PAD").python_name == "strict_positive"  # type: ignore[union-attr]

    def test_frozen_rejects(self) -> None:
        registry = FunctionRegistry()
        registry.freeze()
        with pytest.raises(FunctionRegistrationError) as exc_info:
            registry.register(pad)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.REGISTRY_FROZEN
        assert len(registry) == 0

    def test_copy_is_mutable_and_independent(self) -> None:
        registry = FunctionRegistry()
        registry.register(pad)
        registry.freeze()
        copy = registry.copy()
        copy.register(strict_positive)
        assert not copy.frozen
        assert list(copy) == ["PAD", "STRICT_POSITIVE"]
        assert registry.list_functions() == ["PAD"]


class TestCall:
    """call() bridges names and wraps argument errors."""

    def test_named_arguments_converted(self) -> None:
        registry = FunctionRegistry()
        registry.register(pad, ftl_name="PAD")
        assert registry.call("PAD", ["7"], {"fillChar": "0", "minWidth": 3}) == "007"

    def test_named_arguments_passed_through(self) -> None:
        registry = FunctionRegistry()
        registry.register(echo_named, ftl_name="ECHO")
        assert registry.call("ECHO", [], {"dateStyle": "x", "timeStyle": "y"}) == (
            "dateStyle,timeStyle"
        )

    def test_unknown_function(self) -> None:
        with pytest.raises(FluentResolutionError) as exc_info:
            FunctionRegistry().call("MISSING", [], {})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.FUNCTION_NOT_FOUND

    def test_value_error_wrapped(self) -> None:
        registry = FunctionRegistry()
        registry.register(strict_positive)
        with pytest.raises(FluentResolutionError, match="must be positive"):
            registry.call("STRICT_POSITIVE", [-1], {})

    def test_type_error_wrapped(self) -> None:
        registry = FunctionRegistry()
        registry.register(strict_positive)
        with pytest.raises(FluentResolutionError) as exc_info:
            registry.call("STRICT_POSITIVE", [1, 2], {})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.FUNCTION_FAILED

    def test_other_errors_propagate(self) -> None:
        def broken(value: str) -> str:
            return {}[value]  # type: ignore[no-any-return]

        registry = FunctionRegistry()
        registry.register(broken)
        with pytest.raises(KeyError):
            registry.call("BROKEN", ["k"], {})


def test_repr_shows_frozen_state() -> None:
    registry = FunctionRegistry()
    assert repr(registry) == "FunctionRegistry(functions=0)"
    registry.freeze()
    assert repr(registry) == "FunctionRegistry(functions=0, frozen)"
