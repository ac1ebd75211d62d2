"""Diagnostic system for ftl-datetime errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FieldSetError,
    FluentError,
    FluentResolutionError,
    FormatterConstructionError,
    FormattingError,
    FunctionRegistrationError,
    OptionsMergeError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FieldSetError",
    "FluentError",
    "FluentResolutionError",
    "FormatterConstructionError",
    "FormattingError",
    "FunctionRegistrationError",
    "OptionsMergeError",
]
