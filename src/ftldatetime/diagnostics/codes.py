"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2999: Resolution errors (render-time function and value failures)
        4000-4999: Locale errors (language tags, locale data)
        6000-6999: Registration errors (function table mutations)
    """

    # Resolution errors (2000-2999)
    FUNCTION_NOT_FOUND = 2003
    FUNCTION_FAILED = 2004
    TYPE_MISMATCH = 2006
    INVALID_ARGUMENT = 2007
    ARGUMENT_REQUIRED = 2008
    FORMATTING_FAILED = 2014
    FIELD_SET_INVALID = 2016

    # Locale errors (4000-4999)
    LOCALE_UNKNOWN = 4006
    LOCALE_INVALID = 4011
    LOCALE_DATA_UNSUPPORTED = 4012

    # Registration errors (6000-6999)
    FUNCTION_ALREADY_REGISTERED = 6001
    REGISTRY_FROZEN = 6002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        function_name: Function name where error occurred (format errors)
        argument_name: Argument name that caused error (format errors)
        expected_type: Expected type for argument (format errors)
        received_type: Actual type received (format errors)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    function_name: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INVALID_ARGUMENT]: Invalid argument 'dateStyle' in DATETIME(): ...
              = function: DATETIME
              = argument: dateStyle
              = help: Use one of: full, long, medium, short

        Control characters in interpolated values are escaped so a hostile
        option value cannot forge extra log lines.

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.function_name is not None:
            lines.append(f"  = function: {_escape(self.function_name)}")
        if self.argument_name is not None:
            lines.append(f"  = argument: {_escape(self.argument_name)}")
        if self.expected_type is not None:
            lines.append(f"  = expected: {self.expected_type}")
        if self.received_type is not None:
            lines.append(f"  = received: {self.received_type}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        if self.help_url is not None:
            lines.append(f"  = note: see {self.help_url}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters for single-line display."""
    return "".join(
        ch if ch.isprintable() else ch.encode("unicode_escape").decode("ascii")
        for ch in text
    )
