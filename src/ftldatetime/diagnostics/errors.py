"""Exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FieldSetError",
    "FluentError",
    "FluentResolutionError",
    "FormatterConstructionError",
    "FormattingError",
    "FunctionRegistrationError",
    "OptionsMergeError",
]


class FluentError(Exception):
    """Base exception for all ftl-datetime errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FluentError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class FluentResolutionError(FluentError):
    """Runtime error while rendering a value or calling a function.

    Examples:
    - Unknown function name
    - Wrong value type passed to DATETIME()
    - Function raised on its arguments

    Fallback: the render boundary substitutes a readable placeholder.
    """


class FormattingError(FluentResolutionError):
    """Raised when locale-aware formatting fails.

    The error carries a fallback_value that should be used in the output
    when the formatting fails, so the surrounding text is still rendered.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class OptionsMergeError(FluentResolutionError):
    """A recognized DATETIME() option carried an unusable value.

    Raised for a non-string value, or a string outside
    full/long/medium/short. The merge is all-or-nothing: the options object
    it was raised from is left untouched.

    Attributes:
        option_name: FTL option name (dateStyle or timeStyle)
        option_value: The rejected value, as received
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        option_name: str,
        option_value: object,
    ) -> None:
        """Initialize OptionsMergeError.

        Args:
            message: Error message string OR Diagnostic object
            option_name: FTL option name that was rejected
            option_value: The rejected value
        """
        super().__init__(message)
        self.option_name = option_name
        self.option_value = option_value


class FormatterConstructionError(FluentError):
    """A formatter could not be built for a language and field set.

    Typical causes are malformed or unknown language tags from untrusted
    input. Never cached: a later call with a corrected tag builds normally.

    Attributes:
        language: The language tag that was requested
    """

    def __init__(self, message: str | Diagnostic, *, language: str) -> None:
        """Initialize FormatterConstructionError.

        Args:
            message: Error message string OR Diagnostic object
            language: The language tag that was requested
        """
        super().__init__(message)
        self.language = language


class FieldSetError(FluentError):
    """A field-set builder was asked for an impossible combination.

    StyleBag.as_fieldset() never produces one, so seeing this error means a
    bug in the compiler, not bad input.
    """


class FunctionRegistrationError(FluentError):
    """A function could not be added to a function registry.

    Raised for duplicate names and for writes to a frozen registry.
    """
