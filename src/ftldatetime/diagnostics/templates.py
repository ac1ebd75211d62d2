"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://projectfluent.org/fluent/guide"

    @staticmethod
    def function_not_found(function_name: str) -> Diagnostic:
        """Function not found in registry.

        Args:
            function_name: The function name (e.g., "DATETIME")

        Returns:
            Diagnostic for FUNCTION_NOT_FOUND
        """
        msg = f"Function '{function_name}' not found"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_NOT_FOUND,
            message=msg,
            hint="Register DATETIME with add_datetime_support(). Check spelling.",
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html",
        )

    @staticmethod
    def function_failed(function_name: str, error_msg: str) -> Diagnostic:
        """Function execution failed.

        Args:
            function_name: The function that failed
            error_msg: The error message from the function

        Returns:
            Diagnostic for FUNCTION_FAILED
        """
        msg = f"Function '{function_name}' failed: {error_msg}"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_FAILED,
            message=msg,
            hint="Check the function arguments and their types",
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html",
            function_name=function_name,
        )

    @staticmethod
    def argument_required(function_name: str, argument_name: str) -> Diagnostic:
        """Required positional argument missing.

        Args:
            function_name: Function that was called
            argument_name: Name of the missing argument

        Returns:
            Diagnostic for ARGUMENT_REQUIRED
        """
        msg = f"{function_name}() requires a positional '{argument_name}' argument"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_REQUIRED,
            message=msg,
            hint=f"Call it as {function_name}(${argument_name})",
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html#datetime",
            function_name=function_name,
            argument_name=argument_name,
        )

    @staticmethod
    def type_mismatch(
        function_name: str,
        argument_name: str,
        expected_type: str,
        received_type: str,
    ) -> Diagnostic:
        """Type mismatch in function argument.

        Args:
            function_name: Function where type mismatch occurred
            argument_name: Argument name that has wrong type
            expected_type: Expected type (e.g., "FluentDateTime", "String")
            received_type: Actual type received

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        msg = f"Type mismatch in {function_name}(): expected {expected_type}, got {received_type}"
        hint = f"Convert '{argument_name}' to {expected_type} before passing to {function_name}()"
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=msg,
            hint=hint,
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html#datetime",
            function_name=function_name,
            argument_name=argument_name,
            expected_type=expected_type,
            received_type=received_type,
        )

    @staticmethod
    def invalid_style(
        function_name: str,
        option_name: str,
        value: str,
        allowed: tuple[str, ...],
    ) -> Diagnostic:
        """Style option carried a string outside the recognized spellings.

        Args:
            function_name: Function that received the option
            option_name: FTL option name (dateStyle / timeStyle)
            value: The rejected string
            allowed: Recognized spellings

        Returns:
            Diagnostic for INVALID_ARGUMENT
        """
        msg = f"Invalid argument '{option_name}' in {function_name}(): unknown style '{value}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT,
            message=msg,
            hint=f"Use one of: {', '.join(allowed)}",
            help_url=f"{ErrorTemplate._DOCS_BASE}/functions.html#datetime",
            function_name=function_name,
            argument_name=option_name,
        )

    @staticmethod
    def formatting_failed(function_name: str, value: str, reason: str) -> Diagnostic:
        """Locale-aware formatting failed.

        Args:
            function_name: Name of the formatting surface (e.g., "DATETIME")
            value: String form of the value that could not be formatted
            reason: Underlying failure

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"{function_name} formatting failed for '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            hint="Check the locale and the value being formatted",
            function_name=function_name,
        )

    @staticmethod
    def field_set_invalid(reason: str) -> Diagnostic:
        """Field-set builder rejected its configuration.

        Args:
            reason: Which constraint was violated

        Returns:
            Diagnostic for FIELD_SET_INVALID
        """
        msg = f"Invalid field set: {reason}"
        return Diagnostic(
            code=DiagnosticCode.FIELD_SET_INVALID,
            message=msg,
            hint="This indicates a bug in style compilation; please report it",
        )

    @staticmethod
    def locale_invalid(language: str, reason: str) -> Diagnostic:
        """Language tag is malformed.

        Args:
            language: The rejected tag
            reason: Parser explanation

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Invalid language tag '{language}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            hint="Use a BCP 47 tag such as 'en-US' or 'fr'",
        )

    @staticmethod
    def locale_unknown(language: str) -> Diagnostic:
        """Language tag is well-formed but CLDR has no data for it.

        Args:
            language: The rejected tag

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{language}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Check the tag against the locales shipped with Babel",
        )

    @staticmethod
    def locale_data_unsupported(language: str, reason: str) -> Diagnostic:
        """Locale data cannot express the requested field set.

        Args:
            language: The locale being built
            reason: Which field combination is unsupported

        Returns:
            Diagnostic for LOCALE_DATA_UNSUPPORTED
        """
        msg = f"Locale '{language}' cannot format the requested fields: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_UNSUPPORTED,
            message=msg,
        )

    @staticmethod
    def function_already_registered(function_name: str) -> Diagnostic:
        """Function name already present in the registry.

        Args:
            function_name: The duplicated FTL name

        Returns:
            Diagnostic for FUNCTION_ALREADY_REGISTERED
        """
        msg = f"Function '{function_name}' is already registered"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_ALREADY_REGISTERED,
            message=msg,
            hint="Pass replace=True to override an existing function deliberately",
            function_name=function_name,
        )

    @staticmethod
    def registry_frozen(function_name: str) -> Diagnostic:
        """Write attempted on a frozen registry.

        Args:
            function_name: The FTL name that was being registered

        Returns:
            Diagnostic for REGISTRY_FROZEN
        """
        msg = f"Cannot register '{function_name}': registry is frozen"
        return Diagnostic(
            code=DiagnosticCode.REGISTRY_FROZEN,
            message=msg,
            hint="Use registry.copy() to get a mutable registry",
            function_name=function_name,
        )
