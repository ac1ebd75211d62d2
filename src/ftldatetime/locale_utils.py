"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes language-tag normalization and Babel locale resolution used by
the formatter. Provides canonical locale handling to ensure consistent cache
keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools

from babel import Locale, UnknownLocaleError

from ftldatetime.constants import MAX_LANGUAGE_TAG_LENGTH
from ftldatetime.diagnostics import ErrorTemplate, FormatterConstructionError

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "resolve_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    This function performs the necessary conversion for Babel API compatibility.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. lru_cache never
    stores a raised exception, so a failed lookup is retried on the next call.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("fr-FR")
        >>> locale.language
        'fr'
        >>> locale.territory
        'FR'
    """
    return Locale.parse(normalize_locale(locale_code))


def resolve_locale(language: str) -> Locale:
    """Resolve an untrusted language tag to a Babel Locale.

    Args:
        language: BCP-47 language tag

    Returns:
        Babel Locale object

    Raises:
        FormatterConstructionError: If the tag is empty, too long, malformed,
            or names a locale without CLDR data
    """
    if not isinstance(language, str) or not language:
        raise FormatterConstructionError(
            ErrorTemplate.locale_invalid(str(language), "empty or non-string tag"),
            language=str(language),
        )
    if len(language) > MAX_LANGUAGE_TAG_LENGTH:
        reason = f"longer than {MAX_LANGUAGE_TAG_LENGTH} characters"
        raise FormatterConstructionError(
            ErrorTemplate.locale_invalid(language[:MAX_LANGUAGE_TAG_LENGTH], reason),
            language=language,
        )
    try:
        return get_babel_locale(language)
    except UnknownLocaleError as e:
        raise FormatterConstructionError(
            ErrorTemplate.locale_unknown(language), language=language
        ) from e
    except (ValueError, TypeError) as e:
        raise FormatterConstructionError(
            ErrorTemplate.locale_invalid(language, str(e)), language=language
        ) from e
