"""Attach a time zone to a naive local date-time.

Zone-displaying formatters need an instant, not a wall-clock reading. This
module turns a NaiveDateTime into an aware datetime in the process's local
zone, using the "compatible" policy for readings the zone's rules do not map
to exactly one instant:
    - gap (spring-forward): shift forward by the gap length
    - ambiguous (fall-back): the earlier of the two instants

Python's datetime cannot hold second 60, so leap seconds are clamped to the
last representable instant of the minute before conversion.

The system zone is looked up through tzlocal once per process, on first use.

Python 3.13+. Depends on: tzlocal (system zone lookup).
"""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime, tzinfo

import tzlocal

from .value_types import NaiveDateTime

__all__ = [
    "attach_timezone",
    "clamp_leap_second",
    "get_system_timezone",
    "resolve_local",
]

logger = logging.getLogger(__name__)

_system_timezone: tzinfo | None = None
_system_timezone_lock = threading.Lock()


def get_system_timezone() -> tzinfo:
    """Return the process's local zone, resolving it on first call.

    Honours the TZ environment variable through tzlocal. When no zone can be
    determined the result is UTC. The answer is kept for the lifetime of the
    process; later TZ changes are not observed.

    Thread-safe: concurrent first calls resolve the zone exactly once.
    """
    global _system_timezone  # noqa: PLW0603 - process-wide lazy singleton
    zone = _system_timezone
    if zone is not None:
        return zone
    with _system_timezone_lock:
        if _system_timezone is None:
            try:
                _system_timezone = tzlocal.get_localzone()
            except (LookupError, ValueError) as e:
                logger.warning("Could not determine system timezone (%s); using UTC", e)
                _system_timezone = UTC
            else:
                logger.info("Resolved system timezone: %s", _system_timezone)
        return _system_timezone


def clamp_leap_second(value: NaiveDateTime) -> NaiveDateTime:
    """Map second 60 to 59.999999999 of the same minute; other values pass."""
    if value.is_leap_second:
        logger.debug("Clamping leap second %s", value.isoformat())
    return value.clamp_leap_second()


def resolve_local(naive: datetime, zone: tzinfo) -> datetime:
    """Interpret a naive wall-clock reading in zone.

    Args:
        naive: Wall-clock reading without tzinfo
        zone: Zone whose rules apply

    Returns:
        Aware datetime in zone. Readings inside a gap move forward by the gap
        length; ambiguous readings resolve to the earlier instant.

    Raises:
        ValueError: If naive already carries a tzinfo
    """
    if naive.tzinfo is not None:
        msg = f"naive datetime required, got tzinfo={naive.tzinfo!r}"
        raise ValueError(msg)

    # fold=0 selects the pre-transition offset for both gaps and overlaps.
    # Round-tripping through UTC normalizes a gap reading to its real
    # post-transition wall time.
    candidate = naive.replace(tzinfo=zone, fold=0)
    resolved = candidate.astimezone(UTC).astimezone(zone)

    if resolved.replace(tzinfo=None) != naive:
        logger.debug("%s falls in a gap in %s; shifted to %s", naive, zone, resolved)
    elif naive.replace(tzinfo=zone, fold=1).utcoffset() != candidate.utcoffset():
        logger.debug("%s is ambiguous in %s; using earlier instant", naive, zone)
    return resolved


def attach_timezone(value: NaiveDateTime, zone: tzinfo | None = None) -> datetime:
    """Clamp, convert and localize value.

    Args:
        value: Naive date-time, possibly a leap second
        zone: Zone to use; defaults to the system zone

    Returns:
        Aware datetime suitable for zone-displaying formatters
    """
    naive = clamp_leap_second(value).to_datetime()
    return resolve_local(naive, zone if zone is not None else get_system_timezone())
