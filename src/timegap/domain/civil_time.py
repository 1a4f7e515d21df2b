"""Helpers for converting between UTC and local civil time.

A datetime's *kind* follows from its tzinfo: naive values are
UNSPECIFIED, values in the UTC zone are UTC, any other aware value is
LOCAL. Zones come from the IANA database via ``zoneinfo``.

Local -> UTC conversion is lenient: a wall-clock time inside a DST gap
is shifted forward by the length of the gap, and an ambiguous time
during a DST overlap resolves to the earlier instant (PEP 495 ``fold=0``).
"""

from __future__ import annotations

import functools
from datetime import UTC, date, datetime, timedelta, tzinfo
from enum import StrEnum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timegap.domain.errors import DateTimeKindError, UnknownTimeZoneError
from timegap.domain.year_month import YearMonth


class DateTimeKind(StrEnum):
    """What a datetime's wall-clock numbers are relative to."""

    UTC = "utc"
    LOCAL = "local"
    UNSPECIFIED = "unspecified"


@functools.lru_cache(maxsize=64)
def get_time_zone(name: str) -> tzinfo:
    """Resolve an IANA zone name once and reuse the handle.

    Raises:
        UnknownTimeZoneError: If the database has no such zone.
    """
    if name.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise UnknownTimeZoneError(name) from exc


NORWAY_TIME_ZONE = get_time_zone("Europe/Oslo")
# POSIX sign convention: Etc/GMT-1 is one hour ahead of UTC.
GMT_PLUS_ONE_TIME_ZONE = get_time_zone("Etc/GMT-1")
UTC_TIME_ZONE = UTC

NAMED_TIME_ZONES: dict[str, tzinfo] = {
    "norway": NORWAY_TIME_ZONE,
    "gmt+1": GMT_PLUS_ONE_TIME_ZONE,
    "utc": UTC_TIME_ZONE,
}


def kind_of(value: datetime) -> DateTimeKind:
    if value.tzinfo is None or value.utcoffset() is None:
        return DateTimeKind.UNSPECIFIED
    if value.utcoffset() == timedelta(0) and value.tzname() == "UTC":
        return DateTimeKind.UTC
    return DateTimeKind.LOCAL


def is_utc(value: datetime) -> bool:
    return kind_of(value) is DateTimeKind.UTC


def to_time_zone(utc_time_to_convert: datetime, time_zone_for_output: tzinfo) -> datetime:
    """Convert a UTC datetime to civil time in *time_zone_for_output*.

    The result is naive: it is the wall clock in that zone, with the
    offset dropped.

    Raises:
        DateTimeKindError: If *utc_time_to_convert* is not UTC-kind.
    """
    if not is_utc(utc_time_to_convert):
        raise DateTimeKindError("utc_time_to_convert")

    return utc_time_to_convert.astimezone(time_zone_for_output).replace(tzinfo=None)


def to_norwegian_time(utc_time_to_convert: datetime) -> datetime:
    """Convert a UTC datetime to civil time in Europe/Oslo."""
    return to_time_zone(utc_time_to_convert, NORWAY_TIME_ZONE)


def to_utc(time_to_convert: datetime, time_zone_for_input: tzinfo) -> datetime:
    """Treat the wall clock of *time_to_convert* as civil time in a zone.

    Any tzinfo already on the value is ignored. Returns an aware UTC
    datetime.
    """
    local = time_to_convert.replace(tzinfo=time_zone_for_input, fold=0)
    return local.astimezone(UTC)


def set_utc_kind(time_to_convert: datetime) -> datetime:
    """Relabel a datetime as UTC without shifting its wall clock."""
    if is_utc(time_to_convert):
        return time_to_convert
    return time_to_convert.replace(tzinfo=UTC)


def to_year_month(value: date) -> YearMonth:
    """Year and month of *value*, taken as-is with no zone conversion."""
    return YearMonth(value.year, value.month)
