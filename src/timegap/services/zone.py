"""ZoneService — UTC <-> civil time conversion for named zones."""

from __future__ import annotations

from datetime import datetime

from timegap.domain.civil_time import (
    NAMED_TIME_ZONES,
    get_time_zone,
    kind_of,
    to_time_zone,
    to_utc,
)
from timegap.domain.errors import TimeGapError, UnknownTimeZoneError
from timegap.services.base import BaseService
from timegap.services.result import ServiceResult
from timegap.services.telemetry import get_current_span, traced


class ZoneService(BaseService):
    """Conversions for the ``zone`` command group.

    Input datetimes are ISO 8601 text. A trailing ``Z`` or ``+00:00``
    marks the value as UTC; no offset leaves it unspecified.
    """

    def _zone_name(self, zone: str | None) -> str:
        return zone or self._settings.zones.default

    @traced
    def to_local(self, value: str, *, zone: str | None = None) -> ServiceResult:
        """Convert a UTC datetime to civil time in *zone*."""
        op = "to_local"
        zone_name = self._zone_name(zone)
        parsed = _parse_iso(value)
        if parsed is None:
            return _invalid_datetime(op, value)

        span = get_current_span()
        if span:
            span.annotate("zone", zone_name)

        try:
            local = to_time_zone(parsed, get_time_zone(zone_name))
        except (TimeGapError, UnknownTimeZoneError) as exc:
            return self._domain_failure(op, exc)
        except OverflowError:
            return _out_of_range(op, value, zone_name)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": value,
                "kind": kind_of(parsed).value,
                "zone": zone_name,
                "local": local.isoformat(sep=" "),
            },
        )

    @traced
    def to_utc(self, value: str, *, zone: str | None = None) -> ServiceResult:
        """Interpret *value*'s wall clock in *zone* and convert it to UTC."""
        op = "to_utc"
        zone_name = self._zone_name(zone)
        parsed = _parse_iso(value)
        if parsed is None:
            return _invalid_datetime(op, value)

        span = get_current_span()
        if span:
            span.annotate("zone", zone_name)

        try:
            utc_value = to_utc(parsed, get_time_zone(zone_name))
        except UnknownTimeZoneError as exc:
            return self._domain_failure(op, exc)
        except OverflowError:
            return _out_of_range(op, value, zone_name)

        return ServiceResult(
            ok=True,
            op=op,
            data={"input": value, "zone": zone_name, "utc": utc_value.isoformat(sep=" ")},
        )

    @traced
    def list_zones(self) -> ServiceResult:
        """The named zone handles plus the configured default."""
        items = [{"alias": alias, "zone": str(tz)} for alias, tz in NAMED_TIME_ZONES.items()]
        return ServiceResult(
            ok=True,
            op="list_zones",
            data={"items": items, "default": self._settings.zones.default},
        )


def _parse_iso(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def _invalid_datetime(op: str, value: str) -> ServiceResult:
    return ServiceResult.failure(
        op,
        "INVALID_DATETIME",
        f"Cannot parse value '{value}' as an ISO 8601 datetime.",
        text=value,
    )


def _out_of_range(op: str, value: str, zone_name: str) -> ServiceResult:
    return ServiceResult.failure(
        op,
        "INVALID_DATETIME",
        f"Converting '{value}' with zone '{zone_name}' falls outside the supported "
        "date range.",
        text=value,
        zone=zone_name,
    )

