"""BaseService — shared foundation for timegap services.

Every service receives the frozen :class:`TimeGapSettings` at
construction time and reads its parsing and zone defaults from it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from timegap.domain.errors import (
    DateTimeKindError,
    InvalidYearMonthError,
    NegativeArgumentError,
    TimeGapError,
    UnknownTimeZoneError,
    YearMonthFormatError,
)
from timegap.domain.parsing import ParseStyle
from timegap.services.result import ServiceResult

if TYPE_CHECKING:
    from timegap.config.settings import TimeGapSettings

logger = logging.getLogger(__name__)

_ERROR_CODES: dict[type[Exception], str] = {
    InvalidYearMonthError: "INVALID_YEAR_MONTH",
    NegativeArgumentError: "NEGATIVE_ARGUMENT",
    YearMonthFormatError: "FORMAT_ERROR",
    DateTimeKindError: "DATETIME_KIND",
    UnknownTimeZoneError: "UNKNOWN_TIME_ZONE",
}


class BaseService:
    """Base for service-layer classes.

    Usage::

        class MonthService(BaseService):
            def parse(self, text: str) -> ServiceResult:
                try:
                    ...
                except TimeGapError as exc:
                    return self._domain_failure("parse_month", exc)
    """

    def __init__(self, settings: TimeGapSettings) -> None:
        self._settings = settings

    @property
    def default_styles(self) -> ParseStyle:
        if self._settings.parsing.assume_universal:
            return ParseStyle.ASSUME_UNIVERSAL
        return ParseStyle.ASSUME_LOCAL

    def _domain_failure(
        self, op: str, exc: TimeGapError | UnknownTimeZoneError
    ) -> ServiceResult:
        """Convert a domain error into a failed ServiceResult."""
        code = _ERROR_CODES.get(type(exc), "DOMAIN_ERROR")
        logger.debug("%s failed: %s", op, code)
        return ServiceResult.failure(op, code, str(exc), **_error_detail(exc))


def _error_detail(exc: Exception) -> dict[str, object]:
    if isinstance(exc, InvalidYearMonthError):
        return {"year": exc.year, "month": exc.month}
    if isinstance(exc, NegativeArgumentError):
        return {"param": exc.param_name, "value": exc.value}
    if isinstance(exc, YearMonthFormatError):
        return {"text": exc.text}
    if isinstance(exc, DateTimeKindError):
        return {"param": exc.param_name, "expected": exc.expected}
    if isinstance(exc, UnknownTimeZoneError):
        return {"zone": exc.name}
    return {}
