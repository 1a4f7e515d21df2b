"""YearMonth — a calendar date without the day number.

INVARIANT: every live instance satisfies ``year >= 1`` and
``1 <= month <= 12``. The documented maximum year (9999) is exposed via
:meth:`YearMonth.max_value` but is not enforced at construction.

All relational operators derive from the single three-way comparator
:func:`compare`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic_core import core_schema

from timegap.domain.errors import (
    InvalidYearMonthError,
    NegativeArgumentError,
    YearMonthFormatError,
)
from timegap.domain.parsing import (
    DateFormatInfo,
    DateTimeParser,
    ParseStyle,
    current_format_info,
    parse_datetime_offset,
    resolve_format_info,
)

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

MONTHS_IN_YEAR = 12
MINIMUM_YEAR = 1
MINIMUM_MONTH = 1
MAXIMUM_YEAR = 9999


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class YearMonth:
    """An immutable (year, month) pair.

    Attributes:
        year: Calendar year, 1 or later.
        month: Calendar month, 1-12.
    """

    year: int
    month: int

    MIN_VALUE: ClassVar[YearMonth]
    MAX_VALUE: ClassVar[YearMonth]

    def __post_init__(self) -> None:
        if self.year < MINIMUM_YEAR or self.month < MINIMUM_MONTH or self.month > MONTHS_IN_YEAR:
            raise InvalidYearMonthError(self.year, self.month)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add_years(self, years: int) -> YearMonth:
        """Return a YearMonth *years* later. Month is unchanged."""
        _require_not_negative(years, "years")
        return YearMonth(self.year + years, self.month)

    def subtract_years(self, years: int) -> YearMonth:
        """Return a YearMonth *years* earlier. Month is unchanged."""
        _require_not_negative(years, "years")
        return YearMonth(self.year - years, self.month)

    def add_months(self, months: int) -> YearMonth:
        """Return a YearMonth *months* later, carrying into the year as needed."""
        _require_not_negative(months, "months")

        new_year = self.year
        months_to_add = months
        if months_to_add >= MONTHS_IN_YEAR:
            new_year += months_to_add // MONTHS_IN_YEAR
            months_to_add %= MONTHS_IN_YEAR

        if self.month + months_to_add > MONTHS_IN_YEAR:
            new_year += 1
            new_month = self.month + months_to_add - MONTHS_IN_YEAR
        else:
            new_month = self.month + months_to_add

        return YearMonth(new_year, new_month)

    def subtract_months(self, months: int) -> YearMonth:
        """Return a YearMonth *months* earlier, borrowing from the year as needed."""
        _require_not_negative(months, "months")

        new_year = self.year
        months_to_subtract = months
        if months_to_subtract >= MONTHS_IN_YEAR:
            new_year -= months_to_subtract // MONTHS_IN_YEAR
            months_to_subtract %= MONTHS_IN_YEAR

        if self.month - months_to_subtract <= 0:
            new_year -= 1
            new_month = MONTHS_IN_YEAR + self.month - months_to_subtract
        else:
            new_month = self.month - months_to_subtract

        return YearMonth(new_year, new_month)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare_to(self, other: YearMonth) -> int:
        """Three-way compare: -1 earlier, 0 same, 1 later than *other*."""
        return compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return compare(self, other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return compare(self, other) != 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return compare(self, other) >= 0

    def __hash__(self) -> int:
        return hash((self.year, self.month))

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def __repr__(self) -> str:
        return f"YearMonth(year={self.year}, month={self.month})"

    @classmethod
    def parse(
        cls,
        text: str | None,
        provider: DateFormatInfo | str | None = None,
        styles: ParseStyle | None = None,
        *,
        parser: DateTimeParser | None = None,
    ) -> YearMonth:
        """Parse any recognised date/time text into a YearMonth.

        The parsed value is converted to UTC before the year and month
        are taken, so ``"2009-07-01T00:01:01+01:00"`` yields 2009-06.

        Args:
            text: Input text.
            provider: A :class:`DateFormatInfo` or culture name such as
                ``"nb-NO"``. Omitted: the current locale is used, and
                ``None``/blank text returns :meth:`min_value`.
            styles: Offset handling. Defaults to ``ASSUME_UNIVERSAL``.
            parser: Replacement parsing capability.

        Raises:
            YearMonthFormatError: If *text* cannot be parsed.
        """
        if provider is None and styles is None:
            if text is None or not text.strip():
                return cls.min_value()
            info = current_format_info()
        else:
            info = resolve_format_info(provider)

        if text is None:
            raise YearMonthFormatError(text)

        parse_fn = parser or parse_datetime_offset
        parsed = parse_fn(text, info, ParseStyle.ASSUME_UNIVERSAL if styles is None else styles)
        if parsed is None:
            raise YearMonthFormatError(text)

        try:
            utc_value = parsed.astimezone(UTC)
        except (ValueError, OverflowError) as exc:
            raise YearMonthFormatError(text) from exc
        return cls(utc_value.year, utc_value.month)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_datetime(cls, value: date) -> YearMonth:
        """Take the year and month of *value* as-is (no zone conversion)."""
        return cls(value.year, value.month)

    @classmethod
    def min_value(cls) -> YearMonth:
        return cls(MINIMUM_YEAR, MINIMUM_MONTH)

    @classmethod
    def max_value(cls) -> YearMonth:
        return cls(MAXIMUM_YEAR, MONTHS_IN_YEAR)

    @classmethod
    def now(cls) -> YearMonth:
        """Current year and month of the system local date."""
        return cls.from_datetime(date.today())

    @classmethod
    def utc_now(cls) -> YearMonth:
        """Current year and month in UTC."""
        return cls.from_datetime(datetime.now(UTC))

    # ------------------------------------------------------------------
    # pydantic integration
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from a YearMonth or text; serialise as ``YYYY-MM``."""
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _coerce(cls, value: Any) -> YearMonth:
        if isinstance(value, YearMonth):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        msg = f"Expected YearMonth or str, got {type(value).__name__}"
        raise ValueError(msg)


YearMonth.MIN_VALUE = YearMonth.min_value()
YearMonth.MAX_VALUE = YearMonth.max_value()


def compare(first: YearMonth, second: YearMonth) -> int:
    """Order by year, then month. Returns -1, 0, or 1."""
    if first.year > second.year:
        return 1
    if first.year < second.year:
        return -1
    if first.month > second.month:
        return 1
    if first.month < second.month:
        return -1
    return 0


def _require_not_negative(value: int, param_name: str) -> None:
    if value < 0:
        raise NegativeArgumentError(param_name, value)
