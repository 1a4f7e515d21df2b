"""Error kinds raised by the domain layer.

Every error is a ``ValueError`` so generic callers (pydantic validators,
click param types) can treat them as bad input, while services can still
tell them apart by class.
"""

from __future__ import annotations


class TimeGapError(ValueError):
    """Base class for all domain errors."""


class InvalidYearMonthError(TimeGapError):
    """The (year, month) pair does not form a valid YearMonth."""

    def __init__(self, year: int, month: int) -> None:
        self.year = year
        self.month = month
        super().__init__(
            f"The combination of year '{year}' and month '{month}' "
            "does not represent a valid YearMonth."
        )


class NegativeArgumentError(TimeGapError):
    """An arithmetic step count was negative."""

    def __init__(self, param_name: str, value: int) -> None:
        self.param_name = param_name
        self.value = value
        super().__init__(
            f"The value specified cannot be a negative number. "
            f"(Parameter '{param_name}', actual value {value})"
        )


class YearMonthFormatError(TimeGapError):
    """Text could not be interpreted as any recognised date/time."""

    def __init__(self, text: str | None) -> None:
        self.text = text
        super().__init__(f"Cannot parse value '{text}' to a valid YearMonth.")


class DateTimeKindError(TimeGapError):
    """A datetime had the wrong kind (e.g. naive where UTC was required)."""

    def __init__(self, param_name: str, expected: str = "UTC") -> None:
        self.param_name = param_name
        self.expected = expected
        super().__init__(f"Expected a {expected}-kind value. (Parameter '{param_name}')")


class UnknownTimeZoneError(KeyError):
    """The time zone database has no zone with the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown time zone: {self.name!r}"
