"""Click parameter types for timegap values."""

from __future__ import annotations

from typing import Any

import click

from timegap.domain.errors import YearMonthFormatError
from timegap.domain.year_month import YearMonth


class YearMonthParamType(click.ParamType):
    """Bind a command-line value through :meth:`YearMonth.parse`.

    Accepts anything the parser recognises (``2018-10``,
    ``2018-10-15T08:00:00Z``). Blank text binds to the minimum value.
    """

    name = "year_month"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> YearMonth:
        if isinstance(value, YearMonth):
            return value
        try:
            return YearMonth.parse(value)
        except YearMonthFormatError:
            self.fail(f"The value '{value}' is not valid.", param, ctx)


YEAR_MONTH = YearMonthParamType()
