"""Command group: YearMonth parsing, arithmetic, and comparison."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timegap.commands._base import TgGroup
from timegap.commands._types import YEAR_MONTH

if TYPE_CHECKING:
    from timegap.commands._context import AppContext
    from timegap.domain.year_month import YearMonth

_MONTH_EXAMPLES = """\
  timegap month parse 2018-10
  timegap month parse "05.02.2018" --locale nb-NO
  timegap month add 2018-01 --months 27
  timegap month subtract 2018-01 --years 1 --months 2
  timegap --json month compare 2018-03 2020-01"""


@click.group(cls=TgGroup, examples=_MONTH_EXAMPLES)
@click.pass_obj
def month(app: AppContext) -> None:
    """Parse, shift, and compare year/month values."""


@month.command(
    examples="""\
  timegap month parse 2018-10
  timegap month parse "2009-07-01T00:01:01+01:00"
  timegap month parse "februar 2018" --locale nb-NO
  timegap month parse "2018-10-01 00:30" --assume-local"""
)
@click.argument("text")
@click.option("--locale", default=None, help="Culture name, e.g. nb-NO or en-US.")
@click.option(
    "--assume-local", is_flag=True, help="Treat values without an offset as local time."
)
@click.pass_obj
def parse(app: AppContext, text: str, locale: str | None, assume_local: bool) -> None:
    """Parse any date/time TEXT into a YearMonth (taken in UTC)."""
    from timegap.services.month import MonthService

    app.emit(MonthService(app.settings).parse(text, locale=locale, assume_local=assume_local))


@month.command(
    examples="""\
  timegap month add 2018-01 --months 27
  timegap month add 2018-12 --years 2"""
)
@click.argument("year_month", type=YEAR_MONTH)
@click.option("--years", type=int, default=0, help="Whole years to add.")
@click.option("--months", type=int, default=0, help="Months to add.")
@click.pass_obj
def add(app: AppContext, year_month: YearMonth, years: int, months: int) -> None:
    """Add years, then months, to YEAR_MONTH."""
    from timegap.services.month import MonthService

    app.emit(MonthService(app.settings).shift(year_month, years=years, months=months))


@month.command(
    examples="""\
  timegap month subtract 2018-01 --months 7
  timegap month subtract 2018-01 --years 1"""
)
@click.argument("year_month", type=YEAR_MONTH)
@click.option("--years", type=int, default=0, help="Whole years to subtract.")
@click.option("--months", type=int, default=0, help="Months to subtract.")
@click.pass_obj
def subtract(app: AppContext, year_month: YearMonth, years: int, months: int) -> None:
    """Subtract years, then months, from YEAR_MONTH."""
    from timegap.services.month import MonthService

    app.emit(
        MonthService(app.settings).shift(year_month, years=years, months=months, backwards=True)
    )


@month.command(
    examples="""\
  timegap month compare 2018-03 2020-01
  timegap --json month compare 2019-11 2019-11"""
)
@click.argument("first", type=YEAR_MONTH)
@click.argument("second", type=YEAR_MONTH)
@click.pass_obj
def compare(app: AppContext, first: YearMonth, second: YearMonth) -> None:
    """Report whether FIRST is earlier than, the same as, or later than SECOND."""
    from timegap.services.month import MonthService

    app.emit(MonthService(app.settings).compare(first, second))


@month.command(
    examples="""\
  timegap month now
  timegap -q month now --utc"""
)
@click.option("--utc", is_flag=True, help="Use the UTC date instead of the local date.")
@click.pass_obj
def now(app: AppContext, utc: bool) -> None:
    """Show the current year and month."""
    from timegap.services.month import MonthService

    app.emit(MonthService(app.settings).now(utc=utc))
