"""Command group: demo monthly sales listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timegap.commands._base import TgGroup

if TYPE_CHECKING:
    from timegap.commands._context import AppContext

_SALES_EXAMPLES = """\
  timegap sales list --from 2018-03 --to 2020-01
  timegap --json sales list --from 2018-01 --to 2018-12"""


@click.group(cls=TgGroup, examples=_SALES_EXAMPLES)
@click.pass_obj
def sales(app: AppContext) -> None:
    """Query the demo monthly sales records."""


@sales.command(
    "list",
    examples="""\
  timegap sales list --from 2018-03 --to 2020-01""",
)
@click.option("--from", "from_text", default=None, help="First month, inclusive.")
@click.option("--to", "to_text", default=None, help="Last month, inclusive.")
@click.pass_obj
def list_sales(app: AppContext, from_text: str | None, to_text: str | None) -> None:
    """List sales between --from and --to (both required, inclusive)."""
    from timegap.services.sales import SalesService

    app.emit(SalesService(app.settings).list_sales(from_text, to_text))
