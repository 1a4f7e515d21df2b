"""Command group: UTC <-> civil time conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timegap.commands._base import TgGroup

if TYPE_CHECKING:
    from timegap.commands._context import AppContext

_ZONE_EXAMPLES = """\
  timegap zone to-local 2018-10-28T01:22:23Z
  timegap zone to-local 2018-10-28T01:22:23Z --zone Etc/GMT-1
  timegap zone to-utc "2018-10-28 02:22:23"
  timegap zone list"""


@click.group(cls=TgGroup, examples=_ZONE_EXAMPLES)
@click.pass_obj
def zone(app: AppContext) -> None:
    """Convert between UTC and local civil time."""


@zone.command(
    "to-local",
    examples="""\
  timegap zone to-local 2018-10-28T01:22:23Z
  timegap zone to-local "2018-02-13 02:14:45+00:00" --zone Europe/Oslo""",
)
@click.argument("value")
@click.option("--zone", "zone_name", default=None, help="IANA zone name (default from config).")
@click.pass_obj
def to_local(app: AppContext, value: str, zone_name: str | None) -> None:
    """Convert a UTC VALUE (ISO 8601, with Z or +00:00) to local civil time."""
    from timegap.services.zone import ZoneService

    app.emit(ZoneService(app.settings).to_local(value, zone=zone_name))


@zone.command(
    "to-utc",
    examples="""\
  timegap zone to-utc "2018-10-28 02:22:23"
  timegap zone to-utc "2018-03-25 02:30" --zone Europe/Oslo""",
)
@click.argument("value")
@click.option("--zone", "zone_name", default=None, help="IANA zone name (default from config).")
@click.pass_obj
def to_utc(app: AppContext, value: str, zone_name: str | None) -> None:
    """Interpret VALUE's wall clock in a zone and convert it to UTC."""
    from timegap.services.zone import ZoneService

    app.emit(ZoneService(app.settings).to_utc(value, zone=zone_name))


@zone.command("list", examples="  timegap zone list")
@click.pass_obj
def list_zones(app: AppContext) -> None:
    """List the named zones and the configured default."""
    from timegap.services.zone import ZoneService

    app.emit(ZoneService(app.settings).list_zones())
