"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from timegap.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from timegap.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: the YearMonth or converted value alone, if any."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    for key in ("year_month", "local", "utc"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="tg.ok"), Text(f"  {result.op}", style="tg.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="tg.key")
    if key in ("year_month", "from", "to", "first", "second"):
        v = Text(str(value), style="tg.month")
    elif key == "zone":
        v = Text(str(value), style="tg.zone")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_span(console: Console, span_data: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    line = f"{prefix}{duration:>8.2f}ms  {span_data.get('name', '?')}"
    annotations = span_data.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(Text(line, style="dim"))
    for child in span_data.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="tg.error"), Text(f"  {result.op}", style="tg.op"), "—", msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_sales(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_sales as a table in stored order."""
    d = result.data
    console.print(
        Text("Sales ", style="tg.value"),
        Text(str(d.get("from", "")), style="tg.month"),
        "..",
        Text(str(d.get("to", "")), style="tg.month"),
    )

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Month", style="tg.month", no_wrap=True)
    table.add_column("Value", style="tg.value", justify="right")
    for item in d.get("items", []):
        table.add_row(f"{item['year']:04d}-{item['month']:02d}", str(item["value"]))
    console.print(table)
    console.print(f"\n{d.get('count', 0)} sales")
    if verbose:
        _render_meta(console, result)


def _render_zones(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Alias")
    table.add_column("Zone", style="tg.zone")
    for item in result.data.get("items", []):
        table.add_row(str(item["alias"]), str(item["zone"]))
    console.print(table)
    console.print(f"\ndefault: {result.data.get('default', '')}")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "list_sales": _render_sales,
    "list_zones": _render_zones,
}
