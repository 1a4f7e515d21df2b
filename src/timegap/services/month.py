"""MonthService — YearMonth parsing, arithmetic, and comparison."""

from __future__ import annotations

from timegap.domain.errors import TimeGapError
from timegap.domain.parsing import ParseStyle, resolve_format_info
from timegap.domain.year_month import YearMonth
from timegap.services.base import BaseService
from timegap.services.result import ServiceResult
from timegap.services.telemetry import trace_span, traced

_RELATIONS = {-1: "earlier", 0: "same", 1: "later"}


def _describe(year_month: YearMonth) -> dict[str, object]:
    return {"year_month": str(year_month), "year": year_month.year, "month": year_month.month}


class MonthService(BaseService):
    """Operations on YearMonth values for the ``month`` command group."""

    @traced
    def parse(
        self, text: str | None, *, locale: str | None = None, assume_local: bool = False
    ) -> ServiceResult:
        """Parse *text* into a YearMonth.

        Without a locale (argument or ``[parsing] locale``) and with the
        default universal style, this goes through the single-argument
        form of :meth:`YearMonth.parse`, so blank text yields the minimum.
        """
        op = "parse_month"
        provider = locale or self._settings.parsing.locale
        styles = ParseStyle.ASSUME_LOCAL if assume_local else self.default_styles

        try:
            with trace_span("parse") as span:
                if provider is None and styles == ParseStyle.ASSUME_UNIVERSAL:
                    result = YearMonth.parse(text)
                else:
                    result = YearMonth.parse(text, provider, styles)
                if span:
                    span.annotate("styles", styles.name)
        except TimeGapError as exc:
            return self._domain_failure(op, exc)

        data: dict[str, object] = {"input": text, **_describe(result)}
        warnings: list[str] = []
        if provider is not None:
            resolved = resolve_format_info(provider).name
            data["locale"] = resolved or "invariant"
            if not resolved:
                warnings.append(
                    f"Unknown locale '{provider}'; parsed with the invariant culture."
                )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def shift(
        self,
        year_month: YearMonth,
        *,
        years: int = 0,
        months: int = 0,
        backwards: bool = False,
    ) -> ServiceResult:
        """Move *year_month* by whole years, then months."""
        op = "shift_month_back" if backwards else "shift_month"
        try:
            if backwards:
                result = year_month.subtract_years(years).subtract_months(months)
            else:
                result = year_month.add_years(years).add_months(months)
        except TimeGapError as exc:
            return self._domain_failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={"from": str(year_month), "years": years, "months": months, **_describe(result)},
        )

    @traced
    def compare(self, first: YearMonth, second: YearMonth) -> ServiceResult:
        """Three-way comparison of two YearMonths."""
        outcome = first.compare_to(second)
        return ServiceResult(
            ok=True,
            op="compare_months",
            data={
                "first": str(first),
                "second": str(second),
                "result": outcome,
                "relation": _RELATIONS[outcome],
            },
        )

    @traced
    def now(self, *, utc: bool = False) -> ServiceResult:
        """Current month, from the local date or from UTC."""
        current = YearMonth.utc_now() if utc else YearMonth.now()
        return ServiceResult(
            ok=True,
            op="current_month",
            data={"clock": "utc" if utc else "local", **_describe(current)},
        )
