"""SalesService — demo listing of monthly sales filtered by a YearMonth range.

Raw ``from``/``to`` text is bound into :class:`SalesQuery` the way a web
framework binds query-string parameters. Binding failures become an
``INVALID_INPUT`` error naming the missing field or the rejected value.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from timegap.domain.year_month import YearMonth
from timegap.services.base import BaseService
from timegap.services.result import ServiceResult
from timegap.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from timegap.config.settings import TimeGapSettings


class MonthlySale(BaseModel):
    """One month's sales figure."""

    model_config = {"frozen": True}

    year: int
    month: int
    value: int

    @property
    def year_month(self) -> YearMonth:
        return YearMonth(self.year, self.month)


class SalesQuery(BaseModel):
    """Inclusive [from, to] range, both ends required."""

    from_year_month: YearMonth
    to_year_month: YearMonth


SAMPLE_SALES: tuple[MonthlySale, ...] = (
    MonthlySale(year=2018, month=1, value=100),
    MonthlySale(year=2018, month=5, value=200),
    MonthlySale(year=2018, month=12, value=300),
    MonthlySale(year=2019, month=2, value=400),
    MonthlySale(year=2019, month=11, value=500),
    MonthlySale(year=2020, month=10, value=600),
)


def binding_messages(exc: ValidationError) -> list[str]:
    """Turn pydantic errors into one client-facing message per field."""
    messages: list[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        if error["type"] == "missing":
            messages.append(f"The {field} field is required.")
        else:
            messages.append(f"The value '{error['input']}' is not valid.")
    return messages


class SalesService(BaseService):
    """Lists :class:`MonthlySale` records in stored order."""

    def __init__(
        self, settings: TimeGapSettings, sales: Sequence[MonthlySale] = SAMPLE_SALES
    ) -> None:
        super().__init__(settings)
        self._sales = tuple(sales)

    @traced
    def list_sales(self, from_text: str | None, to_text: str | None) -> ServiceResult:
        """Records whose YearMonth falls within [from, to], inclusive."""
        op = "list_sales"
        params: dict[str, Any] = {}
        if from_text is not None:
            params["from_year_month"] = from_text
        if to_text is not None:
            params["to_year_month"] = to_text

        try:
            query = SalesQuery.model_validate(params)
        except ValidationError as exc:
            messages = binding_messages(exc)
            return ServiceResult.failure(op, "INVALID_INPUT", " ".join(messages), errors=messages)

        with trace_span("filter") as span:
            # Cheap year prefilter, then the exact month comparison.
            candidates = [
                sale
                for sale in self._sales
                if query.from_year_month.year <= sale.year <= query.to_year_month.year
            ]
            matching = [
                sale
                for sale in candidates
                if query.from_year_month <= sale.year_month <= query.to_year_month
            ]
            if span:
                span.annotate("candidates", len(candidates))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "from": str(query.from_year_month),
                "to": str(query.to_year_month),
                "items": [sale.model_dump() for sale in matching],
                "count": len(matching),
            },
        )
