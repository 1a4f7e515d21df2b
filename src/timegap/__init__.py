"""timegap — year/month calendar values and civil-time conversion helpers."""

from __future__ import annotations

from timegap.domain.year_month import YearMonth

__version__ = "0.1.0"

__all__ = ["YearMonth", "__version__"]
