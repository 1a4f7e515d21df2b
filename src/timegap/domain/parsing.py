"""Date/time parsing capability used by :meth:`YearMonth.parse`.

The parser is injectable: anything matching :class:`DateTimeParser` can
stand in for the default, which is backed by ``dateutil.parser``.
Locale conventions (field order, month names) travel in a
:class:`DateFormatInfo`, looked up by culture name with a
region -> language -> invariant fallback.
"""

from __future__ import annotations

import functools
import locale
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import IntFlag
from typing import Protocol

from dateutil import parser as dateparser


class ParseStyle(IntFlag):
    """How to treat parsed values that carry no UTC offset."""

    NONE = 0
    ASSUME_LOCAL = 1
    ASSUME_UNIVERSAL = 2


@dataclass(frozen=True)
class DateFormatInfo:
    """Locale conventions the parser needs.

    ``month_names`` holds one tuple of accepted spellings per month
    (January first). English spellings are always accepted as well.
    """

    name: str
    dayfirst: bool = False
    yearfirst: bool = False
    month_names: tuple[tuple[str, ...], ...] | None = None


class DateTimeParser(Protocol):
    """Parse *text* into an offset-aware datetime, or return None."""

    def __call__(
        self, text: str, info: DateFormatInfo, styles: ParseStyle
    ) -> datetime | None: ...


_NORWEGIAN_MONTHS: tuple[tuple[str, ...], ...] = (
    ("jan", "januar"),
    ("feb", "februar"),
    ("mar", "mars"),
    ("apr", "april"),
    ("mai",),
    ("jun", "juni"),
    ("jul", "juli"),
    ("aug", "august"),
    ("sep", "sept", "september"),
    ("okt", "oktober"),
    ("nov", "november"),
    ("des", "desember"),
)

INVARIANT_FORMAT_INFO = DateFormatInfo(name="")

_FORMAT_INFOS: dict[str, DateFormatInfo] = {
    info.name.lower(): info
    for info in (
        DateFormatInfo(name="en"),
        DateFormatInfo(name="en-US"),
        DateFormatInfo(name="en-GB", dayfirst=True),
        DateFormatInfo(name="nb", dayfirst=True, month_names=_NORWEGIAN_MONTHS),
        DateFormatInfo(name="nb-NO", dayfirst=True, month_names=_NORWEGIAN_MONTHS),
        DateFormatInfo(name="nn-NO", dayfirst=True, month_names=_NORWEGIAN_MONTHS),
        DateFormatInfo(name="no", dayfirst=True, month_names=_NORWEGIAN_MONTHS),
        DateFormatInfo(name="de", dayfirst=True),
        DateFormatInfo(name="de-DE", dayfirst=True),
        DateFormatInfo(name="fr-FR", dayfirst=True),
        DateFormatInfo(name="sv-SE", yearfirst=True),
        DateFormatInfo(name="ja-JP", yearfirst=True),
    )
}


def _normalize_locale_name(name: str) -> str:
    """``nb_NO.UTF-8`` -> ``nb-no``."""
    return name.split(".", 1)[0].split("@", 1)[0].replace("_", "-").strip().lower()


def get_format_info(name: str | None) -> DateFormatInfo:
    """Look up format info for a culture name.

    Falls back from the full name to its language part, then to
    :data:`INVARIANT_FORMAT_INFO`.
    """
    if not name:
        return INVARIANT_FORMAT_INFO
    key = _normalize_locale_name(name)
    if key in _FORMAT_INFOS:
        return _FORMAT_INFOS[key]
    language = key.split("-", 1)[0]
    return _FORMAT_INFOS.get(language, INVARIANT_FORMAT_INFO)


def current_format_info() -> DateFormatInfo:
    """Format info for the process's ``LC_TIME`` locale."""
    try:
        name, _encoding = locale.getlocale(locale.LC_TIME)
    except ValueError:
        return INVARIANT_FORMAT_INFO
    return get_format_info(name)


def resolve_format_info(provider: DateFormatInfo | str | None) -> DateFormatInfo:
    """Accept either a ready DateFormatInfo or a culture name."""
    if isinstance(provider, DateFormatInfo):
        return provider
    if provider is None:
        return current_format_info()
    return get_format_info(provider)


@functools.lru_cache(maxsize=32)
def _parserinfo_for(info: DateFormatInfo) -> dateparser.parserinfo:
    if info.month_names is None:
        return dateparser.parserinfo(dayfirst=info.dayfirst, yearfirst=info.yearfirst)

    english = dateparser.parserinfo.MONTHS
    months = [
        tuple(dict.fromkeys((*local, *english[index])))
        for index, local in enumerate(info.month_names)
    ]
    cls = type("LocalizedParserInfo", (dateparser.parserinfo,), {"MONTHS": months})
    return cls(dayfirst=info.dayfirst, yearfirst=info.yearfirst)


def _check_styles(styles: ParseStyle) -> None:
    if ParseStyle.ASSUME_LOCAL in styles and ParseStyle.ASSUME_UNIVERSAL in styles:
        msg = "ASSUME_LOCAL and ASSUME_UNIVERSAL cannot be combined"
        raise ValueError(msg)


def parse_datetime_offset(
    text: str, info: DateFormatInfo, styles: ParseStyle
) -> datetime | None:
    """Default :class:`DateTimeParser` backed by ``dateutil``.

    Missing date parts default to the first day of the current month.
    Offset-less results are tagged UTC under ``ASSUME_UNIVERSAL`` and
    system-local otherwise.
    """
    _check_styles(styles)
    default = datetime.now().replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    try:
        parsed = dateparser.parse(text, parserinfo=_parserinfo_for(info), default=default)
    except (ValueError, OverflowError):
        return None

    if parsed.tzinfo is not None:
        return parsed
    if ParseStyle.ASSUME_UNIVERSAL in styles:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone()
    except (ValueError, OverflowError):
        return None
