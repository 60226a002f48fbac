"""Scalar extraction, timestamp composition and formatting helpers.

None of the extractors raise: text that cannot be coerced to the requested
type is replaced by the caller's default (or ``None`` for URLs), so one bad
field never prevents a record from being built.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from decimal import Decimal, InvalidOperation
from typing import Final, TypeVar

from yarl import URL

from .timezones import DEFAULT_TIME_ZONE, resolve_time_zone
from .xml import Node, select_single, value_of

_T = TypeVar("_T")

_URL_SCHEMES: Final = frozenset({"http", "https", "ftp"})

_INT_PATTERN: Final = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN: Final = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

_INT_MIN: Final = -(2**31)
_INT_MAX: Final = 2**31 - 1


def get_string(node: Node | None, path: str) -> str:
    """Extract the string value located by ``path``."""
    return value_of(node, path)


def fix_degrees(text: str) -> str:
    """Replace the ``&deg;`` HTML entity with the unicode degree sign."""
    return text.replace("&deg;", "°")


def get_units(node: Node | None, path: str) -> str:
    """Extract a units label normalized for display.

    Degrees are fixed and a bare ``km`` distance unit becomes ``km/h``.
    """
    units = fix_degrees(value_of(node, path))
    if units == "km":
        units = "km/h"
    return units


def get_int(node: Node | None, path: str, default: _T) -> int | _T:
    """Extract a 32-bit integer, or ``default`` if the value is not one.

    Only plain ASCII digits with an optional sign are accepted; surrounding
    whitespace, digit separators and out-of-range values yield ``default``.
    """
    text = value_of(node, path)
    if not _INT_PATTERN.fullmatch(text):
        return default
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return default
    return value


def get_decimal(
    node: Node | None, path: str, default: _T | None = None
) -> Decimal | _T | None:
    """Extract an arbitrary precision decimal, or ``default``.

    Accepts ASCII digits with an optional sign, fraction and exponent.
    Whitespace, digit separators and ``NaN`` or ``Infinity`` yield
    ``default``.
    """
    text = value_of(node, path)
    if not _DECIMAL_PATTERN.fullmatch(text):
        return default
    try:
        return Decimal(text)
    except InvalidOperation:
        return default


def get_url(node: Node | None, path: str) -> URL | None:
    """Extract an absolute http(s)/ftp URL, or ``None`` if malformed."""
    text = value_of(node, path).strip()
    if not text:
        return None
    try:
        url = URL(text)
    except (TypeError, ValueError):
        return None
    if url.scheme not in _URL_SCHEMES or not url.host:
        return None
    return url


def get_timestamp(node: Node | None, path: str) -> datetime | None:
    """Compose an instant from a decomposed WeatherBug timestamp element.

    The element at ``path`` holds ``aws:year``, ``aws:month``, ``aws:day``,
    ``aws:hour``, ``aws:minute``, ``aws:second`` and ``aws:time-zone``
    children. Missing fields default to -1 (date and hour) or 0 (minute and
    second) and roll over like any other out-of-range field, e.g. day 0 is
    the last day of the previous month.

    Returns:
        An aware UTC datetime, or ``None`` when there is no timestamp element
        or the rolled-over date cannot be represented.
    """
    timestamp_node = select_single(node, path)
    if timestamp_node is None:
        return None

    zone = resolve_time_zone(get_string(timestamp_node, "aws:time-zone/@abbrv"))
    year = get_int(timestamp_node, "aws:year/@number", -1)
    # Documents count months from 1, the month index counts from 0.
    month_index = get_int(timestamp_node, "aws:month/@number", -1) - 1
    day = get_int(timestamp_node, "aws:day/@number", -1)
    hour = get_int(timestamp_node, "aws:hour/@hour-24", -1)
    minute = get_int(timestamp_node, "aws:minute/@number", 0)
    second = get_int(timestamp_node, "aws:second/@number", 0)

    return compose_timestamp(zone, year, month_index, day, hour, minute, second)


def compose_timestamp(
    zone: tzinfo,
    year: int,
    month_index: int,
    day: int,
    hour: int,
    minute: int = 0,
    second: int = 0,
) -> datetime | None:
    """Build an instant from lenient calendar fields in ``zone``.

    ``month_index`` is zero-based. Every field may fall outside its normal
    range and carries into the next larger field.
    """
    year += month_index // 12
    month = month_index % 12 + 1
    try:
        wall = datetime(year, month, 1) + timedelta(
            days=day - 1, hours=hour, minutes=minute, seconds=second
        )
        return wall.replace(tzinfo=zone).astimezone(timezone.utc)
    except (OverflowError, ValueError):
        return None


def format_timestamp(
    timestamp: datetime, pattern: str, time_zone: str = DEFAULT_TIME_ZONE
) -> str:
    """Format an instant with a strftime ``pattern`` in the given zone.

    Naive datetimes are taken to be UTC.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(resolve_time_zone(time_zone)).strftime(pattern)


def format_number(value: float | Decimal, pattern: str = ",.2f") -> str:
    """Format a number with a format-spec ``pattern``.

    Grouping and decimal separators follow US conventions (``1,234.5``)
    whatever the process locale is.
    """
    return format(value, pattern)
