"""Fixed time-zone abbreviation table for WeatherBug timestamps.

WeatherBug timestamps carry a short abbreviation (``CST``, ``EDT``...) rather
than a zone id. ``CST``, ``PST`` and ``AST`` name regions and follow their
region's daylight-saving rules. ``EST``, ``MST`` and ``HST`` are fixed
standard offsets all year, and daylight abbreviations are fixed daylight
offsets, so an explicitly labelled value is never shifted by a season.
Anything not in the table resolves to UTC.
"""

from __future__ import annotations

from datetime import timedelta, timezone, tzinfo
from typing import Final
from zoneinfo import ZoneInfo

DEFAULT_TIME_ZONE: Final = "CST"


def _fixed(hours: int) -> timezone:
    return timezone(timedelta(hours=hours))


ABBREVIATIONS: Final[dict[str, tzinfo]] = {
    "CST": ZoneInfo("America/Chicago"),
    "PST": ZoneInfo("America/Los_Angeles"),
    "AST": ZoneInfo("America/Anchorage"),
    "EST": _fixed(-5),
    "MST": _fixed(-7),
    "HST": _fixed(-10),
    "AKST": _fixed(-9),
    "EDT": _fixed(-4),
    "CDT": _fixed(-5),
    "MDT": _fixed(-6),
    "PDT": _fixed(-7),
    "AKDT": _fixed(-8),
    "HDT": _fixed(-9),
    "SST": _fixed(-11),
    "CHST": _fixed(10),
}

_UTC_ALIASES: Final = frozenset({"UTC", "GMT", "UT", "Z"})


def resolve_time_zone(abbreviation: str | None) -> tzinfo:
    """Resolve a WeatherBug time-zone abbreviation.

    Args:
        abbreviation: Abbreviation as found in ``aws:time-zone/@abbrv``.
            Empty or ``None`` selects ``DEFAULT_TIME_ZONE``.

    Returns:
        The matching zone; UTC for unknown abbreviations.
    """
    key = (abbreviation or "").strip().upper() or DEFAULT_TIME_ZONE
    if key in _UTC_ALIASES:
        return timezone.utc
    return ABBREVIATIONS.get(key, timezone.utc)
