"""Weather stations near a location."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from .binding import binding_target
from .utils import get_decimal, get_int, get_string
from .xml import Node


@binding_target
@dataclass(frozen=True)
class Station:
    """A WeatherBug weather station.

    Stations compare and hash by ``id`` alone; every other field is
    descriptive.
    """

    id: str
    name: str = field(default="", compare=False)
    city: str = field(default="", compare=False)
    state: str = field(default="", compare=False)
    country: str = field(default="", compare=False)
    zip_code: int = field(default=-1, compare=False)
    city_code: int = field(default=-1, compare=False)
    distance: Decimal | None = field(default=None, compare=False)
    unit: str = field(default="", compare=False)
    latitude: Decimal | None = field(default=None, compare=False)
    longitude: Decimal | None = field(default=None, compare=False)

    @classmethod
    def from_node(cls, station: Node) -> Station:
        """Build a station from an ``<aws:station>`` element."""
        return cls(
            id=get_string(station, "@id"),
            name=get_string(station, "@name"),
            city=get_string(station, "@city"),
            state=get_string(station, "@state"),
            country=get_string(station, "@country"),
            zip_code=get_int(station, "@zipcode", -1),
            city_code=get_int(station, "@citycode", -1),
            distance=get_decimal(station, "@distance"),
            unit=get_string(station, "@Unit"),
            latitude=get_decimal(station, "@latitude"),
            longitude=get_decimal(station, "@longitude"),
        )
