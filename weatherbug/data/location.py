"""City locations returned by the WeatherBug location search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .binding import binding_target
from .utils import get_int, get_string
from .xml import Node


class CityType(IntEnum):
    """Values of the ``citytype`` attribute."""

    DOMESTIC = 0
    FOREIGN = 1


@binding_target
@dataclass(frozen=True, eq=False)
class Location:
    """A city located in the U.S. or outside of the U.S.

    U.S. cities are identified by their ZIP code, other cities by their
    5 digit city code. Two locations are equal when they are of the same
    city type and share that identifying code.

    Attributes:
        city_name: City name.
        state_name: State name (U.S. cities only).
        country_name: Country name.
        zip_code: 5 digit ZIP code, -1 for non-U.S. cities.
        city_code: 5 digit city code, -1 for U.S. cities.
        city_type: ``CityType`` value, -1 when unknown.
    """

    city_name: str
    state_name: str
    country_name: str
    zip_code: int
    city_code: int
    city_type: int

    @classmethod
    def from_node(cls, location: Node) -> Location:
        """Build a location from an ``<aws:location>`` element."""
        return cls(
            city_name=get_string(location, "@cityname"),
            state_name=get_string(location, "@statename"),
            country_name=get_string(location, "@countryname"),
            zip_code=get_int(location, "@zipcode", -1),
            city_code=get_int(location, "@citycode", -1),
            city_type=get_int(location, "@citytype", -1),
        )

    @property
    def is_domestic(self) -> bool:
        """Whether this is a U.S. city."""
        return self.city_type == CityType.DOMESTIC

    @property
    def code(self) -> int:
        """The identifying code: ZIP code for U.S. cities, city code otherwise."""
        return self.zip_code if self.is_domestic else self.city_code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self.city_type == other.city_type and self.code == other.code

    def __hash__(self) -> int:
        return hash((int(self.city_type), self.code))
