"""Daily forecasts for a location.

``Forecasts`` is bound from the ``<aws:weather>`` root of a forecast
response and carries one ``Forecast`` per ``<aws:forecast>`` element,
usually seven.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from yarl import URL

from .binding import bind, binding_target
from .utils import get_int, get_string, get_units, get_url
from .xml import Node, select_single

_LOCATION = "aws:forecasts/aws:location"


@binding_target
@dataclass(frozen=True)
class Forecast:
    """A single daily (or nightly) forecast.

    Attributes:
        title: Day title, e.g. "Monday".
        alt_title: Short day title, e.g. "MON".
        short_prediction: One line summary.
        image_url: Condition icon URL.
        is_night: 1 for a night forecast, 0 for a day one, -1 if unknown.
        description: Condition description.
        prediction: Full forecast text.
        high: High temperature, ``None`` when not forecast.
        low: Low temperature, ``None`` when not forecast.
        units: Temperature units label, e.g. "°F".
    """

    title: str
    alt_title: str = ""
    short_prediction: str = ""
    image_url: URL | None = None
    is_night: int = -1
    description: str = ""
    prediction: str = ""
    high: int | None = None
    low: int | None = None
    units: str = ""

    @classmethod
    def from_node(cls, forecast: Node) -> Forecast:
        """Build a forecast from an ``<aws:forecast>`` element."""
        return cls(
            title=get_string(forecast, "aws:title"),
            alt_title=get_string(forecast, "aws:title/@alttitle"),
            short_prediction=get_string(forecast, "aws:short-prediction"),
            image_url=get_url(forecast, "aws:image"),
            is_night=get_int(forecast, "aws:image/@isNight", -1),
            description=get_string(forecast, "aws:description"),
            prediction=get_string(forecast, "aws:prediction"),
            high=get_int(forecast, "aws:high", None),
            low=get_int(forecast, "aws:low", None),
            units=get_units(forecast, "aws:high/@units"),
        )


@binding_target
@dataclass(frozen=True)
class Forecasts:
    """A set of daily forecasts for one city."""

    city: str
    state: str = ""
    country: str = ""
    zip_code: int = -1
    city_code: int = -1
    zone: str = ""
    site_url: URL | None = None
    forecasts: tuple[Forecast, ...] = field(default_factory=tuple)

    @classmethod
    def from_node(cls, weather: Node) -> Forecasts:
        """Build the forecast set from an ``<aws:weather>`` element.

        Raises:
            LookupError: If the element has no forecast location.
        """
        location = select_single(weather, _LOCATION)
        if location is None:
            raise LookupError(f"<{weather.tag}> has no {_LOCATION} element")
        return cls(
            city=get_string(location, "aws:city"),
            state=get_string(location, "aws:state"),
            country=get_string(location, "aws:country"),
            zip_code=get_int(location, "aws:zip", -1),
            city_code=get_int(location, "aws:citycode", -1),
            zone=get_string(location, "aws:zone"),
            site_url=get_url(weather, "aws:WebURL"),
            forecasts=tuple(bind(weather, "aws:forecasts/aws:forecast", Forecast)),
        )
