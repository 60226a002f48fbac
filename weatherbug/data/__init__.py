"""WeatherBug XML data binding.

Records are built from parsed WeatherBug documents with ``bind`` and
``bind_single``; the scalar helpers in ``utils`` never raise.
"""

from .alert import Alert
from .binding import (
    REGISTRY,
    BindFailure,
    BindingRegistry,
    Bound,
    bind,
    bind_single,
    binding_target,
)
from .forecasts import Forecast, Forecasts
from .location import CityType, Location
from .station import Station
from .timezones import DEFAULT_TIME_ZONE, resolve_time_zone
from .utils import (
    fix_degrees,
    format_number,
    format_timestamp,
    get_decimal,
    get_int,
    get_string,
    get_timestamp,
    get_units,
    get_url,
)
from .xml import AWS_NAMESPACE, NAMESPACES, parse_document

__all__ = [
    "AWS_NAMESPACE",
    "Alert",
    "BindFailure",
    "BindingRegistry",
    "Bound",
    "CityType",
    "DEFAULT_TIME_ZONE",
    "Forecast",
    "Forecasts",
    "Location",
    "NAMESPACES",
    "REGISTRY",
    "Station",
    "bind",
    "bind_single",
    "binding_target",
    "fix_degrees",
    "format_number",
    "format_timestamp",
    "get_decimal",
    "get_int",
    "get_string",
    "get_timestamp",
    "get_units",
    "get_url",
    "parse_document",
    "resolve_time_zone",
]
