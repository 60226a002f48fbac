"""WeatherBug API client and XML data binding."""

__version__ = "0.1.0"

from .config import ConfigLoadError, WeatherBugConfig, load_config
from .data import Alert, Forecast, Forecasts, Location, Station, bind, bind_single
from .errors import (
    WeatherBugConnectionError,
    WeatherBugParseError,
    WeatherBugResponseError,
    WeatherBugServiceError,
    WeatherBugTimeout,
)
from .http import WeatherBugHttpClient

__all__ = [
    "Alert",
    "ConfigLoadError",
    "Forecast",
    "Forecasts",
    "Location",
    "Station",
    "WeatherBugConfig",
    "WeatherBugConnectionError",
    "WeatherBugHttpClient",
    "WeatherBugParseError",
    "WeatherBugResponseError",
    "WeatherBugServiceError",
    "WeatherBugTimeout",
    "__version__",
    "bind",
    "bind_single",
    "load_config",
]
