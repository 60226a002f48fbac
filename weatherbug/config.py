"""Configuration for the WeatherBug HTTP client.

Configuration is a small YAML file::

    api_code: A1234567890
    base_url: http://api.wxbug.net
    unit_type: 0
    timeout: 10
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

import yaml

DEFAULT_BASE_URL: Final = "http://api.wxbug.net"


class ConfigLoadError(Exception):
    """Error loading the client configuration."""


@dataclass(frozen=True)
class WeatherBugConfig:
    """WeatherBug API access settings.

    Attributes:
        api_code: WeatherBug API access code (``ACode``).
        base_url: API root URL.
        unit_type: 0 for imperial units, 1 for metric units.
        timeout: Total request timeout in seconds.
    """

    api_code: str
    base_url: str = DEFAULT_BASE_URL
    unit_type: int = 0
    timeout: float = 10.0


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file with error handling."""
    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}")
    with path.open() as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping in {path}")
    return data


def load_config(path: Path | str) -> WeatherBugConfig:
    """Load client configuration from a YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed WeatherBugConfig.

    Raises:
        ConfigLoadError: If the file is missing or has no ``api_code``.
    """
    path = Path(path)
    data = _load_yaml(path)

    api_code = data.get("api_code")
    if not api_code:
        raise ConfigLoadError(f"Missing api_code in {path}")

    return WeatherBugConfig(
        api_code=str(api_code),
        base_url=str(data.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
        unit_type=int(data.get("unit_type", 0)),
        timeout=float(data.get("timeout", 10.0)),
    )
