"""Pytest configuration and fixtures for weatherbug tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from lxml import etree

from weatherbug.data.xml import AWS_NAMESPACE


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


def create_mock_response(
    status: int = 200,
    read_data: bytes | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        read_data: Data to return from read() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if read_data is not None:
        response.read.return_value = read_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response


def aws_document(body: str, root: str = "aws:weather") -> str:
    """Wrap ``body`` in a root element declaring the aws namespace."""
    return f'<{root} xmlns:aws="{AWS_NAMESPACE}">{body}</{root}>'


def aws_element(body: str, root: str = "aws:weather") -> etree._Element:
    """Parse ``body`` wrapped in an aws-namespaced root element."""
    return etree.fromstring(aws_document(body, root).encode("utf-8"))


def timestamp_xml(
    tag: str,
    *,
    year: str | None = "2024",
    month: str | None = "3",
    day: str | None = "15",
    hour: str | None = "14",
    minute: str | None = "30",
    second: str | None = "0",
    zone: str | None = None,
) -> str:
    """Build a decomposed WeatherBug timestamp element.

    Passing ``None`` for a field leaves its child element out.
    """
    parts = [f"<aws:{tag}>"]
    if year is not None:
        parts.append(f'<aws:year number="{year}"/>')
    if month is not None:
        parts.append(f'<aws:month number="{month}" abbrv="Mon"/>')
    if day is not None:
        parts.append(f'<aws:day number="{day}"/>')
    if hour is not None:
        parts.append(f'<aws:hour number="2" hour-24="{hour}"/>')
    if minute is not None:
        parts.append(f'<aws:minute number="{minute}"/>')
    if second is not None:
        parts.append(f'<aws:second number="{second}"/>')
    if zone is not None:
        parts.append(f'<aws:time-zone offset="0" abbrv="{zone}"/>')
    parts.append(f"</aws:{tag}>")
    return "".join(parts)
