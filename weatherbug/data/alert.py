"""Severe weather alerts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .binding import binding_target
from .utils import get_string, get_timestamp
from .xml import Node


@binding_target
@dataclass(frozen=True)
class Alert:
    """A severe weather alert.

    Attributes:
        id: Unique alert identifier.
        type: Alert type code.
        title: Alert title.
        posted_time: When the alert was posted, if the document says.
        expires_time: When the alert expires, if the document says.
        message_summary: Short message text.
    """

    id: str
    type: str
    title: str
    posted_time: datetime | None
    expires_time: datetime | None
    message_summary: str

    @classmethod
    def from_node(cls, alert: Node) -> Alert:
        """Build an alert from an ``<aws:alert>`` element."""
        return cls(
            id=get_string(alert, "aws:id"),
            type=get_string(alert, "aws:type"),
            title=get_string(alert, "aws:title"),
            posted_time=get_timestamp(alert, "aws:posted-date"),
            expires_time=get_timestamp(alert, "aws:expires-date"),
            message_summary=get_string(alert, "aws:msg-summary"),
        )
