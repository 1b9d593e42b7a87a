"""Shared formatting helpers for renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


def format_coordinate(lat: float, lng: float) -> str:
    """Lat/lng pair to four decimal places, e.g. ``44.2619, -72.5806``."""
    return f"{lat:.4f}, {lng:.4f}"


def format_date(ts: datetime) -> str:
    """Calendar date of a timestamp, e.g. ``Mar 4, 2026``."""
    return f"{ts.strftime('%b')} {ts.day}, {ts.year}"


def format_time(ts: datetime) -> str:
    """Wall-clock time of a timestamp, e.g. ``3:07 PM``."""
    hour = ts.hour % 12 or 12
    return f"{hour}:{ts.minute:02d} {'AM' if ts.hour < 12 else 'PM'}"
