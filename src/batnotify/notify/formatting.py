"""Text formatting for battery readings."""

from __future__ import annotations

from batnotify.battery.models import BatteryReading
from batnotify.constants import BATTERY_ICON


def format_message(reading: BatteryReading, icon: str = BATTERY_ICON) -> str:
    """Format the notification body.

    Args:
        reading: Extracted battery reading
        icon: Prefix shown before the percentage

    Returns:
        Message such as ``🔋 75% (02:30:45)``
    """
    return f"{icon} {reading.formatted_percentage} ({reading.remaining})"


def format_readings(reading: BatteryReading) -> list[str]:
    """Return the two lines printed to stdout on success."""
    return [
        f"Battery Percentage: {reading.formatted_percentage}",
        f"Time Remaining: {reading.remaining}",
    ]
