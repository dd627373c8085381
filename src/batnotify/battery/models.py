from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class BatteryReading:
    """Charge percentage and time remaining captured from the status text.

    Both fields hold the matched substrings verbatim. Neither is range
    checked: ``"07"`` stays ``"07"`` and ``"99:99:99"`` passes through. The
    numeric views below are for callers that want them.
    """

    percentage: str
    remaining: str

    @property
    def level(self) -> int:
        """Return the percentage as an integer."""
        return int(self.percentage)

    @property
    def remaining_delta(self) -> timedelta | None:
        """Return the remaining time as a timedelta, or None when out of range."""
        hours, minutes, seconds = (int(part) for part in self.remaining.split(":"))
        if minutes > 59 or seconds > 59:
            return None
        return timedelta(hours=hours, minutes=minutes, seconds=seconds)

    @property
    def formatted_percentage(self) -> str:
        """Return formatted battery percentage string."""
        return f"{self.percentage}%"
