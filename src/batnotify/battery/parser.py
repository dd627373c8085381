"""Extract charge percentage and time remaining from status text.

``acpi -b`` prints one line per battery, e.g.::

    Battery 0: Discharging, 75%, 02:30:45 remaining

The pattern is searched once against the whole text. Both fields must be
found in the same match; there is no partial result.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from batnotify.battery.models import BatteryReading
from batnotify.errors import ParseError

logger: Final = logging.getLogger(__name__)

# `.*?` so the first HH:MM:SS after the percentage wins, not the last one
BATTERY_PATTERN: Final = re.compile(r"(?P<percentage>\d+)%.*?(?P<time>\d{2}:\d{2}:\d{2})")


def extract_reading(text: str) -> BatteryReading | None:
    """Return the first percentage/time pair in ``text``, or None."""
    match = BATTERY_PATTERN.search(text)
    if match is None:
        return None
    reading = BatteryReading(percentage=match.group("percentage"), remaining=match.group("time"))
    logger.debug("Matched percentage=%s time=%s", reading.percentage, reading.remaining)
    return reading


def parse_reading(text: str) -> BatteryReading:
    """Like ``extract_reading`` but raise when nothing matches.

    Raises:
        ParseError: If the text holds no percentage followed by a time
    """
    reading = extract_reading(text)
    if reading is None:
        raise ParseError(text)
    return reading
