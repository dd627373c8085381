"""Battery status reading and field extraction."""

from batnotify.battery.models import BatteryReading
from batnotify.battery.parser import BATTERY_PATTERN, extract_reading, parse_reading
from batnotify.battery.reader import AcpiReader, StaticReader, StatusReader, decode_output

__all__ = [
    "AcpiReader",
    "BATTERY_PATTERN",
    "BatteryReading",
    "StaticReader",
    "StatusReader",
    "decode_output",
    "extract_reading",
    "parse_reading",
]
