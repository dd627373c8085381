"""Battery status desktop notifier.

Reads ``acpi -b``, extracts the charge percentage and time remaining, and
shows them with ``notify-send``.
"""

__version__ = "0.1.0"
