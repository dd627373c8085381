"""Application settings management.

This package provides:
- UserSettings: User-configurable settings loaded from batnotify.yaml
"""

from batnotify.settings.user import Urgency, UserSettings

__all__ = ["Urgency", "UserSettings"]
