# Default external tools and the packages that ship them
STATUS_COMMAND = "acpi"
STATUS_FLAG = "-b"
STATUS_PACKAGE = "acpi"

NOTIFY_COMMAND = "notify-send"
NOTIFY_PACKAGE = "libnotify-bin"
DEFAULT_URGENCY = "normal"

# Prefix shown in the desktop notification
BATTERY_ICON = "🔋"

# Environment variable pointing at a config file
CONFIG_ENV_VAR = "BATNOTIFY_CONFIG"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
