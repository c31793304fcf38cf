"""Fixed names shared across the package."""

# Prefix for every diagnostic line
PLUGIN_NAME = "blueblaze-debug-log-file"

# File created inside a directory target
DEBUG_LOG_FILENAME = "debug.log"
