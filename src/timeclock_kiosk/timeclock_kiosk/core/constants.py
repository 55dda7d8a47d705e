"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_PIN_LEN = 4
MAX_PIN_LEN = 6
DEFAULT_MESSAGE_SECONDS = 3.0
DEFAULT_DIRECTORY_TIMEOUT_SECONDS = 10.0
