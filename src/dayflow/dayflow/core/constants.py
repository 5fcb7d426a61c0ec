"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 5000
DEFAULT_POOL_SIZE = 5
DEFAULT_POOL_ACQUIRE_TIMEOUT = 30.0
MIN_PASSWORD_LENGTH = 6
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
