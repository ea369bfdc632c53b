"""
Application constants and metadata.
"""

# Application info
APP_NAME = "serverconf"
APP_VERSION = "0.1.0"

# Default address parts
DEFAULT_HOST = "localhost"
DEFAULT_PORT = "8080"

# Structural tokens
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
PATH_PREFIX = "/"
