"""
Server configuration parser with brace and brace-less block syntax.
"""

from .const import APP_VERSION

__version__ = APP_VERSION
