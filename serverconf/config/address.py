"""
Splitting of ``host:port`` address tokens.
"""

from ..const import DEFAULT_HOST, DEFAULT_PORT


def split_address(address: str) -> tuple[str, str]:
    """
    Split an address token into host and port.

    Examples:
        "localhost:8080"  -> ("localhost", "8080")
        "example.com"     -> ("example.com", "8080")
        ":443"            -> ("localhost", "443")
        "[::1]:80"        -> ("::1", "80")
    """
    host, port = address, ""

    if address.startswith("["):
        end = address.find("]")
        if end != -1:
            host = address[1:end]
            port = address[end + 1:].removeprefix(":")
    elif ":" in address:
        host, _, port = address.rpartition(":")

    return host or DEFAULT_HOST, port or DEFAULT_PORT
