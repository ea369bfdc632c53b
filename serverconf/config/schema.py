"""
Configuration schema produced by the parser.
"""

from dataclasses import dataclass, field

from ..const import DEFAULT_HOST, DEFAULT_PORT


@dataclass
class TLSConfig:
    """TLS settings from the ``tls`` directive."""
    enabled: bool = False
    certificate: str = ""
    key: str = ""


@dataclass
class Config:
    """
    Settings of one server block.

    ``host`` and ``port`` are assigned once, from the address token.
    Middleware directives are not stored here; their raw tokens live in
    the ControllerStore returned alongside the Config.
    """
    host: str = ""
    port: str = ""
    root: str = ""
    tls: TLSConfig = field(default_factory=TLSConfig)

    @property
    def address(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"

    @classmethod
    def default(cls) -> "Config":
        """Config used when the input holds no server block at all."""
        return cls(host=DEFAULT_HOST, port=DEFAULT_PORT)
