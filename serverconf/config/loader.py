"""
Configuration loader with file reading and validation.
"""

from collections import Counter
from pathlib import Path

from ..logging import get_logger
from .directives import default_registry
from .errors import ParseError
from .lexer import Lexer, LexerError
from .parser import ParseResult, Parser
from .registry import DirectiveRegistry


logger = get_logger("config.loader")


class ConfigError(Exception):
    """Exception raised for configuration errors."""

    pass


class ConfigLoader:
    """
    Loads every server block from files or strings.

    Usage:
        loader = ConfigLoader()
        servers = loader.load_file("/etc/serverconf/server.conf")
        # or
        servers = loader.load_string(config_text)
    """

    def __init__(self, registry: DirectiveRegistry | None = None):
        self.registry = registry if registry is not None else default_registry()

    def load_file(self, path: str | Path) -> list[ParseResult]:
        """
        Load configuration from a file.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ConfigError(f"Not a file: {path}")

        try:
            source = path.read_text()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read configuration: {e}") from e

        return self.load_string(source, str(path))

    def load_string(self, source: str, filename: str = "<string>") -> list[ParseResult]:
        """
        Load configuration from a string.

        Raises:
            ConfigError: If the configuration cannot be parsed
        """
        try:
            servers = Parser(Lexer(source, filename), self.registry, filename).parse_all()
        except (LexerError, ParseError) as e:
            raise ConfigError(f"Failed to parse configuration: {e}") from e

        logger.info(f"Loaded {len(servers)} server block(s) from {filename}")
        return servers

    def validate(self, servers: list[ParseResult]) -> list[str]:
        """
        Check parsed server blocks for suspicious settings.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        addresses = Counter(server.config.address for server in servers)
        for address, count in addresses.items():
            if count > 1:
                warnings.append(f"Address {address} is defined {count} times")

        for config, controllers in servers:
            tls = config.tls
            if tls.enabled and not (tls.certificate and tls.key):
                warnings.append(f"{config.address}: TLS is enabled without certificate and key")

            if not config.root and not controllers:
                warnings.append(f"{config.address}: no root and no middleware configured")

        for warning in warnings:
            logger.warning(warning)
        return warnings


def load_config(path: str | Path) -> list[ParseResult]:
    """Load all server blocks from a file with the default registry."""
    return ConfigLoader().load_file(path)
