"""
Pytest configuration and fixtures.
"""

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from serverconf.config.directives import default_registry
from serverconf.config.lexer import Lexer
from serverconf.config.parser import ParseResult, Parser
from serverconf.config.registry import DirectiveRegistry


@pytest.fixture
def registry() -> DirectiveRegistry:
    return default_registry()


@pytest.fixture
def parse(registry: DirectiveRegistry) -> Callable[[str], ParseResult]:
    """Parse one server block from a string with the default registry."""

    def _parse(source: str) -> ParseResult:
        return Parser(Lexer(source), registry).parse()

    return _parse


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write configuration text to a temporary file and return its path."""

    def _write(source: str, name: str = "server.conf") -> Path:
        path = tmp_path / name
        path.write_text(source)
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers installed by a test so they do not outlive its captured streams."""
    yield
    root = logging.getLogger("serverconf")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
