"""
Builtin directives and the default directive registry.
"""

from typing import TYPE_CHECKING

from .registry import DirectiveRegistry
from .schema import TLSConfig

if TYPE_CHECKING:
    from .parser import Parser


# Middleware directives recognized by the default registry
DEFAULT_MIDDLEWARE = (
    "gzip",
    "header",
    "log",
    "rewrite",
    "redir",
    "ext",
    "errors",
    "proxy",
    "fastcgi",
    "websocket",
    "markdown",
    "templates",
    "browse",
    "basicauth",
)


def _required_arg(p: "Parser") -> str:
    if not p.next_arg() or p.token.opens_block or p.token.closes_block:
        raise p.arg_error()
    return p.val


def parse_root(p: "Parser") -> None:
    """root PATH"""
    p.config.root = _required_arg(p)


def parse_tls(p: "Parser") -> None:
    """tls CERTIFICATE KEY"""
    certificate = _required_arg(p)
    key = _required_arg(p)
    p.config.tls = TLSConfig(enabled=True, certificate=certificate, key=key)


BUILTIN_DIRECTIVES = {
    "root": parse_root,
    "tls": parse_tls,
}


def default_registry() -> DirectiveRegistry:
    """Build a fresh registry with the builtin and default middleware directives."""
    registry = DirectiveRegistry()
    for name, handler in BUILTIN_DIRECTIVES.items():
        registry.register_builtin(name, handler)
    registry.register_middleware(*DEFAULT_MIDDLEWARE)
    return registry
