"""
Configuration parsing: lexer, parser, directive registry and loader.
"""

from .controller import Controller, ControllerStore, Dispenser
from .directives import default_registry
from .errors import ConfigSyntaxError, ParseError, UnexpectedEOFError
from .lexer import Lexer, LexerError, Token, TokenStream
from .loader import ConfigError, ConfigLoader
from .parser import ParseResult, Parser, parse_config, parse_config_file
from .registry import DirectiveRegistry
from .schema import Config, TLSConfig

__all__ = [
    "Config",
    "ConfigError",
    "ConfigLoader",
    "ConfigSyntaxError",
    "Controller",
    "ControllerStore",
    "DirectiveRegistry",
    "Dispenser",
    "Lexer",
    "LexerError",
    "ParseError",
    "ParseResult",
    "Parser",
    "TLSConfig",
    "Token",
    "TokenStream",
    "UnexpectedEOFError",
    "default_registry",
    "parse_config",
    "parse_config_file",
]
