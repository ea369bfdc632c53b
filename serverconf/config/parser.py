"""
Recursive descent parser for server configuration blocks.

Grammar:
    config      := address [ block ]
    block       := '{' directives '}' | directives
    directives  := { location | directive }
    location    := '/'path '{' { directive } '}'
    directive   := builtin-directive | middleware-directive

The brace-less block has no terminator other than the end of input.
Middleware directives end at the first token on a later line that is
not inside a brace block of their own.
"""

from pathlib import Path
from typing import Callable, Iterable, NamedTuple

from ..const import CLOSE_BRACE, OPEN_BRACE, PATH_PREFIX
from ..logging import get_logger
from .address import split_address
from .controller import ControllerStore
from .directives import default_registry
from .errors import ConfigSyntaxError, ParseError, UnexpectedEOFError
from .lexer import Lexer, Token, TokenStream
from .registry import DirectiveRegistry
from .schema import Config


logger = get_logger("config.parser")


class ParseResult(NamedTuple):
    """One parsed server block."""
    config: Config
    controllers: ControllerStore


class Parser:
    """
    Parser for one or more server blocks.

    Builtin directive handlers are called with the parser and use
    ``next_arg``, ``val`` and the error helpers to read their arguments.
    """

    def __init__(
        self,
        tokens: Iterable[Token] | TokenStream,
        registry: DirectiveRegistry | None = None,
        filename: str = "<string>",
        address_splitter: Callable[[str], tuple[str, str]] = split_address,
    ):
        if isinstance(tokens, TokenStream):
            self.stream = tokens
        else:
            self.stream = TokenStream(tokens)
        self.registry = registry if registry is not None else default_registry()
        self.filename = filename
        self.address_splitter = address_splitter

        self.config = Config()
        self.controllers = ControllerStore()
        self.servers_parsed = 0

    # Token access

    @property
    def token(self) -> Token:
        return self.stream.current

    @property
    def val(self) -> str:
        return self.stream.current.text

    @property
    def line(self) -> int:
        return self.stream.current.line

    def next(self) -> bool:
        return self.stream.next()

    def next_arg(self) -> bool:
        """Advance only if the following token is on the current line."""
        if self.stream.pending or self.stream.exhausted:
            return False
        following = self.stream.peek()
        if following is None or following.line != self.line:
            return False
        return self.stream.next()

    # Errors

    def syntax_error(self, message: str) -> ParseError:
        return ConfigSyntaxError(message, self.token, self.filename)

    def expected(self, expected: str) -> ParseError:
        return self.syntax_error(f"Unexpected token '{self.val}', expecting '{expected}'")

    def eof_error(self) -> ParseError:
        return UnexpectedEOFError(self.stream.last, self.filename)

    def arg_error(self) -> ParseError:
        return self.syntax_error(f"Wrong argument count or unexpected line ending after '{self.val}'")

    # Entry points

    def parse(self) -> ParseResult:
        """
        Parse one server block.

        The stream may already be positioned on the address token;
        otherwise it is advanced onto it first. Input without any token
        yields the default configuration. Each further call parses the
        next server block and raises RuntimeError once none is left.
        """
        positioned = self.stream.started and not self.servers_parsed
        if not positioned and not self.next():
            if self.servers_parsed:
                raise RuntimeError("no server block left in the input")
            logger.debug(f"{self.filename}: empty input, using default address")
            self.servers_parsed += 1
            return ParseResult(Config.default(), ControllerStore())
        return self._server()

    def parse_all(self) -> list[ParseResult]:
        """Parse server blocks until the input is exhausted."""
        results = [self.parse()]
        while self.next():
            results.append(self._server())
        return results

    # Grammar

    def _server(self) -> ParseResult:
        self.config = Config()
        self.controllers = ControllerStore()

        self._address()
        self._address_block()
        self.servers_parsed += 1

        logger.debug(
            f"{self.filename}: parsed server {self.config.address} "
            f"with {len(self.controllers)} middleware directive(s)"
        )
        return ParseResult(self.config, self.controllers)

    def _address(self) -> None:
        if self.token.opens_block or self.token.closes_block:
            raise self.syntax_error(f"'{self.val}' is not EOF or address")
        self.config.host, self.config.port = self.address_splitter(self.val)

    def _address_block(self) -> None:
        if not self.next():
            # Address only
            return

        if not self.token.opens_block:
            # Brace-less form: the token is the first directive
            self.stream.unread()
            self._directives()
            return

        if not self._directives():
            raise self.eof_error()

    def _directives(self) -> bool:
        """Parse directives up to a closing brace (True) or end of input (False)."""
        while self.next():
            if self.token.closes_block:
                return True
            if self.val.startswith(PATH_PREFIX):
                self._location()
            else:
                self._directive()
        return False

    def _location(self) -> None:
        # Path scopes are accepted, but their directives apply to the
        # whole server: nothing routes requests by path yet.
        path = self.val

        if not self.next():
            raise self.eof_error()
        if not self.token.opens_block:
            raise self.expected(OPEN_BRACE)

        logger.debug(f"{self.filename}:{self.line}: location scope {path} is not routed separately")

        while self.next():
            if self.token.closes_block:
                return
            self._directive()

        raise self.eof_error()

    def _directive(self) -> None:
        name = self.val
        handler = self.registry.lookup_builtin(name)

        if handler is not None:
            handler(self)
        elif self.registry.is_middleware(name):
            self._collect_tokens()
        else:
            raise self.syntax_error(f"Unexpected token '{name}', expecting a valid directive")

    def _collect_tokens(self) -> None:
        start = self.token
        collected = [start]
        nesting = 0

        while self.next():
            token = self.token
            if token.opens_block:
                nesting += 1
            elif token.line > start.line and nesting == 0:
                # First token of the next directive
                self.stream.unread()
                self.controllers.append(start.text, collected)
                logger.debug(f"{self.filename}:{start.line}: collected {len(collected)} token(s) for '{start.text}'")
                return
            elif token.closes_block and nesting > 0:
                nesting -= 1
            elif token.closes_block:
                raise self.syntax_error(f"Unexpected '{CLOSE_BRACE}' because no matching open curly brace '{OPEN_BRACE}'")
            collected.append(token)

        raise self.eof_error()


def parse_config(
    source: str,
    filename: str = "<string>",
    registry: DirectiveRegistry | None = None,
) -> ParseResult:
    """
    Convenience function to parse a single server block from a string.

    Args:
        source: Configuration source text
        filename: Filename for error messages
        registry: Directive registry (a default one if None)

    Returns:
        ParseResult with the Config and the collected middleware tokens
    """
    return Parser(Lexer(source, filename), registry, filename).parse()


def parse_config_file(path: str | Path, registry: DirectiveRegistry | None = None) -> ParseResult:
    """Parse a single server block from a file."""
    path = Path(path)
    return parse_config(path.read_text(), str(path), registry)
