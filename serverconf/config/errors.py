"""
Parse errors shared by the parser, builtin directives and dispensers.
"""

from .lexer import Token


class ParseError(Exception):
    """Exception raised for parser errors."""

    kind = "Parse"

    def __init__(self, message: str, token: Token | None = None, filename: str = "<string>"):
        self.message = message
        self.token = token
        self.filename = filename
        if token is not None:
            location = f"{filename}:{token.line}"
        else:
            location = filename
        super().__init__(f"{location} - {self.kind} error: {message}")


class ConfigSyntaxError(ParseError):
    """The current token violates a grammar expectation."""

    kind = "Syntax"


class UnexpectedEOFError(ParseError):
    """The input ended while a construct was still open."""

    kind = "EOF"

    def __init__(self, token: Token | None = None, filename: str = "<string>"):
        super().__init__("Unexpected EOF", token, filename)
