"""
Lexer (tokenizer) for the server configuration syntax.

Supports:
- Whitespace separated words (addresses, directive names, arguments)
- Double-quoted words that may contain whitespace and newlines
- Single-line (#) comments
- Line tracking for every token

Braces are not special to the lexer: ``{`` and ``}`` become structural
only when they stand alone as an unquoted word, so placeholders such as
``{path}`` and quoted braces such as ``"}"`` survive as ordinary arguments.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator

from ..const import CLOSE_BRACE, OPEN_BRACE


@dataclass(frozen=True)
class Token:
    """A single word from the lexer and the line it started on."""

    text: str
    line: int
    quoted: bool = False

    def __repr__(self) -> str:
        return f"Token({self.text!r}, line {self.line})"

    @property
    def opens_block(self) -> bool:
        return self.text == OPEN_BRACE and not self.quoted

    @property
    def closes_block(self) -> bool:
        return self.text == CLOSE_BRACE and not self.quoted


class LexerError(Exception):
    """Exception raised for lexer errors."""

    def __init__(self, message: str, line: int, filename: str = "<string>"):
        self.line = line
        self.filename = filename
        super().__init__(f"{filename}:{line} - {message}")


class Lexer:
    """
    Tokenizer for the server configuration syntax.

    Example config:
        example.com:80 {
            root /var/www
            gzip
            log /var/log/access.log "{remote} {path}"
        }
    """

    WHITESPACE = " \t\r\n"

    def __init__(self, source: str, filename: str = "<string>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def _advance(self) -> str:
        """Advance position and return the consumed character."""
        if self.pos >= len(self.source):
            return ""

        char = self.source[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
        return char

    def _skip_whitespace_and_comments(self) -> None:
        while True:
            char = self._current()
            if char and char in self.WHITESPACE:
                self._advance()
            elif char == "#":
                while self._current() and self._current() != "\n":
                    self._advance()
            else:
                return

    def _read_quoted(self) -> Token:
        """Read a double-quoted word. Only ``\\"`` is an escape."""
        start_line = self.line
        self._advance()  # skip opening quote
        result = []

        while True:
            char = self._advance()
            if not char:
                raise LexerError("Unterminated quoted string", start_line, self.filename)
            if char == "\\" and self._current() == '"':
                result.append(self._advance())
            elif char == '"':
                break
            else:
                result.append(char)

        return Token("".join(result), start_line, quoted=True)

    def _read_word(self) -> Token:
        start_line = self.line
        start_pos = self.pos
        while self._current() and self._current() not in self.WHITESPACE:
            self._advance()
        return Token(self.source[start_pos:self.pos], start_line)

    def next_token(self) -> Token | None:
        """Get the next token, or None at end of input."""
        self._skip_whitespace_and_comments()

        if self.pos >= len(self.source):
            return None

        if self._current() == '"':
            return self._read_quoted()
        return self._read_word()

    def tokenize(self) -> Iterator[Token]:
        """Generate all tokens from the source."""
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()


def tokenize(source: str, filename: str = "<string>") -> list[Token]:
    """Convenience function to tokenize a source string."""
    return list(Lexer(source, filename))


class TokenStream:
    """
    Cursor over a sequence of tokens with one token of lookahead.

    ``next()`` makes the following token current and returns False once
    the input is exhausted. ``unread()`` hands the current token back so
    that the next ``next()`` call returns it again instead of advancing;
    this is how a step that read one token too far leaves it for the
    step after it. ``peek()`` looks at what ``next()`` would produce
    without moving.
    """

    def __init__(self, tokens: Iterable[Token]):
        self._tokens = iter(tokens)
        self._current: Token | None = None
        self._lookahead: Token | None = None
        self._replay = False
        self._exhausted = False

    @property
    def current(self) -> Token:
        """The current token. After exhaustion, the last token read."""
        if self._current is None:
            raise RuntimeError("token stream has not been advanced")
        return self._current

    @property
    def last(self) -> Token | None:
        """The most recently read token, if any."""
        return self._current

    @property
    def started(self) -> bool:
        return self._current is not None or self._exhausted

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def pending(self) -> bool:
        """True if the current token was unread and not yet taken back."""
        return self._replay

    def _pull(self) -> Token | None:
        if self._lookahead is not None:
            token, self._lookahead = self._lookahead, None
            return token
        return next(self._tokens, None)

    def next(self) -> bool:
        if self._replay:
            self._replay = False
            return True

        token = self._pull()
        if token is None:
            self._exhausted = True
            return False

        self._current = token
        return True

    def peek(self) -> Token | None:
        """Return the token ``next()`` would make current, without consuming it."""
        if self._replay:
            return self._current
        if self._lookahead is None:
            self._lookahead = next(self._tokens, None)
        return self._lookahead

    def unread(self) -> None:
        """Mark the current token as not yet consumed."""
        if self._current is None or self._exhausted:
            raise RuntimeError("no current token to unread")
        if self._replay:
            raise RuntimeError("current token is already unread")
        self._replay = True
