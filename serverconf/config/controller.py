"""
Storage for the raw tokens of middleware directives.

The parser does not interpret middleware directives. It collects every
token of each occurrence and appends them to the Controller named after
the directive; middleware setup code reads them back with a Dispenser.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .errors import ConfigSyntaxError, ParseError, UnexpectedEOFError
from .lexer import Token


@dataclass
class Controller:
    """All tokens collected for one middleware directive name, in source order."""
    name: str
    tokens: list[Token] = field(default_factory=list)
    occurrences: int = 0

    def __repr__(self) -> str:
        return f"Controller({self.name}, occurrences={self.occurrences}, tokens={len(self.tokens)})"

    def dispenser(self, filename: str = "<string>") -> "Dispenser":
        return Dispenser(self.tokens, filename)


@dataclass
class ControllerStore:
    """
    Mapping of directive name to Controller.

    ``append`` is the only way to add tokens: it reuses the Controller
    already stored under the name, or creates it on first use.
    """
    controllers: dict[str, Controller] = field(default_factory=dict)

    def append(self, name: str, tokens: Iterable[Token]) -> Controller:
        controller = self.controllers.get(name)
        if controller is None:
            controller = self.controllers[name] = Controller(name)
        controller.tokens.extend(tokens)
        controller.occurrences += 1
        return controller

    def get(self, name: str) -> Controller | None:
        return self.controllers.get(name)

    def items(self):
        return self.controllers.items()

    def __getitem__(self, name: str) -> Controller:
        return self.controllers[name]

    def __contains__(self, name: object) -> bool:
        return name in self.controllers

    def __iter__(self) -> Iterator[str]:
        return iter(self.controllers)

    def __len__(self) -> int:
        return len(self.controllers)


class Dispenser:
    """
    Read cursor over collected tokens.

    Typical middleware setup loop:

        d = controller.dispenser()
        while d.next():          # on the directive name
            args = d.remaining_args()
            while d.next_block():
                option = d.val
                values = d.remaining_args()
    """

    def __init__(self, tokens: list[Token], filename: str = "<string>"):
        self.tokens = tokens
        self.filename = filename
        self.cursor = -1
        self.nesting = 0

    @property
    def val(self) -> str:
        """Text of the current token, or an empty string before the first ``next()``."""
        if 0 <= self.cursor < len(self.tokens):
            return self.tokens[self.cursor].text
        return ""

    @property
    def line(self) -> int:
        if 0 <= self.cursor < len(self.tokens):
            return self.tokens[self.cursor].line
        return 0

    def next(self) -> bool:
        """Move to the next token regardless of line."""
        if self.cursor < len(self.tokens) - 1:
            self.cursor += 1
            return True
        return False

    def next_arg(self) -> bool:
        """Move to the next token only if it is on the current line."""
        if self.cursor < 0 or self.cursor >= len(self.tokens) - 1:
            return False
        if self.tokens[self.cursor + 1].line != self.tokens[self.cursor].line:
            return False
        self.cursor += 1
        return True

    def next_block(self) -> bool:
        """
        Iterate over the tokens that start lines inside a ``{ }`` block.

        Returns False when the block closes, or straight away if the
        current line does not end with an opening brace.
        """
        if self.nesting > 0:
            if not self.next():
                return False
            if self.tokens[self.cursor].closes_block:
                self.nesting -= 1
                return False
            return True

        if not self.next_arg():
            return False
        if not self.tokens[self.cursor].opens_block:
            self.cursor -= 1
            return False
        self.nesting += 1
        if not self.next():
            return False
        if self.tokens[self.cursor].closes_block:
            self.nesting -= 1
            return False
        return True

    def remaining_args(self) -> list[str]:
        """Consume the rest of the current line, stopping before an opening brace."""
        args = []
        while self.next_arg():
            if self.tokens[self.cursor].opens_block:
                self.cursor -= 1
                break
            args.append(self.val)
        return args

    def _token(self) -> Token | None:
        if 0 <= self.cursor < len(self.tokens):
            return self.tokens[self.cursor]
        return None

    def error(self, message: str) -> ParseError:
        return ConfigSyntaxError(message, self._token(), self.filename)

    def arg_error(self) -> ParseError:
        if self.cursor >= len(self.tokens) - 1 and self.nesting > 0:
            return UnexpectedEOFError(self._token(), self.filename)
        return self.error(f"Wrong argument count or unexpected line ending after '{self.val}'")
