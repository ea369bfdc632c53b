"""
Registry of the directives the parser accepts.

A builtin directive has a handler that is called with the Parser and
consumes its own arguments. A middleware directive is only a name: the
parser collects its tokens into the ControllerStore for later use.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .parser import Parser

Handler = Callable[["Parser"], None]


@dataclass
class DirectiveRegistry:
    """
    Builtin handlers and middleware names known to one parser.

    Usage:
        registry = DirectiveRegistry()
        registry.register_builtin("root", parse_root)
        registry.register_middleware("gzip")
    """
    builtins: dict[str, Handler] = field(default_factory=dict)
    middleware: set[str] = field(default_factory=set)

    def _check_free(self, name: str) -> None:
        if name in self.builtins or name in self.middleware:
            raise ValueError(f"Directive '{name}' is already registered")

    def register_builtin(self, name: str, handler: Handler) -> None:
        self._check_free(name)
        self.builtins[name] = handler

    def register_middleware(self, *names: str) -> None:
        for name in names:
            self._check_free(name)
            self.middleware.add(name)

    def lookup_builtin(self, name: str) -> Handler | None:
        return self.builtins.get(name)

    def is_middleware(self, name: str) -> bool:
        return name in self.middleware
