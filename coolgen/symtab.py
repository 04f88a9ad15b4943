"""Scoped symbol table used while emitting method bodies."""

from __future__ import annotations

import enum
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Generic, Iterator, List, TypeVar

_log = logging.getLogger(__name__)

T = TypeVar("T")


class SymbolNotFoundError(LookupError):
    """Raised when a name is not bound in any open scope."""

    def __init__(self, name: str) -> None:
        super().__init__(f"can't find symbol {name!r}")
        self.name = name


class SymbolKind(enum.Enum):
    """Base register a symbol's offset is relative to."""

    FIELD = "field"
    LOCAL = "local"


@dataclass(frozen=True)
class Symbol:
    """A field of the current object or a local slot in the frame."""

    kind: SymbolKind
    offset: int


class SymbolTable(Generic[T]):
    """Stack of scopes; lookups search from the innermost scope outwards."""

    def __init__(self) -> None:
        self._scopes: List[Dict[str, T]] = [{}]

    def symbol(self, name: str) -> T:
        """Return the innermost binding of ``name``."""
        for scope in reversed(self._scopes):
            if name in scope:
                return scope[name]
        raise SymbolNotFoundError(name)

    def add_symbol(self, name: str, symbol: T) -> None:
        """Bind ``name`` in the current scope; an existing binding there is kept."""
        if not self._scopes:
            raise IndexError("no open scope to add a symbol to")
        _log.debug("add symbol %r: %r", name, symbol)
        self._scopes[-1].setdefault(name, symbol)

    def push_scope(self) -> None:
        """Open a new innermost scope."""
        self._scopes.append({})

    def pop_scope(self) -> None:
        """Close the innermost scope."""
        if not self._scopes:
            raise IndexError("pop from an empty symbol table")
        self._scopes.pop()

    @contextmanager
    def scope(self) -> Iterator["SymbolTable[T]"]:
        """Open a scope for the duration of a ``with`` block."""
        self.push_scope()
        try:
            yield self
        finally:
            self.pop_scope()