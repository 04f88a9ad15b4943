"""Declarations of symbols provided by the runtime library."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Generic, Optional, TypeVar

H = TypeVar("H")


class Runtime(ABC, Generic[H]):
    """Maps runtime symbol names and identifiers to their handles."""

    def __init__(self) -> None:
        self._symbol_by_name: Dict[str, H] = {}

    def symbol(self, name: str) -> Optional[H]:
        """Return the handle registered under ``name``, or None."""
        return self._symbol_by_name.get(name)

    @abstractmethod
    def symbol_name(self, id: int) -> str:
        """Return the name of the runtime symbol with identifier ``id``."""

    def symbol_by_id(self, id: int) -> H:
        """Return the handle of the runtime symbol with identifier ``id``."""
        name = self.symbol_name(id)
        try:
            return self._symbol_by_name[name]
        except KeyError:
            raise KeyError(f"runtime symbol {name!r} is not registered") from None

    def register(self, name: str, handle: H) -> None:
        """Register ``handle`` under ``name``; a name already registered is kept."""
        self._symbol_by_name.setdefault(name, handle)