"""Base for the data section emitter: constants, prototypes and tables."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, TypeVar

from .constants import BOOL_CLASS_NAME, INT_CLASS_NAME, STRING_CLASS_NAME

_log = logging.getLogger(__name__)

V = TypeVar("V")
C = TypeVar("C")


class Data(ABC, Generic[V, C]):
    """Creates each constant, class structure and dispatch table once.

    Subclasses build the low-level object in the ``_make_*`` hooks; this
    class caches what they return and hands the cached value back on
    later requests. Classes are keyed by their ``name`` attribute.
    """

    def __init__(self) -> None:
        self._bool_constants: Dict[bool, V] = {}
        self._string_constants: Dict[str, V] = {}
        self._int_constants: Dict[int, V] = {}
        self._classes: Dict[str, C] = {}
        self._dispatch_tables: Dict[str, V] = {}

    @abstractmethod
    def _make_string_const(self, value: str) -> V: ...

    @abstractmethod
    def _make_bool_const(self, value: bool) -> V: ...

    @abstractmethod
    def _make_int_const(self, value: int) -> V: ...

    @abstractmethod
    def _make_class_struct(self, klass: Any) -> C: ...

    @abstractmethod
    def _make_class_disp_tab(self, klass: Any) -> V: ...

    @abstractmethod
    def _gen_class_obj_tab(self) -> None: ...

    @abstractmethod
    def _gen_class_name_tab(self) -> None: ...

    @abstractmethod
    def _emit_inner(self, out_file: str) -> None: ...

    def string_const(self, value: str) -> V:
        """Declare a string constant and return its handle."""
        if value not in self._string_constants:
            _log.debug("create string const %r", value)
            self._string_constants[value] = self._make_string_const(value)
        return self._string_constants[value]

    def bool_const(self, value: bool) -> V:
        """Declare a boolean constant and return its handle."""
        value = bool(value)
        if value not in self._bool_constants:
            _log.debug("create bool const %r", value)
            self._bool_constants[value] = self._make_bool_const(value)
        return self._bool_constants[value]

    def int_const(self, value: int) -> V:
        """Declare an integer constant and return its handle."""
        if value not in self._int_constants:
            _log.debug("create int const %r", value)
            self._int_constants[value] = self._make_int_const(value)
        return self._int_constants[value]

    def class_struct(self, klass: Any) -> C:
        """Return the low-level class structure for ``klass``."""
        name = klass.name
        if name not in self._classes:
            _log.debug("create struct for %r", name)
            self._classes[name] = self._make_class_struct(klass)
        return self._classes[name]

    def class_disp_tab(self, klass: Any) -> V:
        """Return the dispatch table handle for ``klass``."""
        name = klass.name
        if name not in self._dispatch_tables:
            _log.debug("create dispatch table for %r", name)
            self._dispatch_tables[name] = self._make_class_disp_tab(klass)
        return self._dispatch_tables[name]

    def _init_value(self, type_name: str) -> V:
        """Return the default constant for a basic type."""
        if type_name == STRING_CLASS_NAME:
            return self.string_const("")
        if type_name == INT_CLASS_NAME:
            return self.int_const(0)
        if type_name == BOOL_CLASS_NAME:
            return self.bool_const(False)
        raise ValueError(f"type {type_name!r} has no initial constant")

    def emit(self, out_file: str) -> None:
        """Generate the runtime tables, then write everything to ``out_file``."""
        self._gen_class_obj_tab()
        self._gen_class_name_tab()
        self._emit_inner(out_file)