"""Runtime library symbols known to the SPIM code generator."""

from __future__ import annotations

import enum

from .asmcore import AsmContext, Label, LabelPolicy
from .runtime import Runtime


class RuntimeSymbol(enum.IntEnum):
    """Identifiers of runtime symbols."""

    EQUALITY_TEST = 0
    OBJECT_COPY = 1
    CASE_ABORT = 2
    CASE_ABORT2 = 3
    DISPATCH_ABORT = 4

    GEN_GC_ASSIGN = 5
    MEM_MGR_INIT = 6
    MEM_MGR_COLLECTOR = 7
    GEN_GC_INIT = 8
    MEM_MGR_TEST = 9
    GEN_GC_COLLECT = 10

    INT_TAG_NAME = 11
    BOOL_TAG_NAME = 12
    STRING_TAG_NAME = 13

    HEAP_START = 14

    CLASS_OBJ_TAB = 15
    CLASS_NAME_TAB = 16


_SYMBOLS = (
    "equality_test",
    "Object.copy",
    "_case_abort",
    "_case_abort2",
    "_dispatch_abort",
    "_GenGC_Assign",
    "_MemMgr_INITIALIZER",
    "_MemMgr_COLLECTOR",
    "_GenGC_Init",
    "_MemMgr_TEST",
    "_GenGC_Collect",
    "_int_tag",
    "_bool_tag",
    "_string_tag",
    "heap_start",
    "class_objTab",
    "class_nameTab",
)

_EXTERNAL = (
    RuntimeSymbol.EQUALITY_TEST,
    RuntimeSymbol.OBJECT_COPY,
    RuntimeSymbol.CASE_ABORT,
    RuntimeSymbol.CASE_ABORT2,
    RuntimeSymbol.DISPATCH_ABORT,
    RuntimeSymbol.GEN_GC_ASSIGN,
)

_TABLES = (RuntimeSymbol.CLASS_NAME_TAB, RuntimeSymbol.CLASS_OBJ_TAB)


class RuntimeMips(Runtime[Label]):
    """Labels of runtime routines and of the tables the program must define."""

    def __init__(self, context: AsmContext) -> None:
        super().__init__()
        # the tables are defined by the generated program, so they must be bound
        for sym in _TABLES:
            self.register(self.symbol_name(sym), Label(self.symbol_name(sym), context))
        # the routines live in the runtime library
        for sym in _EXTERNAL:
            name = self.symbol_name(sym)
            self.register(name, Label(name, context, LabelPolicy.ALLOW_NO_BIND))

    def symbol_name(self, id: int) -> str:
        """Return the name of the runtime symbol with identifier ``id``."""
        index = int(id)
        if not 0 <= index < len(_SYMBOLS):
            raise IndexError(f"unknown runtime symbol id {id!r}")
        return _SYMBOLS[index]