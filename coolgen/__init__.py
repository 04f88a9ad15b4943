"""MIPS (SPIM) code generation building blocks: assembler, symbol tables, runtime symbols and constant pools."""

__version__ = "0.1.0"

__all__ = [
    "asmcore",
    "assembler",
    "constants",
    "data",
    "runtime",
    "runtime_mips",
    "symtab",
]