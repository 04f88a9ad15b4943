# coolgen

Building blocks for emitting MIPS assembly that runs under SPIM, as used by
the back end of a COOL compiler. The package has no dependencies outside the
standard library.

## Modules

- `coolgen.asmcore` – the code buffer (`CodeBuffer`), registers (`Register`,
  `Reg`), labels (`Label`, `LabelPolicy`) and the bookkeeping context
  (`AsmContext`) that records which registers are reserved and which labels
  have been bound. Misuse raises `AssemblerError`: reserving a register that
  is already in use, binding a label twice or binding one that was never
  declared.
- `coolgen.assembler` – `Assembler`, which writes MIPS instructions and data
  directives (`.word`, `.byte`, `.ascii`, `.align`, `.globl`, `.data`,
  `.text`) into a `CodeBuffer` and tracks the stack pointer offset across
  `push` and `pop`. The registers `$sp`, `$ra`, `$fp` and `$zero` are
  reserved once per context and exposed as the properties `sp`, `ra`, `fp`
  and `zero`.
- `coolgen.symtab` – a scoped `SymbolTable` mapping names to values such as
  `Symbol` (a `SymbolKind` of `FIELD` or `LOCAL`, and an offset). Lookups
  search the innermost scope first and raise `SymbolNotFoundError` when
  nothing matches. `scope()` opens a scope for the length of a `with` block.
- `coolgen.runtime` – `Runtime`, an abstract lookup of runtime-library
  symbols by name (`symbol`, returning `None` when absent) or by id
  (`symbol_by_id`, raising `KeyError` when the symbol is not registered).
- `coolgen.runtime_mips` – `RuntimeMips` and the `RuntimeSymbol` ids. It
  declares labels for the runtime routines (`equality_test`, `Object.copy`,
  `_case_abort`, `_case_abort2`, `_dispatch_abort`, `_GenGC_Assign`), which
  need not be bound, and for the tables `class_objTab` and `class_nameTab`,
  which must be bound by the generated program.
- `coolgen.data` – `Data`, an abstract base for a constant pool. It creates
  each string, integer and boolean constant, class structure and dispatch
  table once through hooks a subclass implements, and returns the cached
  handle on later requests. `emit(out_file)` generates the class object and
  class name tables and then writes the output through the subclass.
- `coolgen.constants` – word size, mark-word values, the true/false/default
  values and the names of the basic classes.

## Emitting code

```python
from coolgen.asmcore import AsmContext, CodeBuffer, Label, LabelPolicy, Reg, Register
from coolgen.assembler import Assembler

context = AsmContext()
code = CodeBuffer("")
asm = Assembler(code, context)

asm.text_section()
loop = Label("loop_header", context, LabelPolicy.MUST_BIND)
asm.mark(loop)
with Register(Reg.T1, context) as t1:
    asm.li(t1, 1)
    asm.push(t1)
    asm.pop(t1)
asm.j(loop)

context.check_labels()   # raises AssemblerError if a required label was never bound
print(str(code))
```

Every instruction and directive is indented by four spaces and ends with a
newline; a bound label is written as `name:` at the start of its line.
`encode_string` writes text with `.ascii`, escaping newlines and double
quotes, and writes each backslash as a separate `.byte 92`.
`AsmContext.dump()` returns a text listing of the tracked labels and
reserved registers.

## Scoped symbols

```python
from coolgen.symtab import Symbol, SymbolKind, SymbolTable, SymbolNotFoundError

table = SymbolTable()
with table.scope():
    table.add_symbol("count", Symbol(SymbolKind.FIELD, 12))
    table.symbol("count")    # Symbol(kind=SymbolKind.FIELD, offset=12)

try:
    table.symbol("count")
except SymbolNotFoundError:
    pass
```

## What the package does not do

This package holds the low-level pieces only. It has no parser or type
checker, no emitter that turns a program's classes and expressions into
code, no concrete `Data` subclass that lays out prototypes and constants,
and no command-line compiler. Those have to be supplied by the code that
uses it.

## Tests

The test suite lives in `tests/` and uses pytest; install the `test` extra
to get it.