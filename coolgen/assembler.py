"""MIPS assembler that writes textual SPIM instructions into a code buffer."""

from __future__ import annotations

import weakref
from typing import Tuple, Union

from .asmcore import AsmContext, CodeBuffer, Label, Reg, Register

INDENTATION = 4
PUSH_OFFSET = -4  # the stack grows down
POP_OFFSET = 4

# spim wants some characters written as bytes rather than inside .ascii
SPECIAL_SYMBOLS = {"\\": 92}

_Operand = Union[Register, int]

# Registers reserved once per context for the whole program, as they are
# shared by every assembler that works in that context.
_reserved: "weakref.WeakKeyDictionary[AsmContext, Tuple[Register, Register, Register, Register]]" = (
    weakref.WeakKeyDictionary()
)


def _reserved_registers(context: AsmContext) -> Tuple[Register, Register, Register, Register]:
    regs = _reserved.get(context)
    if regs is None:
        regs = (
            Register(Reg.SP, context),
            Register(Reg.RA, context),
            Register(Reg.FP, context),
            Register(Reg.ZERO, context),
        )
        _reserved[context] = regs
    return regs


def _to_int8(value: int) -> int:
    return ((int(value) + 128) % 256) - 128


class Assembler:
    """Emits MIPS directives and instructions into a CodeBuffer."""

    def __init__(self, code: CodeBuffer, context: AsmContext) -> None:
        self._code = code
        self._context = context
        self._indent = " " * INDENTATION
        self._sp_offset = 0
        self._sp, self._ra, self._fp, self._zero = _reserved_registers(context)

    def _emit(self, text: str) -> None:
        self._code.save(self._indent + text)

    @property
    def sp(self) -> Register:
        """The stack pointer."""
        return self._sp

    @property
    def ra(self) -> Register:
        """The return address register."""
        return self._ra

    @property
    def fp(self) -> Register:
        """The frame pointer."""
        return self._fp

    @property
    def zero(self) -> Register:
        """The constant zero register."""
        return self._zero

    @property
    def sp_offset(self) -> int:
        """Current stack pointer offset relative to the frame."""
        return self._sp_offset

    @sp_offset.setter
    def sp_offset(self, offset: int) -> None:
        self._sp_offset = int(offset)

    def mark(self, label: Label) -> None:
        """Bind ``label`` at the current position."""
        name = str(label)
        self._code.save(name + ":")
        self._context._bind_label(name)

    # ------------------------------------------------------------ directives
    def data_section(self) -> None:
        self._emit(".data")

    def text_section(self) -> None:
        self._emit(".text")

    def align(self, words: int) -> None:
        self._emit(f".align\t{words}")

    def global_(self, symbol: Label) -> None:
        self._emit(f".globl\t{symbol}")

    def word(self, value: Union[int, Label]) -> None:
        """Declare a word holding a number or the address of a label."""
        self._emit(f".word\t{value}")

    def byte(self, value: int) -> None:
        self._emit(f".byte\t{_to_int8(value)}")

    def _ascii(self, text: str) -> None:
        escaped = text.replace("\n", "\\n").replace('"', '\\"')
        self._emit(f'.ascii\t"{escaped}"')

    def encode_string(self, text: str) -> None:
        """Emit ``text``, writing special characters as separate bytes."""
        segment = []
        for char in text:
            code = SPECIAL_SYMBOLS.get(char)
            if code is None:
                segment.append(char)
                continue
            if segment:
                self._ascii("".join(segment))
                segment.clear()
            self.byte(code)
        if segment:
            self._ascii("".join(segment))

    # ---------------------------------------------------------- instructions
    def sw(self, from_reg: Register, to_reg: Register, offset: int) -> None:
        self._emit(f"sw\t\t{from_reg} {offset}({to_reg})")

    def lw(self, to_reg: Register, from_reg: Register, offset: int) -> None:
        self._emit(f"lw\t\t{to_reg} {offset}({from_reg})")

    def la(self, to_reg: Register, label: Label) -> None:
        self._emit(f"la\t\t{to_reg} {label}")

    def move(self, result_reg: Register, from_reg: Register) -> None:
        self._emit(f"move\t{result_reg} {from_reg}")

    def li(self, reg: Register, imm: int) -> None:
        self._emit(f"li\t\t{reg} {imm}")

    def addiu(self, result_reg: Register, operand_reg: Register, imm: int) -> None:
        self._emit(f"addiu\t{result_reg} {operand_reg} {imm}")

    def push(self, reg: Register) -> None:
        """Store ``reg`` on top of the stack and grow it by one word."""
        self.sw(reg, self._sp, 0)
        self.addiu(self._sp, self._sp, PUSH_OFFSET)
        self._sp_offset += PUSH_OFFSET

    def pop(self, reg: Register | None = None) -> None:
        """Shrink the stack by one word, loading the popped value into ``reg`` if given."""
        if reg is not None:
            self.lw(reg, self._sp, POP_OFFSET)
        self.addiu(self._sp, self._sp, POP_OFFSET)
        self._sp_offset += POP_OFFSET

    def sub(self, result_reg: Register, op1_reg: Register, op2_reg: Register) -> None:
        self._emit(f"sub\t\t{result_reg} {op1_reg} {op2_reg}")

    def add(self, result_reg: Register, op1_reg: Register, op2_reg: Register) -> None:
        self._emit(f"add\t\t{result_reg} {op1_reg} {op2_reg}")

    def addu(self, result_reg: Register, op1_reg: Register, op2_reg: Register) -> None:
        self._emit(f"addu\t{result_reg} {op1_reg} {op2_reg}")

    def mul(self, result_reg: Register, op1_reg: Register, op2_reg: Register) -> None:
        self._emit(f"mul\t\t {result_reg} {op1_reg} {op2_reg}")

    def div(self, result_reg: Register, op1_reg: Register, op2_reg: Register) -> None:
        self._emit(f"div\t\t{op1_reg} {op2_reg}")
        self._emit(f"mflo\t{result_reg}")

    def xorr(self, result_reg: Register, op1_reg: Register, op2_reg: Register) -> None:
        self._emit(f"xor\t\t{result_reg} {op1_reg} {op2_reg}")

    def xori(self, result_reg: Register, op_reg: Register, imm: int) -> None:
        self._emit(f"xori\t{result_reg} {op_reg} {imm}")

    def slt(self, result_reg: Register, op1_reg: Register, op2_reg: Register) -> None:
        self._emit(f"slt\t\t{result_reg} {op1_reg} {op2_reg}")

    def sll(self, result_reg: Register, op_reg: Register, imm: int) -> None:
        self._emit(f"sll\t\t{result_reg} {op_reg} {imm}")

    def ble(self, op1_reg: Register, op2_reg: Register, label: Label) -> None:
        self._emit(f"ble\t\t{op1_reg} {op2_reg} {label}")

    def bne(self, op1_reg: Register, op2_reg: Register, label: Label) -> None:
        self._emit(f"bne\t\t{op1_reg} {op2_reg} {label}")

    def bgt(self, op1_reg: Register, op2: _Operand, label: Label) -> None:
        self._emit(f"bgt\t\t{op1_reg} {op2} {label}")

    def blt(self, op1_reg: Register, op2: _Operand, label: Label) -> None:
        self._emit(f"blt\t\t{op1_reg} {op2} {label}")

    def beq(self, op1_reg: Register, op2: _Operand, label: Label) -> None:
        self._emit(f"beq\t\t{op1_reg} {op2} {label}")

    def j(self, label: Label) -> None:
        self._emit(f"j\t\t{label}")

    def jal(self, label: Label) -> None:
        self._emit(f"jal\t\t{label}")

    def jalr(self, reg: Register) -> None:
        self._emit(f"jalr\t{reg}")

    def jr(self, reg: Register) -> None:
        self._emit(f"jr\t\t{reg}")