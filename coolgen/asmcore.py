"""Building blocks for the MIPS assembler: code buffers, registers and labels."""

from __future__ import annotations

import enum
import logging
from typing import Dict, List, Optional, Set

_log = logging.getLogger(__name__)


class AssemblerError(RuntimeError):
    """Raised when registers or labels are used inconsistently."""


class CodeBuffer:
    """Accumulates assembler text, one command per line."""

    def __init__(self, text: str = "") -> None:
        self._text = str(text)

    def save(self, command: str) -> None:
        """Append ``command`` followed by a newline."""
        self._text += command + "\n"

    def __iadd__(self, other: "CodeBuffer") -> "CodeBuffer":
        self._text += str(other)
        return self

    def __str__(self) -> str:
        return self._text


class Reg(enum.Enum):
    """Registers the code generator works with."""

    SP = "$sp"
    FP = "$fp"
    RA = "$ra"
    T0 = "$t0"
    T1 = "$t1"
    T2 = "$t2"
    T3 = "$t3"
    T4 = "$t4"
    T5 = "$t5"
    T6 = "$t6"
    A0 = "$a0"
    A1 = "$a1"
    S0 = "$s0"
    ZERO = "$zero"


class LabelPolicy(enum.Enum):
    """Whether a label must be bound somewhere in the emitted code."""

    MUST_BIND = "must_bind"
    ALLOW_NO_BIND = "allow_no_bind"


class AsmContext:
    """Tracks registers in use and labels with their bound state."""

    def __init__(self) -> None:
        self.used_registers: Set[Reg] = set()
        self.used_labels: Dict[str, bool] = {}

    def _declare_label(self, name: str, policy: LabelPolicy) -> None:
        _log.debug("create label %r", name)
        self.used_labels.setdefault(name, policy is LabelPolicy.ALLOW_NO_BIND)

    def _bind_label(self, name: str) -> None:
        if name not in self.used_labels:
            raise AssemblerError(f"label {name!r} was never declared")
        if self.used_labels[name]:
            raise AssemblerError(f"label {name!r} has been already bound")
        self.used_labels[name] = True

    def _acquire(self, reg: Reg) -> None:
        if reg in self.used_registers:
            raise AssemblerError(f"register {reg.value!r} is already in use")
        self.used_registers.add(reg)

    def _release(self, reg: Reg) -> None:
        self.used_registers.discard(reg)

    def check_labels(self) -> None:
        """Raise if any label that must be bound was never bound."""
        unbound = sorted(name for name, bound in self.used_labels.items() if not bound)
        if unbound:
            _log.debug("%s", self.dump())
            raise AssemblerError("labels were not bound: " + ", ".join(unbound))

    def dump(self) -> str:
        """Describe the labels and registers currently tracked."""
        lines: List[str] = ["----------- Labels -----------"]
        lines.extend(f"{name}\tstate: {int(bound)}" for name, bound in self.used_labels.items())
        lines.append("----------- Registers -----------")
        lines.extend(reg.value for reg in Reg if reg in self.used_registers)
        return "\n".join(lines)


class Register:
    """A register reserved in a context until it is released."""

    def __init__(self, reg: Reg, context: AsmContext) -> None:
        context._acquire(reg)
        self.reg = reg
        self._context: Optional[AsmContext] = context

    def release(self) -> None:
        """Return the register to the context; further calls do nothing."""
        if self._context is not None:
            self._context._release(self.reg)
            self._context = None

    def __enter__(self) -> "Register":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __str__(self) -> str:
        return self.reg.value

    @staticmethod
    def reg_name(reg: Reg) -> str:
        """Return the assembler spelling of ``reg``."""
        return reg.value


class Label:
    """A jump or data target, declared in a context."""

    def __init__(
        self,
        name: str,
        context: AsmContext,
        policy: LabelPolicy = LabelPolicy.MUST_BIND,
    ) -> None:
        self.name = name
        self.policy = policy
        context._declare_label(name, policy)

    def __str__(self) -> str:
        return self.name