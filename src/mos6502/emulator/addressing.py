"""
Operand Targets for Read-Modify-Write Instructions
==================================================

ASL, LSR, ROL and ROR operate on the accumulator when their opcode uses
no addressing bytes, and on a memory byte otherwise. The two cases are
modelled as distinct target types with the same get/set interface, so the
shift logic never inspects an optional address itself.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Union


class RegisterFile(Protocol):
    """The parts of the CPU an operand target reads and writes."""
    accumulator: int

    @property
    def memory(self): ...


@dataclass(frozen=True)
class Accumulator:
    """Target the accumulator register."""

    def get(self, cpu: RegisterFile) -> int:
        return cpu.accumulator

    def set(self, cpu: RegisterFile, value: int) -> None:
        cpu.accumulator = value


@dataclass(frozen=True)
class MemoryAt:
    """Target the memory byte at a resolved address."""
    address: int

    def get(self, cpu: RegisterFile) -> int:
        return cpu.memory.read(self.address)

    def set(self, cpu: RegisterFile, value: int) -> None:
        cpu.memory.write(self.address, value)


OperandTarget = Union[Accumulator, MemoryAt]

ACCUMULATOR = Accumulator()


def operand_target(address: Optional[int]) -> OperandTarget:
    """Map a resolved address (or None for accumulator mode) to its target."""
    if address is None:
        return ACCUMULATOR
    return MemoryAt(address)
