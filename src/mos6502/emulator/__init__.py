"""
6502 Processor Core
===================

Instruction-level emulation of the MOS 6502 and the Ricoh 2A03 console
variant.

Quick Start
-----------

Basic usage::

    >>> from mos6502.emulator import CPU
    >>> cpu = CPU()
    >>> cpu.load_and_run([0xA9, 0x05, 0x00])
    2
    >>> cpu.accumulator
    5

Stepping under a bound::

    >>> cpu = CPU("MOS6502")
    >>> cpu.load(program)
    >>> cpu.reset()
    >>> while not cpu.halted and cpu.instruction_count < 10_000:
    ...     cpu.step()

Module Structure
----------------

- `cpu.py`: CPU class, addressing modes, instruction semantics
- `memory.py`: Flat 64KB memory and vector locations
- `status.py`: Status register and flag bits
- `stack.py`: Stack pointer
- `addressing.py`: Accumulator/memory operand targets
- `models.py`: Processor variant configurations
"""

from .cpu import CPU, CPUState

from .memory import (
    Memory,
    MEMORY_SIZE,
    ZERO_PAGE,
    STACK_PAGE,
    RESET_VECTOR,
    INTERRUPT_VECTOR,
)

from .status import Flags, Status, DEFAULT_STATUS
from .stack import StackPointer
from .addressing import Accumulator, MemoryAt, OperandTarget, operand_target

from .models import (
    CPUModel,
    get_model,
    list_models,
    MODEL_NES,
    MODEL_MOS6502,
    MODEL_DEFAULT,
)

__all__ = [
    # CPU
    "CPU",
    "CPUState",

    # Memory
    "Memory",
    "MEMORY_SIZE",
    "ZERO_PAGE",
    "STACK_PAGE",
    "RESET_VECTOR",
    "INTERRUPT_VECTOR",

    # Registers
    "Flags",
    "Status",
    "DEFAULT_STATUS",
    "StackPointer",

    # Operand targets
    "Accumulator",
    "MemoryAt",
    "OperandTarget",
    "operand_target",

    # Models
    "CPUModel",
    "get_model",
    "list_models",
    "MODEL_NES",
    "MODEL_MOS6502",
    "MODEL_DEFAULT",
]
