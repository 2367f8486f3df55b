"""
mos6502 - Instruction-Level 6502 Processor Core
===============================================

This package emulates the instruction set of the MOS 6502 and its Ricoh
2A03 console derivative, for use as the CPU of a retro-computer or
game-console emulator.

Main Components
---------------
- **cpu**: Instruction set definitions
    Mnemonics, addressing modes and the immutable opcode table

- **emulator**: Processor core
    Memory, status register, stack, and the fetch-decode-execute loop

- **cli**: Command-line runner (run6502)

Quick Start
-----------
    >>> from mos6502 import CPU
    >>> cpu = CPU()
    >>> cpu.load_and_run(bytes([0xA9, 0xFF, 0xAA, 0xE8, 0xE8, 0x00]))
    5
    >>> cpu.index_x
    1

Or from the shell:
    $ run6502 program.bin --model MOS6502
"""

__version__ = "1.0.0"

from mos6502.emulator import CPU, CPUState, Flags, Memory, Status, StackPointer
from mos6502.errors import (
    Mos6502Error,
    ExecutionError,
    UnrecognizedOpcodeError,
    MissingOperandError,
)

__all__ = [
    "__version__",
    "CPU",
    "CPUState",
    "Flags",
    "Memory",
    "Status",
    "StackPointer",
    "Mos6502Error",
    "ExecutionError",
    "UnrecognizedOpcodeError",
    "MissingOperandError",
]
