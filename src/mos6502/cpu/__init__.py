"""
6502 CPU Definitions Package
============================

This package contains the 6502 instruction-set definitions shared by the
emulator core and any tooling built around it (tracers, test harnesses).

Modules:
    opcodes: Mnemonics, addressing modes, and the immutable opcode table.

Usage:
    from mos6502.cpu import (
        AddressingMode,
        Instruction,
        OpCode,
        OPCODE_TABLE,
        get_opcode,
    )
"""

from mos6502.cpu.opcodes import (
    # Core types
    AddressingMode,
    Instruction,
    OpCode,
    # Master opcode table
    OPCODE_TABLE,
    # Reference lists
    MNEMONICS,
    BRANCH_INSTRUCTIONS,
    ACCUMULATOR_INSTRUCTIONS,
    # Lookup functions
    get_opcode,
    get_opcodes,
    is_branch_instruction,
)

__all__ = [
    "AddressingMode",
    "Instruction",
    "OpCode",
    "OPCODE_TABLE",
    "MNEMONICS",
    "BRANCH_INSTRUCTIONS",
    "ACCUMULATOR_INSTRUCTIONS",
    "get_opcode",
    "get_opcodes",
    "is_branch_instruction",
]
