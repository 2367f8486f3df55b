"""
MOS 6502 Core Error Hierarchy
=============================

This module defines the exception hierarchy for the processor core.
All exceptions inherit from Mos6502Error, allowing callers to catch all
core-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
Mos6502Error (base)
└── ExecutionError (fatal processor fault)
    ├── UnrecognizedOpcodeError - fetched byte has no opcode table entry
    └── MissingOperandError - instruction dispatched without an address

Design Philosophy
-----------------
Every modelled failure is a data-integrity fault, never a transient one.
Faults are raised where they are detected and terminate the run; nothing
in the core retries or resumes. A surrounding emulator shell may catch the
fault and call ``CPU.reset()``.

Error messages follow this format:
    $ADDR: error: description
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class Mos6502Error(Exception):
    """
    Base exception for all processor core errors.

        try:
            cpu.load_and_run(program)
        except Mos6502Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Execution Faults
# =============================================================================

class ExecutionError(Mos6502Error):
    """
    Fatal fault raised by the execution core.

    Attributes:
        message: The error description
        address: Address of the faulting opcode byte (optional)
    """

    def __init__(self, message: str, address: Optional[int] = None):
        self.message = message
        self.address = address
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.address is None:
            return f"error: {self.message}"
        return f"${self.address:04X}: error: {self.message}"


class UnrecognizedOpcodeError(ExecutionError):
    """
    Fetched code byte has no entry in the opcode table.

    Only documented 6502 opcodes are decoded; any other byte terminates
    the run immediately.
    """

    def __init__(self, opcode: int, address: Optional[int] = None):
        self.opcode = opcode
        super().__init__(f"opcode ${opcode:02X} is not recognized", address)


class MissingOperandError(ExecutionError):
    """
    An instruction that needs an effective address was dispatched without one.

    This indicates an opcode table entry whose addressing mode does not
    match its instruction.
    """

    def __init__(self, instruction: str, opcode: int, address: Optional[int] = None):
        self.instruction = instruction
        self.opcode = opcode
        super().__init__(
            f"{instruction} (opcode ${opcode:02X}) requires an operand address",
            address,
        )
