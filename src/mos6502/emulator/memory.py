"""
Memory Subsystem for the 6502 Core
==================================

A flat 64KB address space with byte and little-endian word access.

Memory Map (fixed locations used by the core):
    $0000-$00FF  Zero page (single-byte addressing)
    $0100-$01FF  Stack page
    $FFFC-$FFFD  Reset vector (program counter after reset)
    $FFFE-$FFFF  Interrupt vector (program counter after BRK)

Everything else is plain RAM; memory-mapped I/O belongs to a surrounding
console layer, not to this core. All addresses wrap modulo 64KB, so a word
read at $FFFF takes its high byte from $0000.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from typing import Iterable

logger = logging.getLogger(__name__)


MEMORY_SIZE = 0x10000

ZERO_PAGE = 0x0000
STACK_PAGE = 0x0100
RESET_VECTOR = 0xFFFC
INTERRUPT_VECTOR = 0xFFFE


class Memory:
    """
    64KB addressable store.

    Memory starts zeroed. It is only changed through write(), write_word()
    and load(); reset() on the CPU never touches it.

    Example:
        >>> mem = Memory()
        >>> mem.write_word(0x10, 0xBAFC)
        >>> mem.read(0x10), mem.read(0x11)
        (252, 186)
    """

    def __init__(self):
        self._data = bytearray(MEMORY_SIZE)

    def __len__(self) -> int:
        return MEMORY_SIZE

    # ========================================
    # Typed Access
    # ========================================

    def read(self, address: int) -> int:
        """Read byte at address."""
        return self._data[address & 0xFFFF]

    def write(self, address: int, value: int) -> None:
        """Write byte to address (value masked to 8 bits)."""
        self._data[address & 0xFFFF] = value & 0xFF

    def read_word(self, address: int) -> int:
        """Read 16-bit little-endian word (low byte at address)."""
        lo = self.read(address)
        hi = self.read(address + 1)
        return (hi << 8) | lo

    def write_word(self, address: int, value: int) -> None:
        """Write 16-bit little-endian word (low byte at address)."""
        self.write(address, value & 0xFF)
        self.write(address + 1, (value >> 8) & 0xFF)

    # ========================================
    # Bulk Operations
    # ========================================

    def load(self, program: Iterable[int], origin: int) -> None:
        """
        Copy program bytes into memory and point the reset vector at them.

        Bytes are written starting at origin, wrapping at $FFFF. The reset
        vector is written after the copy, so it always holds origin.

        Args:
            program: Raw program bytes
            origin: Address of the first program byte

        Raises:
            ValueError: If any value is not a byte (0-255)
        """
        data = bytes(program)
        origin &= 0xFFFF
        for offset, value in enumerate(data):
            self._data[(origin + offset) & 0xFFFF] = value
        self.write_word(RESET_VECTOR, origin)
        logger.debug(f"Loaded {len(data)} bytes at ${origin:04X}")

    def read_block(self, address: int, length: int) -> bytes:
        """
        Read a block of bytes, wrapping at the end of the address space.

        Args:
            address: Start address
            length: Number of bytes

        Returns:
            Copy of the memory contents
        """
        return bytes(self.read(address + i) for i in range(length))

    def clear(self) -> None:
        """Zero the whole address space."""
        self._data = bytearray(MEMORY_SIZE)
