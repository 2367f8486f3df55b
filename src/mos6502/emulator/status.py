"""
Processor Status Register
=========================

Bit layout of the status byte (P):

    7  6  5  4  3  2  1  0
    N  V  B2 B  D  I  Z  C

The bit assignment is part of the observable state: PHP and BRK push the
raw byte and PLP/RTI restore it verbatim.
"""

from enum import IntFlag


class Flags(IntFlag):
    """Status register flags."""
    C = 0x01   # Carry
    Z = 0x02   # Zero
    I = 0x04   # Interrupt disable
    D = 0x08   # Decimal
    B = 0x10   # Break
    B2 = 0x20  # Break (bit 5)
    V = 0x40   # Overflow
    N = 0x80   # Negative

    # Long-form aliases
    CARRY = 0x01
    ZERO = 0x02
    INTERRUPT_DISABLE = 0x04
    DECIMAL = 0x08
    BREAK = 0x10
    BREAK2 = 0x20
    OVERFLOW = 0x40
    NEGATIVE = 0x80


DEFAULT_STATUS = Flags.I | Flags.B | Flags.B2


class Status:
    """
    8-bit status register with derived setters.

    Every setter touches exactly one bit and is a pure function of its
    argument.

    Example:
        >>> status = Status()
        >>> status.set_zero(0)
        >>> status.contains(Flags.Z)
        True
    """

    def __init__(self, bits: int = DEFAULT_STATUS):
        self._bits = int(bits) & 0xFF

    @property
    def bits(self) -> int:
        """Raw status byte."""
        return self._bits

    @bits.setter
    def bits(self, value: int) -> None:
        self._bits = int(value) & 0xFF

    def contains(self, flag: Flags) -> bool:
        """Check whether every bit of flag is set."""
        mask = int(flag)
        return (self._bits & mask) == mask

    def set(self, flag: Flags, value: bool) -> None:
        """Set or clear the given flag."""
        mask = int(flag)
        if value:
            self._bits |= mask
        else:
            self._bits &= ~mask & 0xFF

    def set_carry(self, result: int) -> None:
        """Set carry if a 16-bit intermediate result exceeds 255."""
        self.set(Flags.C, result > 0xFF)

    def set_zero(self, result: int) -> None:
        """Set zero if the 8-bit result is zero."""
        self.set(Flags.Z, (result & 0xFF) == 0)

    def set_negative(self, result: int) -> None:
        """Set negative to bit 7 of the result."""
        self.set(Flags.N, (result & 0x80) != 0)

    def set_overflow(self, value: bool) -> None:
        self.set(Flags.V, value)

    def reset(self) -> None:
        """Restore power-on flags (I, B and B2 set)."""
        self._bits = int(DEFAULT_STATUS)

    def __int__(self) -> int:
        return self._bits

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Status):
            return self._bits == other._bits
        if isinstance(other, int):
            return self._bits == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        names = "".join(
            name if self._bits & flag else "-"
            for name, flag in (
                ("N", Flags.N), ("V", Flags.V), ("B", Flags.B2), ("B", Flags.B),
                ("D", Flags.D), ("I", Flags.I), ("Z", Flags.Z), ("C", Flags.C),
            )
        )
        return f"Status(${self._bits:02X} {names})"
