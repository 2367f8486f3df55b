"""
Stack Pointer
=============

The stack lives in page one ($0100-$01FF). The pointer is a single byte
offset into that page. Pushes write at the current slot and then advance
the pointer by the width of the value; pops retreat first and then read.
The pointer wraps modulo 256: overflow and underflow are not detected.
"""

from mos6502.emulator.memory import STACK_PAGE


class StackPointer:
    """
    One-byte offset into the stack page.

    Example:
        >>> sp = StackPointer(0xFF)
        >>> sp.advance(2)
        >>> sp.value, hex(sp.address)
        (1, '0x101')
    """

    def __init__(self, value: int = 0):
        self._value = value & 0xFF

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = value & 0xFF

    @property
    def address(self) -> int:
        """Physical stack address ($0100 + pointer)."""
        return STACK_PAGE + self._value

    def advance(self, offset: int) -> None:
        """Add a signed offset, wrapping modulo 256."""
        self._value = (self._value + offset) & 0xFF

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StackPointer):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"StackPointer(${self._value:02X})"
