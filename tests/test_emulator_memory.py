"""
Memory Subsystem Unit Tests
===========================

Tests for the flat 64KB memory: byte and word access, wraparound, and
program loading.
"""

import pytest
from mos6502.emulator import Memory, MEMORY_SIZE, RESET_VECTOR


@pytest.fixture
def memory():
    return Memory()


# =============================================================================
# Byte Access
# =============================================================================

class TestByteAccess:
    """Test 8-bit reads and writes."""

    def test_memory_size(self, memory):
        """Address space covers the full 64KB."""
        assert len(memory) == MEMORY_SIZE == 0x10000

    def test_memory_initialization(self, memory):
        """Memory starts zeroed, including the last byte."""
        assert memory.read(0x0000) == 0
        assert memory.read(0x8000) == 0
        assert memory.read(0xFFFF) == 0

    def test_read_write(self, memory):
        memory.write(0x1234, 0x42)
        assert memory.read(0x1234) == 0x42

    def test_last_address_is_writable(self, memory):
        """$FFFF is a real cell, not an off-by-one casualty."""
        memory.write(0xFFFF, 0x99)
        assert memory.read(0xFFFF) == 0x99

    def test_write_masks_value(self, memory):
        memory.write(0x10, 0x1FF)
        assert memory.read(0x10) == 0xFF

    def test_address_wraps(self, memory):
        memory.write(0x10000, 0x11)
        assert memory.read(0x0000) == 0x11


# =============================================================================
# Word Access
# =============================================================================

class TestWordAccess:
    """Test 16-bit little-endian reads and writes."""

    def test_write_word_little_endian(self, memory):
        memory.write_word(0x10, 0xBAFC)
        assert memory.read(0x10) == 0xFC
        assert memory.read(0x11) == 0xBA

    def test_read_word_little_endian(self, memory):
        memory.write(0x20, 0x34)
        memory.write(0x21, 0x12)
        assert memory.read_word(0x20) == 0x1234

    def test_read_word_wraps_at_top(self, memory):
        """A word at $FFFF takes its high byte from $0000."""
        memory.write(0xFFFF, 0xCD)
        memory.write(0x0000, 0xAB)
        assert memory.read_word(0xFFFF) == 0xABCD

    def test_write_word_masks_value(self, memory):
        memory.write_word(0x30, 0x12345)
        assert memory.read_word(0x30) == 0x2345


# =============================================================================
# Program Loading
# =============================================================================

class TestLoad:
    """Test load() and read_block()."""

    def test_load_copies_bytes(self, memory):
        memory.load(bytes([0xA9, 0x05, 0x00]), 0x8000)
        assert memory.read_block(0x8000, 3) == bytes([0xA9, 0x05, 0x00])

    def test_load_sets_reset_vector(self, memory):
        memory.load([0xEA], 0x0600)
        assert memory.read_word(RESET_VECTOR) == 0x0600

    def test_load_accepts_list(self, memory):
        memory.load([1, 2, 3], 0x0200)
        assert memory.read(0x0202) == 3

    def test_load_rejects_non_byte(self, memory):
        with pytest.raises(ValueError):
            memory.load([0x100], 0x8000)

    def test_load_leaves_other_memory(self, memory):
        memory.write(0x0010, 0x55)
        memory.load([0xEA, 0xEA], 0x8000)
        assert memory.read(0x0010) == 0x55
        assert memory.read(0x8002) == 0

    def test_read_block_wraps(self, memory):
        memory.write(0xFFFF, 0x01)
        memory.write(0x0000, 0x02)
        assert memory.read_block(0xFFFF, 2) == bytes([0x01, 0x02])

    def test_clear(self, memory):
        memory.write(0x4000, 0x77)
        memory.clear()
        assert memory.read(0x4000) == 0
