"""
6502 Instruction Set Definition
===============================

This module defines the documented 6502 instruction set: the 56 mnemonics,
the twelve addressing modes, and the opcode table mapping every legal code
byte to its instruction, size, base cycle count and addressing mode.

The 6502 is little-endian: 16-bit operands are stored low byte first.

Addressing Modes
----------------
1. **IMMEDIATE**: Literal byte follows opcode (e.g., LDA #$41 -> $A9 $41)
2. **ZERO_PAGE / ZERO_PAGE_X / ZERO_PAGE_Y**: One address byte, optionally
   indexed, wrapped to $00-$FF
3. **ABSOLUTE / ABSOLUTE_X / ABSOLUTE_Y**: Two address bytes, optionally
   indexed, wrapped to 16 bits
4. **INDIRECT**: Two bytes form a pointer to the target (JMP only)
5. **INDIRECT_X**: (zero page byte + X) is a pointer to the target
6. **INDIRECT_Y**: Zero page byte is a pointer; target = pointee + Y
7. **RELATIVE**: Signed branch displacement from the next instruction
8. **NONE_ADDRESSING**: Implied or accumulator operand, no bytes follow

Cycle counts are the documented base counts. They are advisory metadata:
page-crossing and branch-taken penalties are not modelled.

Reference
---------
- MOS MCS6500 Microcomputer Family Programming Manual
- http://www.6502.org/tutorials/6502opcodes.html
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Addressing Mode Enumeration
# =============================================================================

class AddressingMode(Enum):
    """
    6502 addressing modes.

    Each mode determines how many operand bytes follow the opcode and how
    the effective address is computed from them.
    """
    IMMEDIATE = auto()
    ZERO_PAGE = auto()
    ZERO_PAGE_X = auto()
    ZERO_PAGE_Y = auto()
    ABSOLUTE = auto()
    ABSOLUTE_X = auto()
    ABSOLUTE_Y = auto()
    INDIRECT = auto()
    INDIRECT_X = auto()
    INDIRECT_Y = auto()
    RELATIVE = auto()
    NONE_ADDRESSING = auto()

    @property
    def operand_size(self) -> int:
        """Number of operand bytes consumed from the instruction stream."""
        return _OPERAND_SIZES[self]

    def __str__(self) -> str:
        """Return human-readable name for error messages."""
        return self.name.lower().replace("_", " ")


_OPERAND_SIZES = {
    AddressingMode.IMMEDIATE: 1,
    AddressingMode.ZERO_PAGE: 1,
    AddressingMode.ZERO_PAGE_X: 1,
    AddressingMode.ZERO_PAGE_Y: 1,
    AddressingMode.ABSOLUTE: 2,
    AddressingMode.ABSOLUTE_X: 2,
    AddressingMode.ABSOLUTE_Y: 2,
    AddressingMode.INDIRECT: 2,
    AddressingMode.INDIRECT_X: 1,
    AddressingMode.INDIRECT_Y: 1,
    AddressingMode.RELATIVE: 1,
    AddressingMode.NONE_ADDRESSING: 0,
}


# =============================================================================
# Mnemonic Enumeration
# =============================================================================

class Instruction(Enum):
    """The 56 documented 6502 mnemonics."""
    ADC = "ADC"  # ADd with Carry
    AND = "AND"  # logical AND
    ASL = "ASL"  # Arithmetic Shift Left
    BCC = "BCC"  # Branch if Carry Clear
    BCS = "BCS"  # Branch if Carry Set
    BEQ = "BEQ"  # Branch if EQual
    BIT = "BIT"  # BIT test
    BMI = "BMI"  # Branch if MInus
    BNE = "BNE"  # Branch if Not Equal
    BPL = "BPL"  # Branch if PLus
    BRK = "BRK"  # BReaK (force interrupt)
    BVC = "BVC"  # Branch if oVerflow Clear
    BVS = "BVS"  # Branch if oVerflow Set
    CLC = "CLC"  # CLear Carry
    CLD = "CLD"  # CLear Decimal
    CLI = "CLI"  # CLear Interrupt disable
    CLV = "CLV"  # CLear oVerflow
    CMP = "CMP"  # CoMPare accumulator
    CPX = "CPX"  # ComPare X
    CPY = "CPY"  # ComPare Y
    DEC = "DEC"  # DECrement memory
    DEX = "DEX"  # DEcrement X
    DEY = "DEY"  # DEcrement Y
    EOR = "EOR"  # Exclusive OR
    INC = "INC"  # INCrement memory
    INX = "INX"  # INcrement X
    INY = "INY"  # INcrement Y
    JMP = "JMP"  # JuMP
    JSR = "JSR"  # Jump to SubRoutine
    LDA = "LDA"  # LoaD Accumulator
    LDX = "LDX"  # LoaD X
    LDY = "LDY"  # LoaD Y
    LSR = "LSR"  # Logical Shift Right
    NOP = "NOP"  # No OPeration
    ORA = "ORA"  # logical inclusive OR
    PHA = "PHA"  # PusH Accumulator
    PHP = "PHP"  # PusH Processor status
    PLA = "PLA"  # PuLl Accumulator
    PLP = "PLP"  # PuLl Processor status
    ROL = "ROL"  # ROtate Left
    ROR = "ROR"  # ROtate Right
    RTI = "RTI"  # ReTurn from Interrupt
    RTS = "RTS"  # ReTurn from Subroutine
    SBC = "SBC"  # SuBtract with Carry
    SEC = "SEC"  # SEt Carry
    SED = "SED"  # SEt Decimal
    SEI = "SEI"  # SEt Interrupt disable
    STA = "STA"  # STore Accumulator
    STX = "STX"  # STore X
    STY = "STY"  # STore Y
    TAX = "TAX"  # Transfer A to X
    TAY = "TAY"  # Transfer A to Y
    TSX = "TSX"  # Transfer Stack pointer to X
    TXA = "TXA"  # Transfer X to A
    TXS = "TXS"  # Transfer X to Stack pointer
    TYA = "TYA"  # Transfer Y to A

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Opcode Information
# =============================================================================

@dataclass(frozen=True)
class OpCode:
    """
    Decoding information for a single opcode byte.

    This dataclass is immutable (frozen) so the opcode table cannot be
    modified at runtime.

    Attributes:
        code: The opcode byte
        instruction: Mnemonic executed by this opcode
        size: Total instruction size in bytes (opcode + operand)
        cycles: Documented base cycle count (advisory)
        mode: Addressing mode used to resolve the operand
    """
    code: int
    instruction: Instruction
    size: int
    cycles: int
    mode: AddressingMode

    def __repr__(self) -> str:
        return (
            f"OpCode(code=${self.code:02X}, {self.instruction} {self.mode}, "
            f"size={self.size}, cycles={self.cycles})"
        )


# Short aliases keep the table below readable
_I = Instruction
_M = AddressingMode


# =============================================================================
# Opcode Definitions
# =============================================================================
# Columns: code, mnemonic, size in bytes, base cycles, addressing mode.
# Only documented opcodes are listed; every other byte is undecodable.
# =============================================================================

_OPCODE_DEFINITIONS: tuple[OpCode, ...] = (
    # -------------------------------------------------------------------------
    # Loads and stores
    # -------------------------------------------------------------------------
    OpCode(0xA9, _I.LDA, 2, 2, _M.IMMEDIATE),
    OpCode(0xA5, _I.LDA, 2, 3, _M.ZERO_PAGE),
    OpCode(0xB5, _I.LDA, 2, 4, _M.ZERO_PAGE_X),
    OpCode(0xAD, _I.LDA, 3, 4, _M.ABSOLUTE),
    OpCode(0xBD, _I.LDA, 3, 4, _M.ABSOLUTE_X),
    OpCode(0xB9, _I.LDA, 3, 4, _M.ABSOLUTE_Y),
    OpCode(0xA1, _I.LDA, 2, 6, _M.INDIRECT_X),
    OpCode(0xB1, _I.LDA, 2, 5, _M.INDIRECT_Y),

    OpCode(0xA2, _I.LDX, 2, 2, _M.IMMEDIATE),
    OpCode(0xA6, _I.LDX, 2, 3, _M.ZERO_PAGE),
    OpCode(0xB6, _I.LDX, 2, 4, _M.ZERO_PAGE_Y),
    OpCode(0xAE, _I.LDX, 3, 4, _M.ABSOLUTE),
    OpCode(0xBE, _I.LDX, 3, 4, _M.ABSOLUTE_Y),

    OpCode(0xA0, _I.LDY, 2, 2, _M.IMMEDIATE),
    OpCode(0xA4, _I.LDY, 2, 3, _M.ZERO_PAGE),
    OpCode(0xB4, _I.LDY, 2, 4, _M.ZERO_PAGE_X),
    OpCode(0xAC, _I.LDY, 3, 4, _M.ABSOLUTE),
    OpCode(0xBC, _I.LDY, 3, 4, _M.ABSOLUTE_X),

    OpCode(0x85, _I.STA, 2, 3, _M.ZERO_PAGE),
    OpCode(0x95, _I.STA, 2, 4, _M.ZERO_PAGE_X),
    OpCode(0x8D, _I.STA, 3, 4, _M.ABSOLUTE),
    OpCode(0x9D, _I.STA, 3, 5, _M.ABSOLUTE_X),
    OpCode(0x99, _I.STA, 3, 5, _M.ABSOLUTE_Y),
    OpCode(0x81, _I.STA, 2, 6, _M.INDIRECT_X),
    OpCode(0x91, _I.STA, 2, 6, _M.INDIRECT_Y),

    OpCode(0x86, _I.STX, 2, 3, _M.ZERO_PAGE),
    OpCode(0x96, _I.STX, 2, 4, _M.ZERO_PAGE_Y),
    OpCode(0x8E, _I.STX, 3, 4, _M.ABSOLUTE),

    OpCode(0x84, _I.STY, 2, 3, _M.ZERO_PAGE),
    OpCode(0x94, _I.STY, 2, 4, _M.ZERO_PAGE_X),
    OpCode(0x8C, _I.STY, 3, 4, _M.ABSOLUTE),

    # -------------------------------------------------------------------------
    # Register transfers
    # -------------------------------------------------------------------------
    OpCode(0xAA, _I.TAX, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0xA8, _I.TAY, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0xBA, _I.TSX, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x8A, _I.TXA, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x9A, _I.TXS, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x98, _I.TYA, 1, 2, _M.NONE_ADDRESSING),

    # -------------------------------------------------------------------------
    # Stack operations
    # -------------------------------------------------------------------------
    OpCode(0x48, _I.PHA, 1, 3, _M.NONE_ADDRESSING),
    OpCode(0x08, _I.PHP, 1, 3, _M.NONE_ADDRESSING),
    OpCode(0x68, _I.PLA, 1, 4, _M.NONE_ADDRESSING),
    OpCode(0x28, _I.PLP, 1, 4, _M.NONE_ADDRESSING),

    # -------------------------------------------------------------------------
    # Logical
    # -------------------------------------------------------------------------
    OpCode(0x29, _I.AND, 2, 2, _M.IMMEDIATE),
    OpCode(0x25, _I.AND, 2, 3, _M.ZERO_PAGE),
    OpCode(0x35, _I.AND, 2, 4, _M.ZERO_PAGE_X),
    OpCode(0x2D, _I.AND, 3, 4, _M.ABSOLUTE),
    OpCode(0x3D, _I.AND, 3, 4, _M.ABSOLUTE_X),
    OpCode(0x39, _I.AND, 3, 4, _M.ABSOLUTE_Y),
    OpCode(0x21, _I.AND, 2, 6, _M.INDIRECT_X),
    OpCode(0x31, _I.AND, 2, 5, _M.INDIRECT_Y),

    OpCode(0x49, _I.EOR, 2, 2, _M.IMMEDIATE),
    OpCode(0x45, _I.EOR, 2, 3, _M.ZERO_PAGE),
    OpCode(0x55, _I.EOR, 2, 4, _M.ZERO_PAGE_X),
    OpCode(0x4D, _I.EOR, 3, 4, _M.ABSOLUTE),
    OpCode(0x5D, _I.EOR, 3, 4, _M.ABSOLUTE_X),
    OpCode(0x59, _I.EOR, 3, 4, _M.ABSOLUTE_Y),
    OpCode(0x41, _I.EOR, 2, 6, _M.INDIRECT_X),
    OpCode(0x51, _I.EOR, 2, 5, _M.INDIRECT_Y),

    OpCode(0x09, _I.ORA, 2, 2, _M.IMMEDIATE),
    OpCode(0x05, _I.ORA, 2, 3, _M.ZERO_PAGE),
    OpCode(0x15, _I.ORA, 2, 4, _M.ZERO_PAGE_X),
    OpCode(0x0D, _I.ORA, 3, 4, _M.ABSOLUTE),
    OpCode(0x1D, _I.ORA, 3, 4, _M.ABSOLUTE_X),
    OpCode(0x19, _I.ORA, 3, 4, _M.ABSOLUTE_Y),
    OpCode(0x01, _I.ORA, 2, 6, _M.INDIRECT_X),
    OpCode(0x11, _I.ORA, 2, 5, _M.INDIRECT_Y),

    OpCode(0x24, _I.BIT, 2, 3, _M.ZERO_PAGE),
    OpCode(0x2C, _I.BIT, 3, 4, _M.ABSOLUTE),

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------
    OpCode(0x69, _I.ADC, 2, 2, _M.IMMEDIATE),
    OpCode(0x65, _I.ADC, 2, 3, _M.ZERO_PAGE),
    OpCode(0x75, _I.ADC, 2, 4, _M.ZERO_PAGE_X),
    OpCode(0x6D, _I.ADC, 3, 4, _M.ABSOLUTE),
    OpCode(0x7D, _I.ADC, 3, 4, _M.ABSOLUTE_X),
    OpCode(0x79, _I.ADC, 3, 4, _M.ABSOLUTE_Y),
    OpCode(0x61, _I.ADC, 2, 6, _M.INDIRECT_X),
    OpCode(0x71, _I.ADC, 2, 5, _M.INDIRECT_Y),

    OpCode(0xE9, _I.SBC, 2, 2, _M.IMMEDIATE),
    OpCode(0xE5, _I.SBC, 2, 3, _M.ZERO_PAGE),
    OpCode(0xF5, _I.SBC, 2, 4, _M.ZERO_PAGE_X),
    OpCode(0xED, _I.SBC, 3, 4, _M.ABSOLUTE),
    OpCode(0xFD, _I.SBC, 3, 4, _M.ABSOLUTE_X),
    OpCode(0xF9, _I.SBC, 3, 4, _M.ABSOLUTE_Y),
    OpCode(0xE1, _I.SBC, 2, 6, _M.INDIRECT_X),
    OpCode(0xF1, _I.SBC, 2, 5, _M.INDIRECT_Y),

    OpCode(0xC9, _I.CMP, 2, 2, _M.IMMEDIATE),
    OpCode(0xC5, _I.CMP, 2, 3, _M.ZERO_PAGE),
    OpCode(0xD5, _I.CMP, 2, 4, _M.ZERO_PAGE_X),
    OpCode(0xCD, _I.CMP, 3, 4, _M.ABSOLUTE),
    OpCode(0xDD, _I.CMP, 3, 4, _M.ABSOLUTE_X),
    OpCode(0xD9, _I.CMP, 3, 4, _M.ABSOLUTE_Y),
    OpCode(0xC1, _I.CMP, 2, 6, _M.INDIRECT_X),
    OpCode(0xD1, _I.CMP, 2, 5, _M.INDIRECT_Y),

    OpCode(0xE0, _I.CPX, 2, 2, _M.IMMEDIATE),
    OpCode(0xE4, _I.CPX, 2, 3, _M.ZERO_PAGE),
    OpCode(0xEC, _I.CPX, 3, 4, _M.ABSOLUTE),

    OpCode(0xC0, _I.CPY, 2, 2, _M.IMMEDIATE),
    OpCode(0xC4, _I.CPY, 2, 3, _M.ZERO_PAGE),
    OpCode(0xCC, _I.CPY, 3, 4, _M.ABSOLUTE),

    # -------------------------------------------------------------------------
    # Increments and decrements
    # -------------------------------------------------------------------------
    OpCode(0xE6, _I.INC, 2, 5, _M.ZERO_PAGE),
    OpCode(0xF6, _I.INC, 2, 6, _M.ZERO_PAGE_X),
    OpCode(0xEE, _I.INC, 3, 6, _M.ABSOLUTE),
    OpCode(0xFE, _I.INC, 3, 7, _M.ABSOLUTE_X),
    OpCode(0xE8, _I.INX, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0xC8, _I.INY, 1, 2, _M.NONE_ADDRESSING),

    OpCode(0xC6, _I.DEC, 2, 5, _M.ZERO_PAGE),
    OpCode(0xD6, _I.DEC, 2, 6, _M.ZERO_PAGE_X),
    OpCode(0xCE, _I.DEC, 3, 6, _M.ABSOLUTE),
    OpCode(0xDE, _I.DEC, 3, 7, _M.ABSOLUTE_X),
    OpCode(0xCA, _I.DEX, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x88, _I.DEY, 1, 2, _M.NONE_ADDRESSING),

    # -------------------------------------------------------------------------
    # Shifts and rotates (NONE_ADDRESSING = accumulator)
    # -------------------------------------------------------------------------
    OpCode(0x0A, _I.ASL, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x06, _I.ASL, 2, 5, _M.ZERO_PAGE),
    OpCode(0x16, _I.ASL, 2, 6, _M.ZERO_PAGE_X),
    OpCode(0x0E, _I.ASL, 3, 6, _M.ABSOLUTE),
    OpCode(0x1E, _I.ASL, 3, 7, _M.ABSOLUTE_X),

    OpCode(0x4A, _I.LSR, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x46, _I.LSR, 2, 5, _M.ZERO_PAGE),
    OpCode(0x56, _I.LSR, 2, 6, _M.ZERO_PAGE_X),
    OpCode(0x4E, _I.LSR, 3, 6, _M.ABSOLUTE),
    OpCode(0x5E, _I.LSR, 3, 7, _M.ABSOLUTE_X),

    OpCode(0x2A, _I.ROL, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x26, _I.ROL, 2, 5, _M.ZERO_PAGE),
    OpCode(0x36, _I.ROL, 2, 6, _M.ZERO_PAGE_X),
    OpCode(0x2E, _I.ROL, 3, 6, _M.ABSOLUTE),
    OpCode(0x3E, _I.ROL, 3, 7, _M.ABSOLUTE_X),

    OpCode(0x6A, _I.ROR, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x66, _I.ROR, 2, 5, _M.ZERO_PAGE),
    OpCode(0x76, _I.ROR, 2, 6, _M.ZERO_PAGE_X),
    OpCode(0x6E, _I.ROR, 3, 6, _M.ABSOLUTE),
    OpCode(0x7E, _I.ROR, 3, 7, _M.ABSOLUTE_X),

    # -------------------------------------------------------------------------
    # Jumps and calls
    # -------------------------------------------------------------------------
    OpCode(0x4C, _I.JMP, 3, 3, _M.ABSOLUTE),
    OpCode(0x6C, _I.JMP, 3, 5, _M.INDIRECT),
    OpCode(0x20, _I.JSR, 3, 6, _M.ABSOLUTE),
    OpCode(0x60, _I.RTS, 1, 6, _M.NONE_ADDRESSING),

    # -------------------------------------------------------------------------
    # Branches
    # -------------------------------------------------------------------------
    OpCode(0x90, _I.BCC, 2, 2, _M.RELATIVE),
    OpCode(0xB0, _I.BCS, 2, 2, _M.RELATIVE),
    OpCode(0xF0, _I.BEQ, 2, 2, _M.RELATIVE),
    OpCode(0x30, _I.BMI, 2, 2, _M.RELATIVE),
    OpCode(0xD0, _I.BNE, 2, 2, _M.RELATIVE),
    OpCode(0x10, _I.BPL, 2, 2, _M.RELATIVE),
    OpCode(0x50, _I.BVC, 2, 2, _M.RELATIVE),
    OpCode(0x70, _I.BVS, 2, 2, _M.RELATIVE),

    # -------------------------------------------------------------------------
    # Status flag changes
    # -------------------------------------------------------------------------
    OpCode(0x18, _I.CLC, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0xD8, _I.CLD, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x58, _I.CLI, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0xB8, _I.CLV, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x38, _I.SEC, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0xF8, _I.SED, 1, 2, _M.NONE_ADDRESSING),
    OpCode(0x78, _I.SEI, 1, 2, _M.NONE_ADDRESSING),

    # -------------------------------------------------------------------------
    # System functions
    # -------------------------------------------------------------------------
    OpCode(0x00, _I.BRK, 1, 7, _M.NONE_ADDRESSING),
    OpCode(0x40, _I.RTI, 1, 6, _M.NONE_ADDRESSING),
    OpCode(0xEA, _I.NOP, 1, 2, _M.NONE_ADDRESSING),
)


def _build_table(definitions: tuple[OpCode, ...]) -> tuple[Optional[OpCode], ...]:
    """Build the 256-slot dispatch table, rejecting duplicate codes."""
    table: list[Optional[OpCode]] = [None] * 256
    for opcode in definitions:
        if table[opcode.code] is not None:
            raise ValueError(f"Duplicate opcode ${opcode.code:02X}")
        table[opcode.code] = opcode
    return tuple(table)


# Indexed by code byte; None marks an undocumented opcode
OPCODE_TABLE: tuple[Optional[OpCode], ...] = _build_table(_OPCODE_DEFINITIONS)


# =============================================================================
# Instruction Set Reference Lists
# =============================================================================

MNEMONICS: frozenset[str] = frozenset(i.value for i in Instruction)

BRANCH_INSTRUCTIONS: frozenset[Instruction] = frozenset({
    Instruction.BCC, Instruction.BCS, Instruction.BEQ, Instruction.BMI,
    Instruction.BNE, Instruction.BPL, Instruction.BVC, Instruction.BVS,
})

# Shift/rotate instructions that target the accumulator when no address
# is resolved
ACCUMULATOR_INSTRUCTIONS: frozenset[Instruction] = frozenset({
    Instruction.ASL, Instruction.LSR, Instruction.ROL, Instruction.ROR,
})


# =============================================================================
# Lookup Functions
# =============================================================================

def get_opcode(code: int) -> Optional[OpCode]:
    """
    Look up the opcode entry for a code byte.

    Args:
        code: Opcode byte (0-255)

    Returns:
        OpCode entry, or None if the byte is not a documented opcode
    """
    return OPCODE_TABLE[code & 0xFF]


def get_opcodes(instruction: Instruction) -> list[OpCode]:
    """Return every opcode encoding of an instruction, ordered by code."""
    return [op for op in OPCODE_TABLE if op is not None and op.instruction is instruction]


def is_branch_instruction(instruction: Instruction) -> bool:
    """Check if an instruction is a conditional branch."""
    return instruction in BRANCH_INSTRUCTIONS
