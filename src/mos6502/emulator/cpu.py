"""
6502 CPU Emulator
=================

Instruction-level emulation of the MOS 6502 and its Ricoh 2A03 console
derivative.

The 6502 has:
- 8-bit registers: A (accumulator), X, Y (index)
- 8-bit stack pointer into page one ($0100-$01FF)
- 16-bit program counter
- Flags: N (negative), V (overflow), B/B2 (break), D (decimal),
  I (interrupt disable), Z (zero), C (carry)

Execution is a two-state machine. run() fetches, decodes and executes
instructions until a BRK has executed, then the CPU is halted. Cycle
counts from the opcode table are accumulated for information only; no
timing model is enforced.

Example:
    >>> cpu = CPU()
    >>> cpu.load_and_run([0xA9, 0x05, 0x00])  # LDA #$05; BRK
    2
    >>> cpu.accumulator
    5

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from mos6502.cpu.opcodes import AddressingMode, Instruction, OpCode, OPCODE_TABLE
from mos6502.emulator.addressing import operand_target
from mos6502.emulator.memory import Memory, INTERRUPT_VECTOR, RESET_VECTOR
from mos6502.emulator.models import CPUModel, MODEL_DEFAULT, get_model
from mos6502.emulator.stack import StackPointer
from mos6502.emulator.status import Flags, Status
from mos6502.errors import MissingOperandError, UnrecognizedOpcodeError

logger = logging.getLogger(__name__)


@dataclass
class CPUState:
    """
    Register snapshot.

    All values stored as Python ints:
    - accumulator, index_x, index_y, stack_pointer, status: 8-bit (0-255)
    - program_counter: 16-bit (0-65535)
    """
    accumulator: int = 0
    index_x: int = 0
    index_y: int = 0
    program_counter: int = 0
    stack_pointer: int = 0
    status: int = int(Flags.I | Flags.B | Flags.B2)


class CPU:
    """
    6502 CPU emulator.

    The CPU exclusively owns its 64KB memory and all registers. Everything
    runs synchronously: each instruction completes, including its memory
    writes, before the next is fetched.

    Instrumentation:
        on_instruction(pc, opcode) -> bool is called before each fetch
        inside run(); returning False stops the run before that
        instruction executes. The CPU is not halted by this.

    Example:
        >>> cpu = CPU("MOS6502")
        >>> cpu.load([0xA9, 0xFF, 0xAA, 0xE8, 0xE8, 0x00])
        >>> cpu.reset()
        >>> cpu.run()
        5
        >>> cpu.index_x
        1
    """

    def __init__(self, model: Union[CPUModel, str] = MODEL_DEFAULT):
        """
        Initialize CPU with zeroed memory and power-on registers.

        Args:
            model: Processor variant or its code ("NES", "MOS6502")
        """
        if isinstance(model, str):
            model = get_model(model)
        self.model = model
        self.memory = Memory()

        self._accumulator = 0
        self._index_x = 0
        self._index_y = 0
        self._program_counter = 0
        self.stack_pointer = StackPointer()
        self.status = Status()

        self.halted = False
        self.instruction_count = 0
        self.cycles = 0

        self.on_instruction: Optional[Callable[[int, int], bool]] = None

        # Address of the opcode byte currently executing, for fault reports
        self._instruction_address = 0

    # ========================================
    # Register Properties
    # ========================================

    @property
    def accumulator(self) -> int:
        """Accumulator A (8-bit)."""
        return self._accumulator

    @accumulator.setter
    def accumulator(self, value: int) -> None:
        self._accumulator = value & 0xFF

    @property
    def index_x(self) -> int:
        """Index register X (8-bit)."""
        return self._index_x

    @index_x.setter
    def index_x(self, value: int) -> None:
        self._index_x = value & 0xFF

    @property
    def index_y(self) -> int:
        """Index register Y (8-bit)."""
        return self._index_y

    @index_y.setter
    def index_y(self, value: int) -> None:
        self._index_y = value & 0xFF

    @property
    def program_counter(self) -> int:
        """Program counter (16-bit)."""
        return self._program_counter

    @program_counter.setter
    def program_counter(self, value: int) -> None:
        self._program_counter = value & 0xFFFF

    def snapshot(self) -> CPUState:
        """Copy the current registers into a CPUState."""
        return CPUState(
            accumulator=self.accumulator,
            index_x=self.index_x,
            index_y=self.index_y,
            program_counter=self.program_counter,
            stack_pointer=self.stack_pointer.value,
            status=self.status.bits,
        )

    def restore(self, state: CPUState) -> None:
        """Load registers from a CPUState. Memory is untouched."""
        self.accumulator = state.accumulator
        self.index_x = state.index_x
        self.index_y = state.index_y
        self.program_counter = state.program_counter
        self.stack_pointer.value = state.stack_pointer
        self.status.bits = state.status

    # ========================================
    # Lifecycle
    # ========================================

    def load(self, program) -> None:
        """
        Copy program bytes to the variant's ROM origin.

        The reset vector at $FFFC is pointed at the origin, so the next
        reset() starts execution at the first program byte.

        Args:
            program: Raw program bytes (bytes, bytearray or list of ints)
        """
        self.memory.load(program, self.model.rom_origin)

    def reset(self) -> None:
        """
        Reset registers to power-on state.

        Clears A, X, Y and the stack pointer, restores the default flags
        (I, B, B2) and loads the program counter from the reset vector.
        Memory is preserved.
        """
        self.accumulator = 0
        self.index_x = 0
        self.index_y = 0
        self.stack_pointer.value = 0
        self.status.reset()
        self.program_counter = self.memory.read_word(RESET_VECTOR)
        self.halted = False
        self.instruction_count = 0
        self.cycles = 0
        logger.debug(f"Reset: PC=${self.program_counter:04X} ({self.model.model_type})")

    def load_and_run(self, program) -> int:
        """Load, reset, and run until BRK. Returns instructions executed."""
        self.load(program)
        self.reset()
        return self.run()

    # ========================================
    # Main Execution Loop
    # ========================================

    def run(self) -> int:
        """
        Execute instructions until a BRK has executed.

        Returns:
            Number of instructions executed by this call

        Raises:
            UnrecognizedOpcodeError: Fetched byte is not a documented opcode
            MissingOperandError: Opcode table entry is inconsistent
        """
        self.halted = False
        executed = 0

        while not self.halted:
            if self.on_instruction is not None:
                pc = self.program_counter
                if not self.on_instruction(pc, self.memory.read(pc)):
                    logger.debug(f"Run stopped by instruction hook at ${pc:04X}")
                    break
            self.step()
            executed += 1

        logger.debug(f"Run finished after {executed} instructions, PC=${self.program_counter:04X}")
        return executed

    def step(self) -> OpCode:
        """
        Execute exactly one instruction.

        Returns:
            The decoded opcode entry of the executed instruction
        """
        self._instruction_address = self.program_counter
        code = self._fetch_byte()

        opcode = OPCODE_TABLE[code]
        if opcode is None:
            logger.error(f"Unrecognized opcode ${code:02X} at ${self._instruction_address:04X}")
            raise UnrecognizedOpcodeError(code, self._instruction_address)

        address = self._resolve_address(opcode.mode)
        self._execute(opcode, address)

        self.instruction_count += 1
        self.cycles += opcode.cycles

        if opcode.instruction is Instruction.BRK:
            self.halted = True
            logger.debug(f"BRK at ${self._instruction_address:04X}, halted")

        return opcode

    # ========================================
    # Program Counter Operations
    # ========================================

    def _fetch_byte(self) -> int:
        """Fetch next byte at PC and increment PC."""
        value = self.memory.read(self.program_counter)
        self.program_counter += 1
        return value

    def _fetch_word(self) -> int:
        """Fetch next little-endian word at PC and increment PC by 2."""
        value = self.memory.read_word(self.program_counter)
        self.program_counter += 2
        return value

    def _read_zero_page_word(self, pointer: int) -> int:
        """Read a pointer from the zero page; the high byte wraps within it."""
        lo = self.memory.read(pointer & 0xFF)
        hi = self.memory.read((pointer + 1) & 0xFF)
        return (hi << 8) | lo

    # ========================================
    # Addressing Modes
    # ========================================

    def _resolve_address(self, mode: AddressingMode) -> Optional[int]:
        """
        Consume operand bytes and compute the effective address.

        Returns None for NONE_ADDRESSING (implied or accumulator operand).
        """
        match mode:
            case AddressingMode.IMMEDIATE:
                # The operand byte itself is the target
                address = self.program_counter
                self.program_counter += 1
                return address
            case AddressingMode.ZERO_PAGE:
                return self._fetch_byte()
            case AddressingMode.ZERO_PAGE_X:
                return (self._fetch_byte() + self.index_x) & 0xFF
            case AddressingMode.ZERO_PAGE_Y:
                return (self._fetch_byte() + self.index_y) & 0xFF
            case AddressingMode.ABSOLUTE:
                return self._fetch_word()
            case AddressingMode.ABSOLUTE_X:
                return (self._fetch_word() + self.index_x) & 0xFFFF
            case AddressingMode.ABSOLUTE_Y:
                return (self._fetch_word() + self.index_y) & 0xFFFF
            case AddressingMode.INDIRECT:
                return self.memory.read_word(self._fetch_word())
            case AddressingMode.INDIRECT_X:
                pointer = (self._fetch_byte() + self.index_x) & 0xFF
                return self._read_zero_page_word(pointer)
            case AddressingMode.INDIRECT_Y:
                pointer = self._fetch_byte()
                return (self._read_zero_page_word(pointer) + self.index_y) & 0xFFFF
            case AddressingMode.RELATIVE:
                displacement = self._fetch_byte()
                if displacement & 0x80:
                    displacement -= 0x100
                return (self.program_counter + displacement) & 0xFFFF
            case AddressingMode.NONE_ADDRESSING:
                return None

    # ========================================
    # Stack Operations
    # ========================================

    def push_byte(self, value: int) -> None:
        """Push byte onto stack (write, then advance)."""
        self.memory.write(self.stack_pointer.address, value)
        self.stack_pointer.advance(1)

    def push_word(self, value: int) -> None:
        """Push little-endian word onto stack (write, then advance by 2)."""
        self.memory.write_word(self.stack_pointer.address, value)
        self.stack_pointer.advance(2)

    def pop_byte(self) -> int:
        """Pop byte from stack (retreat, then read)."""
        self.stack_pointer.advance(-1)
        return self.memory.read(self.stack_pointer.address)

    def pop_word(self) -> int:
        """Pop word from stack (retreat by 2, then read)."""
        self.stack_pointer.advance(-2)
        return self.memory.read_word(self.stack_pointer.address)

    # ========================================
    # ALU Helpers
    # ========================================

    def _set_negative_zero(self, value: int) -> None:
        self.status.set_negative(value)
        self.status.set_zero(value)

    def _set_accumulator(self, value: int) -> None:
        self.accumulator = value
        self._set_negative_zero(self.accumulator)

    def _set_index_x(self, value: int) -> None:
        self.index_x = value
        self._set_negative_zero(self.index_x)

    def _set_index_y(self, value: int) -> None:
        self.index_y = value
        self._set_negative_zero(self.index_y)

    def _add_to_accumulator(self, value: int) -> None:
        """Binary add with carry, set C,V,N,Z flags."""
        carry = 1 if self.status.contains(Flags.C) else 0
        total = self.accumulator + value + carry
        self.status.set_carry(total)
        result = total & 0xFF
        # Overflow: operands share a sign that the result does not
        self.status.set_overflow(((value ^ result) & (result ^ self.accumulator) & 0x80) != 0)
        self._set_accumulator(result)

    def _compare(self, register: int, address: int) -> None:
        """Compare register with memory, set C,N,Z flags."""
        value = self.memory.read(address)
        result = (register - value) & 0xFF
        self.status.set(Flags.C, register >= value)
        self._set_negative_zero(result)

    def _branch(self, target: int, condition: bool) -> None:
        if condition:
            self.program_counter = target

    # ========================================
    # Instruction Execution
    # ========================================

    def _operand(self, opcode: OpCode, address: Optional[int]) -> int:
        """Return the resolved address, or fail if the table gave none."""
        if address is None:
            raise MissingOperandError(str(opcode.instruction), opcode.code, self._instruction_address)
        return address

    def _execute(self, opcode: OpCode, address: Optional[int]) -> None:
        """
        Dispatch one decoded instruction.

        Args:
            opcode: Decoded opcode table entry
            address: Effective address from the addressing mode, if any
        """
        status = self.status

        match opcode.instruction:
            # ============================================
            # Loads and stores
            # ============================================
            case Instruction.LDA:
                self._set_accumulator(self.memory.read(self._operand(opcode, address)))
            case Instruction.LDX:
                self._set_index_x(self.memory.read(self._operand(opcode, address)))
            case Instruction.LDY:
                self._set_index_y(self.memory.read(self._operand(opcode, address)))
            case Instruction.STA:
                self.memory.write(self._operand(opcode, address), self.accumulator)
            case Instruction.STX:
                self.memory.write(self._operand(opcode, address), self.index_x)
            case Instruction.STY:
                self.memory.write(self._operand(opcode, address), self.index_y)

            # ============================================
            # Register transfers
            # ============================================
            case Instruction.TAX:
                self._set_index_x(self.accumulator)
            case Instruction.TAY:
                self._set_index_y(self.accumulator)
            case Instruction.TXA:
                self._set_accumulator(self.index_x)
            case Instruction.TYA:
                self._set_accumulator(self.index_y)
            case Instruction.TSX:
                self._set_index_x(self.stack_pointer.value)
            case Instruction.TXS:
                self.stack_pointer.value = self.index_x

            # ============================================
            # Stack
            # ============================================
            case Instruction.PHA:
                self.push_byte(self.accumulator)
            case Instruction.PHP:
                self.push_byte(status.bits)
            case Instruction.PLA:
                self._set_accumulator(self.pop_byte())
            case Instruction.PLP:
                status.bits = self.pop_byte()

            # ============================================
            # Logical
            # ============================================
            case Instruction.AND:
                self._set_accumulator(self.accumulator & self.memory.read(self._operand(opcode, address)))
            case Instruction.ORA:
                self._set_accumulator(self.accumulator | self.memory.read(self._operand(opcode, address)))
            case Instruction.EOR:
                self._set_accumulator(self.accumulator ^ self.memory.read(self._operand(opcode, address)))
            case Instruction.BIT:
                value = self.memory.read(self._operand(opcode, address))
                status.set_zero(self.accumulator & value)
                status.set_overflow((value & 0x40) != 0)
                status.set_negative(value)

            # ============================================
            # Arithmetic
            # ============================================
            case Instruction.ADC:
                self._add_to_accumulator(self.memory.read(self._operand(opcode, address)))
            case Instruction.SBC:
                # A - M - (1 - C) == A + (-M - 1) + C
                value = self.memory.read(self._operand(opcode, address))
                self._add_to_accumulator((-value - 1) & 0xFF)
            case Instruction.CMP:
                self._compare(self.accumulator, self._operand(opcode, address))
            case Instruction.CPX:
                self._compare(self.index_x, self._operand(opcode, address))
            case Instruction.CPY:
                self._compare(self.index_y, self._operand(opcode, address))

            # ============================================
            # Increments and decrements
            # ============================================
            case Instruction.INC:
                target = self._operand(opcode, address)
                result = (self.memory.read(target) + 1) & 0xFF
                self.memory.write(target, result)
                self._set_negative_zero(result)
            case Instruction.DEC:
                target = self._operand(opcode, address)
                result = (self.memory.read(target) - 1) & 0xFF
                self.memory.write(target, result)
                self._set_negative_zero(result)
            case Instruction.INX:
                self._set_index_x(self.index_x + 1)
            case Instruction.INY:
                self._set_index_y(self.index_y + 1)
            case Instruction.DEX:
                self._set_index_x(self.index_x - 1)
            case Instruction.DEY:
                self._set_index_y(self.index_y - 1)

            # ============================================
            # Shifts and rotates
            # ============================================
            case Instruction.ASL:
                target = operand_target(address)
                value = target.get(self)
                result = (value << 1) & 0xFF
                status.set(Flags.C, (value & 0x80) != 0)
                self._set_negative_zero(result)
                target.set(self, result)
            case Instruction.LSR:
                target = operand_target(address)
                value = target.get(self)
                result = value >> 1
                status.set(Flags.C, (value & 0x01) != 0)
                self._set_negative_zero(result)
                target.set(self, result)
            case Instruction.ROL:
                target = operand_target(address)
                value = target.get(self)
                carry = 1 if status.contains(Flags.C) else 0
                result = ((value << 1) | carry) & 0xFF
                status.set(Flags.C, (value & 0x80) != 0)
                self._set_negative_zero(result)
                target.set(self, result)
            case Instruction.ROR:
                target = operand_target(address)
                value = target.get(self)
                carry = 1 if status.contains(Flags.C) else 0
                result = (value >> 1) | (carry << 7)
                status.set(Flags.C, (value & 0x01) != 0)
                self._set_negative_zero(result)
                target.set(self, result)

            # ============================================
            # Jumps and calls
            # ============================================
            case Instruction.JMP:
                self.program_counter = self._operand(opcode, address)
            case Instruction.JSR:
                target = self._operand(opcode, address)
                # Return address minus one; RTS adds it back
                self.push_word((self.program_counter - 1) & 0xFFFF)
                self.program_counter = target
            case Instruction.RTS:
                self.program_counter = self.pop_word() + 1

            # ============================================
            # Branches
            # ============================================
            case Instruction.BCC:
                self._branch(self._operand(opcode, address), not status.contains(Flags.C))
            case Instruction.BCS:
                self._branch(self._operand(opcode, address), status.contains(Flags.C))
            case Instruction.BEQ:
                self._branch(self._operand(opcode, address), status.contains(Flags.Z))
            case Instruction.BNE:
                self._branch(self._operand(opcode, address), not status.contains(Flags.Z))
            case Instruction.BMI:
                self._branch(self._operand(opcode, address), status.contains(Flags.N))
            case Instruction.BPL:
                self._branch(self._operand(opcode, address), not status.contains(Flags.N))
            case Instruction.BVS:
                self._branch(self._operand(opcode, address), status.contains(Flags.V))
            case Instruction.BVC:
                self._branch(self._operand(opcode, address), not status.contains(Flags.V))

            # ============================================
            # Status flag changes
            # ============================================
            case Instruction.CLC:
                status.set(Flags.C, False)
            case Instruction.CLD:
                status.set(Flags.D, False)
            case Instruction.CLI:
                status.set(Flags.I, False)
            case Instruction.CLV:
                status.set(Flags.V, False)
            case Instruction.SEC:
                status.set(Flags.C, True)
            case Instruction.SED:
                status.set(Flags.D, True)
            case Instruction.SEI:
                status.set(Flags.I, True)

            # ============================================
            # System functions
            # ============================================
            case Instruction.BRK:
                self.push_word(self.program_counter)
                self.push_byte(status.bits)
                self.program_counter = self.memory.read_word(INTERRUPT_VECTOR)
                status.set(Flags.B, True)
                status.set(Flags.B2, True)
            case Instruction.RTI:
                status.bits = self.pop_byte()
                self.program_counter = self.pop_word()
            case Instruction.NOP:
                pass
