"""
run6502 - 6502 Program Runner Command-Line Interface
====================================================

Loads a raw binary program into the processor core, runs it until BRK,
and prints the final register state.

Usage Examples
--------------
Run a program on the console variant (loads at $8000):
    $ run6502 program.bin

Run on the stock 6502 (loads at $0600):
    $ run6502 program.bin --model MOS6502

Bound the run and inspect memory afterwards:
    $ run6502 loop.bin --max-steps 10000 --dump 0x0200:32

Verbose mode (debug logging from the core):
    $ run6502 -v program.bin
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from mos6502 import __version__
from mos6502.cli.errors import ExitCode, handle_cli_exception
from mos6502.emulator import CPU, Flags, get_model


def parse_address(text: str) -> int:
    """
    Parse an address given as hex ($ or 0x prefix) or decimal.

    Raises:
        click.BadParameter: If the text is not a valid 16-bit address
    """
    try:
        text = text.strip()
        if text.startswith("$"):
            value = int(text[1:], 16)
        elif text.lower().startswith("0x"):
            value = int(text, 16)
        else:
            value = int(text)
    except ValueError:
        raise click.BadParameter(f"invalid address '{text}'")

    if not 0 <= value <= 0xFFFF:
        raise click.BadParameter(f"address must be 0-65535 (0x0000-0xFFFF), got {text}")
    return value


def parse_dump_range(text: str) -> tuple[int, int]:
    """Parse an ADDR:LEN dump request."""
    if ":" not in text:
        raise click.BadParameter(f"dump range must be ADDR:LEN, got '{text}'")
    address_text, length_text = text.split(":", 1)
    address = parse_address(address_text)
    try:
        length = int(length_text, 0)
    except ValueError:
        raise click.BadParameter(f"invalid dump length '{length_text}'")
    if length <= 0:
        raise click.BadParameter(f"dump length must be positive, got {length}")
    return address, length


def format_flags(bits: int) -> str:
    """Render the status byte as NV-BDIZC letters, "." for clear bits."""
    letters = (
        ("N", Flags.N), ("V", Flags.V), ("-", Flags.B2), ("B", Flags.B),
        ("D", Flags.D), ("I", Flags.I), ("Z", Flags.Z), ("C", Flags.C),
    )
    return "".join(name if bits & flag else "." for name, flag in letters)


def format_registers(cpu: CPU) -> str:
    state = cpu.snapshot()
    return (
        f"PC=${state.program_counter:04X} A=${state.accumulator:02X} "
        f"X=${state.index_x:02X} Y=${state.index_y:02X} "
        f"SP=${state.stack_pointer:02X} P=${state.status:02X} [{format_flags(state.status)}]"
    )


def format_dump(data: bytes, address: int) -> list[str]:
    """Format a hex dump, 16 bytes per line."""
    lines = []
    for i in range(0, len(data), 16):
        chunk = data[i:i + 16]
        hex_str = " ".join(f"{b:02X}" for b in chunk)
        ascii_str = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in chunk)
        lines.append(f"${(address + i) & 0xFFFF:04X}: {hex_str:<48} {ascii_str}")
    return lines


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-m", "--model",
    type=click.Choice(["NES", "MOS6502"], case_sensitive=False),
    default="NES",
    help="Processor variant. NES loads at $8000, MOS6502 at $0600. Default: NES",
)
@click.option(
    "-n", "--max-steps",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after this many instructions if BRK has not been reached",
)
@click.option(
    "-d", "--dump",
    "dumps",
    multiple=True,
    help="Hex dump memory after the run (format: ADDR:LEN, can be repeated)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging from the core)",
)
@click.version_option(version=__version__, prog_name="run6502")
def main(
    input_file: Path,
    model: str,
    max_steps: Optional[int],
    dumps: tuple[str, ...],
    verbose: bool,
) -> None:
    """
    Run a raw 6502 binary until BRK.

    INPUT_FILE is loaded byte-for-byte at the variant's ROM origin; the
    reset vector is pointed at it and execution starts there.

    \b
    Examples:
        run6502 program.bin
        run6502 program.bin -m MOS6502 -d 0x0200:16
        run6502 loop.bin --max-steps 1000
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        dump_ranges = [parse_dump_range(d) for d in dumps]

        program = input_file.read_bytes()
        if len(program) == 0:
            click.echo(f"Error: {input_file} is empty", err=True)
            sys.exit(ExitCode.INVALID_ARGS)

        cpu = CPU(get_model(model))
        if verbose:
            click.echo(f"Model: {cpu.model.name}", err=True)
            click.echo(f"Loading {len(program)} bytes at ${cpu.model.rom_origin:04X}", err=True)

        cpu.load(program)
        cpu.reset()

        while not cpu.halted:
            if max_steps is not None and cpu.instruction_count >= max_steps:
                break
            cpu.step()
    except Exception as e:
        handle_cli_exception(e, verbose, "Execution")

    click.echo(format_registers(cpu))
    if cpu.halted:
        click.echo(f"Halted on BRK after {cpu.instruction_count} instructions ({cpu.cycles} cycles)")
    else:
        click.echo(f"Stopped after {cpu.instruction_count} instructions (step limit reached)")

    for address, length in dump_ranges:
        click.echo("")
        for line in format_dump(cpu.memory.read_block(address, length), address):
            click.echo(line)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
