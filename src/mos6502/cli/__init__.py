"""
mos6502 Command-Line Interface
==============================

This package provides command-line tools for the processor core:

- **run6502**: load a raw binary, run it until BRK, report registers

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["run6502"]
