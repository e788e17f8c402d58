"""
c64emu Command-Line Interface
=============================

This package provides command-line tools for c64emu:

- **c64asm**: 6502 assembler
- **c64run**: 6502 emulator runner
- **c64disasm**: 6502 disassembler

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["c64asm", "c64run", "c64disasm"]
