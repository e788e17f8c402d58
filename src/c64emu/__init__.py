"""
c64emu - 6502 Assembler and Emulator Core
=========================================

This package provides both halves of a small 6502 toolchain:

Main Components
---------------
- **assembler**: Encodes assembly text into a flat byte string ("ROM")
- **emulator**: Loads that ROM at $0200 and executes it against a
  simulated register file and 64KB memory
- **disassembler**: Turns bytes back into assembly text

Only a subset of the instruction set is implemented: loads and stores,
arithmetic and logic without carry, shifts and rotates, increments and
decrements, register transfers and stack pushes/pulls. Branches, jumps,
compares, status flags, interrupts and cycle timing are not modelled.

Quick Start
-----------
    >>> from c64emu import assemble, CPU
    >>> cpu = CPU()
    >>> cpu.load(assemble("LDA #$07\\nPHA\\nLDA #$00\\nPLA"))
    >>> cpu.run()
    4
    >>> cpu.get_state().a
    7

Or use the command-line tools:
    $ c64asm prog.asm -o prog.bin
    $ c64run prog.bin --max-steps 10000
    $ c64disasm prog.bin --address 0x0200
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from c64emu.assembler import Assembler, AssembledLine, AddressingMode, assemble
from c64emu.disassembler import MOS6502Disassembler
from c64emu.emulator import CPU, CPUState, EmulatorConfig, LOAD_ADDRESS
from c64emu.errors import (
    C64Error,
    AssemblerError,
    AssemblySyntaxError,
    UnknownMnemonicError,
    AddressingModeError,
    EmulatorError,
    IllegalOpcodeError,
    ExecutionLimitError,
)

__all__ = [
    "__version__",
    # Assembler
    "Assembler",
    "AssembledLine",
    "AddressingMode",
    "assemble",
    # Emulator
    "CPU",
    "CPUState",
    "EmulatorConfig",
    "LOAD_ADDRESS",
    # Disassembler
    "MOS6502Disassembler",
    # Exception hierarchy
    "C64Error",
    "AssemblerError",
    "AssemblySyntaxError",
    "UnknownMnemonicError",
    "AddressingModeError",
    "EmulatorError",
    "IllegalOpcodeError",
    "ExecutionLimitError",
]
