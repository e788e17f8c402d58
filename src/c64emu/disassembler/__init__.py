"""
c64emu Disassembler Module
==========================

Disassembly of 6502 machine code for the implemented instruction subset,
used by the c64disasm tool and by execution traces.

Usage:
    from c64emu.disassembler import MOS6502Disassembler

    disasm = MOS6502Disassembler()
    print(disasm.disassemble_to_text(rom, start_address=0x0200))

Copyright (c) 2026 c64emu Contributors
"""

from .mos6502 import MOS6502Disassembler, DisassembledInstruction

__all__ = [
    "MOS6502Disassembler",
    "DisassembledInstruction",
]
