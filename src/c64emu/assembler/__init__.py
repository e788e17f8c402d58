"""
6502 Assembler
==============

This package turns 6502 assembly text into a flat byte string that the
emulator loads at $0200.

Main Components
---------------
- **opcodes**: Addressing modes and the (mnemonic, mode) -> opcode table
- **lexer**: Splits a line and classifies its operand into a typed value
- **Assembler**: Encodes lines and concatenates them in source order

Example Usage
-------------
>>> from c64emu.assembler import assemble
>>> list(assemble("ADC #$23"))
[105, 35]
"""

from c64emu.assembler.assembler import Assembler, AssembledLine, assemble
from c64emu.assembler.lexer import Operand, OperandKind, parse_operand, split_line
from c64emu.assembler.opcodes import (
    AddressingMode,
    InstructionInfo,
    OPCODE_TABLE,
    MNEMONICS,
    get_instruction_info,
    get_valid_modes,
    is_valid_instruction,
)

__all__ = [
    "Assembler",
    "AssembledLine",
    "assemble",
    "Operand",
    "OperandKind",
    "parse_operand",
    "split_line",
    "AddressingMode",
    "InstructionInfo",
    "OPCODE_TABLE",
    "MNEMONICS",
    "get_instruction_info",
    "get_valid_modes",
    "is_valid_instruction",
]
