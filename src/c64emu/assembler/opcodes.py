"""
6502 Instruction Set Definition
===============================

This module defines the implemented subset of the MOS 6502 instruction set:
opcodes, addressing modes and instruction sizes. The same table drives the
assembler (mnemonic -> opcode), the emulator's decoder (opcode -> operation)
and the disassembler, so the encode and decode directions cannot drift apart.

The 6502 is little-endian: 16-bit operands are stored low byte first.

Addressing Modes
----------------
1. **IMPLIED**: No operand (e.g., INX, TAX, PHA) - 1 byte
2. **ACCUMULATOR**: Operates on A (e.g., ASL A) - 1 byte
3. **IMMEDIATE**: Literal byte follows opcode (e.g., LDA #$41) - 2 bytes
4. **ZERO_PAGE**: Address $00-$FF (e.g., LDA $40) - 2 bytes
5. **ZERO_PAGE_X / ZERO_PAGE_Y**: Zero page + index, wraps within page - 2 bytes
6. **ABSOLUTE**: Full 16-bit address (e.g., LDA $1234) - 3 bytes
7. **ABSOLUTE_X / ABSOLUTE_Y**: 16-bit address + index - 3 bytes
8. **RELATIVE**: PC + signed displacement - 2 bytes
9. **INDIRECT**: 16-bit pointer to a 16-bit address - 3 bytes
10. **INDEXED_INDIRECT**: ($zp,X) - 2 bytes
11. **INDIRECT_INDEXED**: ($zp),Y - 2 bytes

Only the modes used by implemented instructions appear in OPCODE_TABLE;
RELATIVE and INDIRECT are still resolvable by the emulator.

Reference
---------
- MOS 6500 Microcomputer Family Programming Manual
- http://www.6502.org/tutorials/6502opcodes.html
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Addressing Mode Enumeration
# =============================================================================

class AddressingMode(Enum):
    """
    6502 addressing modes.

    The value of each member is (display name, operand size in bytes).
    """
    IMPLIED = ("implied", 0)
    ACCUMULATOR = ("accumulator", 0)
    IMMEDIATE = ("immediate", 1)
    ZERO_PAGE = ("zero page", 1)
    ZERO_PAGE_X = ("zero page,X", 1)
    ZERO_PAGE_Y = ("zero page,Y", 1)
    ABSOLUTE = ("absolute", 2)
    ABSOLUTE_X = ("absolute,X", 2)
    ABSOLUTE_Y = ("absolute,Y", 2)
    RELATIVE = ("relative", 1)
    INDIRECT = ("indirect", 2)
    INDEXED_INDIRECT = ("(indirect,X)", 1)
    INDIRECT_INDEXED = ("(indirect),Y", 1)

    @property
    def operand_size(self) -> int:
        """Number of operand bytes following the opcode."""
        return self.value[1]

    def __str__(self) -> str:
        """Return human-readable name for error messages."""
        return self.value[0]


# =============================================================================
# Instruction Information
# =============================================================================

@dataclass(frozen=True)
class InstructionInfo:
    """
    Information about a specific instruction encoding.

    Attributes:
        opcode: The opcode byte
        size: Total instruction size in bytes (including operand)
        operand_size: Size of operand (0=none, 1=byte, 2=word)
    """
    opcode: int
    size: int
    operand_size: int

    def __repr__(self) -> str:
        return f"InstructionInfo(opcode=${self.opcode:02X}, size={self.size})"


def _entries(
    mnemonic: str,
    encodings: dict[AddressingMode, int],
) -> dict[tuple[str, AddressingMode], InstructionInfo]:
    return {
        (mnemonic, mode): InstructionInfo(opcode, 1 + mode.operand_size, mode.operand_size)
        for mode, opcode in encodings.items()
    }


_M = AddressingMode


# Group one: accumulator arithmetic and logic. All share the same eight
# addressing modes; only the high bits of the opcode differ.
def _group_one(base: int) -> dict[AddressingMode, int]:
    return {
        _M.INDEXED_INDIRECT: base | 0x01,
        _M.ZERO_PAGE: base | 0x05,
        _M.IMMEDIATE: base | 0x09,
        _M.ABSOLUTE: base | 0x0D,
        _M.INDIRECT_INDEXED: base | 0x11,
        _M.ZERO_PAGE_X: base | 0x15,
        _M.ABSOLUTE_Y: base | 0x19,
        _M.ABSOLUTE_X: base | 0x1D,
    }


# Shifts and rotates: accumulator form plus four memory forms.
def _shift(base: int) -> dict[AddressingMode, int]:
    return {
        _M.ACCUMULATOR: base | 0x0A,
        _M.ZERO_PAGE: base | 0x06,
        _M.ABSOLUTE: base | 0x0E,
        _M.ZERO_PAGE_X: base | 0x16,
        _M.ABSOLUTE_X: base | 0x1E,
    }


# =============================================================================
# Opcode Table
# =============================================================================
# Key: (mnemonic, addressing_mode)
# Value: InstructionInfo(opcode, total_size, operand_size)
# =============================================================================

OPCODE_TABLE: dict[tuple[str, AddressingMode], InstructionInfo] = {
    # Arithmetic and logic
    **_entries("ORA", _group_one(0x00)),
    **_entries("AND", _group_one(0x20)),
    **_entries("EOR", _group_one(0x40)),
    **_entries("ADC", _group_one(0x60)),
    **_entries("LDA", _group_one(0xA0)),
    **_entries("SBC", _group_one(0xE0)),

    # STA is group one without the immediate slot
    **_entries("STA", {
        mode: opcode for mode, opcode in _group_one(0x80).items()
        if mode is not _M.IMMEDIATE
    }),

    # Shifts and rotates
    **_entries("ASL", _shift(0x00)),
    **_entries("ROL", _shift(0x20)),
    **_entries("LSR", _shift(0x40)),
    **_entries("ROR", _shift(0x60)),

    # Memory increment/decrement
    **_entries("DEC", {
        _M.ZERO_PAGE: 0xC6,
        _M.ZERO_PAGE_X: 0xD6,
        _M.ABSOLUTE: 0xCE,
        _M.ABSOLUTE_X: 0xDE,
    }),
    **_entries("INC", {
        _M.ZERO_PAGE: 0xE6,
        _M.ZERO_PAGE_X: 0xF6,
        _M.ABSOLUTE: 0xEE,
        _M.ABSOLUTE_X: 0xFE,
    }),

    # Index register loads and stores
    **_entries("LDX", {
        _M.IMMEDIATE: 0xA2,
        _M.ZERO_PAGE: 0xA6,
        _M.ZERO_PAGE_Y: 0xB6,
        _M.ABSOLUTE: 0xAE,
        _M.ABSOLUTE_Y: 0xBE,
    }),
    **_entries("LDY", {
        _M.IMMEDIATE: 0xA0,
        _M.ZERO_PAGE: 0xA4,
        _M.ZERO_PAGE_X: 0xB4,
        _M.ABSOLUTE: 0xAC,
        _M.ABSOLUTE_X: 0xBC,
    }),
    **_entries("STX", {
        _M.ZERO_PAGE: 0x86,
        _M.ZERO_PAGE_Y: 0x96,
        _M.ABSOLUTE: 0x8E,
    }),
    **_entries("STY", {
        _M.ZERO_PAGE: 0x84,
        _M.ZERO_PAGE_X: 0x94,
        _M.ABSOLUTE: 0x8C,
    }),

    # Register increment/decrement
    **_entries("DEX", {_M.IMPLIED: 0xCA}),
    **_entries("DEY", {_M.IMPLIED: 0x88}),
    **_entries("INX", {_M.IMPLIED: 0xE8}),
    **_entries("INY", {_M.IMPLIED: 0xC8}),

    # Transfers
    **_entries("TAX", {_M.IMPLIED: 0xAA}),
    **_entries("TAY", {_M.IMPLIED: 0xA8}),
    **_entries("TSX", {_M.IMPLIED: 0xBA}),
    **_entries("TXA", {_M.IMPLIED: 0x8A}),
    **_entries("TXS", {_M.IMPLIED: 0x9A}),
    **_entries("TYA", {_M.IMPLIED: 0x98}),

    # Stack
    **_entries("PHA", {_M.IMPLIED: 0x48}),
    **_entries("PHP", {_M.IMPLIED: 0x08}),
    **_entries("PLA", {_M.IMPLIED: 0x68}),
    **_entries("PLP", {_M.IMPLIED: 0x28}),

    ("NOP", _M.IMPLIED): InstructionInfo(0xEA, 1, 0),
}


# =============================================================================
# Instruction Set Reference Lists
# =============================================================================

# Set of all valid mnemonics
MNEMONICS: frozenset[str] = frozenset({
    mnemonic for mnemonic, _ in OPCODE_TABLE.keys()
})


# =============================================================================
# Lookup Functions
# =============================================================================

def get_instruction_info(
    mnemonic: str,
    mode: AddressingMode
) -> Optional[InstructionInfo]:
    """
    Look up instruction information by mnemonic and addressing mode.

    Returns:
        InstructionInfo if found, None if the combination is not implemented
    """
    return OPCODE_TABLE.get((mnemonic.upper(), mode))


def get_valid_modes(mnemonic: str) -> list[AddressingMode]:
    """Get all implemented addressing modes for an instruction."""
    mnemonic = mnemonic.upper()
    return [
        mode for (m, mode) in OPCODE_TABLE.keys()
        if m == mnemonic
    ]


def is_valid_instruction(mnemonic: str) -> bool:
    """Check if a mnemonic is implemented."""
    return mnemonic.upper() in MNEMONICS
