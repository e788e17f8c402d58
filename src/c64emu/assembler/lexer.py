"""
6502 Assembly Line Lexer
========================

This module splits one line of assembly source into a mnemonic and an
operand, and turns the operand text into a typed Operand value. The
assembler then checks the operand's kind against the mnemonic's supported
addressing modes, so the result never depends on the order in which
patterns are tried.

Line Format
-----------
    MNEMONIC [OPERAND] [; comment]

The operand is a single token drawn from hex digits and the characters
``# $ ( ) , X Y``. Whitespace inside the operand is not allowed.

Operand Syntax
--------------
| Kind             | Text         | Value      |
|------------------|--------------|------------|
| IMPLIED          | (none)       | -          |
| ACCUMULATOR      | A            | -          |
| IMMEDIATE        | #$hh         | byte       |
| ZERO_PAGE        | $hh          | byte       |
| ZERO_PAGE_X/Y    | $hh,X  $hh,Y | byte       |
| ABSOLUTE         | $hhhh        | word       |
| ABSOLUTE_X/Y     | $hhhh,X      | word       |
| INDIRECT         | ($hhhh)      | word       |
| INDEXED_INDIRECT | ($hh,X)      | byte       |
| INDIRECT_INDEXED | ($hh),Y      | byte       |

Byte fields are exactly two hex digits and word fields exactly four; the
width of the field alone selects zero page versus absolute addressing.

Example
-------
>>> from c64emu.assembler.lexer import split_line, parse_operand
>>> split_line("LDA $2345,X  ; load")
('LDA', '$2345,X', 1, 5)
>>> parse_operand("$2345,X")
Operand(ABSOLUTE_X, $2345)
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from c64emu.assembler.opcodes import AddressingMode


# =============================================================================
# Operand Kind Enumeration
# =============================================================================

class OperandKind(Enum):
    """Syntactic category of an operand, one per addressing mode it implies."""
    IMPLIED = auto()
    ACCUMULATOR = auto()
    IMMEDIATE = auto()
    ZERO_PAGE = auto()
    ZERO_PAGE_X = auto()
    ZERO_PAGE_Y = auto()
    ABSOLUTE = auto()
    ABSOLUTE_X = auto()
    ABSOLUTE_Y = auto()
    INDIRECT = auto()
    INDEXED_INDIRECT = auto()
    INDIRECT_INDEXED = auto()

    @property
    def mode(self) -> AddressingMode:
        """The addressing mode this operand selects."""
        return AddressingMode[self.name]


# =============================================================================
# Operand Data Class
# =============================================================================

@dataclass(frozen=True)
class Operand:
    """
    A parsed operand.

    Attributes:
        kind: The OperandKind classification
        value: The byte or word value, or None for IMPLIED/ACCUMULATOR
    """
    kind: OperandKind
    value: Optional[int] = None

    def __repr__(self) -> str:
        if self.value is None:
            return f"Operand({self.kind.name})"
        width = 4 if self.kind.mode.operand_size == 2 else 2
        return f"Operand({self.kind.name}, ${self.value:0{width}X})"

    def encode(self) -> bytes:
        """Operand bytes as they follow the opcode (little-endian words)."""
        size = self.kind.mode.operand_size
        if size == 0:
            return b""
        return self.value.to_bytes(size, "little")


# =============================================================================
# Patterns
# =============================================================================

# Mnemonic, then optionally whitespace and one operand token
LINE_PATTERN = re.compile(
    r"^\s*(?P<mnemonic>[A-Za-z]\w*)"
    r"(?:\s+(?P<operand>[0-9A-Fa-f#$(),XYxy]+))?"
    r"\s*(?:;.*)?$"
)

_BYTE = r"\$(?P<value>[0-9A-Fa-f]{2})"
_WORD = r"\$(?P<value>[0-9A-Fa-f]{4})"

OPERAND_PATTERNS: dict[OperandKind, re.Pattern] = {
    OperandKind.IMMEDIATE: re.compile(rf"#{_BYTE}"),
    OperandKind.ZERO_PAGE: re.compile(_BYTE),
    OperandKind.ZERO_PAGE_X: re.compile(rf"{_BYTE},X", re.IGNORECASE),
    OperandKind.ZERO_PAGE_Y: re.compile(rf"{_BYTE},Y", re.IGNORECASE),
    OperandKind.ABSOLUTE: re.compile(_WORD),
    OperandKind.ABSOLUTE_X: re.compile(rf"{_WORD},X", re.IGNORECASE),
    OperandKind.ABSOLUTE_Y: re.compile(rf"{_WORD},Y", re.IGNORECASE),
    OperandKind.INDIRECT: re.compile(rf"\({_WORD}\)"),
    OperandKind.INDEXED_INDIRECT: re.compile(rf"\({_BYTE},X\)", re.IGNORECASE),
    OperandKind.INDIRECT_INDEXED: re.compile(rf"\({_BYTE}\),Y", re.IGNORECASE),
}


# =============================================================================
# Lexer Functions
# =============================================================================

def is_blank(line: str) -> bool:
    """True for empty and comment-only lines."""
    stripped = line.strip()
    return not stripped or stripped.startswith(";")


def split_line(line: str) -> Optional[tuple[str, Optional[str], int, int]]:
    """
    Split a source line into mnemonic and operand text.

    Returns:
        (MNEMONIC, operand_or_None, mnemonic_column, operand_column) with
        1-indexed columns, or None if the line does not match the
        instruction pattern.
    """
    match = LINE_PATTERN.match(line)
    if match is None:
        return None

    mnemonic_column = match.start("mnemonic") + 1
    operand = match.group("operand")
    operand_column = match.start("operand") + 1 if operand else mnemonic_column
    return match.group("mnemonic").upper(), operand, mnemonic_column, operand_column


def parse_operand(text: Optional[str]) -> Optional[Operand]:
    """
    Classify operand text.

    Args:
        text: Operand text, or None when the line has no operand

    Returns:
        The typed Operand, or None if the text matches no operand syntax
    """
    if text is None:
        return Operand(OperandKind.IMPLIED)
    if text.upper() == "A":
        return Operand(OperandKind.ACCUMULATOR)

    # The patterns are mutually exclusive, so iteration order is irrelevant
    for kind, pattern in OPERAND_PATTERNS.items():
        match = pattern.fullmatch(text)
        if match:
            return Operand(kind, int(match.group("value"), 16))

    return None
