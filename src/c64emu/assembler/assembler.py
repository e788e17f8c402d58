"""
6502 Assembler - Main Interface
===============================

This module provides the Assembler class, which turns 6502 assembly source
into a flat byte string ("ROM") ready to be loaded into the emulator.

Every line is encoded on its own: there are no labels, no directives and
no second pass, so each instruction's bytes come entirely from its own
operand text. Lines are concatenated in source order.

Example Usage
-------------
>>> from c64emu.assembler import Assembler
>>> asm = Assembler()
>>> asm.assemble('''
...     LDA #$23
...     STA $0400
... ''').hex(" ")
'a9 23 8d 00 04'

Command-Line Usage
------------------
    $ c64asm prog.asm -o prog.bin -l prog.lst
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from c64emu.assembler.lexer import is_blank, parse_operand, split_line
from c64emu.assembler.opcodes import (
    get_instruction_info,
    get_valid_modes,
    is_valid_instruction,
)
from c64emu.errors import (
    AddressingModeError,
    AssemblySyntaxError,
    SourceLocation,
    UnknownMnemonicError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssembledLine:
    """
    One encoded source line.

    Attributes:
        line: Source line number (1-indexed)
        offset: Byte offset of the instruction within the ROM
        code: Opcode followed by operand bytes
        source: The original source text
    """
    line: int
    offset: int
    code: bytes
    source: str

    def format(self, origin: int = 0) -> str:
        """Format as a listing line: ADDRESS  BYTES  SOURCE"""
        hex_bytes = " ".join(f"{b:02X}" for b in self.code).ljust(8)
        return f"${origin + self.offset:04X}: {hex_bytes}  {self.source.strip()}"


class Assembler:
    """
    6502 assembler for the implemented instruction subset.

    The assembler is stateless between calls; one instance can encode any
    number of sources.

    Attributes:
        filename: Default name for error locations when a call passes none
    """

    def __init__(self, filename: str = "<input>"):
        self.filename = filename

    # =========================================================================
    # Public API
    # =========================================================================

    def assemble(self, source: str, filename: Optional[str] = None) -> bytes:
        """
        Assemble source text into a flat byte string.

        Args:
            source: Assembly text
            filename: Name for error locations (default: self.filename)

        Raises:
            AssemblySyntaxError: A line is not of the form MNEMONIC [OPERAND]
            UnknownMnemonicError: A mnemonic is not implemented
            AddressingModeError: No addressing mode accepts an operand
        """
        return b"".join(entry.code for entry in self.assemble_lines(source, filename))

    def assemble_lines(self, source: str, filename: Optional[str] = None) -> list[AssembledLine]:
        """
        Assemble source text, keeping the per-line breakdown for listings.

        Blank lines and comment-only lines produce no entry. The first
        error aborts the whole pass.
        """
        name = filename or self.filename
        result: list[AssembledLine] = []
        offset = 0

        for number, text in enumerate(source.splitlines(), start=1):
            if is_blank(text):
                continue
            code = self.encode_line(text, number, name)
            result.append(AssembledLine(number, offset, code, text))
            offset += len(code)

        logger.debug(f"Assembled {len(result)} instructions ({offset} bytes) from {name}")
        return result

    def assemble_file(self, path: str | Path) -> bytes:
        """Assemble a source file. The file name is used in error messages."""
        path = Path(path)
        return self.assemble(path.read_text(encoding="utf-8"), str(path))

    def encode_line(self, text: str, line_number: int = 1, filename: Optional[str] = None) -> bytes:
        """
        Encode a single instruction line.

        Args:
            text: The source line
            line_number: Line number for error messages
            filename: Name for error locations (default: self.filename)

        Returns:
            Opcode byte followed by its operand bytes
        """
        name = filename or self.filename
        parts = split_line(text)
        if parts is None:
            raise AssemblySyntaxError(
                "expected 'MNEMONIC [OPERAND]'",
                location=SourceLocation(name, line_number, 1),
                source_line=text,
            )
        mnemonic, operand_text, mnemonic_column, operand_column = parts

        if not is_valid_instruction(mnemonic):
            raise UnknownMnemonicError(
                mnemonic,
                location=SourceLocation(name, line_number, mnemonic_column),
                source_line=text,
            )

        operand = parse_operand(operand_text)
        info = get_instruction_info(mnemonic, operand.kind.mode) if operand else None
        if info is None:
            raise AddressingModeError(
                mnemonic,
                operand_text,
                location=SourceLocation(name, line_number, operand_column),
                source_line=text,
                valid_modes=[str(mode) for mode in get_valid_modes(mnemonic)],
            )

        return bytes([info.opcode]) + operand.encode()


def assemble(source: str, filename: Optional[str] = None) -> bytes:
    """Assemble source text in one call."""
    return Assembler(filename or "<input>").assemble(source)
