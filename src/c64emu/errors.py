"""
c64emu Error Hierarchy
======================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from C64Error, allowing callers to catch every
encoder or emulator failure with a single except clause if desired.

Exception Hierarchy
-------------------
C64Error (base)
├── AssemblerError (encoder-related)
│   ├── AssemblySyntaxError - line does not look like an instruction
│   ├── UnknownMnemonicError - mnemonic not in the instruction table
│   └── AddressingModeError - no addressing mode accepts the operand
└── EmulatorError (execution-related)
    ├── IllegalOpcodeError - opcode byte with no table entry
    └── ExecutionLimitError - step budget exhausted before halting

Assembler errors abort the whole encode pass; no partial ROM is returned.
Emulator errors abort the current tick()/run() call and leave the CPU
state as it was after the last completed instruction.

Rendered assembler errors look like:
    filename:line:column: error: description
        source_line_text
        ^
    hint: supported addressing modes (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class C64Error(Exception):
    """
    Base exception for all c64emu errors.

        try:
            rom = assemble(source)
        except C64Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in assembly source, used for error reporting.

    Attributes:
        filename: Source path, or "<input>" when assembling a string
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(C64Error):
    """
    Base exception for all encoder errors.

    Attributes:
        message: One-line description, without location
        location: File, line and column of the problem (optional)
        hint: Fix-it text printed after the source context (optional)
        source_line: The offending source text (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Render the header line, the indented source with a caret under the
        offending column, and the hint.

        Example output:
            prog.asm:3:5: error: 'ADC' does not accept operand '$12345'
                ADC $12345
                    ^
            hint: ADC supports: immediate, zero page, ...
        """
        where = f"{self.location}: " if self.location else ""
        lines = [f"{where}error: {self.message}"]

        if self.source_line is not None:
            lines.append("    " + self.source_line)
            if self.location is not None and self.location.column > 0:
                lines.append(" " * (3 + self.location.column) + "^")

        if self.hint:
            lines.append("hint: " + self.hint)

        return "\n".join(lines)


class AssemblySyntaxError(AssemblerError):
    """
    Source line that cannot be split into a mnemonic and operand.

    Examples:
        - Line starting with punctuation
        - Characters outside the operand alphabet after the mnemonic
    """
    pass


class UnknownMnemonicError(AssemblerError):
    """
    Mnemonic that is not in the instruction table.

    Example:
        JMP $1234  ; Error: JMP is not implemented
    """

    def __init__(
        self,
        mnemonic: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.mnemonic = mnemonic
        super().__init__(
            f"unknown mnemonic '{mnemonic}'",
            location=location,
            source_line=source_line,
        )


class AddressingModeError(AssemblerError):
    """
    No addressing mode of the mnemonic accepts the operand text.

    Raised both when the operand is malformed (e.g. five hex digits) and
    when it is well-formed but the instruction lacks that mode.

    Example:
        ADC $12345  ; Error: no addressing mode matches
        STA #$10    ; Error: STA has no immediate mode
    """

    def __init__(
        self,
        mnemonic: str,
        operand: Optional[str],
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        valid_modes: Optional[list[str]] = None,
    ):
        self.mnemonic = mnemonic
        self.operand = operand
        self.valid_modes = valid_modes or []

        hint = None
        if self.valid_modes:
            hint = f"{mnemonic} supports: {', '.join(self.valid_modes)}"

        if operand is None:
            message = f"'{mnemonic}' requires an operand"
        else:
            message = f"'{mnemonic}' does not accept operand '{operand}'"

        super().__init__(
            message,
            location=location,
            hint=hint,
            source_line=source_line,
        )


# =============================================================================
# Emulator Exceptions
# =============================================================================

class EmulatorError(C64Error):
    """Base exception for execution errors."""
    pass


class IllegalOpcodeError(EmulatorError):
    """
    Opcode byte with no registered table entry.

    Raised by CPU.tick() before any state is modified, so the program
    counter still points at the offending byte.

    Attributes:
        opcode: The byte that was fetched
        address: Where it was fetched from
    """

    def __init__(self, opcode: int, address: int):
        self.opcode = opcode
        self.address = address
        super().__init__(f"illegal opcode ${opcode:02X} at ${address:04X}")


class ExecutionLimitError(EmulatorError):
    """
    run() executed its step budget without reaching the halt opcode.

    Attributes:
        steps: Number of instructions executed
        address: Program counter when the budget ran out
    """

    def __init__(self, steps: int, address: int):
        self.steps = steps
        self.address = address
        super().__init__(
            f"halt opcode not reached after {steps} steps (PC=${address:04X})"
        )
