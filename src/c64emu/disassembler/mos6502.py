"""
6502 Disassembler
=================

This module converts 6502 machine code back to assembly text for the
implemented instruction subset. It inverts the assembler's OPCODE_TABLE,
so its output syntax is accepted by the assembler unchanged.

Features:
- All implemented addressing modes, in assembler syntax
- Unknown opcodes rendered as ``.BYTE $xx``
- Instructions cut off by the end of the buffer are flagged

Example:
    >>> from c64emu.disassembler import MOS6502Disassembler
    >>> disasm = MOS6502Disassembler()
    >>> for instr in disasm.disassemble(bytes([0xA9, 0x23, 0xAA]), 0x0200):
    ...     print(instr)
    $0200: A9 23     LDA #$23
    $0202: AA        TAX

Copyright (c) 2026 c64emu Contributors
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from c64emu.assembler.opcodes import AddressingMode, OPCODE_TABLE


# =============================================================================
# Disassembled Instruction
# =============================================================================

@dataclass
class DisassembledInstruction:
    """
    A single disassembled instruction.

    Attributes:
        address: Where the opcode byte sits in the 6502 address space
        opcode: The opcode byte
        mnemonic: Instruction mnemonic (or ".BYTE" for unknown opcodes)
        mode: Addressing mode, None for unknown opcodes
        operand_str: Operand in assembler syntax
        size: Bytes consumed (opcode plus operand, fewer if truncated)
        raw_bytes: The consumed bytes, opcode first
        comment: Optional comment
    """
    address: int
    opcode: int
    mnemonic: str
    mode: Optional[AddressingMode]
    operand_str: str
    size: int
    raw_bytes: bytes
    comment: str = ""

    def __str__(self) -> str:
        """Format as assembly line: ADDRESS: BYTES  MNEMONIC OPERAND"""
        hex_bytes = " ".join(f"{b:02X}" for b in self.raw_bytes).ljust(8)

        asm = f"{self.mnemonic} {self.operand_str}" if self.operand_str else self.mnemonic

        if self.comment:
            return f"${self.address:04X}: {hex_bytes}  {asm:<16} ; {self.comment}"
        return f"${self.address:04X}: {hex_bytes}  {asm}"

    @property
    def text(self) -> str:
        """
        Assembly text only, without address and bytes.

        Unknown opcodes and truncated instructions come out as comment
        lines, so the text always assembles.
        """
        asm = f"{self.mnemonic} {self.operand_str}" if self.operand_str else self.mnemonic
        if self.comment:
            return f"; {asm} ({self.comment})"
        return asm


# Operand templates; {b} is a byte field, {w} a word field
_OPERAND_FORMATS = {
    AddressingMode.IMPLIED: "",
    AddressingMode.ACCUMULATOR: "A",
    AddressingMode.IMMEDIATE: "#${b:02X}",
    AddressingMode.ZERO_PAGE: "${b:02X}",
    AddressingMode.ZERO_PAGE_X: "${b:02X},X",
    AddressingMode.ZERO_PAGE_Y: "${b:02X},Y",
    AddressingMode.ABSOLUTE: "${w:04X}",
    AddressingMode.ABSOLUTE_X: "${w:04X},X",
    AddressingMode.ABSOLUTE_Y: "${w:04X},Y",
    AddressingMode.RELATIVE: "${b:02X}",
    AddressingMode.INDIRECT: "(${w:04X})",
    AddressingMode.INDEXED_INDIRECT: "(${b:02X},X)",
    AddressingMode.INDIRECT_INDEXED: "(${b:02X}),Y",
}


# =============================================================================
# 6502 Disassembler
# =============================================================================

class MOS6502Disassembler:
    """
    Disassembler for 6502 machine code.

    Attributes:
        _reverse_table: Maps opcode byte to (mnemonic, mode)
    """

    def __init__(self):
        self._reverse_table = self._build_reverse_table()

    def _build_reverse_table(self) -> Dict[int, Tuple[str, AddressingMode]]:
        """Build reverse lookup table: opcode -> (mnemonic, mode)."""
        return {
            info.opcode: (mnemonic, mode)
            for (mnemonic, mode), info in OPCODE_TABLE.items()
        }

    def disassemble_one(
        self,
        data: bytes,
        address: int = 0,
        offset: int = 0
    ) -> DisassembledInstruction:
        """
        Decode the instruction starting at data[offset].

        Args:
            data: Machine code buffer
            address: Memory address of the instruction (for display)
            offset: Offset into data where the instruction starts

        Raises:
            ValueError: If offset is beyond the data
        """
        if offset >= len(data):
            raise ValueError(f"Offset {offset} beyond data length {len(data)}")

        opcode = data[offset]

        if opcode not in self._reverse_table:
            return DisassembledInstruction(
                address=address,
                opcode=opcode,
                mnemonic=".BYTE",
                mode=None,
                operand_str=f"${opcode:02X}",
                size=1,
                raw_bytes=bytes([opcode]),
                comment="unknown opcode",
            )

        mnemonic, mode = self._reverse_table[opcode]
        size = 1 + mode.operand_size

        if offset + size > len(data):
            partial = bytes(data[offset:])
            return DisassembledInstruction(
                address=address,
                opcode=opcode,
                mnemonic=mnemonic,
                mode=mode,
                operand_str="???",
                size=len(partial),
                raw_bytes=partial,
                comment="incomplete instruction",
            )

        raw_bytes = bytes(data[offset:offset + size])
        operand = raw_bytes[1:]
        byte = operand[0] if operand else 0
        word = int.from_bytes(operand, "little") if len(operand) == 2 else 0

        return DisassembledInstruction(
            address=address,
            opcode=opcode,
            mnemonic=mnemonic,
            mode=mode,
            operand_str=_OPERAND_FORMATS[mode].format(b=byte, w=word),
            size=size,
            raw_bytes=raw_bytes,
        )

    def disassemble(
        self,
        data: bytes,
        start_address: int = 0,
        count: Optional[int] = None,
    ) -> List[DisassembledInstruction]:
        """
        Decode instructions back to back until the buffer or count runs out.

        Args:
            data: Machine code buffer
            start_address: Memory address of the first byte
            count: Maximum number of instructions (None = all)
        """
        result = []
        offset = 0

        while offset < len(data):
            if count is not None and len(result) >= count:
                break

            instr = self.disassemble_one(data, start_address + offset, offset)
            result.append(instr)
            offset += instr.size

        return result

    def disassemble_to_text(
        self,
        data: bytes,
        start_address: int = 0,
        count: Optional[int] = None
    ) -> str:
        """Disassemble and return a multi-line listing."""
        instructions = self.disassemble(data, start_address, count)
        return "\n".join(str(instr) for instr in instructions)
