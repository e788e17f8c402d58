"""
Opcode Decoder
==============

The 256-slot opcode map used by the execution loop.

Each populated slot holds a DecodedOp: the semantic operation to run and
the addressing mode used to find its operand (None for implied and
accumulator forms). Empty slots are illegal opcodes.

The map is built once at import by inverting the assembler's OPCODE_TABLE,
so every encodable (mnemonic, mode) pair decodes back to the same
operation and every populated slot can be produced by the assembler.

Copyright (c) 2026 c64emu Contributors
"""

from dataclasses import dataclass
from typing import Optional

from c64emu.assembler.opcodes import AddressingMode, OPCODE_TABLE
from c64emu.emulator.addressing import operand_width
from c64emu.emulator.operations import MEMORY_OPERATIONS, Operation, REGISTER_OPERATIONS


@dataclass(frozen=True)
class DecodedOp:
    """
    A decoded opcode.

    Attributes:
        opcode: The opcode byte
        mnemonic: Instruction mnemonic
        operation: Semantic operation to invoke
        mode: Addressing mode for memory operations, None for register ones
    """
    opcode: int
    mnemonic: str
    operation: Operation
    mode: Optional[AddressingMode]

    @property
    def size(self) -> int:
        """Total instruction size: opcode plus operand bytes."""
        return 1 + operand_width(self.mode)


def _operation_for(mnemonic: str, mode: AddressingMode) -> Operation:
    if mode is AddressingMode.ACCUMULATOR:
        return Operation[f"{mnemonic}_A"]
    return Operation[mnemonic]


def _build_opcode_map() -> tuple[Optional[DecodedOp], ...]:
    """
    Invert OPCODE_TABLE into a fixed 256-entry tuple.

    Raises:
        ValueError: If two encodings share an opcode, or an operation's
                    shape does not match its addressing mode
    """
    slots: list[Optional[DecodedOp]] = [None] * 256

    for (mnemonic, mode), info in OPCODE_TABLE.items():
        if slots[info.opcode] is not None:
            raise ValueError(f"opcode ${info.opcode:02X} assigned twice")

        operation = _operation_for(mnemonic, mode)
        if mode in (AddressingMode.IMPLIED, AddressingMode.ACCUMULATOR):
            if operation not in REGISTER_OPERATIONS:
                raise ValueError(f"{mnemonic} {mode} has no register operation")
            slots[info.opcode] = DecodedOp(info.opcode, mnemonic, operation, None)
        else:
            if operation not in MEMORY_OPERATIONS:
                raise ValueError(f"{mnemonic} {mode} has no memory operation")
            slots[info.opcode] = DecodedOp(info.opcode, mnemonic, operation, mode)

    return tuple(slots)


OPCODE_MAP: tuple[Optional[DecodedOp], ...] = _build_opcode_map()


def decode(opcode: int) -> Optional[DecodedOp]:
    """Look up an opcode byte. Returns None for illegal opcodes."""
    return OPCODE_MAP[opcode & 0xFF]


def is_legal(opcode: int) -> bool:
    """True if the opcode has a table entry."""
    return decode(opcode) is not None
