"""
Addressing Mode Resolution
==========================

Pure functions that compute an instruction's effective address from the
register file and the operand bytes following the opcode.

Every resolver is called with ``state.pc`` pointing at the first operand
byte (the opcode has already been consumed). Resolvers read memory and
registers but never modify the state.

Modes without a memory operand (implied, accumulator) resolve to None.

Copyright (c) 2026 c64emu Contributors
"""

from typing import Callable, Optional

from c64emu.assembler.opcodes import AddressingMode
from c64emu.emulator.state import CPUState


def _immediate(state: CPUState) -> int:
    # The operand byte itself is the value
    return state.pc


def _zero_page(state: CPUState) -> int:
    return state.read(state.pc)


def _zero_page_x(state: CPUState) -> int:
    return (state.read(state.pc) + state.x) & 0xFF


def _zero_page_y(state: CPUState) -> int:
    return (state.read(state.pc) + state.y) & 0xFF


def _absolute(state: CPUState) -> int:
    return state.read_word(state.pc)


def _absolute_x(state: CPUState) -> int:
    return (state.read_word(state.pc) + state.x) & 0xFFFF


def _absolute_y(state: CPUState) -> int:
    return (state.read_word(state.pc) + state.y) & 0xFFFF


def _relative(state: CPUState) -> int:
    disp = state.read(state.pc)
    if disp >= 0x80:
        disp -= 0x100
    return (state.pc + disp) & 0xFFFF


def _indirect(state: CPUState) -> int:
    return state.read_word(state.read_word(state.pc))


def _indexed_indirect(state: CPUState) -> int:
    pointer = (state.read(state.pc) + state.x) & 0xFF
    return state.read(pointer) | (state.read((pointer + 1) & 0xFF) << 8)


def _indirect_indexed(state: CPUState) -> int:
    pointer = state.read(state.pc)
    base = state.read(pointer) | (state.read((pointer + 1) & 0xFF) << 8)
    return (base + state.y) & 0xFFFF


RESOLVERS: dict[AddressingMode, Callable[[CPUState], int]] = {
    AddressingMode.IMMEDIATE: _immediate,
    AddressingMode.ZERO_PAGE: _zero_page,
    AddressingMode.ZERO_PAGE_X: _zero_page_x,
    AddressingMode.ZERO_PAGE_Y: _zero_page_y,
    AddressingMode.ABSOLUTE: _absolute,
    AddressingMode.ABSOLUTE_X: _absolute_x,
    AddressingMode.ABSOLUTE_Y: _absolute_y,
    AddressingMode.RELATIVE: _relative,
    AddressingMode.INDIRECT: _indirect,
    AddressingMode.INDEXED_INDIRECT: _indexed_indirect,
    AddressingMode.INDIRECT_INDEXED: _indirect_indexed,
}


def resolve_address(mode: AddressingMode, state: CPUState) -> Optional[int]:
    """
    Compute the effective address for an addressing mode.

    Args:
        mode: The instruction's addressing mode
        state: CPU state with pc at the first operand byte

    Returns:
        The effective address, or None for implied/accumulator modes
    """
    resolver = RESOLVERS.get(mode)
    if resolver is None:
        return None
    return resolver(state)


def operand_width(mode: Optional[AddressingMode]) -> int:
    """Number of operand bytes consumed from the instruction stream."""
    return mode.operand_size if mode is not None else 0
