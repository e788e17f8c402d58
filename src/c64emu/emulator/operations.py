"""
Semantic Operations and Stack
=============================

Per-mnemonic register and memory transforms, plus the push/pop
primitives over the fixed stack page.

Operations come in two shapes:
    - memory operations ``op(state, address)`` act on the byte at the
      resolved effective address
    - register operations ``op(state)`` need no address (implied and
      accumulator modes)

No status flags are computed. ADC and SBC ignore carry, and register
results are not masked except where noted (DEX/DEY wrap 0 -> 255, the
rotates are 8-bit). Memory stores always keep the low 8 bits.

Copyright (c) 2026 c64emu Contributors
"""

from enum import Enum
from typing import Callable

from c64emu.emulator.state import CPUState, STACK_PAGE


class Operation(Enum):
    """Semantic operation identifiers. ``_A`` variants act on the accumulator."""
    ADC = "ADC"
    AND = "AND"
    EOR = "EOR"
    ORA = "ORA"
    SBC = "SBC"
    ASL = "ASL"
    ASL_A = "ASL_A"
    LSR = "LSR"
    LSR_A = "LSR_A"
    ROL = "ROL"
    ROL_A = "ROL_A"
    ROR = "ROR"
    ROR_A = "ROR_A"
    LDA = "LDA"
    LDX = "LDX"
    LDY = "LDY"
    STA = "STA"
    STX = "STX"
    STY = "STY"
    TAX = "TAX"
    TAY = "TAY"
    TSX = "TSX"
    TXA = "TXA"
    TXS = "TXS"
    TYA = "TYA"
    INC = "INC"
    INX = "INX"
    INY = "INY"
    DEC = "DEC"
    DEX = "DEX"
    DEY = "DEY"
    PHA = "PHA"
    PHP = "PHP"
    PLA = "PLA"
    PLP = "PLP"
    NOP = "NOP"


# =============================================================================
# Stack
# =============================================================================

def push(state: CPUState, value: int) -> None:
    """Write value at $0100+SP, then decrement SP. No bounds check."""
    state.write(STACK_PAGE + state.sp, value)
    state.sp -= 1


def pop(state: CPUState) -> int:
    """Increment SP, then read $0100+SP. No bounds check."""
    state.sp += 1
    return state.read(STACK_PAGE + state.sp)


# =============================================================================
# Helpers
# =============================================================================

def _rol8(value: int) -> int:
    """8-bit rotate left: bit 7 moves to bit 0."""
    return ((value << 1) | ((value & 0x80) >> 7)) & 0xFF


def _ror8(value: int) -> int:
    """8-bit rotate right: bit 0 moves to bit 7."""
    return ((value >> 1) | ((value & 0x01) << 7)) & 0xFF


# =============================================================================
# Arithmetic and Logic
# =============================================================================

def adc(state: CPUState, address: int) -> None:
    state.a += state.read(address)


def sbc(state: CPUState, address: int) -> None:
    state.a -= state.read(address)


def and_(state: CPUState, address: int) -> None:
    state.a &= state.read(address)


def eor(state: CPUState, address: int) -> None:
    state.a ^= state.read(address)


def ora(state: CPUState, address: int) -> None:
    state.a |= state.read(address)


# =============================================================================
# Shifts and Rotates
# =============================================================================

def asl(state: CPUState, address: int) -> None:
    state.write(address, state.read(address) << 1)


def asl_a(state: CPUState) -> None:
    state.a <<= 1


def lsr(state: CPUState, address: int) -> None:
    state.write(address, state.read(address) >> 1)


def lsr_a(state: CPUState) -> None:
    state.a >>= 1


def rol(state: CPUState, address: int) -> None:
    state.write(address, _rol8(state.read(address)))


def rol_a(state: CPUState) -> None:
    state.a = _rol8(state.a)


def ror(state: CPUState, address: int) -> None:
    state.write(address, _ror8(state.read(address)))


def ror_a(state: CPUState) -> None:
    state.a = _ror8(state.a)


# =============================================================================
# Loads and Stores
# =============================================================================

def lda(state: CPUState, address: int) -> None:
    state.a = state.read(address)


def ldx(state: CPUState, address: int) -> None:
    state.x = state.read(address)


def ldy(state: CPUState, address: int) -> None:
    state.y = state.read(address)


def sta(state: CPUState, address: int) -> None:
    state.write(address, state.a)


def stx(state: CPUState, address: int) -> None:
    state.write(address, state.x)


def sty(state: CPUState, address: int) -> None:
    state.write(address, state.y)


# =============================================================================
# Transfers
# =============================================================================

def tax(state: CPUState) -> None:
    state.x = state.a


def tay(state: CPUState) -> None:
    state.y = state.a


def tsx(state: CPUState) -> None:
    state.x = state.sp


def txa(state: CPUState) -> None:
    state.a = state.x


def txs(state: CPUState) -> None:
    state.sp = state.x


def tya(state: CPUState) -> None:
    state.a = state.y


# =============================================================================
# Increments and Decrements
# =============================================================================

def inc(state: CPUState, address: int) -> None:
    state.write(address, state.read(address) + 1)


def dec(state: CPUState, address: int) -> None:
    state.write(address, state.read(address) - 1)


def inx(state: CPUState) -> None:
    state.x += 1


def iny(state: CPUState) -> None:
    state.y += 1


def dex(state: CPUState) -> None:
    state.x = 255 if state.x == 0 else state.x - 1


def dey(state: CPUState) -> None:
    state.y = 255 if state.y == 0 else state.y - 1


# =============================================================================
# Stack Operations
# =============================================================================

def pha(state: CPUState) -> None:
    push(state, state.a)


def php(state: CPUState) -> None:
    push(state, state.status)


def pla(state: CPUState) -> None:
    state.a = pop(state)


def plp(state: CPUState) -> None:
    state.status = pop(state)


def nop(state: CPUState) -> None:
    pass


# =============================================================================
# Dispatch Tables
# =============================================================================

MEMORY_OPERATIONS: dict[Operation, Callable[[CPUState, int], None]] = {
    Operation.ADC: adc,
    Operation.AND: and_,
    Operation.EOR: eor,
    Operation.ORA: ora,
    Operation.SBC: sbc,
    Operation.ASL: asl,
    Operation.LSR: lsr,
    Operation.ROL: rol,
    Operation.ROR: ror,
    Operation.LDA: lda,
    Operation.LDX: ldx,
    Operation.LDY: ldy,
    Operation.STA: sta,
    Operation.STX: stx,
    Operation.STY: sty,
    Operation.INC: inc,
    Operation.DEC: dec,
}

REGISTER_OPERATIONS: dict[Operation, Callable[[CPUState], None]] = {
    Operation.ASL_A: asl_a,
    Operation.LSR_A: lsr_a,
    Operation.ROL_A: rol_a,
    Operation.ROR_A: ror_a,
    Operation.TAX: tax,
    Operation.TAY: tay,
    Operation.TSX: tsx,
    Operation.TXA: txa,
    Operation.TXS: txs,
    Operation.TYA: tya,
    Operation.INX: inx,
    Operation.INY: iny,
    Operation.DEX: dex,
    Operation.DEY: dey,
    Operation.PHA: pha,
    Operation.PHP: php,
    Operation.PLA: pla,
    Operation.PLP: plp,
    Operation.NOP: nop,
}
