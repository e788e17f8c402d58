"""
CPU State
=========

The register file and flat 64KB memory image driven by the emulator.

A CPUState is created fresh for each execution session and passed
explicitly to every addressing-mode resolver and semantic operation;
there is no shared or module-level instance.

Register widths:
    - a, x, y: conceptually 8-bit. Arithmetic and increment paths do not
      mask them, so they may leave the 0-255 range (see DEX/DEY for the
      paths that do wrap).
    - pc: 16-bit, starts at the load address $0200
    - sp: offset into the stack page $0100-$01FF, starts at $FF
    - status: flag byte (NV-BDIZC); no operation computes flags

Memory stores whole bytes: every write keeps ``value & 0xFF`` and every
address is taken modulo 64KB.

Copyright (c) 2026 c64emu Contributors
"""

from dataclasses import dataclass, field

MEMORY_SIZE = 0x10000
LOAD_ADDRESS = 0x0200
STACK_PAGE = 0x0100
STACK_TOP = 0xFF


@dataclass
class CPUState:
    """
    Complete CPU state: registers plus memory.

    All values are Python ints; memory is a bytearray so that every cell
    is a byte.
    """
    a: int = 0
    x: int = 0
    y: int = 0
    pc: int = LOAD_ADDRESS
    sp: int = STACK_TOP
    status: int = 0
    memory: bytearray = field(default_factory=lambda: bytearray(MEMORY_SIZE), repr=False)

    # ========================================
    # Memory Access
    # ========================================

    def read(self, address: int) -> int:
        """Read byte at address (wraps at 64KB)."""
        return self.memory[address & 0xFFFF]

    def write(self, address: int, value: int) -> None:
        """Write the low 8 bits of value at address (wraps at 64KB)."""
        self.memory[address & 0xFFFF] = value & 0xFF

    def read_word(self, address: int) -> int:
        """Read 16-bit word (little-endian)."""
        return self.read(address) | (self.read(address + 1) << 8)

    # ========================================
    # Snapshots
    # ========================================

    def copy(self) -> "CPUState":
        """Deep copy, including the memory image."""
        return CPUState(
            a=self.a,
            x=self.x,
            y=self.y,
            pc=self.pc,
            sp=self.sp,
            status=self.status,
            memory=bytearray(self.memory),
        )

    def registers(self) -> dict[str, int]:
        """Register file as a dict in display order, for printing and comparison."""
        return {
            "A": self.a,
            "X": self.x,
            "Y": self.y,
            "SP": self.sp,
            "PC": self.pc,
            "P": self.status,
        }

    def __str__(self) -> str:
        return " ".join(
            f"{name}=${value:0{4 if name == 'PC' else 2}X}"
            for name, value in self.registers().items()
        )
