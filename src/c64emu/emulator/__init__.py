"""
6502 Emulator
=============

Executes the byte stream produced by the assembler against a simulated
register file and flat 64KB memory.

Quick Start
-----------

    >>> from c64emu.assembler import assemble
    >>> from c64emu.emulator import CPU
    >>> cpu = CPU()
    >>> cpu.load(assemble("ADC #$23"))
    >>> op = cpu.tick()
    >>> cpu.get_state().a
    35

Bounded execution::

    >>> cpu = CPU(EmulatorConfig(max_steps=1000))
    >>> cpu.load(rom)
    >>> cpu.run()          # raises ExecutionLimitError after 1000 steps

Module Structure
----------------

- `state.py`: CPUState (registers + memory) and memory-map constants
- `addressing.py`: Effective-address resolution per addressing mode
- `operations.py`: Semantic operations and stack push/pop
- `decoder.py`: 256-slot opcode map built from the assembler's table
- `cpu.py`: CPU class with tick() and run()
- `config.py`: EmulatorConfig

Copyright (c) 2026 c64emu Contributors
"""

from .addressing import operand_width, resolve_address
from .config import EmulatorConfig
from .cpu import CPU
from .decoder import DecodedOp, OPCODE_MAP, decode, is_legal
from .operations import Operation, pop, push
from .state import CPUState, LOAD_ADDRESS, MEMORY_SIZE, STACK_PAGE, STACK_TOP

__all__ = [
    "CPU",
    "CPUState",
    "EmulatorConfig",
    "DecodedOp",
    "OPCODE_MAP",
    "decode",
    "is_legal",
    "Operation",
    "push",
    "pop",
    "resolve_address",
    "operand_width",
    "LOAD_ADDRESS",
    "MEMORY_SIZE",
    "STACK_PAGE",
    "STACK_TOP",
]
