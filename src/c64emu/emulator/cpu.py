"""
6502 CPU Emulator
=================

Fetch-decode-execute loop for the implemented 6502 subset.

Each CPU owns a fresh CPUState; registers and memory are mutated only by
tick(), which decodes one opcode through the 256-slot OPCODE_MAP, resolves
its operand address and invokes the bound semantic operation.

Program counter accounting:
    tick() consumes exactly ``1 + operand width`` bytes: one for the
    opcode, then the addressing mode's operand bytes.

Error behaviour:
    An illegal opcode raises IllegalOpcodeError before anything is
    modified, so the state is that of the last completed instruction and
    PC still points at the offending byte.

Not modelled: cycle timing, interrupts and reset vectors, status flags,
decimal mode.

Copyright (c) 2026 c64emu Contributors
"""

import logging
from typing import Callable, Optional

from c64emu.emulator.addressing import resolve_address
from c64emu.emulator.config import EmulatorConfig
from c64emu.emulator.decoder import DecodedOp, decode
from c64emu.emulator.operations import MEMORY_OPERATIONS, REGISTER_OPERATIONS
from c64emu.emulator.state import CPUState, LOAD_ADDRESS, MEMORY_SIZE
from c64emu.errors import ExecutionLimitError, IllegalOpcodeError

logger = logging.getLogger(__name__)


class CPU:
    """
    6502 CPU emulator with an instruction hook.

    The hook ``on_instruction(pc, opcode) -> bool`` is called by run()
    before each instruction; returning False stops the run without
    executing that instruction.

    Example:
        >>> cpu = CPU()
        >>> cpu.load(assemble("LDA #$07\\nTAX"))
        >>> cpu.run()
        2
        >>> cpu.get_state().x
        7
    """

    def __init__(self, config: Optional[EmulatorConfig] = None):
        """
        Initialize CPU with a fresh state.

        Args:
            config: Execution settings. Defaults to EmulatorConfig().
        """
        self.config = config or EmulatorConfig()
        self.state = CPUState()

        self.on_instruction: Optional[Callable[[int, int], bool]] = None

    # ========================================
    # Register Properties
    # ========================================

    @property
    def a(self) -> int:
        """Accumulator."""
        return self.state.a

    @property
    def x(self) -> int:
        """Index register X."""
        return self.state.x

    @property
    def y(self) -> int:
        """Index register Y."""
        return self.state.y

    @property
    def pc(self) -> int:
        """Program counter."""
        return self.state.pc

    @property
    def sp(self) -> int:
        """Stack pointer (offset into $0100-$01FF)."""
        return self.state.sp

    # ========================================
    # State Access
    # ========================================

    def reset(self) -> None:
        """Discard the current state and start over with zeroed memory."""
        self.state = CPUState()

    def get_state(self) -> CPUState:
        """Return the live register file and memory image."""
        return self.state

    def snapshot(self) -> CPUState:
        """Return an independent copy of the current state."""
        return self.state.copy()

    def load(self, data: bytes, address: int = LOAD_ADDRESS) -> None:
        """
        Copy a ROM image into memory.

        Args:
            data: Bytes to load
            address: Start address (the fixed load address by default)

        Raises:
            ValueError: If the data does not fit below $10000
        """
        end = address + len(data)
        if address < 0 or end > MEMORY_SIZE:
            raise ValueError(
                f"{len(data)} bytes at ${address:04X} exceed the 64KB address space"
            )
        self.state.memory[address:end] = data
        logger.debug(f"Loaded {len(data)} bytes at ${address:04X}")

    # ========================================
    # Execution
    # ========================================

    def tick(self) -> DecodedOp:
        """
        Execute exactly one instruction.

        Returns:
            The DecodedOp that was executed

        Raises:
            IllegalOpcodeError: If the byte at PC has no table entry
        """
        state = self.state
        address_of_opcode = state.pc
        opcode = state.read(address_of_opcode)

        op = decode(opcode)
        if op is None:
            raise IllegalOpcodeError(opcode, address_of_opcode)

        state.pc = (state.pc + 1) & 0xFFFF

        if op.mode is None:
            REGISTER_OPERATIONS[op.operation](state)
        else:
            address = resolve_address(op.mode, state)
            MEMORY_OPERATIONS[op.operation](state, address)

        state.pc = (address_of_opcode + op.size) & 0xFFFF

        if self.config.trace:
            logger.debug(f"${address_of_opcode:04X}: {op.mnemonic:<4} {state}")

        return op

    def step(self) -> DecodedOp:
        """Alias for tick()."""
        return self.tick()

    def run(
        self,
        halt_opcode: Optional[int] = None,
        max_steps: Optional[int] = None,
    ) -> int:
        """
        Execute until the byte at PC equals the halt opcode.

        The halt instruction itself is not executed. Without a step
        budget this loops forever if the halt opcode is never reached.

        Args:
            halt_opcode: Stop byte (default: config.halt_opcode)
            max_steps: Step budget (default: config.max_steps, None = unbounded)

        Returns:
            Number of instructions executed

        Raises:
            IllegalOpcodeError: If an illegal opcode is fetched
            ExecutionLimitError: If max_steps instructions ran without halting
        """
        if halt_opcode is None:
            halt_opcode = self.config.halt_opcode
        if max_steps is None:
            max_steps = self.config.max_steps

        state = self.state
        steps = 0
        logger.debug(f"Run from ${state.pc:04X} until ${halt_opcode:02X}")

        while True:
            opcode = state.read(state.pc)
            if opcode == halt_opcode:
                break
            if max_steps is not None and steps >= max_steps:
                logger.warning(f"Step budget of {max_steps} exhausted at ${state.pc:04X}")
                raise ExecutionLimitError(steps, state.pc)
            if self.on_instruction and not self.on_instruction(state.pc, opcode):
                logger.debug(f"Instruction hook stopped run at ${state.pc:04X}")
                break
            self.tick()
            steps += 1

        logger.debug(f"Stopped at ${state.pc:04X} after {steps} steps")
        return steps
