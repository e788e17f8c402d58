"""
Emulator Configuration
======================

Run-time settings for the execution loop. Configuration can come from:
- Default values (defined here)
- Environment variables (EmulatorConfig.from_env)
- Command-line options (c64run builds a config from its flags)

Copyright (c) 2026 c64emu Contributors
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EmulatorConfig:
    """
    Configuration for CPU execution.

    Attributes:
        halt_opcode: run() stops when the byte at PC equals this value.
                     Default $00, which is what unwritten memory contains,
                     so a loaded program halts when it runs off its end.
        max_steps: Default step budget for run(). None means unbounded:
                   run() never returns if the halt opcode is unreachable.
        trace: Log every executed instruction at DEBUG level

    Example:
        >>> config = EmulatorConfig(max_steps=10_000)
        >>> cpu = CPU(config)
    """
    halt_opcode: int = 0x00
    max_steps: Optional[int] = None
    trace: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.halt_opcode <= 0xFF:
            raise ValueError(f"halt_opcode must be a byte, got {self.halt_opcode}")
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {self.max_steps}")

    @classmethod
    def from_env(cls) -> "EmulatorConfig":
        """
        Create EmulatorConfig from environment variables.

        Environment variables (all optional):
            C64EMU_HALT_OPCODE: halt byte (decimal, 0x.. or $..)
            C64EMU_MAX_STEPS: step budget for run()
            C64EMU_TRACE: "1"/"true"/"yes" to trace instructions
        """
        config = cls()

        halt = os.environ.get("C64EMU_HALT_OPCODE")
        max_steps = os.environ.get("C64EMU_MAX_STEPS")
        trace = os.environ.get("C64EMU_TRACE")

        return cls(
            halt_opcode=parse_number(halt) if halt else config.halt_opcode,
            max_steps=int(max_steps) if max_steps else config.max_steps,
            trace=trace.lower() in ("1", "true", "yes") if trace else config.trace,
        )


def parse_number(text: str) -> int:
    """
    Parse a decimal or hex number ($FF, 0xFF).

    Raises:
        ValueError: If the text is not a number
    """
    text = text.strip()
    if text.startswith("$"):
        return int(text[1:], 16)
    if text.lower().startswith("0x"):
        return int(text[2:], 16)
    return int(text)
