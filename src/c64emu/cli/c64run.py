"""
c64run - 6502 Emulator Command-Line Interface
=============================================

Loads a ROM image at $0200, runs it until the halt opcode is reached and
prints the final register file.

Usage Examples
--------------
Run a binary produced by c64asm:
    $ c64run prog.bin

Assemble and run a source file in one go:
    $ c64run prog.asm --asm

Bounded run with an instruction trace:
    $ c64run prog.bin --max-steps 1000 --trace

Dump memory after the run:
    $ c64run prog.bin --dump 0x0400:16

Environment variables C64EMU_HALT_OPCODE, C64EMU_MAX_STEPS and C64EMU_TRACE
provide defaults for the matching options.
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from c64emu import __version__
from c64emu.assembler import Assembler
from c64emu.cli.errors import configure_logging, handle_cli_exception, parse_address
from c64emu.disassembler import MOS6502Disassembler
from c64emu.emulator import CPU, EmulatorConfig


def _format_dump(memory: bytearray, start: int, length: int) -> list[str]:
    lines = []
    for offset in range(0, length, 16):
        addr = start + offset
        chunk = memory[addr:min(addr + 16, start + length)]
        lines.append(f"${addr:04X}: " + " ".join(f"{b:02X}" for b in chunk))
    return lines


def _build_config(halt: Optional[str], max_steps: Optional[int], trace: bool) -> EmulatorConfig:
    """Environment defaults, overridden by command-line options."""
    try:
        config = EmulatorConfig.from_env()
    except ValueError as e:
        raise click.BadParameter(f"invalid C64EMU_* environment setting: {e}")

    if halt is not None:
        config = replace(config, halt_opcode=parse_address(halt, "halt opcode", 0xFF))
    if max_steps is not None:
        config = replace(config, max_steps=max_steps)
    if trace:
        config = replace(config, trace=True)
    return config


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--asm", "is_source",
    is_flag=True,
    help="Treat INPUT_FILE as assembly source instead of a binary",
)
@click.option(
    "--halt",
    type=str,
    default=None,
    help="Halt opcode (hex with $ or 0x prefix, or decimal). Default: $00",
)
@click.option(
    "-n", "--max-steps",
    type=click.IntRange(min=0),
    default=None,
    help="Stop with an error after this many instructions (default: unbounded)",
)
@click.option(
    "-t", "--trace",
    is_flag=True,
    help="Print each instruction before it executes",
)
@click.option(
    "-d", "--dump",
    type=str,
    default=None,
    help="Dump memory after the run, as ADDRESS:LENGTH (e.g. 0x0400:16)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="c64run")
def main(
    input_file: Path,
    is_source: bool,
    halt: Optional[str],
    max_steps: Optional[int],
    trace: bool,
    dump: Optional[str],
    verbose: bool,
) -> None:
    """
    Run a 6502 program until it reaches the halt opcode.

    INPUT_FILE is a raw binary (or, with --asm, an assembly source file).
    The program is loaded at $0200 and execution starts there.
    """
    configure_logging(verbose)

    try:
        config = _build_config(halt, max_steps, trace)

        dump_range = None
        if dump is not None:
            start_text, _, length_text = dump.partition(":")
            start = parse_address(start_text, "dump address")
            length = parse_address(length_text or "16", "dump length", 0x10000 - start)
            dump_range = (start, length)

        if is_source:
            rom = Assembler().assemble_file(input_file)
        else:
            rom = input_file.read_bytes()

        cpu = CPU(config)
        try:
            cpu.load(rom)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="INPUT_FILE")
        if verbose:
            click.echo(f"Loaded {len(rom)} bytes at ${cpu.pc:04X}")

        if config.trace:
            disasm = MOS6502Disassembler()

            def show(pc: int, opcode: int) -> bool:
                state = cpu.get_state()
                instr = disasm.disassemble_one(bytes(state.memory[pc:pc + 3]), pc)
                click.echo(f"{str(instr):<32} {state}")
                return True

            cpu.on_instruction = show

        steps = cpu.run()

        click.echo(f"Halted at ${cpu.pc:04X} after {steps} steps")
        click.echo(str(cpu.get_state()))

        if dump_range is not None:
            for line in _format_dump(cpu.get_state().memory, *dump_range):
                click.echo(line)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Execution")


if __name__ == "__main__":
    main()
