"""
c64disasm - 6502 Disassembler Command-Line Interface
====================================================

Usage Examples
--------------
Disassemble a binary as loaded at $0200:
    $ c64disasm prog.bin

With base address:
    $ c64disasm code.bin --address 0xC000

Limit number of instructions:
    $ c64disasm code.bin --count 20

Output to file, without raw bytes (re-assemblable):
    $ c64disasm code.bin --no-bytes -o listing.asm
"""

import sys
from pathlib import Path
from typing import Optional

import click

from c64emu import __version__
from c64emu.cli.errors import ExitCode, handle_cli_exception, parse_address
from c64emu.disassembler import MOS6502Disassembler


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-a", "--address",
    type=str,
    default="0x0200",
    help="Base address for disassembly (hex with 0x or $ prefix, or decimal). Default: 0x0200",
)
@click.option(
    "-c", "--count",
    type=int,
    default=None,
    help="Maximum number of instructions to disassemble (default: all)",
)
@click.option(
    "--no-bytes",
    is_flag=True,
    help="Omit addresses and raw bytes; undecodable bytes become comments (output can be re-assembled)",
)
@click.version_option(version=__version__, prog_name="c64disasm")
def main(
    input_file: Path,
    output: Optional[Path],
    address: str,
    count: Optional[int],
    no_bytes: bool,
) -> None:
    """
    Disassemble 6502 machine code.

    INPUT_FILE is the binary file to disassemble.
    """
    try:
        base_address = parse_address(address)
        data = input_file.read_bytes()
    except Exception as e:
        handle_cli_exception(e)

    if len(data) == 0:
        click.echo(f"Error: {input_file} is empty", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    instructions = MOS6502Disassembler().disassemble(data, start_address=base_address, count=count)

    if no_bytes:
        output_lines = [instr.text for instr in instructions]
    else:
        output_lines = [
            f"; Disassembly of {input_file.name}",
            f"; Size: {len(data)} bytes",
            f"; Base address: ${base_address:04X}",
            "",
        ]
        output_lines.extend(str(instr) for instr in instructions)

    result = "\n".join(output_lines) + "\n"

    if output:
        try:
            output.write_text(result, encoding="utf-8")
        except OSError as e:
            handle_cli_exception(e)
    else:
        click.echo(result, nl=False)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
