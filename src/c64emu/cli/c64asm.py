"""
c64asm - 6502 Assembler Command-Line Interface
==============================================

Assembles a 6502 source file into a raw binary ROM image that c64run
loads at $0200.

Usage Examples
--------------
Basic assembly (writes prog.bin):
    $ c64asm prog.asm

With output and listing files:
    $ c64asm prog.asm -o out.bin -l prog.lst

Verbose mode:
    $ c64asm -v prog.asm
"""

from pathlib import Path
from typing import Optional

import click

from c64emu import __version__
from c64emu.assembler import Assembler
from c64emu.cli.errors import configure_logging, handle_cli_exception
from c64emu.emulator import LOAD_ADDRESS


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
    help="Output binary file (default: input.bin)",
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate listing file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="c64asm")
def main(
    input_file: Path,
    output: Optional[Path],
    listing: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble 6502 source code into a raw binary.

    INPUT_FILE is the assembly source file (.asm) to assemble.

    \b
    Examples:
        c64asm prog.asm              # Outputs prog.bin
        c64asm prog.asm -o out.bin   # Specify output file
        c64asm prog.asm -l prog.lst  # Also write a listing
    """
    configure_logging(verbose)
    output_file = output if output is not None else input_file.with_suffix(".bin")

    try:
        if verbose:
            click.echo(f"Assembling {input_file}...")

        asm = Assembler(str(input_file))
        lines = asm.assemble_lines(input_file.read_text(encoding="utf-8"))
        code = b"".join(entry.code for entry in lines)

        output_file.write_bytes(code)
        if verbose:
            click.echo(f"Wrote {len(code)} bytes to {output_file}")

        if listing:
            text = "\n".join(entry.format(LOAD_ADDRESS) for entry in lines)
            listing.write_text(text + "\n", encoding="utf-8")
            if verbose:
                click.echo(f"Wrote listing to {listing}")

        if verbose:
            click.echo(f"Assembly complete: {len(lines)} instructions, {len(code)} bytes")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
