# =============================================================================
# test_cli.py - c64asm and c64run Command-Line Tests
# =============================================================================

import click
import pytest
from click.testing import CliRunner

from c64emu.cli import c64asm, c64run
from c64emu.cli.errors import parse_address


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "prog.asm"
    path.write_text("LDA #$07  ; seven\nTAX\n")
    return path


# =============================================================================
# c64asm
# =============================================================================

class TestAssemblerCLI:
    """Tests for the c64asm CLI tool."""

    def test_help(self, runner):
        result = runner.invoke(c64asm.main, ["--help"])
        assert result.exit_code == 0
        assert "Assemble 6502 source" in result.output

    def test_version(self, runner):
        result = runner.invoke(c64asm.main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_default_output(self, runner, source):
        result = runner.invoke(c64asm.main, [str(source)])

        assert result.exit_code == 0
        assert source.with_suffix(".bin").read_bytes() == bytes([0xA9, 0x07, 0xAA])

    def test_output_and_listing(self, runner, source, tmp_path):
        out = tmp_path / "out.bin"
        lst = tmp_path / "out.lst"

        result = runner.invoke(c64asm.main, [str(source), "-o", str(out), "-l", str(lst)])

        assert result.exit_code == 0
        assert out.read_bytes() == bytes([0xA9, 0x07, 0xAA])
        assert lst.read_text().splitlines() == [
            "$0200: A9 07     LDA #$07  ; seven",
            "$0202: AA        TAX",
        ]

    def test_verbose(self, runner, source):
        result = runner.invoke(c64asm.main, [str(source), "-v"])
        assert result.exit_code == 0
        assert "Wrote 3 bytes" in result.output

    def test_assembly_error(self, runner, tmp_path):
        bad = tmp_path / "bad.asm"
        bad.write_text("ADC $12345\n")

        result = runner.invoke(c64asm.main, [str(bad)])

        assert result.exit_code == 1
        assert "Assembly error:" in result.output
        assert "does not accept operand '$12345'" in result.output
        assert not bad.with_suffix(".bin").exists()

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(c64asm.main, [str(tmp_path / "nope.asm")])
        assert result.exit_code == 2


# =============================================================================
# c64run
# =============================================================================

class TestRunnerCLI:
    """Tests for the c64run CLI tool."""

    def _binary(self, tmp_path, data):
        path = tmp_path / "prog.bin"
        path.write_bytes(bytes(data))
        return path

    def test_help(self, runner):
        result = runner.invoke(c64run.main, ["--help"])
        assert result.exit_code == 0
        assert "Run a 6502 program" in result.output

    def test_run_binary(self, runner, tmp_path):
        path = self._binary(tmp_path, [0xA9, 0x07, 0xAA])

        result = runner.invoke(c64run.main, [str(path)])

        assert result.exit_code == 0
        assert "Halted at $0203 after 2 steps" in result.output
        assert "A=$07 X=$07 Y=$00 SP=$FF PC=$0203 P=$00" in result.output

    def test_run_source(self, runner, source):
        result = runner.invoke(c64run.main, [str(source), "--asm"])

        assert result.exit_code == 0
        assert "X=$07" in result.output

    def test_custom_halt(self, runner, tmp_path):
        path = self._binary(tmp_path, [0xE8, 0xE8, 0xEA, 0xE8])

        result = runner.invoke(c64run.main, [str(path), "--halt", "$EA"])

        assert result.exit_code == 0
        assert "after 2 steps" in result.output

    def test_bad_halt(self, runner, tmp_path):
        path = self._binary(tmp_path, [0xEA])

        result = runner.invoke(c64run.main, [str(path), "--halt", "0x100"])

        assert result.exit_code == 2

    def test_max_steps(self, runner, tmp_path):
        path = self._binary(tmp_path, [0xEA] * 10)

        result = runner.invoke(c64run.main, [str(path), "-n", "3"])

        assert result.exit_code == 1
        assert "halt opcode not reached after 3 steps" in result.output

    def test_max_steps_from_environment(self, runner, tmp_path):
        path = self._binary(tmp_path, [0xEA] * 10)

        result = runner.invoke(c64run.main, [str(path)], env={"C64EMU_MAX_STEPS": "2"})

        assert result.exit_code == 1

    def test_bad_environment_value(self, runner, tmp_path):
        path = self._binary(tmp_path, [0xEA])

        result = runner.invoke(c64run.main, [str(path)], env={"C64EMU_MAX_STEPS": "lots"})

        assert result.exit_code == 2
        assert "C64EMU_" in result.output

    def test_oversized_binary(self, runner, tmp_path):
        path = self._binary(tmp_path, bytes(0xFE01))

        result = runner.invoke(c64run.main, [str(path)])

        assert result.exit_code == 2
        assert "64KB" in result.output

    def test_illegal_opcode(self, runner, tmp_path):
        path = self._binary(tmp_path, [0x02])

        result = runner.invoke(c64run.main, [str(path)])

        assert result.exit_code == 1
        assert "illegal opcode $02 at $0200" in result.output

    def test_dump(self, runner, tmp_path):
        src = tmp_path / "store.asm"
        src.write_text("LDA #$42\nSTA $0400\n")

        result = runner.invoke(c64run.main, [str(src), "--asm", "--dump", "0x0400:4"])

        assert result.exit_code == 0
        assert "$0400: 42 00 00 00" in result.output

    def test_trace(self, runner, tmp_path):
        path = self._binary(tmp_path, [0xA9, 0x07, 0xAA])

        result = runner.invoke(c64run.main, [str(path), "--trace"])

        assert result.exit_code == 0
        assert "$0200: A9 07     LDA #$07" in result.output
        assert "$0202: AA        TAX" in result.output


# =============================================================================
# Option Parsing
# =============================================================================

class TestParseAddress:
    """Test the shared number option parser."""

    @pytest.mark.parametrize("text,value", [("$FF", 255), ("0x0400", 0x400), ("512", 512)])
    def test_formats(self, text, value):
        assert parse_address(text) == value

    def test_limit(self):
        with pytest.raises(click.BadParameter, match="halt opcode must be 0-255"):
            parse_address("0x100", "halt opcode", 0xFF)

    def test_not_a_number(self):
        with pytest.raises(click.BadParameter, match="invalid address 'zz'"):
            parse_address("zz")
