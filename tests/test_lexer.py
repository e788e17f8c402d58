# =============================================================================
# test_lexer.py - Line and Operand Lexer Tests
# =============================================================================
# Tests for splitting source lines into mnemonic/operand and classifying
# operand text into typed Operand values.
# =============================================================================

import pytest

from c64emu.assembler.lexer import (
    Operand,
    OperandKind,
    is_blank,
    parse_operand,
    split_line,
)
from c64emu.assembler.opcodes import AddressingMode


# =============================================================================
# Line Splitting Tests
# =============================================================================

class TestSplitLine:
    """Test the instruction line pattern."""

    def test_mnemonic_only(self):
        assert split_line("TAX") == ("TAX", None, 1, 1)

    def test_mnemonic_and_operand(self):
        assert split_line("LDA $2345,X") == ("LDA", "$2345,X", 1, 5)

    def test_leading_whitespace_and_comment(self):
        assert split_line("  lda #$10 ; load") == ("LDA", "#$10", 3, 7)

    def test_comment_without_space(self):
        assert split_line("LDA $10;load")[1] == "$10"

    def test_trailing_whitespace(self):
        assert split_line("INX   ") == ("INX", None, 1, 1)

    @pytest.mark.parametrize("line", [
        "LDA #$10 extra",
        "123",
        "#$10",
        "LDA #'A'",
        "LDA#$10",
    ])
    def test_rejected_lines(self, line):
        assert split_line(line) is None

    @pytest.mark.parametrize("line,blank", [
        ("", True),
        ("   ", True),
        ("; comment", True),
        ("   ; indented comment", True),
        ("NOP", False),
    ])
    def test_is_blank(self, line, blank):
        assert is_blank(line) is blank


# =============================================================================
# Operand Classification Tests
# =============================================================================

class TestParseOperand:
    """Test operand text to typed Operand conversion."""

    @pytest.mark.parametrize("text,kind,value", [
        (None, OperandKind.IMPLIED, None),
        ("A", OperandKind.ACCUMULATOR, None),
        ("a", OperandKind.ACCUMULATOR, None),
        ("#$23", OperandKind.IMMEDIATE, 0x23),
        ("$23", OperandKind.ZERO_PAGE, 0x23),
        ("$23,X", OperandKind.ZERO_PAGE_X, 0x23),
        ("$23,Y", OperandKind.ZERO_PAGE_Y, 0x23),
        ("$2345", OperandKind.ABSOLUTE, 0x2345),
        ("$2345,X", OperandKind.ABSOLUTE_X, 0x2345),
        ("$2345,Y", OperandKind.ABSOLUTE_Y, 0x2345),
        ("($2345)", OperandKind.INDIRECT, 0x2345),
        ("($23,X)", OperandKind.INDEXED_INDIRECT, 0x23),
        ("($23),Y", OperandKind.INDIRECT_INDEXED, 0x23),
    ])
    def test_kinds(self, text, kind, value):
        assert parse_operand(text) == Operand(kind, value)

    def test_hex_is_case_insensitive(self):
        assert parse_operand("$ff") == Operand(OperandKind.ZERO_PAGE, 0xFF)
        assert parse_operand("$abcd,x") == Operand(OperandKind.ABSOLUTE_X, 0xABCD)

    @pytest.mark.parametrize("text", [
        "$12345",
        "$123",
        "$1",
        "#$1234",
        "#23",
        "($12),X",
        "($1234,X)",
        "$12,Z",
        "AA",
        "X",
    ])
    def test_unrecognised(self, text):
        assert parse_operand(text) is None

    def test_field_width_selects_mode(self):
        """$0010 is absolute even though it fits in a byte."""
        assert parse_operand("$0010").kind is OperandKind.ABSOLUTE
        assert parse_operand("$10").kind is OperandKind.ZERO_PAGE


# =============================================================================
# Operand Encoding Tests
# =============================================================================

class TestOperandEncoding:
    """Test operand byte extraction."""

    def test_kind_maps_to_mode(self):
        for kind in OperandKind:
            assert kind.mode is AddressingMode[kind.name]

    def test_no_bytes_for_implied(self):
        assert Operand(OperandKind.IMPLIED).encode() == b""
        assert Operand(OperandKind.ACCUMULATOR).encode() == b""

    def test_byte_operand(self):
        assert Operand(OperandKind.IMMEDIATE, 0x23).encode() == b"\x23"

    def test_word_operand_is_little_endian(self):
        assert Operand(OperandKind.ABSOLUTE, 0x2345).encode() == b"\x45\x23"
        assert Operand(OperandKind.INDIRECT, 0xFF00).encode() == b"\x00\xff"

    def test_repr(self):
        assert repr(Operand(OperandKind.ABSOLUTE_X, 0x2345)) == "Operand(ABSOLUTE_X, $2345)"
        assert repr(Operand(OperandKind.IMPLIED)) == "Operand(IMPLIED)"
