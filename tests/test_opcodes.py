# =============================================================================
# test_opcodes.py - Instruction Table Tests
# =============================================================================
# Tests for the (mnemonic, mode) -> opcode table and the 256-slot decoder
# map built from it. The two directions must be exact inverses: whatever
# the assembler can emit, the emulator can execute, and nothing else.
# =============================================================================

import pytest

from c64emu.assembler.opcodes import (
    AddressingMode,
    MNEMONICS,
    OPCODE_TABLE,
    get_instruction_info,
    get_valid_modes,
    is_valid_instruction,
)
from c64emu.emulator.decoder import OPCODE_MAP, decode, is_legal
from c64emu.emulator.operations import MEMORY_OPERATIONS, Operation, REGISTER_OPERATIONS


# =============================================================================
# Addressing Mode Tests
# =============================================================================

class TestAddressingMode:
    """Test addressing mode metadata."""

    @pytest.mark.parametrize("mode,size", [
        (AddressingMode.IMPLIED, 0),
        (AddressingMode.ACCUMULATOR, 0),
        (AddressingMode.IMMEDIATE, 1),
        (AddressingMode.ZERO_PAGE, 1),
        (AddressingMode.ZERO_PAGE_X, 1),
        (AddressingMode.ZERO_PAGE_Y, 1),
        (AddressingMode.ABSOLUTE, 2),
        (AddressingMode.ABSOLUTE_X, 2),
        (AddressingMode.ABSOLUTE_Y, 2),
        (AddressingMode.RELATIVE, 1),
        (AddressingMode.INDIRECT, 2),
        (AddressingMode.INDEXED_INDIRECT, 1),
        (AddressingMode.INDIRECT_INDEXED, 1),
    ])
    def test_operand_size(self, mode, size):
        assert mode.operand_size == size

    def test_str_is_readable(self):
        assert str(AddressingMode.ZERO_PAGE_X) == "zero page,X"
        assert str(AddressingMode.INDIRECT_INDEXED) == "(indirect),Y"


# =============================================================================
# Opcode Table Tests
# =============================================================================

class TestOpcodeTable:
    """Test the encoder-side opcode table."""

    def test_table_size(self):
        assert len(OPCODE_TABLE) == 114
        assert len(MNEMONICS) == 32

    def test_opcodes_unique(self):
        opcodes = [info.opcode for info in OPCODE_TABLE.values()]
        assert len(opcodes) == len(set(opcodes))

    def test_sizes_match_modes(self):
        for (mnemonic, mode), info in OPCODE_TABLE.items():
            assert info.operand_size == mode.operand_size, mnemonic
            assert info.size == 1 + mode.operand_size, mnemonic

    @pytest.mark.parametrize("mnemonic,mode,opcode", [
        ("ADC", AddressingMode.IMMEDIATE, 0x69),
        ("ADC", AddressingMode.INDIRECT_INDEXED, 0x71),
        ("LDA", AddressingMode.ABSOLUTE_X, 0xBD),
        ("LDA", AddressingMode.ABSOLUTE_Y, 0xB9),
        ("EOR", AddressingMode.ABSOLUTE_X, 0x5D),
        ("ORA", AddressingMode.ABSOLUTE_Y, 0x19),
        ("SBC", AddressingMode.ABSOLUTE_X, 0xFD),
        ("STA", AddressingMode.ABSOLUTE_Y, 0x99),
        ("STA", AddressingMode.INDEXED_INDIRECT, 0x81),
        ("ASL", AddressingMode.ACCUMULATOR, 0x0A),
        ("ROR", AddressingMode.ABSOLUTE_X, 0x7E),
        ("LDX", AddressingMode.ZERO_PAGE_Y, 0xB6),
        ("LDX", AddressingMode.ABSOLUTE_Y, 0xBE),
        ("LDY", AddressingMode.ABSOLUTE_X, 0xBC),
        ("STX", AddressingMode.ZERO_PAGE_Y, 0x96),
        ("STY", AddressingMode.ZERO_PAGE_X, 0x94),
        ("DEX", AddressingMode.IMPLIED, 0xCA),
        ("PLP", AddressingMode.IMPLIED, 0x28),
        ("NOP", AddressingMode.IMPLIED, 0xEA),
    ])
    def test_known_encodings(self, mnemonic, mode, opcode):
        assert get_instruction_info(mnemonic, mode).opcode == opcode

    def test_store_has_no_immediate(self):
        for mnemonic in ("STA", "STX", "STY"):
            assert get_instruction_info(mnemonic, AddressingMode.IMMEDIATE) is None

    def test_lookup_is_case_insensitive(self):
        assert get_instruction_info("lda", AddressingMode.IMMEDIATE).opcode == 0xA9
        assert is_valid_instruction("tax")

    def test_lookup_miss_returns_none(self):
        assert get_instruction_info("JMP", AddressingMode.ABSOLUTE) is None
        assert not is_valid_instruction("JMP")
        assert get_valid_modes("JMP") == []

    def test_valid_modes(self):
        assert get_valid_modes("STX") == [
            AddressingMode.ZERO_PAGE,
            AddressingMode.ZERO_PAGE_Y,
            AddressingMode.ABSOLUTE,
        ]


# =============================================================================
# Decoder Map Tests
# =============================================================================

class TestOpcodeMap:
    """Test the emulator-side 256-slot opcode map."""

    def test_has_256_slots(self):
        assert len(OPCODE_MAP) == 256

    def test_every_encoding_decodes_back(self):
        for (mnemonic, mode), info in OPCODE_TABLE.items():
            op = decode(info.opcode)
            assert op is not None
            assert op.mnemonic == mnemonic
            assert op.opcode == info.opcode
            assert op.size == info.size
            if mode in (AddressingMode.IMPLIED, AddressingMode.ACCUMULATOR):
                assert op.mode is None
            else:
                assert op.mode is mode

    def test_every_populated_slot_is_encodable(self):
        populated = [op for op in OPCODE_MAP if op is not None]
        assert len(populated) == len(OPCODE_TABLE)

        for op in populated:
            if op.mode is not None:
                mode = op.mode
            elif op.operation.name.endswith("_A"):
                mode = AddressingMode.ACCUMULATOR
            else:
                mode = AddressingMode.IMPLIED
            assert OPCODE_TABLE[(op.mnemonic, mode)].opcode == op.opcode

    def test_operation_shapes(self):
        for op in OPCODE_MAP:
            if op is None:
                continue
            if op.mode is None:
                assert op.operation in REGISTER_OPERATIONS
            else:
                assert op.operation in MEMORY_OPERATIONS

    def test_accumulator_forms_bind_register_variant(self):
        assert decode(0x0A).operation is Operation.ASL_A
        assert decode(0x4A).operation is Operation.LSR_A
        assert decode(0x2A).operation is Operation.ROL_A
        assert decode(0x6A).operation is Operation.ROR_A
        assert decode(0x06).operation is Operation.ASL

    @pytest.mark.parametrize("opcode", [0x00, 0x02, 0x4C, 0x20, 0xC9, 0xD0, 0xFF])
    def test_illegal_slots_are_empty(self, opcode):
        assert decode(opcode) is None
        assert not is_legal(opcode)
