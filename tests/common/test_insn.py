import pytest

import luaubc.common.insn as insn

SAMPLE_WORDS = [0x00000000, 0xFFFFFFFF, 0x12345678, 0x80000001, 0x7FFF8000, 0xDEADBEEF]


@pytest.mark.parametrize('word', SAMPLE_WORDS)
def test_byte_fields(word):
    assert insn.opcode(word) == word & 0xFF
    assert insn.field_a(word) == (word >> 8) & 0xFF
    assert insn.field_b(word) == (word >> 16) & 0xFF
    assert insn.field_c(word) == (word >> 24) & 0xFF
    assert insn.field_d(word) == (word >> 16) & 0xFFFF
    assert insn.field_e(word) == (word >> 8) & 0xFFFFFF


def test_decode_opcode_alias():
    assert insn.decode_opcode(0x12345678) == 0x78


@pytest.mark.parametrize('value', [-32768, -32767, -2, -1, 0, 1, 2, 32766, 32767])
def test_signed_d(value):
    word = ((value & 0xFFFF) << 16) | 0x00AB12
    assert insn.field_sd(word) == value


def test_signed_d_boundaries():
    assert insn.field_sd(0x7FFF0000) == 32767
    assert insn.field_sd(0x80000000) == -32768
    assert insn.field_sd(0xFFFF0000) == -1


@pytest.mark.parametrize('value', [-(1 << 23), -1, 0, 1, (1 << 23) - 1])
def test_signed_e(value):
    word = ((value & 0xFFFFFF) << 8) | 0x69
    assert insn.field_se(word) == value


def test_unsigned_e_saturation_value():
    word = (insn.MAX_SE << 8) | 0x2F
    assert insn.field_e(word) == (1 << 23) - 1


def test_wide_inputs_are_truncated():
    word = (1 << 40) | 0xFFFF1234
    assert insn.field_d(word) == 0xFFFF
    assert insn.field_sd(word) == -1
    assert insn.field_e(word) == 0xFFFF12
    assert insn.opcode(word) == 0x34
