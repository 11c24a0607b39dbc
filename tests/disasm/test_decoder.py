import struct

import pytest

import luaubc.disasm.decoder as decoder
from luaubc.common.errors import TruncatedStream, UnknownOpcode

from unit_utils import abc, ad, e
from fixtures import forloop_words  # noqa: F401


def test_decode_forloop(forloop_words):  # noqa: F811
    code = decoder.decode_function(forloop_words)

    assert [i.name for i in code] == [
        'LOADN', 'LOADN', 'LOADN', 'LOADN', 'FORNPREP', 'ADD', 'FORNLOOP',
        'GETIMPORT', 'FASTCALL1', 'MOVE', 'CALL', 'RETURN'
    ]
    assert [i.pc for i in code] == [0, 1, 2, 3, 4, 5, 6, 7, 9, 10, 11, 12]

    loop = code[6]
    assert loop.operands == {'a': 1, 'sd': -2}

    getimport = code[7]
    assert getimport.operands == {'a': 4, 'd': 0}
    assert getimport.aux == 0x40000000
    assert getimport.size == 2
    assert getimport.words() == [0x000004A4, 0x40000000]


def test_operands_follow_shape():
    assert decoder.decode_at([abc('NOP', 1, 2, 3)], 0).operands == {}
    assert decoder.decode_at([ad('JUMP', 7, -5)], 0).operands == {'sd': -5}
    assert decoder.decode_at([ad('LOADK', 1, 40000)], 0).operands == {'a': 1, 'd': 40000}
    assert decoder.decode_at([abc('FASTCALL', 2, 9, 3)], 0).operands == {'a': 2, 'c': 3}


def test_signed_and_unsigned_e():
    assert decoder.decode_at([e('JUMPX', -100)], 0).operands == {'e': -100}
    assert decoder.decode_at([e('COVERAGE', (1 << 23) - 1)], 0).operands == {'e': (1 << 23) - 1}
    assert decoder.decode_at([e('COVERAGE', 1 << 23)], 0).operands == {'e': 1 << 23}


def test_unknown_opcode_aborts():
    words = [abc('NOP'), 0x00000099, abc('NOP')]

    with pytest.raises(UnknownOpcode) as excinfo:
        decoder.decode_function(words)

    assert excinfo.value.opcode == 0x99


def test_missing_aux():
    with pytest.raises(TruncatedStream) as excinfo:
        decoder.decode_function([abc('NOP'), abc('GETTABLEKS', 0, 1, 2)])

    assert excinfo.value.pc == 1


def test_pc_out_of_range():
    with pytest.raises(TruncatedStream):
        decoder.decode_at([abc('NOP')], 1)


def test_aux_word_is_not_decoded():
    # aux would be an unknown opcode if it were decoded as an instruction
    words = [abc('LOADKX', 3), 0x00000099, abc('RETURN', 0, 1)]
    code = decoder.decode_function(words)

    assert [i.name for i in code] == ['LOADKX', 'RETURN']
    assert code[0].aux == 0x99


def test_words_from_bytes():
    data = struct.pack('<2I', 0x0001038C, 0x00020482)
    assert decoder.words_from_bytes(data) == [0x0001038C, 0x00020482]

    data = struct.pack('>I', 0x0001038C)
    assert decoder.words_from_bytes(data, 'big') == [0x0001038C]

    assert decoder.words_from_bytes(b'') == []


def test_words_from_bytes_truncated():
    with pytest.raises(TruncatedStream):
        decoder.words_from_bytes(b'\x8c\x03\x01')


def test_instruction_is_hashable():
    first = decoder.decode_at([abc('ADD', 0, 1, 2)], 0)
    second = decoder.decode_at([abc('ADD', 0, 1, 2)], 0)

    assert first == second
    assert hash(first) == hash(second)
    assert first.fields == (('a', 0), ('b', 1), ('c', 2))

    first.operands['a'] = 9
    assert first.operands['a'] == 0
