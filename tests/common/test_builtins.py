import pytest

from luaubc.common.builtins import BuiltinFunction, builtin_name


@pytest.mark.parametrize('bfid, name', [
    (1, 'assert'),
    (2, 'math.abs'),
    (29, 'bit32.band'),
    (54, 'Vector3.new'),
    (57, 'select'),
    (59, 'bit32.extract'),
    (64, 'bit32.byteswap'),
    (66, 'buffer.readu8'),
    (77, 'buffer.writef64'),
    (88, 'vector.max'),
])
def test_known_ids(bfid, name):
    assert builtin_name(bfid) == name


@pytest.mark.parametrize('bfid', [0, 89, 9999, -1])
def test_fallback(bfid):
    assert builtin_name(bfid) == 'none'


def test_enum_values():
    assert BuiltinFunction.LBF_MATH_ABS == 2
    assert BuiltinFunction.LBF_VECTOR_MAX == 88
    assert builtin_name(BuiltinFunction.LBF_TYPEOF) == 'typeof'
