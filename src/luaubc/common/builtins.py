''' Builtin function ids used by the FASTCALL family '''

from enum import IntEnum
from types import MappingProxyType


NONE_NAME = 'none'


class BuiltinFunction(IntEnum):
    LBF_NONE = 0

    LBF_ASSERT = 1

    LBF_MATH_ABS = 2
    LBF_MATH_ACOS = 3
    LBF_MATH_ASIN = 4
    LBF_MATH_ATAN2 = 5
    LBF_MATH_ATAN = 6
    LBF_MATH_CEIL = 7
    LBF_MATH_COSH = 8
    LBF_MATH_COS = 9
    LBF_MATH_DEG = 10
    LBF_MATH_EXP = 11
    LBF_MATH_FLOOR = 12
    LBF_MATH_FMOD = 13
    LBF_MATH_FREXP = 14
    LBF_MATH_LDEXP = 15
    LBF_MATH_LOG10 = 16
    LBF_MATH_LOG = 17
    LBF_MATH_MAX = 18
    LBF_MATH_MIN = 19
    LBF_MATH_MODF = 20
    LBF_MATH_POW = 21
    LBF_MATH_RAD = 22
    LBF_MATH_SINH = 23
    LBF_MATH_SIN = 24
    LBF_MATH_SQRT = 25
    LBF_MATH_TANH = 26
    LBF_MATH_TAN = 27

    LBF_BIT32_ARSHIFT = 28
    LBF_BIT32_BAND = 29
    LBF_BIT32_BNOT = 30
    LBF_BIT32_BOR = 31
    LBF_BIT32_BXOR = 32
    LBF_BIT32_BTEST = 33
    LBF_BIT32_EXTRACT = 34
    LBF_BIT32_LROTATE = 35
    LBF_BIT32_LSHIFT = 36
    LBF_BIT32_REPLACE = 37
    LBF_BIT32_RROTATE = 38
    LBF_BIT32_RSHIFT = 39

    LBF_TYPE = 40

    LBF_STRING_BYTE = 41
    LBF_STRING_CHAR = 42
    LBF_STRING_LEN = 43

    LBF_TYPEOF = 44

    LBF_STRING_SUB = 45

    LBF_MATH_CLAMP = 46
    LBF_MATH_SIGN = 47
    LBF_MATH_ROUND = 48

    LBF_RAWSET = 49
    LBF_RAWGET = 50
    LBF_RAWEQUAL = 51

    LBF_TABLE_INSERT = 52
    LBF_TABLE_UNPACK = 53

    LBF_VECTOR = 54

    LBF_BIT32_COUNTLZ = 55
    LBF_BIT32_COUNTRZ = 56

    LBF_SELECT_VARARG = 57  # select(_, ...)

    LBF_RAWLEN = 58

    LBF_BIT32_EXTRACTK = 59  # bit32.extract(_, k, k)

    LBF_GETMETATABLE = 60
    LBF_SETMETATABLE = 61

    LBF_TONUMBER = 62
    LBF_TOSTRING = 63

    LBF_BIT32_BYTESWAP = 64

    LBF_BUFFER_READI8 = 65
    LBF_BUFFER_READU8 = 66
    LBF_BUFFER_WRITEU8 = 67
    LBF_BUFFER_READI16 = 68
    LBF_BUFFER_READU16 = 69
    LBF_BUFFER_WRITEU16 = 70
    LBF_BUFFER_READI32 = 71
    LBF_BUFFER_READU32 = 72
    LBF_BUFFER_WRITEU32 = 73
    LBF_BUFFER_READF32 = 74
    LBF_BUFFER_WRITEF32 = 75
    LBF_BUFFER_READF64 = 76
    LBF_BUFFER_WRITEF64 = 77

    LBF_VECTOR_MAGNITUDE = 78
    LBF_VECTOR_NORMALIZE = 79
    LBF_VECTOR_CROSS = 80
    LBF_VECTOR_DOT = 81
    LBF_VECTOR_FLOOR = 82
    LBF_VECTOR_CEIL = 83
    LBF_VECTOR_ABS = 84
    LBF_VECTOR_SIGN = 85
    LBF_VECTOR_CLAMP = 86
    LBF_VECTOR_MIN = 87
    LBF_VECTOR_MAX = 88


B = BuiltinFunction

# Ids missing here resolve to NONE_NAME
BUILTIN_NAMES = MappingProxyType({
    B.LBF_ASSERT: 'assert',

    B.LBF_MATH_ABS: 'math.abs',
    B.LBF_MATH_ACOS: 'math.acos',
    B.LBF_MATH_ASIN: 'math.asin',
    B.LBF_MATH_ATAN2: 'math.atan2',
    B.LBF_MATH_ATAN: 'math.atan',
    B.LBF_MATH_CEIL: 'math.ceil',
    B.LBF_MATH_COSH: 'math.cosh',
    B.LBF_MATH_COS: 'math.cos',
    B.LBF_MATH_DEG: 'math.deg',
    B.LBF_MATH_EXP: 'math.exp',
    B.LBF_MATH_FLOOR: 'math.floor',
    B.LBF_MATH_FMOD: 'math.fmod',
    B.LBF_MATH_FREXP: 'math.frexp',
    B.LBF_MATH_LDEXP: 'math.ldexp',
    B.LBF_MATH_LOG10: 'math.log10',
    B.LBF_MATH_LOG: 'math.log',
    B.LBF_MATH_MAX: 'math.max',
    B.LBF_MATH_MIN: 'math.min',
    B.LBF_MATH_MODF: 'math.modf',
    B.LBF_MATH_POW: 'math.pow',
    B.LBF_MATH_RAD: 'math.rad',
    B.LBF_MATH_SINH: 'math.sinh',
    B.LBF_MATH_SIN: 'math.sin',
    B.LBF_MATH_SQRT: 'math.sqrt',
    B.LBF_MATH_TANH: 'math.tanh',
    B.LBF_MATH_TAN: 'math.tan',

    B.LBF_BIT32_ARSHIFT: 'bit32.arshift',
    B.LBF_BIT32_BAND: 'bit32.band',
    B.LBF_BIT32_BNOT: 'bit32.bnot',
    B.LBF_BIT32_BOR: 'bit32.bor',
    B.LBF_BIT32_BXOR: 'bit32.bxor',
    B.LBF_BIT32_BTEST: 'bit32.btest',
    B.LBF_BIT32_EXTRACT: 'bit32.extract',
    B.LBF_BIT32_LROTATE: 'bit32.lrotate',
    B.LBF_BIT32_LSHIFT: 'bit32.lshift',
    B.LBF_BIT32_REPLACE: 'bit32.replace',
    B.LBF_BIT32_RROTATE: 'bit32.rrotate',
    B.LBF_BIT32_RSHIFT: 'bit32.rshift',

    B.LBF_TYPE: 'type',

    B.LBF_STRING_BYTE: 'string.byte',
    B.LBF_STRING_CHAR: 'string.char',
    B.LBF_STRING_LEN: 'string.len',

    B.LBF_TYPEOF: 'typeof',

    B.LBF_STRING_SUB: 'string.sub',

    B.LBF_MATH_CLAMP: 'math.clamp',
    B.LBF_MATH_SIGN: 'math.sign',
    B.LBF_MATH_ROUND: 'math.round',

    B.LBF_RAWSET: 'rawset',
    B.LBF_RAWGET: 'rawget',
    B.LBF_RAWEQUAL: 'rawequal',

    B.LBF_TABLE_INSERT: 'table.insert',
    B.LBF_TABLE_UNPACK: 'table.unpack',

    B.LBF_VECTOR: 'Vector3.new',

    B.LBF_BIT32_COUNTLZ: 'bit32.countlz',
    B.LBF_BIT32_COUNTRZ: 'bit32.countrz',

    B.LBF_SELECT_VARARG: 'select',

    B.LBF_RAWLEN: 'rawlen',

    B.LBF_BIT32_EXTRACTK: 'bit32.extract',

    B.LBF_GETMETATABLE: 'getmetatable',
    B.LBF_SETMETATABLE: 'setmetatable',

    B.LBF_TONUMBER: 'tonumber',
    B.LBF_TOSTRING: 'tostring',

    # 64..77 resolve from the enum names; older lookup tables omit this
    # range and answer "none" for it.
    B.LBF_BIT32_BYTESWAP: 'bit32.byteswap',

    B.LBF_BUFFER_READI8: 'buffer.readi8',
    B.LBF_BUFFER_READU8: 'buffer.readu8',
    B.LBF_BUFFER_WRITEU8: 'buffer.writeu8',
    B.LBF_BUFFER_READI16: 'buffer.readi16',
    B.LBF_BUFFER_READU16: 'buffer.readu16',
    B.LBF_BUFFER_WRITEU16: 'buffer.writeu16',
    B.LBF_BUFFER_READI32: 'buffer.readi32',
    B.LBF_BUFFER_READU32: 'buffer.readu32',
    B.LBF_BUFFER_WRITEU32: 'buffer.writeu32',
    B.LBF_BUFFER_READF32: 'buffer.readf32',
    B.LBF_BUFFER_WRITEF32: 'buffer.writef32',
    B.LBF_BUFFER_READF64: 'buffer.readf64',
    B.LBF_BUFFER_WRITEF64: 'buffer.writef64',

    B.LBF_VECTOR_MAGNITUDE: 'vector.magnitude',
    B.LBF_VECTOR_NORMALIZE: 'vector.normalize',
    B.LBF_VECTOR_CROSS: 'vector.cross',
    B.LBF_VECTOR_DOT: 'vector.dot',
    B.LBF_VECTOR_FLOOR: 'vector.floor',
    B.LBF_VECTOR_CEIL: 'vector.ceil',
    B.LBF_VECTOR_ABS: 'vector.abs',
    B.LBF_VECTOR_SIGN: 'vector.sign',
    B.LBF_VECTOR_CLAMP: 'vector.clamp',
    B.LBF_VECTOR_MIN: 'vector.min',
    B.LBF_VECTOR_MAX: 'vector.max',
})


def builtin_name(bfid: int) -> str:
    return BUILTIN_NAMES.get(bfid, NONE_NAME)
