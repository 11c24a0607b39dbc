from types import MappingProxyType

# Bytecode version; runtime supports [MIN, MAX]
LBC_VERSION_MIN = 3
LBC_VERSION_MAX = 6

# Type encoding version
LBC_TYPE_VERSION_MIN = 1
LBC_TYPE_VERSION_MAX = 3

VERSION_RANGE = (LBC_VERSION_MIN, LBC_VERSION_MAX)
TYPE_VERSION_RANGE = (LBC_TYPE_VERSION_MIN, LBC_TYPE_VERSION_MAX)

# Constant table entry kinds
LBC_CONSTANT_NIL = 0
LBC_CONSTANT_BOOLEAN = 1
LBC_CONSTANT_NUMBER = 2
LBC_CONSTANT_STRING = 3
LBC_CONSTANT_IMPORT = 4
LBC_CONSTANT_TABLE = 5
LBC_CONSTANT_CLOSURE = 6
LBC_CONSTANT_VECTOR = 7

# Type table tags
LBC_TYPE_NIL = 0
LBC_TYPE_BOOLEAN = 1
LBC_TYPE_NUMBER = 2
LBC_TYPE_STRING = 3
LBC_TYPE_TABLE = 4
LBC_TYPE_FUNCTION = 5
LBC_TYPE_THREAD = 6
LBC_TYPE_USERDATA = 7
LBC_TYPE_VECTOR = 8
LBC_TYPE_BUFFER = 9

LBC_TYPE_ANY = 15

LBC_TYPE_TAGGED_USERDATA_BASE = 64
LBC_TYPE_TAGGED_USERDATA_END = 64 + 32

LBC_TYPE_OPTIONAL_BIT = 1 << 7  # 128

LBC_TYPE_INVALID = 256

# Capture type, operand A of CAPTURE
LCT_VAL = 0
LCT_REF = 1
LCT_UPVAL = 2

# Proto flag bitmask
LPF_NATIVE_MODULE = 1 << 0    # main proto of a --!native module
LPF_NATIVE_COLD = 1 << 1      # not profitable to compile natively
LPF_NATIVE_FUNCTION = 1 << 2  # module has at least one @native function

CONSTANT_NAMES = MappingProxyType({
    LBC_CONSTANT_NIL: 'nil',
    LBC_CONSTANT_BOOLEAN: 'boolean',
    LBC_CONSTANT_NUMBER: 'number',
    LBC_CONSTANT_STRING: 'string',
    LBC_CONSTANT_IMPORT: 'import',
    LBC_CONSTANT_TABLE: 'table',
    LBC_CONSTANT_CLOSURE: 'closure',
    LBC_CONSTANT_VECTOR: 'vector',
})

CAPTURE_NAMES = MappingProxyType({
    LCT_VAL: 'VAL',
    LCT_REF: 'REF',
    LCT_UPVAL: 'UPVAL',
})

PROTO_FLAG_NAMES = MappingProxyType({
    LPF_NATIVE_MODULE: 'NATIVE_MODULE',
    LPF_NATIVE_COLD: 'NATIVE_COLD',
    LPF_NATIVE_FUNCTION: 'NATIVE_FUNCTION',
})


def version_supported(version: int) -> bool:
    return LBC_VERSION_MIN <= version <= LBC_VERSION_MAX


def type_version_supported(version: int) -> bool:
    return LBC_TYPE_VERSION_MIN <= version <= LBC_TYPE_VERSION_MAX


def proto_flag_names(flags: int) -> list[str]:
    return [name for bit, name in PROTO_FLAG_NAMES.items() if flags & bit]
