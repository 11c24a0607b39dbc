from types import MappingProxyType

import luaubc.common.bytecode as bc
from luaubc.common.errors import UnrepresentableType


BASE_TYPE_NAMES = MappingProxyType({
    bc.LBC_TYPE_NIL: 'nil',
    bc.LBC_TYPE_BOOLEAN: 'boolean',
    bc.LBC_TYPE_NUMBER: 'number',
    bc.LBC_TYPE_STRING: 'string',
    bc.LBC_TYPE_TABLE: 'table',
    bc.LBC_TYPE_FUNCTION: 'function',
    bc.LBC_TYPE_THREAD: 'thread',
    bc.LBC_TYPE_USERDATA: 'userdata',
    bc.LBC_TYPE_VECTOR: 'Vector3',
    bc.LBC_TYPE_BUFFER: 'buffer',
    bc.LBC_TYPE_ANY: 'any',
})


def base_type(tag: int) -> int:
    return tag & ~bc.LBC_TYPE_OPTIONAL_BIT


def is_optional(tag: int) -> bool:
    return tag & bc.LBC_TYPE_OPTIONAL_BIT != 0


def is_tagged_userdata(tag: int) -> bool:
    base = base_type(tag)
    return bc.LBC_TYPE_TAGGED_USERDATA_BASE <= base < bc.LBC_TYPE_TAGGED_USERDATA_END


def type_name(tag: int, include_optional_suffix: bool) -> str:
    ''' Human-readable name of a type tag, e.g. 2 -> "number", 2|128 -> "number?" '''

    name = BASE_TYPE_NAMES.get(base_type(tag))

    if name is None:
        raise UnrepresentableType(tag)

    if include_optional_suffix and is_optional(tag):
        name += '?'

    return name
