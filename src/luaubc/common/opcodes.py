''' Opcode descriptors and the dispatch table '''

import logging as lg
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Sequence

from luaubc.common.errors import UnknownOpcode


CASE_MULTIPLIER = 227  # 0xE3, coprime with 256
DISPATCH_SIZE = 256


class Shape(Enum):
    NONE = 'none'
    A = 'A'
    AB = 'AB'
    ABC = 'ABC'
    AD = 'AD'
    ASD = 'AsD'
    SD = 'sD'
    AC = 'AC'
    E = 'E'

    @property
    def fields(self) -> tuple[str, ...]:
        return SHAPE_FIELDS[self]


SHAPE_FIELDS = {
    Shape.NONE: (),
    Shape.A: ('a',),
    Shape.AB: ('a', 'b'),
    Shape.ABC: ('a', 'b', 'c'),
    Shape.AD: ('a', 'd'),
    Shape.ASD: ('a', 'sd'),
    Shape.SD: ('sd',),
    Shape.AC: ('a', 'c'),
    Shape.E: ('e',),
}


@dataclass(frozen=True)
class OpcodeDescriptor:
    name: str
    shape: Shape
    has_aux: bool = False
    index: int = -1

    def __str__(self) -> str:
        return self.name


def op(name: str, shape: Shape, aux: bool = False) -> tuple[str, Shape, bool]:
    return (name, shape, aux)


# Sequential order matters: position in this list is the index fed to
# dispatch_key(). Removed opcodes were replaced in place by newer ones.
OPCODE_LIST = (
    op('NOP', Shape.NONE),
    op('BREAK', Shape.NONE),
    op('LOADNIL', Shape.A),
    op('LOADB', Shape.ABC),
    op('LOADN', Shape.ASD),
    op('LOADK', Shape.AD),
    op('MOVE', Shape.AB),
    op('GETGLOBAL', Shape.AC, aux=True),
    op('SETGLOBAL', Shape.AC, aux=True),
    op('GETUPVAL', Shape.AB),
    op('SETUPVAL', Shape.AB),
    op('CLOSEUPVALS', Shape.A),
    op('GETIMPORT', Shape.AD, aux=True),
    op('GETTABLE', Shape.ABC),
    op('SETTABLE', Shape.ABC),
    op('GETTABLEKS', Shape.ABC, aux=True),
    op('SETTABLEKS', Shape.ABC, aux=True),
    op('GETTABLEN', Shape.ABC),
    op('SETTABLEN', Shape.ABC),
    op('NEWCLOSURE', Shape.AD),
    op('NAMECALL', Shape.ABC, aux=True),
    op('CALL', Shape.ABC),
    op('RETURN', Shape.AB),
    op('JUMP', Shape.SD),
    op('JUMPBACK', Shape.SD),
    op('JUMPIF', Shape.ASD),
    op('JUMPIFNOT', Shape.ASD),
    op('JUMPIFEQ', Shape.ASD, aux=True),
    op('JUMPIFLE', Shape.ASD, aux=True),
    op('JUMPIFLT', Shape.ASD, aux=True),
    op('JUMPIFNOTEQ', Shape.ASD, aux=True),
    op('JUMPIFNOTLE', Shape.ASD, aux=True),
    op('JUMPIFNOTLT', Shape.ASD, aux=True),
    op('ADD', Shape.ABC),
    op('SUB', Shape.ABC),
    op('MUL', Shape.ABC),
    op('DIV', Shape.ABC),
    op('MOD', Shape.ABC),
    op('POW', Shape.ABC),
    op('ADDK', Shape.ABC),
    op('SUBK', Shape.ABC),
    op('MULK', Shape.ABC),
    op('DIVK', Shape.ABC),
    op('MODK', Shape.ABC),
    op('POWK', Shape.ABC),
    op('AND', Shape.ABC),
    op('OR', Shape.ABC),
    op('ANDK', Shape.ABC),
    op('ORK', Shape.ABC),
    op('CONCAT', Shape.ABC),
    op('NOT', Shape.AB),
    op('MINUS', Shape.AB),
    op('LENGTH', Shape.AB),
    op('NEWTABLE', Shape.AB, aux=True),
    op('DUPTABLE', Shape.AD),
    op('SETLIST', Shape.ABC, aux=True),
    op('FORNPREP', Shape.ASD),
    op('FORNLOOP', Shape.ASD),
    op('FORGLOOP', Shape.ASD, aux=True),
    op('FORGPREP_INEXT', Shape.A),
    op('FASTCALL3', Shape.ABC, aux=True),
    op('FORGPREP_NEXT', Shape.A),
    op('NATIVECALL', Shape.NONE),
    op('GETVARARGS', Shape.AB),
    op('DUPCLOSURE', Shape.AD),
    op('PREPVARARGS', Shape.A),
    op('LOADKX', Shape.A, aux=True),
    op('JUMPX', Shape.E),
    op('FASTCALL', Shape.AC),
    op('COVERAGE', Shape.E),
    op('CAPTURE', Shape.AB),
    op('SUBRK', Shape.ABC),
    op('DIVRK', Shape.ABC),
    op('FASTCALL1', Shape.ABC),
    op('FASTCALL2', Shape.ABC, aux=True),
    op('FASTCALL2K', Shape.ABC, aux=True),
    op('FORGPREP', Shape.ASD),
    op('JUMPXEQKNIL', Shape.ASD, aux=True),
    op('JUMPXEQKB', Shape.ASD, aux=True),
    op('JUMPXEQKN', Shape.ASD, aux=True),
    op('JUMPXEQKS', Shape.ASD, aux=True),
    op('IDIV', Shape.ABC),
    op('IDIVK', Shape.ABC),
    # Counts opcodes, never dispatched
    op('_COUNT', Shape.NONE),
)

COUNT_SENTINEL = '_COUNT'


def dispatch_key(index: int) -> int:
    return (index * CASE_MULTIPLIER) % DISPATCH_SIZE


def make_descriptors(
    entries: Sequence[tuple[str, Shape, bool]]
) -> tuple[OpcodeDescriptor, ...]:
    descriptors = []

    for index, (name, shape, aux) in enumerate(entries):
        if name == COUNT_SENTINEL:
            break

        descriptors.append(OpcodeDescriptor(name, shape, aux, index))

    return tuple(descriptors)


def build_dispatch_table(
    descriptors: Sequence[OpcodeDescriptor]
) -> tuple[OpcodeDescriptor | None, ...]:
    if len(descriptors) > DISPATCH_SIZE:
        raise ValueError(f'Too many opcodes: {len(descriptors)}')

    table: list[OpcodeDescriptor | None] = [None] * DISPATCH_SIZE

    for descriptor in descriptors:
        key = dispatch_key(descriptor.index)

        if table[key] is not None:
            raise ValueError(f'Dispatch key {key} taken by {table[key]}')

        table[key] = descriptor

    lg.debug(f'Dispatch table built for {len(descriptors)} opcodes')
    return tuple(table)


DESCRIPTORS = make_descriptors(OPCODE_LIST)
OPCODE_COUNT = len(DESCRIPTORS)
DISPATCH_TABLE = build_dispatch_table(DESCRIPTORS)
BY_NAME = MappingProxyType({d.name: d for d in DESCRIPTORS})


def descriptor_for(opcode_byte: int) -> OpcodeDescriptor:
    if not 0 <= opcode_byte < DISPATCH_SIZE:
        raise UnknownOpcode(opcode_byte)

    descriptor = DISPATCH_TABLE[opcode_byte]

    if descriptor is None:
        raise UnknownOpcode(opcode_byte)

    return descriptor


def descriptor_by_name(name: str) -> OpcodeDescriptor:
    try:
        return BY_NAME[name]
    except KeyError:
        raise UnknownOpcode(name) from None


def opcode_byte(name: str) -> int:
    return dispatch_key(descriptor_by_name(name).index)


def all_descriptors() -> tuple[OpcodeDescriptor, ...]:
    return DESCRIPTORS
