''' Instruction stream decoder '''

import logging as lg
import struct
from dataclasses import dataclass
from typing import Sequence

import luaubc.common.insn as insn
import luaubc.common.opcodes as opcodes
from luaubc.common.errors import TruncatedStream
from luaubc.common.opcodes import OpcodeDescriptor


WORD_SIZE = 4

# E is a signed jump offset here; elsewhere (COVERAGE) it is a hit counter
SIGNED_E = frozenset(['JUMPX'])

EXTRACTORS = {
    'a': insn.field_a,
    'b': insn.field_b,
    'c': insn.field_c,
    'd': insn.field_d,
    'sd': insn.field_sd,
    'e': insn.field_e,
}


@dataclass(frozen=True)
class Instruction:
    pc: int
    word: int
    descriptor: OpcodeDescriptor
    fields: tuple[tuple[str, int], ...] = ()
    aux: int | None = None

    @property
    def operands(self) -> dict[str, int]:
        return dict(self.fields)

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def size(self) -> int:
        return 2 if self.descriptor.has_aux else 1

    def words(self) -> list[int]:
        if self.aux is None:
            return [self.word]

        return [self.word, self.aux]


def words_from_bytes(data: bytes, byteorder: str = 'little') -> list[int]:
    if len(data) % WORD_SIZE != 0:
        raise TruncatedStream(len(data) // WORD_SIZE, len(data))

    prefix = '<' if byteorder == 'little' else '>'
    count = len(data) // WORD_SIZE
    return list(struct.unpack(f'{prefix}{count}I', data))


def bind_operands(descriptor: OpcodeDescriptor, word: int) -> tuple[tuple[str, int], ...]:
    operands = {}

    for name in descriptor.shape.fields:
        if name == 'e' and descriptor.name in SIGNED_E:
            operands[name] = insn.field_se(word)
        else:
            operands[name] = EXTRACTORS[name](word)

    return tuple(operands.items())


def decode_at(words: Sequence[int], pc: int) -> Instruction:
    if not 0 <= pc < len(words):
        raise TruncatedStream(pc, len(words))

    word = words[pc]
    descriptor = opcodes.descriptor_for(insn.decode_opcode(word))
    fields = bind_operands(descriptor, word)
    aux = None

    if descriptor.has_aux:
        if pc + 1 >= len(words):
            raise TruncatedStream(pc, len(words))

        aux = words[pc + 1]

    return Instruction(pc, word, descriptor, fields, aux)


def decode_function(words: Sequence[int]) -> list[Instruction]:
    code: list[Instruction] = []
    pc = 0

    while pc < len(words):
        instruction = decode_at(words, pc)
        lg.debug(f'{pc:04}: {instruction.name} {instruction.operands}')
        code.append(instruction)
        pc += instruction.size

    return code
