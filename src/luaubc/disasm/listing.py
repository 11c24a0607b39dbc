from typing import Sequence

import luaubc.common.bytecode as bc
from luaubc.common.builtins import builtin_name
from luaubc.disasm.decoder import Instruction, decode_function
from luaubc.disasm.settings import DisasmSettings


# Operand roles: R register, K constant, U upvalue, L jump offset.
# Fields without a role are printed as plain integers.
REG = 'R'
CONST = 'K'
UPVAL = 'U'
JUMP = 'L'

D_JUMP_OPS = frozenset([
    'JUMP', 'JUMPBACK', 'JUMPIF', 'JUMPIFNOT',
    'JUMPIFEQ', 'JUMPIFLE', 'JUMPIFLT', 'JUMPIFNOTEQ', 'JUMPIFNOTLE', 'JUMPIFNOTLT',
    'FORNPREP', 'FORNLOOP', 'FORGLOOP', 'FORGPREP',
    'JUMPXEQKNIL', 'JUMPXEQKB', 'JUMPXEQKN', 'JUMPXEQKS',
    'JUMPX',
])

FASTCALL_OPS = frozenset(['FASTCALL', 'FASTCALL1', 'FASTCALL2', 'FASTCALL2K', 'FASTCALL3'])

# A is not a register for these
NON_REGISTER_A_OPS = FASTCALL_OPS | frozenset(['CAPTURE', 'PREPVARARGS'])

REG_REG = {'b': REG, 'c': REG}
REG_CONST = {'b': REG, 'c': CONST}
REG_ONLY = {'b': REG}
REG_JUMP = {'b': REG, 'c': JUMP}

FIELD_ROLES = {
    'LOADB': {'c': JUMP},
    'LOADK': {'d': CONST},
    'MOVE': REG_ONLY,
    'GETUPVAL': {'b': UPVAL},
    'SETUPVAL': {'b': UPVAL},
    'GETIMPORT': {'d': CONST},
    'GETTABLE': REG_REG,
    'SETTABLE': REG_REG,
    'GETTABLEKS': REG_ONLY,
    'SETTABLEKS': REG_ONLY,
    'GETTABLEN': REG_ONLY,
    'SETTABLEN': REG_ONLY,
    'NAMECALL': REG_ONLY,

    'ADD': REG_REG,
    'SUB': REG_REG,
    'MUL': REG_REG,
    'DIV': REG_REG,
    'MOD': REG_REG,
    'POW': REG_REG,
    'IDIV': REG_REG,
    'AND': REG_REG,
    'OR': REG_REG,
    'CONCAT': REG_REG,

    'ADDK': REG_CONST,
    'SUBK': REG_CONST,
    'MULK': REG_CONST,
    'DIVK': REG_CONST,
    'MODK': REG_CONST,
    'POWK': REG_CONST,
    'IDIVK': REG_CONST,
    'ANDK': REG_CONST,
    'ORK': REG_CONST,

    'SUBRK': {'b': CONST, 'c': REG},
    'DIVRK': {'b': CONST, 'c': REG},

    'NOT': REG_ONLY,
    'MINUS': REG_ONLY,
    'LENGTH': REG_ONLY,

    'DUPTABLE': {'d': CONST},
    'SETLIST': REG_ONLY,
    'DUPCLOSURE': {'d': CONST},

    'FASTCALL': {'c': JUMP},
    'FASTCALL1': REG_JUMP,
    'FASTCALL2': REG_JUMP,
    'FASTCALL2K': REG_JUMP,
    'FASTCALL3': REG_JUMP,
}


def field_roles(name: str) -> dict[str, str]:
    roles = dict(FIELD_ROLES.get(name, {}))

    if name in D_JUMP_OPS:
        roles['sd'] = JUMP
        roles['e'] = JUMP

    return roles


def jump_target(instruction: Instruction) -> int | None:
    for name, role in field_roles(instruction.name).items():
        if role == JUMP and name in instruction.operands:
            return instruction.pc + 1 + instruction.operands[name]

    return None


def render_a(instruction: Instruction, settings: DisasmSettings) -> str:
    a = instruction.operands['a']

    if instruction.name in FASTCALL_OPS:
        if settings.resolve_builtins:
            return builtin_name(a)

        return str(a)

    if instruction.name == 'CAPTURE':
        return bc.CAPTURE_NAMES.get(a, str(a))

    if instruction.name in NON_REGISTER_A_OPS:
        return str(a)

    return f'R{a}'


def render_operands(instruction: Instruction, settings: DisasmSettings) -> list[str]:
    tokens = []
    roles = field_roles(instruction.name)

    for name, value in instruction.fields:
        role = roles.get(name)

        if name == 'a':
            tokens.append(render_a(instruction, settings))
        elif role == JUMP:
            tokens.append(f'L{instruction.pc + 1 + value}')
        elif role is not None:
            tokens.append(f'{role}{value}')
        else:
            tokens.append(str(value))

    if instruction.aux is not None:
        tokens.append(f'[{instruction.aux:#010x}]')

    return tokens


def render(instruction: Instruction, settings: DisasmSettings | None = None) -> str:
    if settings is None:
        settings = DisasmSettings()

    parts = []

    if settings.show_pc:
        parts.append(f'{instruction.pc:04}')

    if settings.show_raw:
        parts.append(' '.join(f'{w:08X}' for w in instruction.words()).ljust(17))

    parts.append(instruction.name)
    parts.extend(render_operands(instruction, settings))
    return ' '.join(parts)


def render_function(
    words: Sequence[int], settings: DisasmSettings | None = None
) -> list[str]:
    return [render(instruction, settings) for instruction in decode_function(words)]
