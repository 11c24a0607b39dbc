''' Instruction word field codec '''

WORD_MASK = 0xFFFFFFFF

OPCODE_MASK = 0xFF
SHIFT_A = 8
SHIFT_B = 16
SHIFT_C = 24
SHIFT_D = 16
SHIFT_E = 8

MAX_SD = 0x7FFF     # largest positive signed D
MAX_SE = 0x7FFFFF   # largest positive signed E, also the COVERAGE saturation point


def opcode(word: int) -> int:
    return word & OPCODE_MASK


decode_opcode = opcode


def field_a(word: int) -> int:
    return (word >> SHIFT_A) & 0xFF


def field_b(word: int) -> int:
    return (word >> SHIFT_B) & 0xFF


def field_c(word: int) -> int:
    return (word >> SHIFT_C) & 0xFF


def field_d(word: int) -> int:
    return (word & WORD_MASK) >> SHIFT_D


def field_sd(word: int) -> int:
    d = field_d(word)

    if d > MAX_SD:
        return d - 0x10000

    return d


def field_e(word: int) -> int:
    return (word & WORD_MASK) >> SHIFT_E


def field_se(word: int) -> int:
    e = field_e(word)

    if e > MAX_SE:
        return e - 0x1000000

    return e
