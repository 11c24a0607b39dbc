class DecodeError(Exception):
    pass


class UnknownOpcode(DecodeError):
    opcode: int | str

    def __init__(self, opcode: int | str):
        super().__init__(f'Unknown opcode {opcode}')
        self.opcode = opcode


class UnrepresentableType(DecodeError):
    tag: int

    def __init__(self, tag: int):
        super().__init__(f'Unrepresentable type tag {tag}')
        self.tag = tag


class TruncatedStream(DecodeError):
    pc: int
    length: int

    def __init__(self, pc: int, length: int):
        super().__init__(f'Instruction stream truncated at {pc} (length {length})')
        self.pc = pc
        self.length = length


class DumpSyntaxError(DecodeError):
    pass
