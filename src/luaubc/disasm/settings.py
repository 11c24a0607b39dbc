import logging as lg
import tomllib
from pathlib import Path


BYTEORDERS = ('little', 'big')


def check_flag(name: str, value) -> bool:
    if not isinstance(value, bool):
        raise UserWarning(f'Setting {name} must be true or false, got {value!r}')

    return value


class DisasmSettings:
    show_pc: bool
    show_raw: bool
    byteorder: str
    resolve_builtins: bool

    def __init__(self):
        self.show_pc = True
        self.show_raw = False
        self.byteorder = 'little'
        self.resolve_builtins = True

    def update(
        self,
        show_pc: bool | None = None,
        show_raw: bool | None = None,
        byteorder: str | None = None,
        resolve_builtins: bool | None = None
    ):
        if show_pc is not None:
            self.show_pc = check_flag('show_pc', show_pc)

        if show_raw is not None:
            self.show_raw = check_flag('show_raw', show_raw)

        if byteorder is not None:
            if byteorder not in BYTEORDERS:
                raise UserWarning(f'Unsupported byte order {byteorder}')

            self.byteorder = byteorder

        if resolve_builtins is not None:
            self.resolve_builtins = check_flag('resolve_builtins', resolve_builtins)

        return self


def load_settings(path: Path) -> DisasmSettings:
    lg.debug(f'Loading settings from {path}')
    config = tomllib.loads(path.read_text())
    section = config.get('disasm', {})

    return DisasmSettings().update(
        show_pc=section.get('show_pc'),
        show_raw=section.get('show_raw'),
        byteorder=section.get('byteorder'),
        resolve_builtins=section.get('resolve_builtins')
    )
