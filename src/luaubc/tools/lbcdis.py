import sys
from pathlib import Path
import logging as lg
import traceback

import click

from luaubc.common.errors import DecodeError
from luaubc.disasm.decoder import words_from_bytes
from luaubc.disasm.hexdump import parse_dump
from luaubc.disasm.listing import render_function
from luaubc.disasm.settings import DisasmSettings, load_settings


EXIT_OK = 0
EXIT_DECODE_ERROR = 2
EXIT_GENERAL_ERROR = 100


def read_words(input_path: Path, hex_dump: bool, settings: DisasmSettings) -> list[int]:
    if hex_dump:
        return parse_dump(input_path.read_text())

    return words_from_bytes(input_path.read_bytes(), settings.byteorder)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-c', '--config', type=click.Path(exists=True, path_type=Path), help='TOML settings file')
@click.option('--hex', 'hex_dump', is_flag=True, help='Input is a textual word dump')
@click.option('--big-endian', is_flag=True, help='Binary input words are big endian')
@click.option('--no-pc', is_flag=True, help='Do not print instruction positions')
@click.option('--raw', is_flag=True, help='Print raw instruction words')
@click.argument('input_path', type=click.Path(exists=True, path_type=Path))
def disassemble(
    verbose: bool, config: Path | None, hex_dump: bool,
    big_endian: bool, no_pc: bool, raw: bool, input_path: Path
):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('LUAU BYTECODE DISASSEMBLER')

    try:
        settings = load_settings(config) if config else DisasmSettings()

        settings.update(
            show_pc=False if no_pc else None,
            show_raw=True if raw else None,
            byteorder='big' if big_endian else None
        )

        words = read_words(input_path, hex_dump, settings)
        lg.info(f'Decoding {len(words)} words from {input_path}')

        for line in render_function(words, settings):
            click.echo(line)

    except DecodeError as e:
        lg.error(f'Decoding failed: {e}')
        sys.exit(EXIT_DECODE_ERROR)

    except Exception as e:
        lg.error(f'Disassembly halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_GENERAL_ERROR)

    sys.exit(EXIT_OK)


if __name__ == '__main__':
    disassemble()
