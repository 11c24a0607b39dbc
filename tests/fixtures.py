import pytest

import unit_utils
from luaubc.disasm.hexdump import parse_dump


@pytest.fixture
def forloop_words():
    yield parse_dump(unit_utils.load_file('testdata/disasm/forloop.hex'))


@pytest.fixture
def forloop_listing():
    yield unit_utils.load_lines('testdata/disasm/forloop.lst')
