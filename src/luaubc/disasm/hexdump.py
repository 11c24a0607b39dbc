''' Textual word dump grammar '''

import pyparsing as pp

from luaubc.common.errors import DumpSyntaxError


comment = pp.Regex(r'(//|;)[^\n]*')

address = pp.Suppress(pp.Regex(r'[0-9a-fA-F]+:'))

word = pp.Regex(r'(0[xX])?[0-9a-fA-F]{1,8}\b').set_parse_action(lambda r: int(r[0], 16))

dump = pp.ZeroOrMore(address | word)
dump.ignore(comment)


def parse_dump(text: str) -> list[int]:
    try:
        return list(dump.parse_string(text, parse_all=True))
    except pp.ParseException as e:
        raise DumpSyntaxError(f'Malformed word dump at line {e.lineno}, column {e.col}') from e
