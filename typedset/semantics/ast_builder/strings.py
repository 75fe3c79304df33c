"""String literal processing."""
from __future__ import annotations

_SIMPLE_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '\\': '\\',
    '"': '"',
    "'": "'",
}


def process_string_escapes(raw_string: str) -> str:
    r"""Process escape sequences in a string literal body.

    Handles \n, \t, \r, \\, \", \' and \uNNNN. Unknown escapes are kept
    verbatim.
    """
    result = []
    i = 0
    while i < len(raw_string):
        ch = raw_string[i]
        if ch != '\\' or i + 1 >= len(raw_string):
            result.append(ch)
            i += 1
            continue

        next_char = raw_string[i + 1]
        if next_char in _SIMPLE_ESCAPES:
            result.append(_SIMPLE_ESCAPES[next_char])
            i += 2
        elif next_char == 'u' and i + 5 < len(raw_string):
            try:
                result.append(chr(int(raw_string[i + 2:i + 6], 16)))
                i += 6
            except ValueError:
                result.append(ch)
                i += 1
        else:
            result.append(ch)
            i += 1

    return ''.join(result)


def parse_string_token(value: str) -> str:
    """Strip the surrounding quotes of a STRING token and decode escapes."""
    return process_string_escapes(value[1:-1])
