"""Key/value decoding for query strings and hash-bang fragments.

Flat on purpose: no list values, no nested keys. A repeated key keeps
its last value.
"""

import re
from urllib.parse import unquote

_SEPARATORS = re.compile(r"[&;]")


def parse_params(query: str) -> dict[str, str]:
    """Decode ``key=value`` pairs separated by ``&`` or ``;``.

    ``+`` is read as a space before percent-decoding. A segment without
    ``=`` uses the segment itself as both key and value::

        parse_params("foo=FOO&buz=BUZ")  # {"foo": "FOO", "buz": "BUZ"}
        parse_params("a+b=c+d")          # {"a b": "c d"}
        parse_params("flag")             # {"flag": "flag"}
    """
    params: dict[str, str] = {}
    for pair in _SEPARATORS.split(query):
        if not pair:
            continue
        key, sep, value = pair.partition("=")
        if not sep:
            value = key
        params[_decode(key)] = _decode(value)
    return params


def _decode(text: str) -> str:
    return unquote(text.replace("+", " "))
