from __future__ import annotations

import re
from typing import List


def tokenize_string(s: str, delim: str = "\t\n") -> List[str]:
    """Split ``s`` on any single character in ``delim``.

    Empty tokens between adjacent delimiters are kept, but a trailing
    delimiter does not produce a trailing empty token.
    """
    if not s:
        return []
    if not delim:
        return [s]
    tokens = re.split("[" + re.escape(delim) + "]", s)
    if tokens[-1] == "":
        tokens.pop()
    return tokens
