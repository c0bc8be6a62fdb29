# -*- encoding: utf-8 -*-
# @File   : utils.py
# @Time   : 2024/11/02 21:51:37

"""Character level helpers shared by the parser and the serializer.

A backslash always escapes the character right after it, so we walk
strings pair by pair instead of doing naive `str.replace()`,
which would break on `\\\\=` and friends.
"""

from .consts import COMMENT_MARKS, PropMark, is_separator
from .exceptions import NoSeparatorFound

ESC = PropMark.ESCAPE.value


def get_separator(line: str) -> tuple[str, int]:
    """Find the first unescaped `=`, `:` or whitespace in `line`.

    Returns:
        a `(separator, index)` tuple.

    Raises:
        NoSeparatorFound: if `line` is empty or has no such character.
    """
    escaped = False
    for idx, ch in enumerate(line):
        if escaped:
            escaped = False
        elif ch == ESC:
            escaped = True
        elif is_separator(ch):
            return ch, idx
    raise NoSeparatorFound(line)


def escape_separators(s: str) -> str:
    ret: list[str] = []
    i, n = 0, len(s)
    while i < n:
        ch = s[i]
        if ch == ESC:
            # existing escape pair, keep as is.
            ret.append(s[i:i + 2])
            i += 2
            continue
        if is_separator(ch):
            ret.append(ESC)
        ret.append(ch)
        i += 1
    return ''.join(ret)


def unescape_separators(s: str) -> str:
    ret: list[str] = []
    i, n = 0, len(s)
    while i < n:
        ch = s[i]
        if ch != ESC or i + 1 >= n:
            ret.append(ch)
            i += 1
            continue
        nxt = s[i + 1]
        if is_separator(nxt):
            ret.append(nxt)
        else:
            ret.append(ch + nxt)
        i += 2
    return ''.join(ret)


def escape_key(key: str) -> str:
    """`escape_separators()`, plus a leading `#` or `!` escaped,
    or the written line would read back as a comment."""
    ret = escape_separators(key)
    if ret[:1] in COMMENT_MARKS:
        ret = ESC + ret
    return ret


def unescape_key(key: str) -> str:
    """Inverse of `escape_key()`."""
    if key[:1] == ESC and key[1:2] in COMMENT_MARKS:
        key = key[1:]
    return unescape_separators(key)


def ends_with_escape(s: str) -> bool:
    """Whether `s` ends with an odd run of backslashes,
    i.e. a line continuation marker."""
    cnt = len(s) - len(s.rstrip(ESC))
    return cnt % 2 == 1
