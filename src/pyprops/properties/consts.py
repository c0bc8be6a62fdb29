# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:32:05

from enum import Enum


class PropMark(str, Enum):
    EQUALS = '='
    COLON = ':'
    ESCAPE = '\\'
    COMMENT = '#'
    COMMENT_ALT = '!'


SEPARATORS = (PropMark.EQUALS.value, PropMark.COLON.value)
COMMENT_MARKS = (PropMark.COMMENT.value, PropMark.COMMENT_ALT.value)


def is_separator(ch: str) -> bool:
    """`=`, `:` or any whitespace."""
    return ch in SEPARATORS or ch.isspace()
