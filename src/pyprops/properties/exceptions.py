# -*- encoding: utf-8 -*-
# @File   : exceptions.py
# @Time   : 2024/11/02 21:40:12

class PropertiesError(Exception):
    """Base of all errors raised when handling .properties documents."""
    pass


class NoSeparatorFound(PropertiesError):
    """A logical line carries no unescaped `=`, `:` or whitespace."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f'no separator detected for property: {line}')


class InvalidProperty(PropertiesError):
    """A logical line (or whole document) can't make a key-value pair."""

    def __init__(self, line: str, reason: str | None = None) -> None:
        self.line = line
        self.reason = reason
        msg = f'invalid property: {line}'
        if reason:
            msg += f' ({reason})'
        super().__init__(msg)
