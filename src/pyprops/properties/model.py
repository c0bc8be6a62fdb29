# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 22:10:48

"""
Basically an ordered dict of `.properties` entries.

Parsing lives in `properties.parser`.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Iterator

from .exceptions import InvalidProperty
from .utils import ends_with_escape, escape_key, escape_separators


@dataclass(kw_only=True)
class Property:
    key: str
    value: str = ''


class Properties(MutableMapping[str, Property]):
    """Key-value pairs of a `.properties` document, in declaration order.

    Re-assigning an existing key only updates its value,
    the key keeps the position where it was first inserted.

    Not thread-safe. Lock it yourself if sharing between threads.
    """

    # two list model: one keeps declaration order, another does lookup.
    def __init__(self) -> None:
        self.__keys: list[str] = []
        self.__data: dict[str, Property] = {}

    def __getitem__(self, key: str) -> Property:
        return self.__data[key]

    def __setitem__(self, key: str, value: Property | str) -> None:
        if isinstance(value, str):
            value = Property(key=key, value=value)
        elif value.key != key:
            value = Property(key=key, value=value.value)
        if key not in self.__data:
            self.__keys.append(key)
        self.__data[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__data[key]
        self.__keys.remove(key)

    def __contains__(self, key: object) -> bool:
        return key in self.__data

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.__keys))

    def __len__(self) -> int:
        return len(self.__keys)

    def __repr__(self) -> str:
        return 'Properties { .cnt = %d }' % len(self)

    def keys(self) -> list[str]:  # type: ignore[override]
        return list(self.__keys)

    def getvalue(self, key: str, default: str | None = None) -> str | None:
        """Shortcut of `self[key].value`."""
        prop = self.__data.get(key)
        return default if prop is None else prop.value

    def to_dict(self) -> dict[str, str]:
        return {k: self.__data[k].value for k in self.__keys}

    def to_string(self, delimiter: str = '=') -> str:
        """Serialize back to `.properties` text, one pair per line.

        An empty collection gives an empty string,
        which `new_from_string()` refuses to read back.
        """
        lines = []
        for k in self.__keys:
            v = self.__data[k].value
            if not k:
                raise InvalidProperty(k, 'empty key')
            if any('\n' in i or '\r' in i for i in (k, v)):
                raise InvalidProperty(k, 'line break is not serializable')
            # an odd trailing `\` escapes the delimiter (key)
            # or joins the next line (value).
            if ends_with_escape(k) or ends_with_escape(v):
                raise InvalidProperty(k, 'trailing backslash')
            lines.append(
                f'{escape_key(k)}{delimiter}{escape_separators(v)}')
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.to_string()
