# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/02 22:36:19

"""Java-style `.properties` reading and writing.

We do parsing based on the following consumption:
1. The whole document fits in memory. No streaming.
2. Files are plain text in a known codec (`utf-8` by default),
   there's no codec detection.
3. One bad line fails the whole document. No partial results.

Besides the native text form, JSON (flat object) and YAML (nested by `.`)
conversions are provided for convenience.
"""

import json
import logging
from io import StringIO, TextIOBase
from re import compile as regex
from typing import Any

import yaml

from ..abstract import FileHandler, SerializedComponents
from .consts import COMMENT_MARKS, SEPARATORS
from .exceptions import InvalidProperty, NoSeparatorFound
from .model import Properties, Property
from .utils import (
    ends_with_escape,
    get_separator,
    unescape_key,
    unescape_separators
)

_NEWLINE = regex(r'\r\n|\r|\n')


class PropLineReader(SerializedComponents[str]):
    """Assemble physical lines into logical ones.

    Comments and blank lines are dropped, continuation lines
    (trailing unescaped `\\`) get joined.
    """

    def __init__(self, text: str) -> None:
        self._lines = _NEWLINE.split(text)
        self._pos = 0
        self._current: str | None = None

    def reset_seek(self) -> None:
        self._pos = 0
        self._current = None

    @property
    def seekable(self) -> bool:
        return self._pos < len(self._lines)

    def next(self) -> None:
        """Move to the next logical line.

        `self.current` would be `None` once the text is exhausted.
        """
        self._current = None
        while self.seekable:
            line = self._lines[self._pos].lstrip()
            self._pos += 1
            # `#` or `!` only matters at the head of a logical line.
            if not line or line[0] in COMMENT_MARKS:
                continue
            while ends_with_escape(line):
                line = line[:-1]
                if not self.seekable:
                    break
                raw = self._lines[self._pos]
                self._pos += 1
                cont = raw.lstrip()
                if not cont:  # blank line ends the continuation
                    break
                if cont != raw and line and not line[-1].isspace():
                    line += ' '
                line += cont
            if line:
                self._current = line
                return

    @property
    def current(self) -> str | None:
        return self._current

    def __str__(self) -> str:
        return f'line {self._pos} of {len(self._lines)}'


class PropertiesParser(FileHandler[Properties]):
    @staticmethod
    def parseline(line: str) -> Property:
        """Split one logical line into a `Property`.

        Raises:
            InvalidProperty: no separator found, or the key is empty.
        """
        try:
            sep, idx = get_separator(line)
        except NoSeparatorFound as e:
            raise InvalidProperty(line) from e

        key = unescape_key(line[:idx])
        if not key:
            raise InvalidProperty(line, 'empty key')
        rest = line[idx + 1:].lstrip()
        # `key = value`, the whitespace comes first.
        if sep.isspace() and rest[:1] in SEPARATORS:
            rest = rest[1:].lstrip()
        return Property(key=key, value=unescape_separators(rest))

    @staticmethod
    def readstream(
        buf: TextIOBase, ins: Properties | None = None
    ) -> Properties:
        """Parse a decoded text stream.

        If `ins` is given, parsed pairs are merged into it
        (only after the whole stream turns out valid).
        """
        ret = Properties()
        for line in PropLineReader(buf.read()):
            prop = PropertiesParser.parseline(line)
            if prop.key in ret:
                logging.warning(
                    f'"{prop.key}" already exists and got overrode.')
            ret[prop.key] = prop
        if not ret:
            raise InvalidProperty('', 'no property found')
        logging.debug(f'{len(ret)} properties parsed.')

        if ins is None:
            return ret
        for k, v in ret.items():
            ins[k] = v
        return ins

    @staticmethod
    def writestream(
        instance: Properties, buf: TextIOBase, delimiter: str = '='
    ) -> None:
        # mirror `readstream()`, which refuses a document without property.
        if not instance:
            raise InvalidProperty('', 'no property to write')
        buf.write(instance.to_string(delimiter))
        buf.write('\n')

    def read(self, ins: Properties | None = None) -> Properties:
        with self._open() as fp:
            return self.readstream(fp, ins)

    def write(self, instance: Properties, *, delimiter: str = '=') -> None:
        buf = StringIO()
        # serialize first so a bad entry won't leave a truncated file.
        self.writestream(instance, buf, delimiter)
        with self._open('w') as fp:
            fp.write(buf.getvalue())
        logging.debug(f'{len(instance)} properties written to {self}.')


def new_from_string(text: str) -> Properties:
    """Parse a whole `.properties` document.

    Raises:
        InvalidProperty: if `text` is empty, has no property at all,
            or any line is malformed.
    """
    if not text:
        raise InvalidProperty(text, 'empty document')
    return PropertiesParser.readstream(StringIO(text))


def _scalar(key: str, val: Any) -> str:
    if val is None:
        return ''
    if isinstance(val, bool):
        return 'true' if val else 'false'
    if isinstance(val, (dict, list)):
        raise InvalidProperty(key, 'nested value is not supported')
    return str(val)


class PropertiesJsonParser(FileHandler[Properties]):
    """Flat JSON object, i.e. `{"key": "value"}`."""

    def read(self) -> Properties:
        with self._open() as fp:
            src = json.load(fp)
        if not isinstance(src, dict):
            raise InvalidProperty(str(self), 'JSON object expected')
        ret = Properties()
        for k, v in src.items():
            ret[k] = _scalar(k, v)
        return ret

    def write(self, instance: Properties, indent: int = 2) -> None:
        with self._open('w') as fp:
            json.dump(instance.to_dict(), fp, ensure_ascii=False, indent=indent)


class PropertiesYamlParser(FileHandler[Properties]):
    """Keys are split by `.` into nested YAML mappings, like:

        ```yaml
        server:
          port: '8080'  # server.port=8080
        ```
    """

    @staticmethod
    def to_layers(instance: Properties) -> dict[str, Any]:
        layers: dict[str, Any] = {}
        for key, val in instance.to_dict().items():
            words = key.split('.')
            cur = layers
            for word in words[:-1]:
                nxt = cur.setdefault(word, {})
                if not isinstance(nxt, dict):
                    cur = None
                    break
                cur = nxt
            if cur is None or isinstance(cur.get(words[-1]), dict):
                # leaf and prefix at the same time, keep it flat.
                if key in layers:
                    raise InvalidProperty(key, 'unable to nest')
                logging.warning(f'"{key}" conflicts with other keys, '
                                'kept flat at top level.')
                cur = layers
                words = [key]
            cur[words[-1]] = val
        return layers

    @staticmethod
    def __flatten(
        node: dict[Any, Any], ret: Properties, prefix: str = ''
    ) -> None:
        for k, v in node.items():
            key = f'{prefix}.{k}' if prefix else str(k)
            if isinstance(v, dict):
                PropertiesYamlParser.__flatten(v, ret, key)
            else:
                ret[key] = _scalar(key, v)

    def read(self) -> Properties:
        with self._open() as fp:
            src = yaml.safe_load(fp)
        if not isinstance(src, dict):
            raise InvalidProperty(str(self), 'YAML mapping expected')
        ret = Properties()
        self.__flatten(src, ret)
        return ret

    def write(self, instance: Properties, indent: int = 2) -> None:
        with self._open('w') as fp:
            yaml.safe_dump(
                self.to_layers(instance), fp,
                allow_unicode=True, sort_keys=False,
                default_flow_style=False, indent=indent)
