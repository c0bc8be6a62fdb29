# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/02 21:20:30

from abc import ABCMeta, abstractmethod
from typing import IO, Generic, Iterator, TypeVar

T = TypeVar('T')


class SerializedComponents(Generic[T], metaclass=ABCMeta):
    """Restartable cursor over components pulled out of a text.

    Subclasses move with `next()` and report `None` as `current`
    once exhausted. Iterating always starts over from the head.
    """

    @abstractmethod
    def reset_seek(self) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def seekable(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def next(self) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def current(self) -> T | None:
        raise NotImplementedError

    def __iter__(self) -> Iterator[T]:
        self.reset_seek()
        while True:
            self.next()
            if (i := self.current) is None:
                return
            yield i


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Read/write a `T` document from/to one text file.

    There's no codec detection, the file is opened with `encoding` as is.
    """

    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        self._fn = filename
        self._codec = encoding

    @property
    def encoding(self) -> str:
        return self._codec

    def _open(self, mode: str = 'r') -> IO[str]:
        return open(self._fn, mode, encoding=self._codec)

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return f'{self._fn} ({self._codec})'
