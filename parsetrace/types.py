from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, NamedTuple, Sequence
)

T = TypeVar('T')
U = TypeVar('U')

Visitor = Callable[[str, str], Any]
Transform = Callable[[str, str], T]
EntryPredicate = Callable[[str, str], bool]


class InvalidArgument(ValueError):
    """raised when a result is built from arguments that cannot form well-formed pairs"""
    pass


class Entry(NamedTuple):
    """one (value, remainder) pair recording the outcome of a single parsing step"""
    value: str
    remainder: str

    def __repr__(self) -> str:
        return f"Entry(value={self.value!r}, remainder={self.remainder!r})"
