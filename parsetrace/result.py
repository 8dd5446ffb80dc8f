from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IParseResult(ABC):
    @abstractmethod
    def _get_data(self) -> List[Entry]:
        """get the entries as a fresh list"""
        pass

# --- base result implementation ---

class _BaseParseResult(IParseResult):
    def __init__(self, input: str,
                 values: Optional[Sequence[str]] = None,
                 remainders: Optional[Sequence[str]] = None):
        """init over the original input, optionally seeded with parallel values and remainders"""
        if (values is None) != (remainders is None):
            raise InvalidArgument("values and remainders must be supplied together.")
        if isinstance(values, str) or isinstance(remainders, str):
            raise InvalidArgument("values and remainders must be sequences of strings, not a single string.")
        values = list(values) if values is not None else []
        remainders = list(remainders) if remainders is not None else []
        if len(values) != len(remainders):
            raise InvalidArgument(
                f"values and remainders must have the same length, got {len(values)} and {len(remainders)}.")

        self._input = input
        # parallel lists, only ever written together
        self._values: List[str] = values
        self._remainders: List[str] = remainders

    @property
    def input(self) -> str:
        return self._input

    def _get_data(self) -> List[Entry]:
        return list(self)

    def __iter__(self) -> Iterator[Entry]:
        # snapshot, so pushes made while iterating are not visited
        for value, remainder in zip(list(self._values), list(self._remainders)):
            yield Entry(value, remainder)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._get_data()[index]
        return Entry(self._values[index], self._remainders[index])

    def __eq__(self, other) -> bool:
        if not isinstance(other, _BaseParseResult):
            return NotImplemented
        return self._input == other._input and self._get_data() == other._get_data()

    __hash__ = None

    def __repr__(self) -> str:
        return f"ParseResult(input={self._input!r}, entries={len(self)})"

# --- main result class ---

class ParseResult(
    _BaseParseResult,
    _CoreOperations
):
    """ordered, growable record of (value, remainder) pairs produced while parsing an input string."""
    def __init__(self, input: str,
                 values: Optional[Sequence[str]] = None,
                 remainders: Optional[Sequence[str]] = None):
        super().__init__(input, values, remainders)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
