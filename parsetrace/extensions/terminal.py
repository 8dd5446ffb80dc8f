from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..result import ParseResult

# marks "nothing found" apart from a None default
_MISSING = object()


class TerminalAccessor:
    def __init__(self, result_instance: 'ParseResult'):
        self._result = result_instance

    def list(self) -> List[Entry]:
        """convert to list of entries"""
        return self._result._get_data()

    def dict(self) -> Dict[str, str]:
        """convert to value -> remainder dictionary, later values win"""
        return {value: remainder for value, remainder in self._result}

    def array(self) -> np.ndarray:
        """convert to (n, 2) numpy array of strings"""
        data = self._result._get_data()
        return np.array([list(entry) for entry in data], dtype=str).reshape(len(data), 2)

    def pandas(self) -> pd.Series:
        """convert to pandas series of values indexed by remainder"""
        return pd.Series(self._result.values(),
                         index=pd.Index(self._result.remainders(), name="remainder"),
                         name="value", dtype=object)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._result._get_data(), columns=list(Entry._fields))

    def count(self, predicate: Optional[EntryPredicate] = None) -> int:
        """count entries"""
        if predicate is None: return len(self._result)
        return sum(1 for entry in self._result if predicate(*entry))

    def any(self, predicate: Optional[EntryPredicate] = None) -> bool:
        """check if any entry satisfies condition"""
        if predicate is None: return len(self._result) > 0
        return any(predicate(*entry) for entry in self._result)

    def all(self, predicate: EntryPredicate) -> bool:
        """check if all entries satisfy condition"""
        return all(predicate(*entry) for entry in self._result)


    def first(self, predicate: Optional[EntryPredicate] = None) -> Entry:
        """get first entry"""
        return self._find_or_raise(self._result._get_data(), predicate)

    def first_or_default(self, predicate: Optional[EntryPredicate] = None,
                         default: Optional[Entry] = None) -> Optional[Entry]:
        """get first entry or default; predicate errors still propagate"""
        found = self._find(self._result._get_data(), predicate)
        return default if found is _MISSING else found

    def last(self, predicate: Optional[EntryPredicate] = None) -> Entry:
        """get last entry"""
        return self._find_or_raise(list(reversed(self._result._get_data())), predicate)

    def last_or_default(self, predicate: Optional[EntryPredicate] = None,
                        default: Optional[Entry] = None) -> Optional[Entry]:
        """get last entry or default; predicate errors still propagate"""
        found = self._find(list(reversed(self._result._get_data())), predicate)
        return default if found is _MISSING else found

    @staticmethod
    def _find(data: List[Entry], predicate: Optional[EntryPredicate]) -> Any:
        if predicate is None:
            return data[0] if data else _MISSING
        for entry in data:
            if predicate(*entry): return entry
        return _MISSING

    @classmethod
    def _find_or_raise(cls, data: List[Entry], predicate: Optional[EntryPredicate]) -> Entry:
        found = cls._find(data, predicate)
        if found is _MISSING:
            if predicate is None: raise ValueError("result contains no entries")
            raise ValueError("no entry satisfies the condition")
        return found
