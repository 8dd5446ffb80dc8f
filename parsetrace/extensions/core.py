from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..result import ParseResult

class _CoreOperations:
    def push(self: 'ParseResult', value: str, remainder: str) -> 'ParseResult':
        """
        appends one (value, remainder) pair to the end of the result.
        this MUTATES the instance and returns it to allow chaining.
        """
        # both lists grow in one step so no partial pair is ever visible
        self._values.append(value)
        self._remainders.append(remainder)
        return self

    def concat(self: 'ParseResult', other: 'ParseResult') -> List[Entry]:
        """
        returns this result's entries followed by every entry of other.
        neither operand is modified and other.input is not checked.
        """
        # itertools.chain over two fresh snapshots, the result shares nothing with either side
        return list(chain(self._get_data(), other._get_data()))

    def concat_result(self: 'ParseResult', other: 'ParseResult') -> 'ParseResult':
        """same as concat, wrapped in a new result over this result's input"""
        from ..factories import from_pairs
        return from_pairs(self.input, self.concat(other))

    def entries(self: 'ParseResult') -> List[Entry]:
        """materialize all pairs in insertion order as a new list"""
        return self._get_data()

    def for_each(self: 'ParseResult', visitor: Visitor) -> None:
        """
        calls visitor(value, remainder) for every entry, in order.
        this is an EAGER operation; visitor errors propagate untouched.
        """
        for value, remainder in self:
            visitor(value, remainder)

    def map(self: 'ParseResult', transform: Transform[U]) -> List[U]:
        """project each (value, remainder) pair to a new form"""
        return [transform(value, remainder) for value, remainder in self]

    def copy(self: 'ParseResult') -> 'ParseResult':
        """independent result with the same input and entries"""
        from ..result import ParseResult
        return ParseResult(self.input, self._values, self._remainders)

    def values(self: 'ParseResult') -> List[str]:
        return list(self._values)

    def remainders(self: 'ParseResult') -> List[str]:
        return list(self._remainders)

    def where(self: 'ParseResult', predicate: EntryPredicate) -> 'ParseResult':
        """filter entries into a new result over the same input"""
        from ..factories import from_pairs
        return from_pairs(self.input, (entry for entry in self if predicate(*entry)))

    def completed(self: 'ParseResult') -> 'ParseResult':
        """entries that consumed the whole input"""
        return self.where(lambda value, remainder: remainder == "")

    def consumed(self: 'ParseResult') -> List[int]:
        """number of input characters consumed at each step"""
        total = len(self.input)
        return self.map(lambda value, remainder: total - len(remainder))
