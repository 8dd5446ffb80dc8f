import typing
from .types import *

if typing.TYPE_CHECKING:
    from .result import ParseResult

def empty(input: str) -> 'ParseResult':
    """create result with no entries"""
    from .result import ParseResult
    return ParseResult(input)

def from_lists(input: str, values: Sequence[str], remainders: Sequence[str]) -> 'ParseResult':
    """create result from parallel value and remainder sequences"""
    from .result import ParseResult
    return ParseResult(input, values, remainders)

def from_pairs(input: str, pairs: Iterable[Tuple[str, str]]) -> 'ParseResult':
    """create result from (value, remainder) pairs"""
    from .result import ParseResult
    result = ParseResult(input)
    for index, pair in enumerate(pairs):
        if len(pair) != 2:
            raise InvalidArgument(f"pair at index {index} has {len(pair)} items, expected 2.")
        result.push(pair[0], pair[1])
    return result

def from_prefixes(input: str) -> 'ParseResult':
    """create result holding every non-empty prefix of input with its remainder"""
    return from_pairs(input, ((input[:i], input[i:]) for i in range(1, len(input) + 1)))

# --- aliases ---
P = from_pairs
