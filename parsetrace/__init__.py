"""
'    __________    _____ __________  ____________________
'    \______   \  /  _  \\______   \/   _____/\_   _____/
'     |     ___/ /  /_\  \|       _/\_____  \  |    __)_
'     |    |    /    |    \    |   \/        \ |        \
'     |____|    \____|__  /____|_  /_______  //_______  /
'                       \/       \/        \/         \/   trace
"""

# expose the main class
from .result import ParseResult

# expose the factory functions
from .factories import (
    empty,
    from_pairs,
    from_lists,
    from_prefixes,
    P
)

# expose supporting types
from .types import (
    Entry,
    InvalidArgument
)

# define what `import *` does
__all__ = [
    "ParseResult",
    "empty",
    "from_pairs",
    "from_lists",
    "from_prefixes",
    "P",
    "Entry",
    "InvalidArgument"
]
