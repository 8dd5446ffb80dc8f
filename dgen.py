'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from parsetrace import ParseResult, empty
from typing import Any, Dict, List, Optional


class Generator:
    """trace schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Dict = {}) -> Any:
        try:
            method = getattr(self._fake, method_name)
            return method(**kwargs)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def resolve_input(self, source: Any) -> str:
        """turn the 'input' part of a schema into a concrete string"""
        if isinstance(source, dict) and "_qen_provider" in source:
            return str(self._resolve_provider(source))
        if isinstance(source, tuple) and len(source) == 2 and isinstance(source[1], dict):
            return str(self._resolve_faker_method(source[0], source[1]))
        if isinstance(source, str):
            if hasattr(self._fake, source):
                return str(self._resolve_faker_method(source))
            return source  # otherwise, it's a literal string.
        raise ValueError(f"cannot build an input string from {source!r}")

    def create(self, schema: Dict) -> ParseResult:
        text = self.resolve_input(schema.get("input", "sentence"))
        result = empty(text)
        if not text:
            return result

        # cut points are sorted so the trace reads like progressive consumption
        count = self._get_count(schema)
        cuts = np.sort(self._rng.integers(1, len(text), size=count, endpoint=True))
        for cut in cuts.tolist():
            result.push(text[:cut], text[cut:])
        return result

    def _get_count(self, schema: Dict) -> int:
        count = 5 # default count
        if "_qen_count" in schema:
            count_config = schema["_qen_count"]
            if isinstance(count_config, int):
                count = count_config
            elif isinstance(count_config, (list, tuple)) and len(count_config) == 2:
                low, high = count_config
                count = int(self._rng.integers(low, high, endpoint=True))
        return count


class _SchemaProvider:
    def __init__(self, schema: Dict, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List[ParseResult]:
        return [self._generator.create(self._schema) for _ in range(count)]


def from_schema(schema: Dict, seed: Optional[int] = None) -> _SchemaProvider:
    """
    creates a trace generator from a schema.

    :param schema: {'input': <faker provider | (provider, kwargs) | provider dict | literal>,
                    '_qen_count': <int | (low, high)>}
    :param seed: an optional seed for reproducible traces.
    :return: a schema provider with a .take() method returning parse results.
    """
    return _SchemaProvider(schema, seed)
