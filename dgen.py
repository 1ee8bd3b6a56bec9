'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema-driven test records for enumly.
'''

import itertools
import numpy as np
from faker import Faker
from enumly import Enumerable, FunctionSource, IterableSource
from typing import Any, Dict, Iterator, Optional


class Generator:
    """schema interpreter.

    a schema is a dict of field -> definition, where a definition is
      - a faker provider name ('word', 'name', ...) or (name, kwargs) tuple
      - {'_qen_provider': 'choice', 'from': [...]}
      - {'_qen_provider': 'ref', 'key': other_field, 'format': '...'}
      - {'_qen_provider': 'literal', 'value': ...}
      - a nested dict (a nested record) or [item_schema] (a list of records)
    anything else is taken literally.
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            options = config["from"]
            # index instead of rng.choice so mixed-type options keep their python types
            return options[int(self._rng.integers(len(options)))]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current record")
            value = context[key]
            return config["format"].format(value) if "format" in config else value
        if provider == "literal":
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._provider(schema, context)
            record = {}
            for key, definition in schema.items():
                # refs see the enclosing record and the fields built so far
                record[key] = self.create(definition, {**context, **record})
            return record

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = item_schema.get('_qen_count', 3) if isinstance(item_schema, dict) else 3
            actual = item_schema.get('_qen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual, context) for _ in range(count)]

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed

    def _records(self) -> Iterator[Any]:
        generator = Generator(self._seed)
        while True:
            yield generator.create(self._schema)

    def take(self, count: int) -> Enumerable:
        """count records held in a list: the source can be traversed any number of times"""
        return IterableSource(list(itertools.islice(self._records(), count)))

    def stream(self, count: int) -> Enumerable:
        """count records from a generator: the source can be traversed once"""
        return IterableSource(itertools.islice(self._records(), count))

    def endless(self) -> Enumerable:
        """a fresh, never ending run of records on every traversal"""
        return FunctionSource(self._records, 'endless records')


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
