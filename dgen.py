'''
seeded record generator for test fixtures.

a schema is a dict of field -> definition, where a definition is one of:
    'word'                                   a faker provider name
    ('pyint', {'min_value': 1})              a faker provider with kwargs
    {'_gen': 'choice', 'from': [...]}        a random pick
    {'_gen': 'ref', 'key': 'other_field'}    the value of an earlier field
    {'_gen': 'literal', 'value': ...}        a fixed value
anything else is returned as is.
'''

import numpy as np
from faker import Faker
from lazyseq import from_iterable, Sequence
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_directive(self, config: Dict, context: Dict) -> Any:
        kind = config["_gen"]
        if kind == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return context[key]

        if kind == "choice":
            options = config["from"]
            # index into the list so native python values come back, not numpy scalars
            return options[int(self._rng.integers(0, len(options)))]

        if kind == "literal":
            if "value" not in config:
                raise ValueError("'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _gen directive: '{kind}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_gen" in schema:
                return self._resolve_directive(schema, current_context)

            # fields are built in order so refs can see earlier siblings
            record = {}
            for key, field_schema in schema.items():
                record[key] = self.create(field_schema, {**current_context, **record})
            return record

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self, count: int) -> List[Any]:
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> Sequence:
        """generate `count` records up front and wrap them as a re-traversable sequence"""
        return from_iterable(self.records(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
