from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple


def json_type_name(value: Any) -> str:
    """Return the JSON type tag for a parsed JSON value."""
    if value is None:
        return "null"
    # bool is a subclass of int, so it has to be checked first.
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


@dataclass
class SchemaNode:
    """Inferred shape of one position in a JSON value tree.

    `literal_values` is keyed by (type tag, value) so that `1`, `1.0` and `True`
    stay distinct the way JSON treats them; the dict values hold the literal.
    Nodes are never mutated after construction, which makes it safe to share
    one node between several aggregates.
    """

    type_counts: Dict[str, int] = field(default_factory=dict)
    item_schema: Optional[SchemaNode] = None
    properties: Dict[str, SchemaNode] = field(default_factory=dict)
    literal_values: Dict[Tuple[str, Any], Any] = field(default_factory=dict)

    @property
    def types(self):
        return list(self.type_counts)

    @property
    def values(self):
        return list(self.literal_values.values())

    def is_empty(self) -> bool:
        return not self.type_counts


def record_schema(value: Any) -> SchemaNode:
    """Record the schema of a single JSON value."""
    node = SchemaNode()

    if isinstance(value, list):
        node.type_counts["array"] = 1
        if value:
            node.item_schema = aggregate_schemas(record_schema(item) for item in value)
    elif isinstance(value, dict):
        node.type_counts["object"] = 1
        for k, v in value.items():
            node.properties[k] = record_schema(v)
    else:
        type_name = json_type_name(value)
        node.type_counts[type_name] = 1
        node.literal_values[(type_name, value)] = value

    return node


def aggregate_schemas(schemas: Iterable[SchemaNode]) -> SchemaNode:
    """Merge any number of schemas into a new one.

    The inputs are left untouched. Children present in only one input are
    adopted by reference; children present in several are merged recursively.
    """
    aggregate = SchemaNode()

    for schema in schemas:
        for type_name, count in schema.type_counts.items():
            aggregate.type_counts[type_name] = aggregate.type_counts.get(type_name, 0) + count

        for key, literal in schema.literal_values.items():
            aggregate.literal_values.setdefault(key, literal)

        for key, prop_schema in schema.properties.items():
            existing = aggregate.properties.get(key)
            if existing is None:
                aggregate.properties[key] = prop_schema
            else:
                aggregate.properties[key] = aggregate_schemas([existing, prop_schema])

        if schema.item_schema is not None:
            if aggregate.item_schema is None:
                aggregate.item_schema = schema.item_schema
            else:
                aggregate.item_schema = aggregate_schemas([aggregate.item_schema, schema.item_schema])

    return aggregate
