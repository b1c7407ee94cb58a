from __future__ import annotations

from typing import Any, Dict, Optional

from .schema_utils import SchemaNode


def generate_openapi_schema(node: Optional[SchemaNode], max_enum_values: Optional[int] = None) -> Dict[str, Any]:
    """Convert an aggregated SchemaNode into an OpenAPI v3 compatible schema.

    - one observed type becomes `type`, several become a `oneOf` of bare types
    - `properties` and `items` are emitted whenever `object`/`array` was observed
    - every observed scalar literal is listed under `enum`, whatever the types

    `max_enum_values` drops `enum` from nodes with more distinct literals than
    the cap. It is off by default.
    """
    if node is None or node.is_empty():
        return {}

    schema: Dict[str, Any] = {}
    types = node.types

    if len(types) == 1:
        schema["type"] = types[0]
    elif len(types) > 1:
        schema["oneOf"] = [{"type": t} for t in types]

    if "object" in types:
        schema["properties"] = {
            key: generate_openapi_schema(prop_schema, max_enum_values)
            for key, prop_schema in node.properties.items()
        }

    if "array" in types:
        schema["items"] = generate_openapi_schema(node.item_schema, max_enum_values)

    values = node.values
    if values and (max_enum_values is None or len(values) <= max_enum_values):
        schema["enum"] = values

    return schema
