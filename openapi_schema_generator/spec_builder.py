"""Build the final OpenAPI document from a batch of aggregation entries.

Every entry contributes twice:
- to the exact-node schema of its own path (backing a `post` operation)
- to the subtree schema of every path in its ancestor chain (backing a `get`
  operation tagged "Aggregated Schemas")

The registries below live only for the duration of one call.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from .config import OPENAPI_VERSION, GeneratorConfig
from .openapi import generate_openapi_schema
from .paths import flat_key, get_parent_paths, recursive_key
from .records import AggregationEntry
from .schema_utils import SchemaNode, aggregate_schemas

logger = logging.getLogger(__name__)

AGGREGATED_SCHEMAS_TAG = "Aggregated Schemas"
JSON_CONTENT_TYPE = "application/json"


def _schema_ref(component_name: str) -> Dict[str, str]:
    return {"$ref": f"#/components/schemas/{component_name}"}


def _post_operation(name: str, component_name: str) -> Dict[str, Any]:
    return {
        "description": f"Generated Schema for {name}.",
        "requestBody": {
            "content": {
                JSON_CONTENT_TYPE: {"schema": _schema_ref(component_name)},
            },
        },
        "responses": {
            "default": {"description": "placeholder"},
        },
    }


def _get_operation(path: str) -> Dict[str, Any]:
    return {
        "description": f"Generated Recursive Schema for {path}.",
        "tags": [AGGREGATED_SCHEMAS_TAG],
        "responses": {
            "default": {
                "description": "placeholder",
                "content": {
                    JSON_CONTENT_TYPE: {"schema": _schema_ref(recursive_key(path))},
                },
            },
        },
    }


def _fold(registry: Dict[str, SchemaNode], key: str, schema: SchemaNode) -> None:
    existing = registry.get(key)
    registry[key] = schema if existing is None else aggregate_schemas([existing, schema])


def generate_openapi_spec(
    entries: Iterable[AggregationEntry],
    config: Optional[GeneratorConfig] = None,
) -> Dict[str, Any]:
    config = config or GeneratorConfig()

    aggregated_paths: Dict[str, Dict[str, Any]] = {}
    aggregated_tags: Dict[str, Dict[str, None]] = {}
    aggregated_schemas: Dict[str, SchemaNode] = {}
    recursive_schemas: Dict[str, SchemaNode] = {}

    count = 0
    for entry in entries:
        count += 1
        component_name = flat_key(entry.path)
        _fold(aggregated_schemas, component_name, entry.schema)

        # Ordered union of tags per exact path.
        tags = aggregated_tags.setdefault(entry.path, {})
        tags.update(dict.fromkeys(entry.tags))

        operations = aggregated_paths.setdefault(entry.path, {})
        if "post" not in operations:
            operations["post"] = _post_operation(entry.name, component_name)

        for parent in get_parent_paths(entry.path):
            _fold(recursive_schemas, parent, entry.schema)
            parent_operations = aggregated_paths.setdefault(parent, {})
            if "get" not in parent_operations:
                parent_operations["get"] = _get_operation(parent)

        logger.debug("Folded %s into %s", entry.name, entry.path)

    for path, tags in aggregated_tags.items():
        aggregated_paths[path]["post"]["tags"] = list(tags)

    schemas: Dict[str, Any] = {}
    for component_name, schema in aggregated_schemas.items():
        schemas[component_name] = generate_openapi_schema(schema, config.max_enum_values)
    for path, schema in recursive_schemas.items():
        schemas[recursive_key(path)] = generate_openapi_schema(schema, config.max_enum_values)

    logger.info(
        "Generated spec from %d documents: %d exact paths, %d aggregated paths",
        count,
        len(aggregated_schemas),
        len(recursive_schemas),
    )

    return {
        "openapi": OPENAPI_VERSION,
        "info": config.info(),
        "paths": aggregated_paths,
        "components": {"schemas": schemas},
    }
