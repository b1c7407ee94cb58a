from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from .errors import DocumentParseError
from .schema_utils import SchemaNode, aggregate_schemas, record_schema


@dataclass
class AggregationEntry:
    schema: SchemaNode
    path: str
    name: str
    tags: List[str] = field(default_factory=list)


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant {name!r}")


def parse_document(raw: Any, source: Optional[str] = None) -> Any:
    """Parse raw JSON text; already structured values pass through unchanged.

    NaN and Infinity are rejected, they have no JSON representation.
    """
    if not isinstance(raw, (str, bytes)):
        return raw
    try:
        if isinstance(raw, bytes):
            raw = raw.decode('utf-8')
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise DocumentParseError(source, str(e)) from e


def organize_data(
    raw: Any,
    path: str,
    name: str,
    tags: Sequence[str] = (),
    flatten_top_level_arrays: bool = False,
    source: Optional[str] = None,
) -> AggregationEntry:
    """Build the AggregationEntry for one document.

    With `flatten_top_level_arrays`, a top-level array is treated as a batch of
    documents and its elements' schemas are aggregated directly.
    """
    data = parse_document(raw, source)

    if flatten_top_level_arrays and isinstance(data, list):
        schema = aggregate_schemas(record_schema(item) for item in data)
    else:
        schema = record_schema(data)

    return AggregationEntry(schema=schema, path=path, name=name, tags=list(tags))
