"""Core logic for the OpenAPI Schema Generator.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- record the shape of JSON documents and merge those shapes
- derive namespace paths, names and tags from a directory tree
- build an OpenAPI document with one schema per directory and per subtree
"""
from .config import GeneratorConfig
from .errors import DocumentParseError, SchemaGeneratorError
from .openapi import generate_openapi_schema
from .paths import get_parent_paths
from .records import AggregationEntry, organize_data
from .schema_utils import SchemaNode, aggregate_schemas, record_schema
from .spec_builder import generate_openapi_spec

__version__ = "1.0.1"
