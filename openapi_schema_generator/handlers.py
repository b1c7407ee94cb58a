from __future__ import annotations

import json
import os
import tempfile
import zipfile
from typing import Any, Dict, List, Optional

from .config import GeneratorConfig, enum_cap
from .errors import SchemaGeneratorError
from .io_utils import load_entries, upload_members
from .spec_builder import generate_openapi_spec


def _uploaded_paths(files) -> List[str]:
    if not files:
        return []
    if not isinstance(files, list):
        files = [files]
    return [f.name if hasattr(f, 'name') else str(f) for f in files]


def build_config(title: str, version: str, max_enum_values, flatten_arrays: bool) -> GeneratorConfig:
    defaults = GeneratorConfig()
    cap = enum_cap(max_enum_values)
    return GeneratorConfig(
        title=(title or '').strip() or defaults.title,
        description=defaults.description,
        version=(version or '').strip() or defaults.version,
        max_enum_values=cap,
        flatten_top_level_arrays=bool(flatten_arrays),
    )


def summarize_spec(spec: Dict[str, Any]) -> str:
    paths = spec.get("paths", {})
    exact = sum(1 for ops in paths.values() if "post" in ops)
    recursive = sum(1 for ops in paths.values() if "get" in ops)
    return f"Generated {exact} directory schemas and {recursive} aggregated schemas."


def write_spec_file(spec: Dict[str, Any], file_name: Optional[str] = None) -> str:
    if not file_name or not file_name.strip():
        file_name = "openapi"
    file_name = file_name.strip()
    if not file_name.lower().endswith('.json'):
        file_name += '.json'

    path = os.path.join(tempfile.gettempdir(), file_name)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(spec, f, indent=2)
    return path


async def generate_spec_handler(files, title, version, max_enum_values, flatten_arrays, file_name):
    paths = _uploaded_paths(files)
    if not paths:
        return None, None, "No files uploaded."

    try:
        config = build_config(title, version, max_enum_values, flatten_arrays)
        entries = await load_entries(upload_members(paths), config)
    except (SchemaGeneratorError, OSError, ValueError, zipfile.BadZipFile) as e:
        return None, None, str(e)

    if not entries:
        return None, None, "No JSON files found in the upload."

    spec = generate_openapi_spec(entries, config)
    try:
        download_path = write_spec_file(spec, file_name)
    except OSError as e:
        return spec, None, f"Error writing spec: {str(e)}"

    return spec, download_path, f"{summarize_spec(spec)} Read {len(entries)} documents."
