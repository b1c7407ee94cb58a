from __future__ import annotations

import asyncio
import io
import logging
import mimetypes
import os
import zipfile
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import GeneratorConfig
from .errors import DocumentParseError
from .paths import get_name_for_file, get_path_for_file, get_tags_for_file
from .records import AggregationEntry, organize_data

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = 'application/json'


def read_text_content(file_obj) -> str:
    """Read text from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def is_json_file(path: str) -> bool:
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type == JSON_MIME_TYPE


def discover_json_files(root_dir: str) -> List[Tuple[str, str]]:
    """Walk `root_dir` and return (file path, relative path) pairs for JSON files.

    Relative paths start with the name of `root_dir` itself, so that it plays
    the part of the upload root.
    """
    if not os.path.isdir(root_dir):
        raise ValueError(f"Not a directory: {root_dir}")
    root_dir = os.path.abspath(root_dir)
    base_dir = os.path.dirname(root_dir)
    found: List[Tuple[str, str]] = []
    for dirpath, dirnames, filenames in os.walk(root_dir):
        dirnames.sort()
        for filename in sorted(filenames):
            full_path = os.path.join(dirpath, filename)
            if not is_json_file(full_path):
                logger.debug("Skipping non-JSON file %s", full_path)
                continue
            rel = os.path.relpath(full_path, base_dir).replace(os.sep, '/')
            found.append((full_path, rel))
    return found


def zip_members(zip_path: str) -> List[Tuple[io.BytesIO, str]]:
    """Return (content, member name) pairs for the files inside a zip archive.

    Member names keep the archived directory layout, so the top-level folder of
    the archive plays the part of the upload root.
    """
    members: List[Tuple[io.BytesIO, str]] = []
    with zipfile.ZipFile(zip_path) as zf:
        for info in zf.infolist():
            if info.is_dir():
                continue
            name = info.filename.replace('\\', '/')
            if name.startswith('__MACOSX/'):
                continue
            members.append((io.BytesIO(zf.read(info)), name))
    return members


def upload_members(file_paths: Sequence[str]) -> List[Tuple[object, str]]:
    """Expand uploaded files into (file, relative path) pairs.

    Uploaded files are stored under content-hash directories, so only zip
    archives carry a directory layout. Loose files are placed at the root.
    """
    members: List[Tuple[object, str]] = []
    for path in file_paths:
        path = str(path)
        if zipfile.is_zipfile(path):
            members.extend(zip_members(path))
        else:
            members.append((path, os.path.basename(path)))
    return members


async def _read_entry(file_obj, relative_path: str, config: GeneratorConfig) -> AggregationEntry:
    try:
        raw = await asyncio.to_thread(read_text_content, file_obj)
    except UnicodeDecodeError as e:
        raise DocumentParseError(relative_path, str(e)) from e
    entry = organize_data(
        raw,
        get_path_for_file(relative_path),
        get_name_for_file(relative_path),
        get_tags_for_file(relative_path),
        flatten_top_level_arrays=config.flatten_top_level_arrays,
        source=relative_path,
    )
    logger.debug("Read %s -> %s", relative_path, entry.path)
    return entry


async def load_entries(
    files: Iterable[Tuple[object, str]],
    config: Optional[GeneratorConfig] = None,
) -> List[AggregationEntry]:
    """Read and organize every (file, relative path) pair concurrently.

    All reads have to finish before anything is returned; the first failing
    read or parse propagates and the batch is abandoned.
    """
    config = config or GeneratorConfig()
    selected = [(f, rel) for f, rel in files if is_json_file(rel)]
    entries = await asyncio.gather(*(_read_entry(f, rel, config) for f, rel in selected))
    logger.info("Loaded %d JSON documents", len(entries))
    return list(entries)
