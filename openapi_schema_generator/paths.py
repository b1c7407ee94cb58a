from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import List, Optional

RECURSIVE_PREFIX = "recursive-"


def split_path(path: str) -> List[str]:
    """Split a slash-delimited namespace path into its non-empty segments."""
    if path is None:
        return []
    if not isinstance(path, str):
        path = str(path)
    return [p for p in path.split('/') if p]


def get_parent_paths(path: str) -> List[str]:
    """Return the ancestor chain of `path`, from '/' down to the path itself.

    >>> get_parent_paths('/a/b/c')
    ['/', '/a', '/a/b', '/a/b/c']
    """
    parts = split_path(path)
    return ['/'] + ['/' + '/'.join(parts[:i + 1]) for i in range(len(parts))]


def flat_key(path: str) -> str:
    """Component name for a path: leading slash stripped, slashes become spaces."""
    if path.startswith('/'):
        path = path[1:]
    return path.replace('/', ' ')


def recursive_key(path: str) -> str:
    return RECURSIVE_PREFIX + flat_key(path)


def _directory_parts(relative_path: Optional[str]) -> List[str]:
    if not relative_path or '/' not in relative_path.replace('\\', '/'):
        return []
    return list(PurePosixPath(relative_path.replace('\\', '/')).parts[:-1])


def get_tags_for_path(directories: List[str]) -> List[str]:
    """Cumulative directory prefixes, excluding the upload root segment.

    A single directory is returned unchanged, since there is nothing below the
    upload root to group by.
    """
    if len(directories) <= 1:
        return list(directories)
    below_root = directories[1:]
    return ['/'.join(below_root[:i + 1]) for i in range(len(below_root))]


def get_path_for_file(relative_path: Optional[str]) -> str:
    """Namespace path of the directory that contains `relative_path`."""
    parts = _directory_parts(relative_path)
    if not parts:
        return '/'
    return '/' + '/'.join(parts)


def to_pascal_case(text: str) -> str:
    text = text.lower()
    text = re.sub(r'[-_]+', ' ', text)
    text = re.sub(r'[^\w\s]', '', text)
    text = re.sub(r'\s+(.)(\w*)', lambda m: m.group(1).upper() + m.group(2), text)
    return re.sub(r'\w', lambda m: m.group(0).upper(), text, count=1)


def get_name_for_file(relative_path: str) -> str:
    """Display name: the containing directory in PascalCase, else the file stem."""
    parts = _directory_parts(relative_path)
    if not parts:
        return PurePosixPath(relative_path.replace('\\', '/')).stem
    return to_pascal_case(parts[-1])


def get_tags_for_file(relative_path: Optional[str]) -> List[str]:
    return get_tags_for_path(_directory_parts(relative_path))
