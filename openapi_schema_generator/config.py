from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

DEFAULT_TITLE = "Pie's Minecraft Schema Generator"
DEFAULT_DESCRIPTION = (
    "A very simple OpenAPIv3 Spec Generator, intended for minecraft json files, "
    "applicable to other projects."
)
DEFAULT_VERSION = "1.0.1"
OPENAPI_VERSION = "3.0.3"


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one spec generation run.

    max_enum_values: omit `enum` on nodes with more distinct literals than this.
        None keeps every observed literal.
    flatten_top_level_arrays: a document whose top-level value is an array
        contributes the aggregate of its elements instead of an array schema.
    """

    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    version: str = DEFAULT_VERSION
    max_enum_values: Optional[int] = None
    flatten_top_level_arrays: bool = False

    def __post_init__(self):
        if self.max_enum_values is not None and self.max_enum_values < 0:
            raise ValueError("max_enum_values must be zero or positive.")

    def info(self) -> Dict[str, Any]:
        return {"title": self.title, "description": self.description, "version": self.version}


def enum_cap(value) -> Optional[int]:
    """Convert a user supplied enum cap; empty or 0 means no cap."""
    if value in (None, ''):
        return None
    cap = int(value)
    if cap < 0:
        raise ValueError("max_enum_values must be zero or positive.")
    return cap or None
