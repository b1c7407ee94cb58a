from __future__ import annotations

from typing import Optional


class SchemaGeneratorError(Exception):
    """Base class for errors raised while generating a spec."""


class DocumentParseError(SchemaGeneratorError, ValueError):
    """A document in the batch is not valid JSON."""

    def __init__(self, source: Optional[str], message: str):
        self.source = source
        label = source or "<document>"
        super().__init__(f"Error parsing JSON in {label}: {message}")
