"""Common utilities shared across modmod renderers."""

from __future__ import annotations

from .tags import to_tag, to_prefixed_tag
from .files import read_document, write_document, ensure_dir, copy_files

__all__ = [
    # tags
    "to_tag",
    "to_prefixed_tag",
    # files
    "read_document",
    "write_document",
    "ensure_dir",
    "copy_files",
]
