"""File helpers used by the renderers.

All helpers let ``OSError`` propagate; callers decide how to report it.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


def read_document(path: Path) -> str:
    """Read a whole text document as UTF-8."""
    return Path(path).read_text(encoding="utf-8")


def write_document(path: Path, content: str) -> Path:
    """Create or truncate ``path`` and write ``content`` as UTF-8."""
    path = Path(path)
    path.write_text(content, encoding="utf-8")
    return path


def ensure_dir(path: Path) -> Path:
    """Create a directory and its parents; existing directories are fine."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def copy_files(paths: Iterable[Path], dest_dir: Path) -> List[Path]:
    """
    Copy files into a flat destination directory.

    Each file keeps its base name, so two sources with the same name
    overwrite each other in ``dest_dir`` (last copy wins).

    Args:
        paths: Files to copy
        dest_dir: Existing destination directory

    Returns:
        Destination paths in the order copied

    Raises:
        OSError: If a source cannot be read or the destination written
    """
    copied: List[Path] = []
    for source in paths:
        source = Path(source)
        target = Path(dest_dir) / source.name
        logger.debug(f"Copying {source} -> {target}")
        shutil.copyfile(source, target)
        copied.append(target)
    return copied
