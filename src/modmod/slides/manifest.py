"""
Module: slides.manifest

Purpose:
    Load, validate, merge and write the slides package manifest
    (``package.json``). Generated per-deck scripts are merged into either
    a caller-supplied manifest template or the built-in stub.

Key Functions:
    - load_manifest(): Parse and validate a manifest (or the stub)
    - validate_manifest(): JSON Schema check of the manifest shape
    - merge_scripts(): Overwrite ``name`` and merge generated scripts
    - write_manifest(): Pretty-print to disk

Key Classes:
    - ManifestError: Malformed JSON or a manifest of the wrong shape

Dependencies:
    - jsonschema: Shape validation against package.schema.json
    - common.tags: Package name to tag

Used By:
    - slides.renderer: Final step of render_slides()
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import jsonschema

from modmod.common.files import read_document, write_document
from modmod.common.tags import to_tag

logger = logging.getLogger(__name__)

RESOURCES_DIR = Path(__file__).parent / "resources"
MANIFEST_STUB_PATH = RESOURCES_DIR / "package.json"

# Added after all generated scripts so hand-edited entries above it can
# always end with a trailing comma.
SENTINEL_SCRIPT = "_"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the resources directory."""
    if name not in _SCHEMAS:
        schema_path = RESOURCES_DIR / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ManifestError(RuntimeError):
    """Raised when a manifest cannot be parsed or has the wrong shape."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


def validate_manifest(data: Any) -> None:
    """
    Validate manifest data against package.schema.json.

    The manifest must be a JSON object and ``scripts`` an object when
    present. Anything else is passed through; ``name`` is overwritten on
    merge, so its value is never checked.

    Raises:
        ManifestError: If data is invalid
    """
    schema = _load_schema("package")
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        path = ".".join(str(p) for p in e.absolute_path)
        raise ManifestError(
            f"Manifest validation failed at {path or '<root>'}: {e.message}",
            path=path,
        ) from e


def load_manifest(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load a manifest template, or the built-in stub if ``path`` is None.

    Args:
        path: Caller-supplied ``package.json`` template

    Returns:
        Parsed manifest object, keys in document order

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8
        ManifestError: If the JSON is malformed or fails validation
    """
    source = path if path is not None else MANIFEST_STUB_PATH
    logger.debug(f"Loading manifest template {source}")
    text = read_document(source)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Cannot parse manifest {source}: {e}") from e
    validate_manifest(data)
    return data


def merge_scripts(
    manifest: Mapping[str, Any],
    package_name: str,
    scripts: Mapping[str, str],
) -> Dict[str, Any]:
    """
    Merge generated scripts into a manifest.

    - ``name`` is overwritten with the tag of ``package_name``.
    - The sentinel ``"_": ""`` is appended after the generated scripts.
    - Existing unrelated scripts keep their values and positions. A script
      whose key is also generated is replaced by the generated value, moved
      into the generated block.
    - Without a ``scripts`` object the generated block becomes ``scripts``.

    Args:
        manifest: Parsed manifest; not modified
        package_name: Package (track) name
        scripts: Generated scripts in emission order

    Returns:
        New merged manifest

    Raises:
        ManifestError: If ``scripts`` exists but is not an object

    Example:
        >>> merge_scripts({"scripts": {"lint": "eslint ."}}, "Intro", {"dev-1_1": "slidev 1_1_a.md"})
        {'scripts': {'lint': 'eslint .', 'dev-1_1': 'slidev 1_1_a.md', '_': ''}, 'name': 'intro'}
    """
    merged = dict(manifest)
    merged["name"] = to_tag(package_name)

    generated = dict(scripts)
    generated.pop(SENTINEL_SCRIPT, None)
    generated[SENTINEL_SCRIPT] = ""

    if "scripts" not in merged:
        merged["scripts"] = generated
        return merged

    existing = merged["scripts"]
    if not isinstance(existing, dict):
        raise ManifestError(
            f"scripts field is not an object: {type(existing).__name__}",
            path="scripts",
        )
    combined = {key: value for key, value in existing.items() if key not in generated}
    combined.update(generated)
    merged["scripts"] = combined
    return merged


def write_manifest(path: Path, manifest: Mapping[str, Any]) -> Path:
    """Write ``manifest`` pretty-printed (2-space indent, key order kept)."""
    text = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
    return write_document(path, text)
