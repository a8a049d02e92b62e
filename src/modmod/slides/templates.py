"""
Module: slides.templates

Purpose:
    Deck templates and literal placeholder substitution. A template is plain
    markdown containing fixed ``#[modmod:...]`` tokens; substitution swaps
    every occurrence of each token in a single pass. Values are inserted
    verbatim and never re-scanned, so a value that happens to contain a
    token is left alone.

Key Functions:
    - default_template(): Built-in Slidev deck template
    - load_template(): Deck override or the default
    - substitute(): Single-pass token replacement

Dependencies:
    - re (std)
    - common.files: read_document

Used By:
    - slides.renderer: Step 6 of the per-deck pipeline
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from modmod.common.files import read_document

logger = logging.getLogger(__name__)

RESOURCES_DIR = Path(__file__).parent / "resources"

MOD_TITLE = "#[modmod:mod_title]"
MOD_INDEX = "#[modmod:mod_index]"
UNIT_INDEX = "#[modmod:unit_index]"
UNIT_TITLE = "#[modmod:unit_title]"
CONTENT = "#[modmod:content]"
OBJECTIVES = "#[modmod:objectives]"
SUMMARY = "#[modmod:summary]"
THEME = "#[modmod:theme]"

PLACEHOLDERS = (
    MOD_TITLE,
    MOD_INDEX,
    UNIT_INDEX,
    UNIT_TITLE,
    CONTENT,
    OBJECTIVES,
    SUMMARY,
    THEME,
)


@lru_cache(maxsize=None)
def default_template() -> str:
    """Return the built-in deck template."""
    return read_document(RESOURCES_DIR / "default.md")


def load_template(template: Optional[Path]) -> str:
    """
    Load a deck template.

    Args:
        template: Deck-specific template, or None for the built-in default

    Raises:
        OSError: If the override cannot be read
    """
    if template is None:
        logger.debug("Using built-in deck template")
        return default_template()
    logger.debug(f"Using deck template {template}")
    return read_document(template)


def substitute(template: str, values: Mapping[str, str]) -> str:
    """
    Replace every occurrence of each token in ``values`` with its value.

    Tokens are matched literally and case-sensitively. Tokens missing from
    ``values`` are left in place.

    Example:
        >>> substitute("# #[modmod:unit_title] (#[modmod:unit_title])",
        ...            {UNIT_TITLE: "Overview"})
        '# Overview (Overview)'
    """
    if not values:
        return template
    # Longest first so no token shadows another that extends it
    tokens = sorted(values, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda match: values[match.group(0)], template)
