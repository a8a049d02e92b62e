"""Tag derivation for names used in file paths and manifest identifiers.

A tag is the lowercase, filesystem and identifier safe form of a
human-readable name: runs of anything other than ASCII letters and digits
collapse into a single hyphen, and leading/trailing hyphens are dropped.
"""

from __future__ import annotations

import re

_NON_TAG_CHARS = re.compile(r"[^a-z0-9]+")


def to_tag(name: str) -> str:
    """Convert a human-readable name into a tag.

    Args:
        name: Track, module or unit name.

    Returns:
        Tag string; empty if the name holds no letters or digits.

    Examples:
        >>> to_tag("Intro to Systems")
        'intro-to-systems'
        >>> to_tag("  Ownership & References ")
        'ownership-references'
        >>> to_tag("intro-to-systems")
        'intro-to-systems'
    """
    return _NON_TAG_CHARS.sub("-", name.lower()).strip("-")


def to_prefixed_tag(name: str, prefix: str) -> str:
    """Convert a name into a tag prefixed with ``prefix`` and an underscore.

    Used for deck slugs, where the prefix is the ``<module>_<unit>`` index
    pair so that output files sort by position in the track.

    Examples:
        >>> to_prefixed_tag("Overview", "1_1")
        '1_1_overview'
        >>> to_prefixed_tag("Basic Syntax", "2_10")
        '2_10_basic-syntax'
        >>> to_prefixed_tag("???", "3_1")
        '3_1'
    """
    tag = to_tag(name)
    if not tag:
        return prefix
    return f"{prefix}_{tag}"
