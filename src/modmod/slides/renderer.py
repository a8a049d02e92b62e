"""
Module: slides.renderer

Purpose:
    Render a SlidesPackage into a directory of Slidev decks plus a
    package.json wiring up per-deck dev/build/export scripts.
    Aggregate sections → Skip empty → Copy images → Scripts → Template → Write,
    once per deck, then merge the manifest.

Key Functions:
    - render_slides(): Main entry point, full rebuild of every deck
    - aggregate_sections(): Concatenate section fragments for one deck
    - deck_scripts(): The three manifest scripts for one deck

Key Classes:
    - RenderResult: Paths and scripts produced by a successful render
    - RenderSlidesError: The single error render_slides() raises
    - DeckText: Aggregated content/objectives/summary of one deck

Dependencies:
    - common.files: Document I/O and image copies
    - common.tags: Deck slugs
    - slides.templates: Placeholder substitution
    - slides.manifest: package.json load/merge/write

Used By:
    - SlidesPackage.render()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Union

from modmod.common.files import copy_files, ensure_dir, read_document, write_document
from modmod.common.tags import to_prefixed_tag

from . import templates
from .config import SlidesRenderOptions
from .manifest import ManifestError, load_manifest, merge_scripts, write_manifest
from .models import Section, SlideDeck, SlidesPackage

logger = logging.getLogger(__name__)

SLIDES_DIR_NAME = "slides"
IMAGES_DIR_NAME = "images"
MANIFEST_FILE_NAME = "package.json"
RULE = "---"


class RenderSlidesError(Exception):
    """Rendering aborted; the underlying cause is chained as ``__cause__``."""

    def __init__(self, message: str = "unable to render slides"):
        super().__init__(message)


@dataclass(frozen=True)
class DeckText:
    """
    Aggregated text of one deck.

    Attributes:
        content: Rule-separated content fragments, one per non-empty section
        objectives: Objective bullet lines
        summary: Summary bullet lines
    """

    content: str = ""
    objectives: str = ""
    summary: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.content or self.objectives or self.summary)


@dataclass(frozen=True)
class RenderResult:
    """
    Output of a successful render (immutable).

    Attributes:
        slides_dir: ``<out>/slides``
        deck_paths: Written deck files, in package order
        skipped: Prefixes of decks skipped for having no text
        manifest_path: Written package.json
        scripts: Merged ``scripts`` object of the manifest
    """

    slides_dir: Path
    deck_paths: tuple[Path, ...]
    skipped: tuple[str, ...]
    manifest_path: Path
    scripts: Dict[str, str]


def aggregate_sections(sections: Iterable[Section]) -> DeckText:
    """
    Concatenate the text fragments of ``sections`` in order.

    Each section's content document is read and stripped. Empty documents
    contribute nothing; others are prefixed with a ``---`` rule (unless they
    already start with one) and end with a newline. Objectives and summary
    items become ``- item`` lines. Further reading and images are ignored.

    Raises:
        OSError: If a content document cannot be read
        UnicodeDecodeError: If a content document is not UTF-8
    """
    content: List[str] = []
    objectives: List[str] = []
    summary: List[str] = []

    for section in sections:
        topic_content = read_document(section.content).strip()
        if topic_content:
            if not topic_content.startswith(RULE):
                content.append(f"{RULE}\n\n")
            content.append(topic_content)
            content.append("\n")

        for objective in section.objectives:
            objectives.append(f"- {objective.strip()}\n")

        for item in section.summary:
            summary.append(f"- {item.strip()}\n")

    return DeckText(
        content="".join(content),
        objectives="".join(objectives),
        summary="".join(summary),
    )


def deck_scripts(deck: SlideDeck, slug: str, deck_file: str, url_base: str) -> Dict[str, str]:
    """
    Build the dev/build/export scripts for one deck.

    Args:
        deck: Deck being rendered
        slug: Deck slug, used as the build output directory under ``dist/``
        deck_file: Deck path relative to the slides directory
        url_base: URL base without leading/trailing slashes

    Example:
        >>> deck = SlideDeck("Overview", "Foundations", 1, 1)
        >>> deck_scripts(deck, "1_1_overview", "1_1_overview.md", "")["build-1_1"]
        'slidev build --download --out dist/1_1_overview --base /slides/1_1/ 1_1_overview.md'
    """
    separator = "/" if url_base else ""
    base = f"/{url_base}{separator}slides/{deck.module_index}_{deck.unit_index}/"
    return {
        f"dev-{deck.prefix}": f"slidev {deck_file}",
        f"build-{deck.prefix}": (
            f"slidev build --download --out dist/{slug} --base {base} {deck_file}"
        ),
        f"export-{deck.prefix}": f"slidev export {deck_file}",
    }


def render_slides(
    package: SlidesPackage,
    out_dir: Union[Path, str],
    options: SlidesRenderOptions,
) -> RenderResult:
    """
    Render every deck of ``package`` and the manifest under ``out_dir/slides``.

    Pipeline per deck (package order, decks are not sorted):
    1. Slug ``<module>_<unit>_<tag>``, output ``slides/<slug>.md``
    2. Aggregate section content, objectives and summary
    3. Skip the deck if all three are empty
    4. Copy its images into ``slides/images/`` (flat)
    5. Register ``dev-``, ``build-`` and ``export-<module>_<unit>`` scripts
    6. Substitute placeholders in the deck template
    7. Write the deck file

    Then the scripts are merged into the manifest (caller template or stub)
    and written to ``slides/package.json``.

    Args:
        package: Built package
        out_dir: Output root; ``slides/`` is created inside it
        options: Theme, manifest template and URL base

    Returns:
        RenderResult describing what was written

    Raises:
        RenderSlidesError: On any I/O or UTF-8 decode failure, malformed
            manifest JSON, or a manifest whose ``scripts`` is not an object.
            Files written for earlier decks are left in place.

    Example:
        >>> result = render_slides(package, Path("out"), SlidesRenderOptions(theme="default"))
        >>> sorted(result.scripts)
        ['_', 'build-1_1', 'dev-1_1', 'export-1_1']
    """
    try:
        return _render(package, Path(out_dir), options)
    except (OSError, UnicodeDecodeError, ManifestError) as e:
        logger.error(f"Rendering slides for {package.name!r} failed: {e}")
        raise RenderSlidesError() from e


def _render(package: SlidesPackage, out_dir: Path, options: SlidesRenderOptions) -> RenderResult:
    logger.info(
        f"Rendering {len(package.decks)} decks for {package.name!r} into {out_dir}"
    )

    manifest = load_manifest(options.package_json)

    slides_dir = ensure_dir(out_dir / SLIDES_DIR_NAME)
    images_dir = ensure_dir(slides_dir / IMAGES_DIR_NAME)
    url_base = options.base_path

    scripts: Dict[str, str] = {}
    deck_paths: List[Path] = []
    skipped: List[str] = []

    for deck in package.decks:
        slug = to_prefixed_tag(deck.name, deck.prefix)
        deck_output = slides_dir / f"{slug}.md"

        text = aggregate_sections(deck.sections)
        if text.is_empty:
            logger.info(f"Skipping deck {deck.prefix} {deck.name!r}: no content")
            skipped.append(deck.prefix)
            continue

        for section in deck.sections:
            copy_files(section.images, images_dir)

        deck_file = deck_output.relative_to(slides_dir).as_posix()
        scripts.update(deck_scripts(deck, slug, deck_file, url_base))

        template = templates.load_template(deck.template)
        slides_content = templates.substitute(
            template,
            {
                templates.MOD_TITLE: deck.module_name,
                templates.MOD_INDEX: str(deck.module_index),
                templates.UNIT_INDEX: str(deck.unit_index),
                templates.UNIT_TITLE: deck.name,
                templates.CONTENT: text.content,
                templates.OBJECTIVES: text.objectives,
                templates.SUMMARY: text.summary,
                templates.THEME: options.theme,
            },
        )

        write_document(deck_output, slides_content)
        deck_paths.append(deck_output)
        logger.info(f"Wrote deck {deck.prefix} to {deck_output}")

    merged = merge_scripts(manifest, package.name, scripts)
    manifest_path = write_manifest(slides_dir / MANIFEST_FILE_NAME, merged)
    logger.info(f"Wrote manifest with {len(scripts)} deck scripts to {manifest_path}")

    return RenderResult(
        slides_dir=slides_dir,
        deck_paths=tuple(deck_paths),
        skipped=tuple(skipped),
        manifest_path=manifest_path,
        scripts=dict(merged["scripts"]),
    )
