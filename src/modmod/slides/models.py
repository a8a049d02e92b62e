"""
Module: slides.models

Purpose:
    Immutable content model for one package of slide decks. A package holds
    ordered decks (one per unit of the track), a deck holds ordered sections
    (one per topic of the unit).

Key Classes:
    - SlidesPackage: Named, ordered collection of decks
    - SlideDeck: One renderable presentation for a unit
    - Section: One content fragment contributing to a deck

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - slides.builder: Only supported way to assemble a package
    - slides.renderer: Reads the model to emit decks and manifest
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .builder import SlidesPackageBuilder
    from .config import SlidesRenderOptions
    from .renderer import RenderResult


@dataclass(frozen=True)
class Section:
    """
    One content fragment of a deck (immutable).

    Attributes:
        content: Path to the markdown content document
        objectives: Learning objectives, rendered as bullets
        summary: Summary items, rendered as bullets
        further_reading: Further reading entries (kept, not rendered)
        images: Image files copied next to the rendered decks
    """

    content: Path
    objectives: tuple[str, ...] = ()
    summary: tuple[str, ...] = ()
    further_reading: tuple[str, ...] = ()
    images: tuple[Path, ...] = ()


@dataclass(frozen=True)
class SlideDeck:
    """
    One slide presentation, corresponding to one unit of a module (immutable).

    Attributes:
        name: Unit name
        module_name: Name of the enclosing module
        module_index: Position of the module in the track
        unit_index: Position of the unit within its module
        template: Optional deck template; the built-in default is used if None
        sections: Ordered sections

    Invariants:
        - (module_index, unit_index) is unique within a package
        - Both indices are non-negative
    """

    name: str
    module_name: str
    module_index: int
    unit_index: int
    template: Optional[Path] = None
    sections: tuple[Section, ...] = ()

    def __post_init__(self) -> None:
        """Validate indices on construction."""
        if self.module_index < 0:
            raise ValueError(f"module_index must be non-negative: {self.module_index}")
        if self.unit_index < 0:
            raise ValueError(f"unit_index must be non-negative: {self.unit_index}")

    @property
    def prefix(self) -> str:
        """Index pair used for file slugs and script keys, e.g. ``"1_2"``."""
        return f"{self.module_index}_{self.unit_index}"


@dataclass(frozen=True)
class SlidesPackage:
    """
    Package of slide decks for one track (immutable).

    Attributes:
        name: Package name, corresponds to the name of the track
        decks: Decks in insertion order (never re-sorted)

    Example:
        >>> builder = SlidesPackage.builder("Intro to Systems")
        >>> builder = builder.deck("Overview", "Foundations", 1, 1).add()
        >>> package = builder.build()
        >>> package.decks[0].prefix
        '1_1'
    """

    name: str
    decks: tuple[SlideDeck, ...] = ()

    @classmethod
    def builder(cls, name: str) -> "SlidesPackageBuilder":
        """Start building a package with no decks."""
        from .builder import SlidesPackageBuilder

        return SlidesPackageBuilder(name)

    def render(
        self,
        out_dir: Union[Path, str],
        options: "SlidesRenderOptions",
    ) -> "RenderResult":
        """Render every deck and the manifest under ``out_dir/slides``.

        See :func:`modmod.slides.renderer.render_slides`.
        """
        from .renderer import render_slides

        return render_slides(self, out_dir, options)
