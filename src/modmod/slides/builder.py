"""
Module: slides.builder

Purpose:
    Staged builder for SlidesPackage. Construction follows the nesting of
    the model: package -> deck -> section. Each nested builder's ``add()``
    commits its accumulated state into the parent exactly once and hands
    the parent builder back.

Key Classes:
    - SlidesPackageBuilder: Accumulates decks, ``build()`` yields the package
    - SlideDeckBuilder: Accumulates sections for one deck
    - SectionBuilder: Accumulates objectives, summary, reading and images
    - BuilderError: Raised on any out-of-order or repeated step

Dependencies:
    - dataclasses (std)
    - slides.models: Frozen model classes produced by the builders

Used By:
    - Track readers that turn a course structure into a SlidesPackage

Design Deviation from the borrow-chain builder:
    Nothing is lost silently. A builder that was committed is consumed and
    refuses further calls, and a parent refuses to open a new child, commit,
    or build while a child is still open. Forgetting an ``add()`` therefore
    surfaces as a BuilderError instead of a missing deck or section.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Union

from .models import Section, SlideDeck, SlidesPackage

PathLike = Union[Path, str]


class BuilderError(Exception):
    """Builder used out of order, reused after commit, or left uncommitted."""


class _Stage:
    """Shared consumed-state tracking for the builder stages."""

    _what = "builder"

    def __init__(self) -> None:
        self._consumed = False

    def _ensure_active(self) -> None:
        if self._consumed:
            raise BuilderError(f"{self._what} was already committed and cannot be reused")

    def _consume(self) -> None:
        self._ensure_active()
        self._consumed = True


class SlidesPackageBuilder(_Stage):
    """
    Builder for a SlidesPackage.

    Obtain one with ``SlidesPackage.builder(name)``.

    Example:
        >>> builder = SlidesPackage.builder("Intro to Systems")
        >>> deck = builder.deck("Overview", "Foundations", 1, 1)
        >>> section = deck.section("topics/overview/slides.md").objective("Understand X")
        >>> builder = section.add().add()
        >>> package = builder.build()
    """

    _what = "Package builder"

    def __init__(self, name: str) -> None:
        super().__init__()
        self._name = name
        self._decks: List[SlideDeck] = []
        self._open: Optional[SlideDeckBuilder] = None

    def deck(
        self,
        name: str,
        module_name: str,
        module_index: int,
        unit_index: int,
        template: Optional[PathLike] = None,
    ) -> "SlideDeckBuilder":
        """
        Open a deck builder with no sections.

        The package is not modified until the returned builder's ``add()``.

        Raises:
            BuilderError: If another deck is still open or the index pair is taken
            ValueError: If an index is negative
        """
        self._ensure_active()
        if self._open is not None:
            raise BuilderError(
                f"Deck {self._open.name!r} ({self._open.prefix}) was opened but never added"
            )
        deck = SlideDeck(
            name=name,
            module_name=module_name,
            module_index=module_index,
            unit_index=unit_index,
            template=Path(template) if template is not None else None,
        )
        for existing in self._decks:
            if existing.prefix == deck.prefix:
                raise BuilderError(
                    f"Deck {deck.name!r} reuses index pair {deck.prefix} of deck {existing.name!r}"
                )
        self._open = SlideDeckBuilder(self, deck)
        return self._open

    def build(self) -> SlidesPackage:
        """
        Finish the package.

        Raises:
            BuilderError: If a deck is still open or the builder was already built
        """
        if self._open is not None:
            raise BuilderError(
                f"Deck {self._open.name!r} ({self._open.prefix}) was opened but never added"
            )
        self._consume()
        return SlidesPackage(name=self._name, decks=tuple(self._decks))

    def _commit(self, deck: SlideDeck) -> None:
        self._decks.append(deck)
        self._open = None


class SlideDeckBuilder(_Stage):
    """Builder for one SlideDeck, created by ``SlidesPackageBuilder.deck()``."""

    _what = "Deck builder"

    def __init__(self, package_builder: SlidesPackageBuilder, deck: SlideDeck) -> None:
        super().__init__()
        self._package_builder = package_builder
        self._deck = deck
        self._sections: List[Section] = []
        self._open: Optional[SectionBuilder] = None

    @property
    def name(self) -> str:
        return self._deck.name

    @property
    def prefix(self) -> str:
        return self._deck.prefix

    def section(self, content: PathLike) -> "SectionBuilder":
        """
        Open a section builder for the content document at ``content``.

        Raises:
            BuilderError: If another section of this deck is still open
        """
        self._ensure_active()
        if self._open is not None:
            raise BuilderError(
                f"Section {str(self._open.content)!r} of deck {self.name!r} was opened but never added"
            )
        self._open = SectionBuilder(self, Path(content))
        return self._open

    def add(self) -> SlidesPackageBuilder:
        """
        Commit the deck into the package builder and return it.

        Raises:
            BuilderError: If a section is still open or the deck was already added
        """
        self._ensure_active()
        if self._open is not None:
            raise BuilderError(
                f"Section {str(self._open.content)!r} of deck {self.name!r} was opened but never added"
            )
        self._package_builder._commit(replace(self._deck, sections=tuple(self._sections)))
        self._consume()
        return self._package_builder

    def _commit(self, section: Section) -> None:
        self._sections.append(section)
        self._open = None


class SectionBuilder(_Stage):
    """
    Builder for one Section, created by ``SlideDeckBuilder.section()``.

    The mutators append one entry each, keep call order, and return the
    builder so calls can be chained.
    """

    _what = "Section builder"

    def __init__(self, deck_builder: SlideDeckBuilder, content: Path) -> None:
        super().__init__()
        self._deck_builder = deck_builder
        self.content = content
        self._objectives: List[str] = []
        self._summary: List[str] = []
        self._further_reading: List[str] = []
        self._images: List[Path] = []

    def objective(self, objective: str) -> "SectionBuilder":
        self._ensure_active()
        self._objectives.append(objective)
        return self

    def summary(self, summary: str) -> "SectionBuilder":
        self._ensure_active()
        self._summary.append(summary)
        return self

    def further_reading(self, further_reading: str) -> "SectionBuilder":
        self._ensure_active()
        self._further_reading.append(further_reading)
        return self

    def image(self, image: PathLike) -> "SectionBuilder":
        self._ensure_active()
        self._images.append(Path(image))
        return self

    def add(self) -> SlideDeckBuilder:
        """Commit the section into the deck builder and return it."""
        self._consume()
        self._deck_builder._commit(
            Section(
                content=self.content,
                objectives=tuple(self._objectives),
                summary=tuple(self._summary),
                further_reading=tuple(self._further_reading),
                images=tuple(self._images),
            )
        )
        return self._deck_builder
