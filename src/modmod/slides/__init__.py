"""
Module: slides

Purpose:
    Render a course track into Slidev slide decks. Callers assemble a
    SlidesPackage with the staged builder (package -> deck -> section) and
    render it into ``<out>/slides`` together with a package.json holding
    per-deck dev/build/export scripts.

Key Functions:
    - render_slides(): Render a package (also SlidesPackage.render())

Key Classes:
    - SlidesPackage, SlideDeck, Section: Immutable content model
    - SlidesPackageBuilder: Staged builder, from SlidesPackage.builder()
    - SlidesRenderOptions: Theme, manifest template and URL base
    - RenderResult: What a render wrote
    - RenderSlidesError, BuilderError, ManifestError: Errors

Dependencies:
    - jsonschema: Manifest validation
"""

from .models import Section, SlideDeck, SlidesPackage
from .builder import BuilderError, SectionBuilder, SlideDeckBuilder, SlidesPackageBuilder
from .config import SlidesRenderOptions
from .manifest import ManifestError
from .renderer import DeckText, RenderResult, RenderSlidesError, aggregate_sections, render_slides

__all__ = [
    # Model
    "SlidesPackage",
    "SlideDeck",
    "Section",
    # Builder
    "SlidesPackageBuilder",
    "SlideDeckBuilder",
    "SectionBuilder",
    "BuilderError",
    # Config
    "SlidesRenderOptions",
    # Rendering
    "render_slides",
    "aggregate_sections",
    "DeckText",
    "RenderResult",
    "RenderSlidesError",
    "ManifestError",
]
