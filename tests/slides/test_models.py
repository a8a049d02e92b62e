"""
Unit Tests for the slides content model.
"""

import dataclasses

import pytest
from pathlib import Path

from modmod.slides.models import Section, SlideDeck, SlidesPackage
from modmod.slides.builder import SlidesPackageBuilder


class TestSlideDeck:
    """Tests for SlideDeck dataclass."""

    def test_prefix_when_indices_given_then_module_underscore_unit(self):
        deck = SlideDeck("Overview", "Foundations", 2, 10)
        assert deck.prefix == "2_10"

    def test_init_when_negative_module_index_then_raises_error(self):
        with pytest.raises(ValueError, match="module_index must be non-negative"):
            SlideDeck("Overview", "Foundations", -1, 0)

    def test_init_when_negative_unit_index_then_raises_error(self):
        with pytest.raises(ValueError, match="unit_index must be non-negative"):
            SlideDeck("Overview", "Foundations", 0, -3)

    def test_init_when_zero_indices_then_allowed(self):
        assert SlideDeck("Intro", "Start", 0, 0).prefix == "0_0"

    def test_deck_is_frozen(self):
        deck = SlideDeck("Overview", "Foundations", 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            deck.name = "Other"


class TestSection:
    """Tests for Section dataclass."""

    def test_defaults_when_only_content_then_empty_tuples(self):
        section = Section(Path("topic.md"))
        assert section.objectives == ()
        assert section.summary == ()
        assert section.further_reading == ()
        assert section.images == ()


class TestSlidesPackage:
    """Tests for SlidesPackage dataclass."""

    def test_builder_when_called_then_returns_empty_package_builder(self):
        builder = SlidesPackage.builder("Intro to Systems")
        assert isinstance(builder, SlidesPackageBuilder)
        package = builder.build()
        assert package.name == "Intro to Systems"
        assert package.decks == ()

    def test_render_delegates_to_render_slides(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(
            "modmod.slides.renderer.render_slides",
            lambda package, out_dir, options: calls.append((package, out_dir, options)) or "result",
        )
        package = SlidesPackage("Intro")

        assert package.render(tmp_path, "options") == "result"
        assert calls == [(package, tmp_path, "options")]
