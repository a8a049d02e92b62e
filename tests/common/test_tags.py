"""
Unit tests for tag derivation.
"""

import pytest

from modmod.common.tags import to_tag, to_prefixed_tag


class TestToTag:
    """Tests for to_tag."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Overview", "overview"),
            ("Intro to Systems", "intro-to-systems"),
            ("intro-to-systems", "intro-to-systems"),
            ("  Ownership & References  ", "ownership-references"),
            ("Closures and Dynamic dispatch", "closures-and-dynamic-dispatch"),
            ("C++ / Rust: FFI", "c-rust-ffi"),
            ("Unit 3", "unit-3"),
        ],
    )
    def test_to_tag_when_name_given_then_lowercase_hyphenated(self, name, expected):
        assert to_tag(name) == expected

    def test_to_tag_when_no_alphanumerics_then_empty(self):
        assert to_tag("!!! ---") == ""

    def test_to_tag_when_already_tag_then_unchanged(self):
        assert to_tag(to_tag("Traits and Generics")) == "traits-and-generics"


class TestToPrefixedTag:
    """Tests for to_prefixed_tag."""

    def test_prefixed_tag_when_name_given_then_prefix_and_underscore(self):
        assert to_prefixed_tag("Overview", "1_1") == "1_1_overview"

    def test_prefixed_tag_when_multiword_then_hyphenated_after_prefix(self):
        assert to_prefixed_tag("Basic Syntax", "2_10") == "2_10_basic-syntax"

    def test_prefixed_tag_when_name_has_no_tag_then_prefix_only(self):
        assert to_prefixed_tag("???", "3_1") == "3_1"
