"""Tests for the curated key-facts table."""

from __future__ import annotations

from comicvalue.pipeline.key_comics import is_key_comic, key_comics_count, lookup_key_info, normalize_title


class TestNormalizeTitle:
    def test_strips_article_case_and_punctuation(self) -> None:
        """Leading 'The', case and punctuation are ignored."""
        assert normalize_title("The Amazing Spider-Man") == "amazingspiderman"
        assert normalize_title("  AMAZING spider man ") == "amazingspiderman"

    def test_article_only_stripped_at_start(self) -> None:
        """'the' inside a title is kept."""
        assert normalize_title("Tales of the Unexpected") == "talesoftheunexpected"


class TestLookupKeyInfo:
    def test_known_key(self) -> None:
        """A curated key returns its facts."""
        assert lookup_key_info("Amazing Spider-Man", "300") == [
            "First full appearance of Venom",
            "Origin of Venom",
        ]

    def test_title_variations_match(self) -> None:
        """'The', '#' and case differences still match."""
        assert lookup_key_info("The Incredible Hulk", "#181") == ["First full appearance of Wolverine"]
        assert lookup_key_info("the walking dead", "1") is not None

    def test_leading_zeros(self) -> None:
        """'001' finds issue '1'."""
        assert lookup_key_info("Saga", "001") == lookup_key_info("Saga", "1")
        assert lookup_key_info("Saga", "001") is not None

    def test_unknown_issue_and_title(self) -> None:
        """Non-key issues and unknown titles return None."""
        assert lookup_key_info("Amazing Spider-Man", "9999") is None
        assert lookup_key_info("Completely Made Up Comic", "1") is None

    def test_returns_a_copy(self) -> None:
        """Callers cannot mutate the curated table."""
        facts = lookup_key_info("Amazing Spider-Man", "300")
        assert facts is not None
        facts.append("mutated")

        assert "mutated" not in (lookup_key_info("Amazing Spider-Man", "300") or [])

    def test_is_key_comic_and_count(self) -> None:
        """Convenience helpers agree with the lookup."""
        assert is_key_comic("Amazing Fantasy", "15") is True
        assert is_key_comic("Amazing Fantasy", "16") is False
        assert key_comics_count() > 300
