"""Tests for cache fingerprints."""

from __future__ import annotations

import base64
import hashlib

from comicvalue.utils.fingerprint import image_fingerprint, metadata_fingerprint, price_fingerprint


class TestPriceFingerprint:
    def test_identical_requests_match(self) -> None:
        """Case, whitespace, '#' and grade formatting do not change the key."""
        a = price_fingerprint("Amazing Spider-Man", "300", 9, True, "CGC")
        b = price_fingerprint("  amazing spider-man ", "#300", "9.0", True, "cgc")
        assert a == b

    def test_slab_flag_and_company_distinguish(self) -> None:
        """Raw and slabbed copies, and different graders, get different keys."""
        raw = price_fingerprint("Saga", "1", 9.8, False)
        slab = price_fingerprint("Saga", "1", 9.8, True)
        cbcs = price_fingerprint("Saga", "1", 9.8, True, "CBCS")
        assert len({raw, slab, cbcs}) == 3

    def test_missing_grade(self) -> None:
        """No grade is a stable, distinct key."""
        assert price_fingerprint("Saga", "1", None, False) == "saga|1||raw|"


class TestOtherFingerprints:
    def test_metadata_fingerprint(self) -> None:
        """Title and issue only."""
        assert metadata_fingerprint("The Walking Dead ", "#1") == "the walking dead|1"

    def test_image_fingerprint_hashes_decoded_bytes(self) -> None:
        """Raw base64 and data URLs of the same bytes agree."""
        content = b"\x89PNG fake cover bytes"
        encoded = base64.b64encode(content).decode()

        expected = hashlib.sha256(content).hexdigest()
        assert image_fingerprint(encoded) == expected
        assert image_fingerprint(f"data:image/png;base64,{encoded}") == expected

    def test_image_fingerprint_differs_per_image(self) -> None:
        """Different images get different keys."""
        a = base64.b64encode(b"cover-a").decode()
        b = base64.b64encode(b"cover-b").decode()
        assert image_fingerprint(a) != image_fingerprint(b)
