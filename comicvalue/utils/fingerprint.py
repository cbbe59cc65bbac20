"""
Comic Valuation — Cache Fingerprints

Deterministic cache keys. Two logically identical requests always produce
the same fingerprint: text is case-folded and trimmed, and grades are
normalised so 9, 9.0 and "9.0" agree.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import re

_DATA_URL_PREFIX = re.compile(r"^data:image/[\w.+-]+;base64,")


def _normalise_grade(grade: float | str | None) -> str:
    if grade is None or grade == "":
        return ""
    try:
        return f"{float(grade):g}"
    except (TypeError, ValueError):
        return str(grade).strip().lower()


def price_fingerprint(
    title: str,
    issue_number: str | None,
    grade: float | str | None,
    is_encapsulated: bool,
    grading_company: str | None = None,
) -> str:
    """Cache key for a price lookup: title|issue|grade|slabbed-or-raw|company."""
    return "|".join([
        title.strip().lower(),
        (issue_number or "").strip().lstrip("#").lower(),
        _normalise_grade(grade),
        "slabbed" if is_encapsulated else "raw",
        (grading_company or "").strip().lower(),
    ])


def metadata_fingerprint(title: str, issue_number: str | None) -> str:
    """Cache key for comic metadata: title|issue."""
    return f"{title.strip().lower()}|{(issue_number or '').strip().lstrip('#').lower()}"


def image_fingerprint(image_base64: str) -> str:
    """
    SHA-256 of the decoded image bytes.

    Accepts raw base64 or a data URL. Input that does not decode is hashed
    as text, so the key stays deterministic either way.
    """
    payload = _DATA_URL_PREFIX.sub("", image_base64.strip())
    try:
        content = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        content = payload.encode("utf-8")
    return hashlib.sha256(content).hexdigest()
