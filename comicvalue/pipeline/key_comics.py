"""
Comic Valuation — Curated Key-Facts Lookup

Exact title + issue match against the curated key comics table. Free and
authoritative, so it runs before any generative call.
"""

from __future__ import annotations

import re

import structlog

from comicvalue.pipeline.key_comics_data import KEY_COMICS

logger = structlog.get_logger(__name__)


def normalize_title(title: str) -> str:
    """'The Amazing Spider-Man' → 'amazingspiderman'."""
    lowered = title.strip().lower()
    lowered = re.sub(r"^the\s+", "", lowered)
    return re.sub(r"[^a-z0-9]", "", lowered)


def _build_index() -> dict[str, dict[str, list[str]]]:
    index: dict[str, dict[str, list[str]]] = {}
    for title, issue, facts in KEY_COMICS:
        index.setdefault(normalize_title(title), {})[issue] = facts
    return index


_INDEX = _build_index()


def lookup_key_info(title: str, issue_number: str) -> list[str] | None:
    """
    Key facts for a comic, or None when it is not in the table.

    Tries the issue as given, then with leading zeros stripped ("01" → "1").
    """
    issues = _INDEX.get(normalize_title(title))
    if not issues:
        return None

    issue = issue_number.strip().lstrip("#").strip()
    facts = issues.get(issue)
    if facts is None:
        facts = issues.get(issue.lstrip("0") or "0")

    if facts is not None:
        logger.debug("key_info_found", title=title, issue_number=issue, source="key_comics")
        return list(facts)
    return None


def is_key_comic(title: str, issue_number: str) -> bool:
    return lookup_key_info(title, issue_number) is not None


def key_comics_count() -> int:
    return len(KEY_COMICS)
