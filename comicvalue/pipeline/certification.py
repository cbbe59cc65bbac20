"""
Comic Valuation — Certification Lookup (CGC / CBCS / PGX)

Reads a slab's label data from the grading company's public verification
page. Each company gets a small BeautifulSoup parser keyed on the label
text its page shows ("Grade", "Page Quality", "Verified").

Successful lookups are cached for a year under the "cert" namespace;
certificates never change. Failures (HTTP errors, not-found pages,
unparseable HTML) come back as CertificationResult(success=False) and are
not cached.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote

import httpx
import structlog
from bs4 import BeautifulSoup, NavigableString, Tag
from pydantic import BaseModel, ValidationError

from comicvalue.config import CacheNamespace, GradingCompany, settings
from comicvalue.utils.cache import CacheStore

logger = structlog.get_logger(__name__)

_NOT_FOUND_MARKERS = ("not found", "No results", "invalid")
_CBCS_NOT_FOUND_MARKERS = _NOT_FOUND_MARKERS + ("no record",)

_FACT_BOUNDARY = re.compile(r"(?<=[.!?])\s+|\s*\n\s*")


class CertificationData(BaseModel):
    """Label fields read from a verification page. Any field may be missing."""
    title: str | None = None
    issue_number: str | None = None
    publisher: str | None = None
    release_year: str | None = None
    grade: str | None = None
    grade_label: str | None = None
    label_type: str | None = None
    variant: str | None = None
    page_quality: str | None = None
    grade_date: str | None = None
    grader_notes: str | None = None
    signatures: str | None = None
    key_comments: str | None = None
    art_comments: str | None = None

    @property
    def key_facts(self) -> list[str]:
        return split_key_comments(self.key_comments)


class CertificationResult(BaseModel):
    success: bool
    source: str
    cert_number: str
    data: CertificationData | None = None
    error: str | None = None


def split_key_comments(text: str | None) -> list[str]:
    """
    Split free-text key comments into discrete facts.

    "1st appearance of Venom. Todd McFarlane cover.\\nSigned" →
    ["1st appearance of Venom", "Todd McFarlane cover", "Signed"]
    """
    if not text:
        return []
    facts = []
    for part in _FACT_BOUNDARY.split(text):
        fact = part.strip().rstrip(".").strip()
        if fact:
            facts.append(fact)
    return facts


def detect_grading_company(cert_number: str) -> GradingCompany | None:
    """
    Guess the grading company from a cert number's format.

    CBCS certs are alphanumeric with dashes ("20-1F9AC96-004"); CGC certs
    are 7-10 digits (ten digits is CGC even with spaces or dashes); PGX
    certs are 5-7 digits.
    """
    trimmed = cert_number.strip()

    if re.fullmatch(r"[\dA-Z]+-[A-Z0-9]+-\d+", trimmed, re.IGNORECASE) or re.search(
        r"[A-F]", trimmed, re.IGNORECASE
    ):
        return GradingCompany.CBCS

    digits = re.sub(r"\D", "", trimmed)
    if len(digits) == 10 or (7 <= len(digits) <= 10 and trimmed.isdigit()):
        return GradingCompany.CGC
    if 5 <= len(digits) <= 7:
        return GradingCompany.PGX
    return None


# ---------------------------------------------------------------------------
# HTML helpers
# ---------------------------------------------------------------------------

_GRADE_TEXT = re.compile(r"^\s*\d{1,2}(?:\.\d)?\s*$")


def _page(html: str) -> tuple[BeautifulSoup, str]:
    soup = BeautifulSoup(html, "html.parser")
    return soup, soup.get_text(" ", strip=True)


def _text(node: Tag | NavigableString | None, separator: str = " ") -> str | None:
    if node is None:
        return None
    if isinstance(node, NavigableString):
        text = str(node).strip()
    else:
        text = node.get_text(separator, strip=True)
    return text or None


def _label_value(soup: BeautifulSoup, label: str, separator: str = " ") -> str | None:
    """
    Value shown next to a label: "<dt>Grade</dt><dd>9.8</dd>" → "9.8".

    The label must be the whole text of its element, so "Grade" never picks
    up "Grade Date" or "Grader Notes". Falls back to inline "Label: value"
    text. Pass separator="\\n" to keep <br>-separated lines apart.
    """
    node = soup.find(string=re.compile(rf"^\s*{label}\s*:?\s*$", re.IGNORECASE))
    if node is not None:
        owner = node.parent
        value = _text(owner.find_next_sibling() or owner.find_next(), separator)
        if value:
            return value

    inline = re.compile(rf"^\s*{label}\s*:\s*(\S.*)$", re.IGNORECASE | re.DOTALL)
    node = soup.find(string=inline)
    if node is not None:
        return inline.match(str(node)).group(1).strip()
    return None


def _split_title(full_title: str, issue_optional_hash: bool) -> tuple[str, str | None]:
    """'Amazing Spider-Man #300' → ('Amazing Spider-Man', '300')."""
    pattern = r"^(.+?)\s*#?(\d+[A-Za-z]?)$" if issue_optional_hash else r"^(.+?)\s*#(\d+[A-Za-z]?)$"
    match = re.match(pattern, full_title.strip())
    if match:
        return match.group(1).strip(), match.group(2)
    return full_title.strip(), None


def _year(value: str | None) -> str | None:
    match = re.search(r"\b(\d{4})\b", value or "")
    return match.group(1) if match else None


def _failure(source: str, cert_number: str, error: str) -> CertificationResult:
    return CertificationResult(success=False, source=source, cert_number=cert_number, error=error)


# ---------------------------------------------------------------------------
# Per-company parsers
# ---------------------------------------------------------------------------

def parse_cgc_page(html: str, cert_number: str) -> CertificationResult:
    """
    Parse a CGC verification page.

    Fields appear as label/value pairs: Grade, Publisher, Issue Year,
    Page Quality, Grade Date, Label Category, Key Comments, Art Comments,
    Grader Notes, Signatures. Title is the page heading.
    """
    soup, text = _page(html)
    if any(marker in text for marker in _NOT_FOUND_MARKERS):
        return _failure("cgc", cert_number, "Certification number not found")

    heading = soup.find("h1") or soup.find(class_=re.compile("title", re.IGNORECASE))
    full_title = _text(heading) or _label_value(soup, "Title")
    title, issue_number = _split_title(full_title, True) if full_title else (None, None)
    if issue_number is None:
        issue_number = _label_value(soup, "Issue")

    grade = _label_value(soup, "Grade") or _text(soup.find(string=_GRADE_TEXT))

    signatures = _label_value(soup, "Signatures", "\n")
    if signatures is None:
        signed = soup.find(string=re.compile(r"SIGNED BY", re.IGNORECASE))
        if signed is not None:
            signatures = str(signed)[re.search(r"SIGNED BY", signed, re.IGNORECASE).start():].strip()

    if not title and not grade:
        return _failure("cgc", cert_number, "Could not parse certification data")

    grade_date = _label_value(soup, r"Grade\s*Date")
    iso_date = re.search(r"\d{4}-\d{2}-\d{2}", grade_date or "")

    return CertificationResult(
        success=True,
        source="cgc",
        cert_number=cert_number,
        data=CertificationData(
            title=title,
            issue_number=issue_number,
            publisher=_label_value(soup, "Publisher"),
            release_year=_year(_label_value(soup, r"Issue\s*Year")) or _year(text),
            grade=grade,
            label_type=_label_value(soup, r"Label\s*Category"),
            page_quality=_label_value(soup, r"Page\s*Quality"),
            grade_date=iso_date.group(0) if iso_date else grade_date,
            grader_notes=_label_value(soup, r"Grader\s*Notes", "\n"),
            signatures=signatures,
            key_comments=_label_value(soup, r"Key\s*Comments", "\n"),
            art_comments=_label_value(soup, r"Art\s*Comments", "\n"),
        ),
    )


def parse_cbcs_page(html: str, cert_number: str) -> CertificationResult:
    """
    Parse a CBCS grading-notes page.

    Heading carries "Title #Issue"; publisher and date read like
    "Marvel 8 1990"; the grade sits just before the "Verified" block.
    CBCS shows no grade date or key comments.
    """
    soup, text = _page(html)
    if any(marker in text for marker in _CBCS_NOT_FOUND_MARKERS):
        return _failure("cbcs", cert_number, "Certification number not found")

    with_issue = re.compile(r"#\d+[A-Za-z]?\s*$")
    heading = soup.find(["h1", "h2", "h3"], string=with_issue) or soup.find(string=with_issue)
    full_title = _text(heading)
    title, issue_number = _split_title(full_title, False) if full_title else (None, None)

    publisher_date = None
    dated = re.compile(r"^\s*([A-Za-z][A-Za-z\s]*?)\s+(\d{1,2})\s+(\d{4})\s*$")
    node = soup.find(string=dated)
    if node is not None:
        publisher_date = dated.match(str(node))

    verified = soup.find(string=re.compile(r"^\s*Verified\s*$", re.IGNORECASE))
    if verified is not None:
        grade = _text(verified.find_previous(string=re.compile(r"^\s*\d+(?:\.\d+)?\s*$")))
        page_quality = _text(verified.find_next(string=re.compile(r"^\s*[A-Za-z][A-Za-z\s\-]*$")))
    else:
        grade = _text(soup.find(string=_GRADE_TEXT))
        page_quality = _text(soup.find(string=re.compile(r"^\s*(?:White|Off-White|Cream)\s*$")))

    signatures = _label_value(soup, "Signees") or _label_value(soup, "Verified Signature")
    if signatures:
        signatures = " ".join(signatures.split())

    if not title and not grade:
        return _failure("cbcs", cert_number, "Could not parse certification data")

    return CertificationResult(
        success=True,
        source="cbcs",
        cert_number=cert_number,
        data=CertificationData(
            title=title,
            issue_number=issue_number,
            publisher=publisher_date.group(1).strip() if publisher_date else None,
            release_year=publisher_date.group(3) if publisher_date else None,
            grade=grade,
            label_type="Verified Signature" if signatures else None,
            variant=_label_value(soup, "Variant"),
            page_quality=page_quality,
            grader_notes=_label_value(soup, "Notes", "\n"),
            signatures=signatures,
        ),
    )


def parse_pgx_page(html: str, cert_number: str) -> CertificationResult:
    """Parse a PGX verification page. Only title, grade and year are published."""
    soup, text = _page(html)
    if any(marker in text for marker in _NOT_FOUND_MARKERS):
        return _failure("pgx", cert_number, "Certification number not found")

    full_title = _label_value(soup, "Title")
    grade_match = re.search(r"\d+(?:\.\d+)?", _label_value(soup, "Grade") or "")
    grade = grade_match.group(0) if grade_match else None
    title, issue_number = _split_title(full_title, False) if full_title else (None, None)

    if not title and not grade:
        return _failure("pgx", cert_number, "Could not parse certification data")

    year = re.search(r"\((\d{4})\)", text)
    return CertificationResult(
        success=True,
        source="pgx",
        cert_number=cert_number,
        data=CertificationData(
            title=title,
            issue_number=issue_number,
            release_year=year.group(1) if year else None,
            grade=grade,
        ),
    )


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

def _cache_key(company: str, cert_number: str) -> str:
    return f"{company.lower()}-{re.sub(r'[^0-9A-Za-z]', '', cert_number).upper()}"


class CertificationClient:
    """
    Verification-page client for CGC, CBCS and PGX.

    Usage:
        async with CertificationClient(cache) as client:
            result = await client.lookup("CGC", "1234567001")
    """

    def __init__(self, cache: CacheStore | None = None) -> None:
        self._cache = cache
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "CertificationClient":
        self._client = httpx.AsyncClient(
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            follow_redirects=True,
            headers={
                "User-Agent": settings.CERT_USER_AGENT,
                "Accept": "text/html,application/xhtml+xml",
            },
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()

    async def _fetch(self, source: str, url: str, cert_number: str) -> str | CertificationResult:
        """Page HTML, or a failed result describing why it could not be fetched."""
        if not self._client:
            return _failure(source, cert_number, "Client not open")
        try:
            response = await self._client.get(url)
            if response.status_code != 200:
                logger.warning(
                    "cert_lookup_http_error",
                    company=source,
                    cert_number=cert_number,
                    status=response.status_code,
                    source="certification",
                )
                return _failure(source, cert_number, f"{source.upper()} lookup failed: {response.status_code}")
            return response.text
        except Exception as e:
            logger.error(
                "cert_lookup_failed",
                company=source,
                cert_number=cert_number,
                error=str(e),
                source="certification",
            )
            return _failure(source, cert_number, str(e))

    async def lookup_cgc(self, cert_number: str) -> CertificationResult:
        clean = re.sub(r"\D", "", cert_number)
        if len(clean) < 6:
            return _failure("cgc", cert_number, "Invalid CGC certification number")
        page = await self._fetch("cgc", f"{settings.CGC_CERT_URL}/{clean}/", clean)
        return page if isinstance(page, CertificationResult) else parse_cgc_page(page, clean)

    async def lookup_cbcs(self, cert_number: str) -> CertificationResult:
        # CBCS certs keep their letters and dashes
        clean = cert_number.strip()
        if len(clean) < 5:
            return _failure("cbcs", cert_number, "Invalid CBCS certification number")
        page = await self._fetch("cbcs", f"{settings.CBCS_CERT_URL}/{quote(clean, safe='')}", clean)
        return page if isinstance(page, CertificationResult) else parse_cbcs_page(page, clean)

    async def lookup_pgx(self, cert_number: str) -> CertificationResult:
        clean = re.sub(r"\D", "", cert_number)
        if len(clean) < 5:
            return _failure("pgx", cert_number, "Invalid PGX certification number")
        page = await self._fetch("pgx", f"{settings.PGX_CERT_URL}/{clean}", clean)
        return page if isinstance(page, CertificationResult) else parse_pgx_page(page, clean)

    async def lookup(self, grading_company: str, cert_number: str) -> CertificationResult:
        """
        Look up a certification, serving from the cert cache when possible.

        Unsupported companies fail without a network call.
        """
        company = grading_company.strip().upper()
        key = _cache_key(company, cert_number)

        if self._cache is not None:
            cached = await self._cache.get(CacheNamespace.CERT, key)
            if cached is not None:
                try:
                    result = CertificationResult.model_validate(cached)
                except ValidationError:
                    result = None
                if result is not None and result.success and result.data is not None:
                    logger.info("cert_cache_hit", company=company, key=key, source="certification")
                    return result

        if company == GradingCompany.CGC.value:
            result = await self.lookup_cgc(cert_number)
        elif company == GradingCompany.CBCS.value:
            result = await self.lookup_cbcs(cert_number)
        elif company == GradingCompany.PGX.value:
            result = await self.lookup_pgx(cert_number)
        else:
            return _failure("cgc", cert_number, f"Unsupported grading company: {grading_company}")

        logger.info(
            "cert_lookup_complete",
            company=company,
            cert_number=result.cert_number,
            success=result.success,
            error=result.error,
            source="certification",
        )

        if result.success and result.data is not None and self._cache is not None:
            self._cache.set_in_background(CacheNamespace.CERT, key, result.model_dump(mode="json"))

        return result
