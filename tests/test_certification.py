"""Tests for certification lookups (CGC / CBCS / PGX)."""

from __future__ import annotations

import httpx
import pytest
import respx

from comicvalue.config import CacheNamespace, GradingCompany
from comicvalue.pipeline.certification import (
    CertificationClient,
    detect_grading_company,
    parse_cbcs_page,
    parse_cgc_page,
    parse_pgx_page,
    split_key_comments,
)

CGC_URL = "https://www.cgccomics.com/certlookup/1234567001/"
CBCS_URL = "https://cbcscomics.com/grading-notes/20-1F9AC96-004"

CGC_PAGE = """<html><body>
<h1>Amazing Spider-Man #300</h1>
<dl>
<dt>Grade</dt><dd>9.8</dd>
<dt>Publisher</dt><dd>Marvel Comics</dd>
<dt>Issue Year</dt><dd>1988</dd>
<dt>Page Quality</dt><dd>White</dd>
<dt>Grade Date</dt><dd>2017-06-27</dd>
<dt>Label Category</dt><dd>Universal</dd>
<dt>Key Comments</dt><dd>1st full appearance of Venom.<br>Todd McFarlane cover.</dd>
<dt>Grader Notes</dt><dd>light spine stress</dd>
</dl>
</body></html>"""

CBCS_PAGE = """<div class="cert">
<h2>Incredible Hulk #181</h2>
<p>Marvel 11 1974</p>
<span class="grade">9.6</span>
<div>Verified</div>
<span>White</span>
<p>Notes:</p><p>minor corner wear</p>
</div>"""

PGX_PAGE = "<table><tr><td>Title: Spawn #1</td><td>Released (1992)</td><td>Grade: 9.8</td></tr></table>"


class TestParseCgcPage:
    def test_parses_label_fields(self) -> None:
        """Title, issue and label data are read from the page."""
        result = parse_cgc_page(CGC_PAGE, "1234567001")

        assert result.success is True
        assert result.source == "cgc"
        data = result.data
        assert data is not None
        assert data.title == "Amazing Spider-Man"
        assert data.issue_number == "300"
        assert data.grade == "9.8"
        assert data.publisher == "Marvel Comics"
        assert data.release_year == "1988"
        assert data.page_quality == "White"
        assert data.grade_date == "2017-06-27"
        assert data.label_type == "Universal"
        assert data.grader_notes == "light spine stress"
        assert data.signatures is None

    def test_key_comments_become_facts(self) -> None:
        """Multi-line key comments split into discrete facts."""
        data = parse_cgc_page(CGC_PAGE, "1234567001").data

        assert data is not None
        assert data.key_facts == ["1st full appearance of Venom", "Todd McFarlane cover"]

    def test_label_match_is_exact(self) -> None:
        """The Grade label never reads the Grader Notes or Grade Date values."""
        page = """<table>
        <tr><td>Grader Notes</td><td>corner crease<br>spine roll</td></tr>
        <tr><td>Grade Date</td><td>2021-03-04</td></tr>
        <tr><td>Grade</td><td>8.5</td></tr>
        <tr><td>Signatures</td><td>Stan Lee<br>John Romita</td></tr>
        </table>"""

        data = parse_cgc_page(page, "1234567001").data

        assert data is not None
        assert data.grade == "8.5"
        assert data.grade_date == "2021-03-04"
        assert data.grader_notes == "corner crease\nspine roll"
        assert data.signatures == "Stan Lee\nJohn Romita"

    def test_not_found_page(self) -> None:
        """A not-found page is a failed result."""
        result = parse_cgc_page("<p>Certification not found</p>", "1234567001")

        assert result.success is False
        assert result.data is None
        assert result.error == "Certification number not found"

    def test_unparseable_page(self) -> None:
        """No title and no grade is a failure."""
        result = parse_cgc_page("<html><body><p>Maintenance</p></body></html>", "1234567001")
        assert result.success is False


class TestParseOtherCompanies:
    def test_cbcs_page(self) -> None:
        """CBCS heading, publisher/date line, grade and notes are read."""
        result = parse_cbcs_page(CBCS_PAGE, "20-1F9AC96-004")

        assert result.success is True
        data = result.data
        assert data is not None
        assert data.title == "Incredible Hulk"
        assert data.issue_number == "181"
        assert data.publisher == "Marvel"
        assert data.release_year == "1974"
        assert data.grade == "9.6"
        assert data.page_quality == "White"
        assert data.grader_notes == "minor corner wear"
        assert data.label_type is None

    def test_cbcs_no_record(self) -> None:
        """CBCS 'no record' pages fail."""
        assert parse_cbcs_page("<p>There is no record for this cert</p>", "x").success is False

    def test_pgx_page(self) -> None:
        """PGX publishes title, grade and year only."""
        result = parse_pgx_page(PGX_PAGE, "123456")

        assert result.success is True
        data = result.data
        assert data is not None
        assert data.title == "Spawn"
        assert data.issue_number == "1"
        assert data.grade == "9.8"
        assert data.release_year == "1992"


class TestHelpers:
    @pytest.mark.parametrize(
        "cert,company",
        [
            ("20-1F9AC96-004", GradingCompany.CBCS),
            ("1234567001", GradingCompany.CGC),
            ("12345 67890", GradingCompany.CGC),
            ("3802468", GradingCompany.CGC),
            ("123456", GradingCompany.PGX),
            ("12", None),
        ],
    )
    def test_detect_grading_company(self, cert, company) -> None:
        """Cert number formats map to their grading company."""
        assert detect_grading_company(cert) == company

    def test_split_key_comments(self) -> None:
        """Sentences and lines become facts without trailing periods."""
        text = "1st appearance of Venom. Todd McFarlane cover.\nSigned"
        assert split_key_comments(text) == ["1st appearance of Venom", "Todd McFarlane cover", "Signed"]
        assert split_key_comments(None) == []
        assert split_key_comments("   ") == []


class TestCertificationClient:
    @pytest.mark.asyncio
    async def test_lookup_fetches_parses_and_caches(self, cache) -> None:
        """A successful lookup is cached; the second call makes no request."""
        with respx.mock:
            route = respx.get(CGC_URL).mock(return_value=httpx.Response(200, text=CGC_PAGE))

            async with CertificationClient(cache) as client:
                first = await client.lookup("cgc", "1234567001")
                await cache.wait_pending()
                second = await client.lookup("CGC", "1234567001")

        assert first.success is True
        assert second.success is True
        assert second.data == first.data
        assert route.call_count == 1
        assert await cache.get(CacheNamespace.CERT, "cgc-1234567001") is not None

    @pytest.mark.asyncio
    async def test_cbcs_keeps_letters_and_dashes(self, cache) -> None:
        """CBCS certs are looked up verbatim and keyed without dashes."""
        with respx.mock:
            route = respx.get(CBCS_URL).mock(return_value=httpx.Response(200, text=CBCS_PAGE))

            async with CertificationClient(cache) as client:
                result = await client.lookup("CBCS", "20-1F9AC96-004")
                await cache.wait_pending()

        assert route.call_count == 1
        assert result.cert_number == "20-1F9AC96-004"
        assert await cache.get(CacheNamespace.CERT, "cbcs-201F9AC96004") is not None

    @pytest.mark.asyncio
    async def test_http_error_is_not_cached(self, cache) -> None:
        """Non-200 responses fail and leave the cache empty."""
        with respx.mock:
            respx.get(CGC_URL).mock(return_value=httpx.Response(404))

            async with CertificationClient(cache) as client:
                result = await client.lookup("CGC", "1234567001")
                await cache.wait_pending()

        assert result.success is False
        assert result.error == "CGC lookup failed: 404"
        assert await cache.get(CacheNamespace.CERT, "cgc-1234567001") is None

    @pytest.mark.asyncio
    async def test_short_cert_fails_without_request(self) -> None:
        """Too-short cert numbers are rejected before any request."""
        with respx.mock:
            async with CertificationClient() as client:
                result = await client.lookup("CGC", "123")

        assert result.success is False
        assert result.error == "Invalid CGC certification number"

    @pytest.mark.asyncio
    async def test_unsupported_company(self) -> None:
        """Unknown graders fail without a request."""
        async with CertificationClient() as client:
            result = await client.lookup("Other", "1234567001")

        assert result.success is False
        assert "Unsupported grading company" in (result.error or "")

    @pytest.mark.asyncio
    async def test_failed_cached_entry_is_ignored(self, cache) -> None:
        """A cached failure does not short-circuit a fresh lookup."""
        await cache.set(
            CacheNamespace.CERT,
            "cgc-1234567001",
            {"success": False, "source": "cgc", "cert_number": "1234567001", "error": "boom"},
        )
        with respx.mock:
            route = respx.get(CGC_URL).mock(return_value=httpx.Response(200, text=CGC_PAGE))

            async with CertificationClient(cache) as client:
                result = await client.lookup("CGC", "1234567001")

        assert result.success is True
        assert route.call_count == 1
