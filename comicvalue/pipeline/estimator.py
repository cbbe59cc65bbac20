"""
Comic Valuation — Generative Estimator (Anthropic Messages API)

Three calls, each returning structured JSON:
- estimate_prices: synthetic recent sales + per-grade estimates, used when
  the marketplace has nothing
- complete_metadata: one batched request for every field still missing
- read_cover: vision read of a cover photo

Every response is validated with pydantic before use. Bad JSON, a failed
validation or an API error all come back as None; nothing raises.
"""

from __future__ import annotations

import json
import re
from typing import Any

import anthropic
import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from comicvalue.config import settings
from comicvalue.pricing import ComicDetails, GradePoint, PriceRequest, SaleEvent

logger = structlog.get_logger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")

# Fields the metadata completion call may fill, by their JSON name
COMPLETABLE_FIELDS: dict[str, str] = {
    "publisher": "the full official publisher name (e.g. 'Marvel Comics')",
    "releaseYear": "the 4-digit year this issue was published",
    "variant": "the variant name if this is a variant cover, or null for a standard cover",
    "writer": "the writer(s) of this issue",
    "coverArtist": "the cover artist for this issue",
    "interiorArtist": "the interior/pencil artist for this issue",
    "keyInfo": (
        "array of key facts: first appearances (cameo vs full), deaths, origins, "
        "team changes, costume debuts, storyline beginnings"
    ),
}


class AiPriceEstimate(BaseModel):
    """Shape the price prompt asks for. Non-positive prices are dropped."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recent_sales: list[SaleEvent] = Field(default_factory=list)
    grade_estimates: list[GradePoint] = Field(default_factory=list)
    market_notes: str | None = None

    def usable_sales(self) -> list[SaleEvent]:
        return [sale for sale in self.recent_sales if sale.price > 0]


def strip_code_fences(text: str) -> str:
    """Remove a ```json ... ``` wrapper the model sometimes adds."""
    return _CODE_FENCE.sub("", text.strip()).strip()


def _condition_line(request: PriceRequest, details: ComicDetails | None) -> str:
    parts = [f"Grade: {request.grade:g}" if request.grade else "Raw/Ungraded"]
    if request.is_encapsulated:
        parts.append(f"Graded by {request.grading_company or 'CGC'}")
    if details is not None and details.is_signature_series:
        parts.append(f"Signature Series signed by {details.signed_by or 'unknown'}")
    return " ".join(parts)


def build_price_prompt(request: PriceRequest, details: ComicDetails | None = None) -> str:
    publisher = details.publisher if details and details.publisher else "Unknown"
    year = details.release_year if details and details.release_year else "Unknown"
    return f"""You are a comic book market expert with knowledge of recent comic book sales and values.

I need estimated recent sale prices for this comic:
- Title: {request.title}
- Issue Number: {request.issue_number or "Unknown"}
- Publisher: {publisher}
- Year: {year}
- Condition: {_condition_line(request, details)}

Return a JSON object with estimated recent sales data AND grade-specific price estimates:
{{
  "recentSales": [
    {{ "price": number, "date": "YYYY-MM-DD", "source": "eBay" }}
  ],
  "gradeEstimates": [
    {{ "grade": 9.8, "label": "Near Mint/Mint", "rawValue": number, "slabbedValue": number }},
    {{ "grade": 9.4, "label": "Near Mint", "rawValue": number, "slabbedValue": number }},
    {{ "grade": 8.0, "label": "Very Fine", "rawValue": number, "slabbedValue": number }},
    {{ "grade": 6.0, "label": "Fine", "rawValue": number, "slabbedValue": number }},
    {{ "grade": 4.0, "label": "Very Good", "rawValue": number, "slabbedValue": number }},
    {{ "grade": 2.0, "label": "Good", "rawValue": number, "slabbedValue": number }}
  ],
  "marketNotes": "brief note about this comic's market value"
}}

Important:
- Return ONLY the JSON object, no other text
- Provide 3 realistic sale prices at the given grade (or 9.4 NM for raw), dated within the last 6 months
- Raw copies typically sell for 70-90% of the equivalent slabbed value
- For key issues 9.8 can be 2-10x the 9.4 price; for regular issues about 1.5-2x"""


def build_metadata_prompt(details: ComicDetails, missing_fields: list[str]) -> str:
    wanted = ",\n".join(
        f'  "{name}": "{COMPLETABLE_FIELDS[name]}"' for name in missing_fields
    )
    return f"""You are a comic book expert with extensive knowledge of comic book history and creators.

Complete the missing information for this comic:
- Title: {details.title}
- Issue Number: {details.issue_number}
- Publisher: {details.publisher or "Unknown"}
- Year: {details.release_year or "Unknown"}

Return a JSON object with exactly these fields:
{{
{wanted}
}}

Important:
- Return ONLY the JSON object, no other text
- Use null for any field you are not confident about
- Be specific: actual names and concrete facts, not generic responses"""


COVER_PROMPT = """You are an expert comic book identifier and grading specialist. Analyze this comic book cover image.

Return a JSON object with this exact structure:
{
  "title": "series title or null",
  "issueNumber": "issue number as string or null",
  "variant": "variant name if a variant cover, otherwise null",
  "publisher": "full publisher name or null",
  "coverArtist": "cover artist if visible, otherwise null",
  "writer": "writer if visible, otherwise null",
  "interiorArtist": "interior artist if visible, otherwise null",
  "releaseYear": "4-digit year as string or null",
  "confidence": "high", "medium" or "low",
  "isSlabbed": true or false,
  "gradingCompany": "CGC", "CBCS", "PGX", "Other" or null,
  "grade": "numeric grade as a string (e.g. '9.8') or null",
  "certNumber": "certification number from the label or null",
  "isSignatureSeries": true or false,
  "signedBy": "name of the signer or null"
}

Return ONLY the JSON object, no other text. Use null for anything you cannot determine."""


class PriceEstimator:
    """
    Anthropic-backed estimator.

    Usage:
        estimator = PriceEstimator()
        estimate = await estimator.estimate_prices(request)
    """

    def __init__(self, client: anthropic.AsyncAnthropic | None = None) -> None:
        if client is None and settings.ANTHROPIC_API_KEY:
            client = anthropic.AsyncAnthropic(api_key=settings.ANTHROPIC_API_KEY)
        self._client = client

    def is_available(self) -> bool:
        return self._client is not None

    async def _request_json(
        self,
        content: str | list[dict[str, Any]],
        event: str,
    ) -> dict[str, Any] | None:
        """Send one user message and decode the JSON object in the reply."""
        if self._client is None:
            logger.warning(f"{event}_no_api_key", source="estimator")
            return None

        try:
            response = await self._client.messages.create(
                model=settings.ANTHROPIC_MODEL_ID,
                max_tokens=settings.ESTIMATOR_MAX_TOKENS,
                messages=[{"role": "user", "content": content}],
            )
        except Exception as e:
            logger.error(f"{event}_failed", error=str(e), source="estimator")
            return None

        try:
            text = next(block.text for block in response.content if block.type == "text")
            data = json.loads(strip_code_fences(text))
        except (json.JSONDecodeError, StopIteration, AttributeError, TypeError) as parse_err:
            logger.warning(f"{event}_parse_error", error=str(parse_err), source="estimator")
            return None

        if not isinstance(data, dict):
            logger.warning(f"{event}_parse_error", error="response is not a JSON object", source="estimator")
            return None
        return data

    async def estimate_prices(
        self,
        request: PriceRequest,
        details: ComicDetails | None = None,
    ) -> AiPriceEstimate | None:
        """
        Synthetic recent sales and grade estimates for a comic.

        Returns None when the call fails, the reply does not validate, or it
        carries neither a usable sale nor a grade estimate.
        """
        data = await self._request_json(build_price_prompt(request, details), "ai_price_estimate")
        if data is None:
            return None

        try:
            estimate = AiPriceEstimate.model_validate(data)
        except ValidationError as e:
            logger.warning(
                "ai_price_estimate_invalid",
                title=request.title,
                issue_number=request.issue_number,
                error=str(e),
                source="estimator",
            )
            return None

        if not estimate.usable_sales() and not estimate.grade_estimates:
            logger.info(
                "ai_price_estimate_empty",
                title=request.title,
                issue_number=request.issue_number,
                source="estimator",
            )
            return None

        logger.info(
            "ai_price_estimate_complete",
            title=request.title,
            issue_number=request.issue_number,
            sale_count=len(estimate.usable_sales()),
            grade_point_count=len(estimate.grade_estimates),
            source="estimator",
        )
        return estimate

    async def complete_metadata(
        self,
        details: ComicDetails,
        missing_fields: list[str],
    ) -> ComicDetails | None:
        """
        Fill every missing field in a single call.

        Only fields named in missing_fields are taken from the reply.
        """
        wanted = [name for name in missing_fields if name in COMPLETABLE_FIELDS]
        if not wanted or not details.title:
            return None

        data = await self._request_json(build_metadata_prompt(details, wanted), "ai_metadata_completion")
        if data is None:
            return None

        # Drop nulls and anything not asked for
        filtered = {name: data[name] for name in wanted if data.get(name) not in (None, "", [])}
        try:
            completion = ComicDetails.model_validate(filtered)
        except ValidationError as e:
            logger.warning("ai_metadata_completion_invalid", error=str(e), source="estimator")
            return None

        logger.info(
            "ai_metadata_completion_complete",
            title=details.title,
            requested=wanted,
            filled=sorted(filtered),
            source="estimator",
        )
        return completion

    async def read_cover(self, image_base64: str, media_type: str = "image/jpeg") -> ComicDetails | None:
        """Identify a comic from a cover photo (base64, with or without a data-URL prefix)."""
        payload = re.sub(r"^data:image/[\w.+-]+;base64,", "", image_base64.strip())
        if not payload or len(payload) > settings.COVER_IMAGE_MAX_BASE64_CHARS:
            logger.warning("cover_read_rejected_image", size=len(payload), source="estimator")
            return None

        data = await self._request_json(
            [
                {
                    "type": "image",
                    "source": {"type": "base64", "media_type": media_type, "data": payload},
                },
                {"type": "text", "text": COVER_PROMPT},
            ],
            "cover_read",
        )
        if data is None:
            return None

        try:
            details = ComicDetails.model_validate({k: v for k, v in data.items() if v is not None})
        except ValidationError as e:
            logger.warning("cover_read_invalid", error=str(e), source="estimator")
            return None

        logger.info(
            "cover_read_complete",
            title=details.title,
            issue_number=details.issue_number,
            confidence=details.confidence,
            is_slabbed=details.is_slabbed,
            source="estimator",
        )
        return details
