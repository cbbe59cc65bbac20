"""
Comic Valuation — Metadata Resolution

Completes a comic's identification, independent of pricing:

1. Curated key facts      exact title + issue match, free
2. Certification lookup   slabbed comics with a cert number only
3. Generative completion  one batched call for every field still missing

Precedence on conflict: certification > curated > generative > the
original cover read. Generative answers only ever fill gaps.

analyze_cover() wraps the whole flow for a cover photo, cached by image
content hash under "aiAnalyze".
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from comicvalue.config import CacheNamespace, GradingCompany
from comicvalue.pipeline.certification import CertificationClient, detect_grading_company
from comicvalue.pipeline.estimator import PriceEstimator
from comicvalue.pipeline.key_comics import lookup_key_info
from comicvalue.pricing import ComicDetails
from comicvalue.utils.cache import CacheStore
from comicvalue.utils.fingerprint import image_fingerprint, metadata_fingerprint

logger = structlog.get_logger(__name__)

# JSON field name → ComicDetails attribute, for fields the generative tier fills
COMPLETION_FIELDS: dict[str, str] = {
    "publisher": "publisher",
    "releaseYear": "release_year",
    "variant": "variant",
    "writer": "writer",
    "coverArtist": "cover_artist",
    "interiorArtist": "interior_artist",
    "keyInfo": "key_info",
}


def missing_fields(details: ComicDetails) -> list[str]:
    """JSON names of completable fields that are still empty."""
    return [name for name, attr in COMPLETION_FIELDS.items() if not getattr(details, attr)]


class MetadataResolver:
    """
    Runs the metadata waterfall.

    `certification` must be an open CertificationClient (or None to skip
    that tier).

    Usage:
        async with CertificationClient(cache) as certs:
            resolver = MetadataResolver(cache, certs, PriceEstimator())
            details = await resolver.resolve(details)
    """

    def __init__(
        self,
        cache: CacheStore,
        certification: CertificationClient | None,
        estimator: PriceEstimator | None,
    ) -> None:
        self.cache = cache
        self.certification = certification
        self.estimator = estimator

    async def resolve(self, details: ComicDetails) -> ComicDetails:
        """Return a completed copy of `details`. Never raises."""
        if not details.title:
            return details

        resolved = self._apply_key_facts(details)
        resolved = await self._apply_certification(resolved)
        resolved = await self._apply_completion(resolved)

        logger.info(
            "metadata_resolved",
            title=resolved.title,
            issue_number=resolved.issue_number,
            key_fact_count=len(resolved.key_info),
            still_missing=missing_fields(resolved),
            source="metadata",
        )
        return resolved

    def _apply_key_facts(self, details: ComicDetails) -> ComicDetails:
        if not details.issue_number:
            return details
        facts = lookup_key_info(details.title or "", details.issue_number)
        if facts is None:
            return details
        logger.info(
            "metadata_curated_key_facts",
            title=details.title,
            issue_number=details.issue_number,
            fact_count=len(facts),
            source="metadata",
        )
        return details.model_copy(update={"key_info": facts})

    async def _apply_certification(self, details: ComicDetails) -> ComicDetails:
        if self.certification is None or not details.is_slabbed or not details.cert_number:
            return details

        company = details.grading_company
        if not company or company == GradingCompany.OTHER.value:
            detected = detect_grading_company(details.cert_number)
            if detected is None:
                logger.info(
                    "metadata_cert_company_unknown",
                    cert_number=details.cert_number,
                    source="metadata",
                )
                return details
            company = detected.value

        try:
            result = await self.certification.lookup(company, details.cert_number)
        except Exception as e:
            logger.error(
                "metadata_cert_lookup_failed",
                cert_number=details.cert_number,
                error=str(e),
                source="metadata",
            )
            return details

        if not result.success or result.data is None:
            return details

        cert = result.data
        overrides: dict[str, Any] = {
            "title": cert.title,
            "issue_number": cert.issue_number,
            "publisher": cert.publisher,
            "release_year": cert.release_year,
            "grade": cert.grade,
            "variant": cert.variant,
            "label_type": cert.label_type,
            "page_quality": cert.page_quality,
            "grade_date": cert.grade_date,
            "grader_notes": cert.grader_notes,
            "signed_by": cert.signatures,
        }
        update = {field: value for field, value in overrides.items() if value}
        update["grading_company"] = company
        if cert.key_facts:
            update["key_info"] = cert.key_facts
        if cert.signatures or (cert.label_type and "signature" in cert.label_type.lower()):
            update["is_signature_series"] = True

        logger.info(
            "metadata_cert_applied",
            company=company,
            cert_number=result.cert_number,
            fields=sorted(update),
            source="metadata",
        )
        return details.model_copy(update=update)

    async def _apply_completion(self, details: ComicDetails) -> ComicDetails:
        wanted = missing_fields(details)
        if not wanted or not details.issue_number:
            return details

        key = metadata_fingerprint(details.title or "", details.issue_number)
        completion = await self._cached_completion(key)

        if completion is None:
            if self.estimator is None:
                return details
            completion = await self.estimator.complete_metadata(details, wanted)
            if completion is None:
                return details
            self.cache.set_in_background(
                CacheNamespace.COMIC_METADATA,
                key,
                completion.model_dump(by_alias=True, mode="json", exclude_defaults=True),
            )

        # Fill gaps only
        update = {
            COMPLETION_FIELDS[name]: getattr(completion, COMPLETION_FIELDS[name])
            for name in wanted
            if getattr(completion, COMPLETION_FIELDS[name])
        }
        if not update:
            return details
        return details.model_copy(update=update)

    async def _cached_completion(self, key: str) -> ComicDetails | None:
        cached = await self.cache.get(CacheNamespace.COMIC_METADATA, key)
        if cached is None:
            return None
        try:
            return ComicDetails.model_validate(cached)
        except ValidationError as e:
            logger.warning("metadata_cache_invalid", key=key, error=str(e), source="metadata")
            return None

    async def analyze_cover(
        self,
        image_base64: str,
        media_type: str = "image/jpeg",
    ) -> ComicDetails | None:
        """
        Identify and complete a comic from a cover photo.

        Identical images are served from the aiAnalyze cache. Returns None
        when the cover cannot be read.
        """
        key = image_fingerprint(image_base64)

        cached = await self.cache.get(CacheNamespace.AI_ANALYZE, key)
        if cached is not None:
            try:
                details = ComicDetails.model_validate(cached)
            except ValidationError as e:
                logger.warning("cover_cache_invalid", key=key, error=str(e), source="metadata")
            else:
                logger.info("cover_cache_hit", key=key, title=details.title, source="metadata")
                return details

        if self.estimator is None:
            return None

        details = await self.estimator.read_cover(image_base64, media_type)
        if details is None:
            return None

        details = await self.resolve(details)
        self.cache.set_in_background(
            CacheNamespace.AI_ANALYZE,
            key,
            details.model_dump(by_alias=True, mode="json", exclude={"price_data"}),
        )
        return details
