"""
Comic Valuation — Command-Line Entrypoint

Resolves metadata and a price record for one comic and prints both as JSON.
Logs go to stderr so stdout stays machine-readable.

Run via:
    python -m comicvalue.main "Amazing Spider-Man" 300 --grade 9.8 --slabbed --company CGC
    python -m comicvalue.main --cover ./asm300.jpg
"""

from __future__ import annotations

import argparse
import asyncio
import base64
import json
import logging
import mimetypes
import sys
from pathlib import Path
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from comicvalue.config import settings
from comicvalue.pipeline.certification import CertificationClient
from comicvalue.pipeline.ebay import eBayClient
from comicvalue.pipeline.estimator import PriceEstimator
from comicvalue.pricing import ComicDetails, PriceRequest
from comicvalue.pricing.metadata import MetadataResolver
from comicvalue.pricing.resolver import PriceResolver
from comicvalue.utils.cache import CacheStore


# ---------------------------------------------------------------------------
# Structlog Configuration
# ---------------------------------------------------------------------------


def _configure_logging(log_level: str = "INFO") -> None:
    """
    Set up structured logging with JSON output on stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """
    # Configure stdlib logging first (for third-party libraries)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Database Setup
# ---------------------------------------------------------------------------


async def create_db_engine() -> tuple[Any, async_sessionmaker[AsyncSession]]:
    """
    Create SQLAlchemy async engine and session factory for the cache store.

    The DATABASE_URL is read from settings (env variable DATABASE_URL).

    Returns:
        (engine, session_factory) tuple.
    """
    logger = structlog.get_logger(__name__)

    engine = create_async_engine(
        settings.DATABASE_URL,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    logger.info("database_engine_ready")
    return engine, session_factory


# ---------------------------------------------------------------------------
# Valuation
# ---------------------------------------------------------------------------


async def value_comic(
    details: ComicDetails | None,
    cache: CacheStore,
    grade: float | None = None,
    cover_path: Path | None = None,
    estimator: PriceEstimator | None = None,
) -> dict[str, Any]:
    """
    Identify and price one comic.

    Metadata and price are resolved concurrently when the title is already
    known; a cover photo is read first since the price depends on it.

    Returns:
        {"comic": ..., "price": ...} in the boundary JSON shape.
    """
    logger = structlog.get_logger(__name__)
    estimator = estimator or PriceEstimator()

    async with eBayClient() as ebay, CertificationClient(cache) as certs:
        metadata = MetadataResolver(cache, certs, estimator)
        prices = PriceResolver(cache, ebay, estimator)

        if cover_path is not None:
            media_type = mimetypes.guess_type(cover_path.name)[0] or "image/jpeg"
            image = base64.standard_b64encode(cover_path.read_bytes()).decode("utf-8")
            details = await metadata.analyze_cover(image, media_type)
            if details is None or not details.title:
                logger.warning("cover_not_identified", path=str(cover_path))
                await cache.wait_pending()
                return {"comic": None, "price": None}

        if details is None:
            return {"comic": None, "price": None}

        request = PriceRequest(
            title=details.title or "",
            issue_number=details.issue_number or "",
            grade=grade if grade is not None else _label_grade(details),
            is_encapsulated=details.is_slabbed,
            grading_company=details.grading_company,
        )

        if cover_path is not None:
            record = await prices.resolve(request, details)
        else:
            details, record = await asyncio.gather(
                metadata.resolve(details),
                prices.resolve(request, details),
            )

    await cache.wait_pending()
    return {
        "comic": details.model_dump(by_alias=True, mode="json", exclude={"price_data"}),
        "price": record.to_payload(),
    }


def _label_grade(details: ComicDetails) -> float | None:
    if not details.grade:
        return None
    try:
        return float(details.grade)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# CLI Entry
# ---------------------------------------------------------------------------


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Estimate the market value of a comic book.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m comicvalue.main "Amazing Spider-Man" 300
  python -m comicvalue.main "Incredible Hulk" 181 --grade 9.4 --slabbed --company CGC --cert 1234567001
  python -m comicvalue.main --cover ./asm300.jpg
""",
    )
    parser.add_argument("title", nargs="?", help="Series title, e.g. 'Amazing Spider-Man'.")
    parser.add_argument("issue", nargs="?", default="", help="Issue number, e.g. 300.")
    parser.add_argument("--grade", type=float, default=None, help="Condition grade on the 0.5-10.0 scale.")
    parser.add_argument("--slabbed", action="store_true", help="Comic is professionally graded and encapsulated.")
    parser.add_argument("--company", type=str, default=None, help="Grading company: CGC | CBCS | PGX.")
    parser.add_argument("--cert", type=str, default=None, help="Certification number on the slab label.")
    parser.add_argument("--cover", type=Path, default=None, help="Identify the comic from a cover photo instead.")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Log level (default: WARNING).")

    args = parser.parse_args(argv)
    if args.cover is None and not args.title:
        parser.error("a title (or --cover) is required")
    return args


async def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    _configure_logging(log_level=args.log_level)
    logger = structlog.get_logger(__name__)

    engine = None
    session_factory = None
    if settings.DATABASE_URL:
        engine, session_factory = await create_db_engine()
    else:
        logger.warning("config_database_url_missing", note="cache disabled")

    details = None
    if args.cover is None:
        details = ComicDetails(
            title=args.title,
            issue_number=args.issue or None,
            is_slabbed=args.slabbed or bool(args.cert),
            grading_company=args.company.upper() if args.company else None,
            grade=f"{args.grade:g}" if args.grade is not None else None,
            cert_number=args.cert,
        )

    try:
        result = await value_comic(
            details,
            CacheStore(session_factory),
            grade=args.grade,
            cover_path=args.cover,
        )
    finally:
        if engine is not None:
            await engine.dispose()

    print(json.dumps(result, indent=2))


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
