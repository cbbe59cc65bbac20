"""
Comic Valuation — Configuration & Constants

Every threshold, TTL, endpoint and magic number lives here. No hardcoded
values in valuation logic.

Usage:
    from comicvalue.config import settings
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic_settings import BaseSettings


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PriceSource(str, Enum):
    """
    Adapter that ultimately produced a PriceRecord's value.

    The resolver only ever emits EBAY or AI. DATABASE is reserved for records
    a caller loads from its own store and hands back to the engine.
    """
    DATABASE = "database"
    EBAY = "ebay"
    AI = "ai"


class CacheNamespace(str, Enum):
    """Cache namespaces. Each carries its own TTL (see Settings.CACHE_TTL_SECONDS)."""
    AI_ANALYZE = "aiAnalyze"          # keyed by image content hash
    EBAY_PRICE = "ebayPrice"          # keyed by price fingerprint
    COMIC_METADATA = "comicMetadata"  # keyed by title|issue
    CERT = "cert"                     # keyed by company-certnumber


class GradingCompany(str, Enum):
    CGC = "CGC"
    CBCS = "CBCS"
    PGX = "PGX"
    OTHER = "Other"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Central configuration for the valuation engine.

    Loads from environment variables with fallback defaults.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # -----------------------------------------------------------------------
    # API Keys
    # -----------------------------------------------------------------------
    ANTHROPIC_API_KEY: str = ""
    ANTHROPIC_MODEL_ID: str = "claude-sonnet-4-20250514"

    # eBay (OAuth client credentials; Marketplace Insights + Browse fallback)
    EBAY_APP_ID: str = ""                   # eBay Developer App ID (Client ID)
    EBAY_CERT_ID: str = ""                  # eBay Developer Cert ID (Client Secret)
    EBAY_OAUTH_URL: str = "https://api.ebay.com/identity/v1/oauth2/token"
    EBAY_OAUTH_SCOPE: str = "https://api.ebay.com/oauth/api_scope"
    EBAY_API_URL: str = "https://api.ebay.com"
    EBAY_MARKETPLACE_ID: str = "EBAY_US"
    EBAY_COMIC_CATEGORY_ID: str = "259104"  # Collectible Comics
    EBAY_SEARCH_LIMIT: int = 50

    # Certification verification pages
    CGC_CERT_URL: str = "https://www.cgccomics.com/certlookup"
    CBCS_CERT_URL: str = "https://cbcscomics.com/grading-notes"
    PGX_CERT_URL: str = "https://www.pgxcomics.com/cert/verify"
    CERT_USER_AGENT: str = "Mozilla/5.0 (compatible; ComicValue/1.0)"

    HTTP_TIMEOUT_SECONDS: float = 15.0

    # -----------------------------------------------------------------------
    # Database (cache store backend)
    # -----------------------------------------------------------------------
    DATABASE_URL: str = ""

    # -----------------------------------------------------------------------
    # Cache TTLs per namespace
    # -----------------------------------------------------------------------
    CACHE_TTL_SECONDS: dict[str, int] = {
        CacheNamespace.AI_ANALYZE.value: 60 * 60 * 24 * 30,      # 30 days
        CacheNamespace.EBAY_PRICE.value: 60 * 60 * 24,           # 24 hours
        CacheNamespace.COMIC_METADATA.value: 60 * 60 * 24 * 7,   # 7 days
        CacheNamespace.CERT.value: 60 * 60 * 24 * 365,           # certificates are permanent
    }

    # -----------------------------------------------------------------------
    # Sales aggregation
    # -----------------------------------------------------------------------
    RECENT_SALE_WINDOW_DAYS: int = 180
    RECENT_SALES_AVERAGE_COUNT: int = 3
    MAX_SALES_KEPT: int = 10

    # Marketplace outlier band relative to the median sale
    OUTLIER_HIGH_MULTIPLE: Decimal = Decimal("3")
    OUTLIER_LOW_MULTIPLE: Decimal = Decimal("0.2")

    DISCLAIMER_AVERAGE_OF_WINDOW: str = (
        "Value is the average of the {count} most recent sales within the last 6 months."
    )
    DISCLAIMER_AVERAGE_OF_FEW: str = (
        "Value is the average of {count} sales within the last 6 months."
    )
    DISCLAIMER_SINGLE_RECENT: str = (
        "Value based on the most recent sale within the last 6 months."
    )
    DISCLAIMER_STALE: str = (
        "Value based on most recent sale (older than 6 months - recent data unavailable)."
    )
    DISCLAIMER_GRADE_CURVE: str = (
        "AI-estimated values based on market knowledge. Actual prices may vary."
    )

    # -----------------------------------------------------------------------
    # Grade curve
    # Multipliers relative to the base grade (9.4 NM). Used to fan a single
    # marketplace price out across the grade scale.
    # -----------------------------------------------------------------------
    DEFAULT_BASE_GRADE: float = 9.4
    GRADE_MULTIPLIERS: list[tuple[float, str, Decimal, Decimal]] = [
        (9.8, "Near Mint/Mint", Decimal("2.5"), Decimal("3.0")),
        (9.6, "Near Mint+", Decimal("1.5"), Decimal("1.8")),
        (9.4, "Near Mint", Decimal("1.0"), Decimal("1.2")),
        (9.2, "Near Mint-", Decimal("0.85"), Decimal("1.0")),
        (8.0, "Very Fine", Decimal("0.6"), Decimal("0.75")),
        (6.0, "Fine", Decimal("0.4"), Decimal("0.5")),
        (4.0, "Very Good", Decimal("0.25"), Decimal("0.3")),
        (2.0, "Good", Decimal("0.15"), Decimal("0.2")),
    ]

    # -----------------------------------------------------------------------
    # Generative estimator
    # -----------------------------------------------------------------------
    ESTIMATOR_MAX_TOKENS: int = 1024
    COVER_IMAGE_MAX_BASE64_CHARS: int = 20 * 1024 * 1024


# Singleton instance
settings = Settings()
