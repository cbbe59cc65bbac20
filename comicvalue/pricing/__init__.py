"""Comic Valuation — Price records and comic details shared across the engine.

All models serialise with camelCase keys; that JSON shape is what the cache
stores and what presentation code consumes.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from comicvalue.config import PriceSource

_TWO_DP = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(_TWO_DP, rounding=ROUND_HALF_UP)


# Decimal in Python, a plain number on the wire
Money = Annotated[
    Decimal,
    AfterValidator(quantize_money),
    PlainSerializer(float, return_type=float, when_used="json"),
]

# Sold prices are kept exact; only derived values are rounded
SalePrice = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SaleEvent(_CamelModel):
    """One sold listing. The age flag is derived; aggregation recomputes it."""
    model_config = ConfigDict(frozen=True)

    price: SalePrice
    date: str
    source: str = "eBay"
    is_older_than_6_months: bool = Field(default=False, alias="isOlderThan6Months")


class GradePoint(_CamelModel):
    """Known value of a comic at one grade, raw and slabbed."""
    model_config = ConfigDict(frozen=True)

    grade: float
    label: str = ""
    raw_value: Money = Decimal("0")
    slabbed_value: Money = Decimal("0")


class PriceRecord(_CamelModel):
    """
    Canonical price for a comic, built fresh per resolution and never mutated.

    estimated_value is None only when there are no sales and no grade
    estimates. Grade-specific values are derived on read (engine.grade_price).
    """
    model_config = ConfigDict(frozen=True)

    estimated_value: Money | None = None
    recent_sales: list[SaleEvent] = Field(default_factory=list)
    most_recent_sale_date: str | None = None
    is_averaged: bool = False
    disclaimer: str | None = None
    grade_estimates: list[GradePoint] | None = None
    base_grade: float | None = None
    price_source: PriceSource | None = None

    @classmethod
    def empty(cls) -> "PriceRecord":
        """The valid "no price available" outcome."""
        return cls()

    def to_payload(self) -> dict[str, Any]:
        """Boundary shape consumed by display and aggregation code."""
        return self.model_dump(by_alias=True, mode="json")


class PriceRequest(_CamelModel):
    """Inputs to one price resolution."""
    model_config = ConfigDict(frozen=True)

    title: str
    issue_number: str = ""
    grade: float | None = None
    is_encapsulated: bool = False
    grading_company: str | None = None


class ComicDetails(_CamelModel):
    """Identification of a single comic, as read from a cover and enriched by lookups."""
    # Model output sends years and grades as numbers as often as strings
    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str | None = None
    issue_number: str | None = None
    variant: str | None = None
    publisher: str | None = None
    cover_artist: str | None = None
    writer: str | None = None
    interior_artist: str | None = None
    release_year: str | None = None
    confidence: str = "low"

    # Grading (detected from slabbed comics or a certification lookup)
    is_slabbed: bool = False
    grading_company: str | None = None
    grade: str | None = None
    cert_number: str | None = None
    is_signature_series: bool = False
    signed_by: str | None = None
    label_type: str | None = None
    page_quality: str | None = None
    grade_date: str | None = None
    grader_notes: str | None = None

    key_info: list[str] = Field(default_factory=list)
    price_data: PriceRecord | None = None


class CollectionItem(_CamelModel):
    """A comic in a user's collection, with the owner's condition assessment."""

    id: str
    comic: ComicDetails
    condition_grade: float | None = None
    is_graded: bool = False
    grading_company: str | None = None
    purchase_price: Money | None = None
    purchase_date: str | None = None
