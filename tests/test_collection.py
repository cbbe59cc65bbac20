"""Tests for the valuation façade and collection aggregator."""

from __future__ import annotations

from decimal import Decimal

from comicvalue.config import PriceSource
from comicvalue.engine.collection import (
    calculate_collection_totals,
    calculate_decade_stats,
    calculate_financial_stats,
    calculate_grading_stats,
    calculate_key_comic_stats,
    calculate_publisher_stats,
    get_top_publishers,
)
from comicvalue.engine.valuation import get_comic_value, item_grade
from comicvalue.pricing import CollectionItem, ComicDetails, PriceRecord


class TestGetComicValue:
    def test_no_price_record_is_zero(self, make_item) -> None:
        """Items without a price record are worth 0, never None."""
        assert get_comic_value(make_item(None)) == Decimal("0")

    def test_no_grade_uses_base_value(self, make_item) -> None:
        """Without a grade the record's base value is used."""
        assert get_comic_value(make_item(75)) == Decimal("75.00")

    def test_null_estimated_value_is_zero(self) -> None:
        """A record with no value at all is 0."""
        item = CollectionItem(id="x", comic=ComicDetails(title="T", price_data=PriceRecord.empty()))
        assert get_comic_value(item) == Decimal("0")

    def test_caller_stored_record_is_valued(self) -> None:
        """A record a caller loaded from its own store values like any other."""
        record = PriceRecord(estimated_value=Decimal("42.50"), price_source=PriceSource.DATABASE)
        item = CollectionItem(id="db", comic=ComicDetails(title="T", price_data=record))

        assert get_comic_value(item) == Decimal("42.50")
        assert record.to_payload()["priceSource"] == "database"

    def test_interpolates_at_owner_grade(self, scenario_points) -> None:
        """The owner's grade and slab flag drive interpolation."""
        record = PriceRecord(estimated_value=Decimal("300"), grade_estimates=scenario_points)
        raw = CollectionItem(id="a", comic=ComicDetails(title="T", price_data=record), condition_grade=9.6)
        slab = CollectionItem(
            id="b", comic=ComicDetails(title="T", price_data=record), condition_grade=9.6, is_graded=True
        )

        assert get_comic_value(raw) == Decimal("400.00")
        assert get_comic_value(slab) == Decimal("650.00")

    def test_slab_label_grade_used_when_owner_grade_missing(self, scenario_points) -> None:
        """A slabbed comic's label grade stands in for the owner's grade."""
        record = PriceRecord(estimated_value=Decimal("300"), grade_estimates=scenario_points)
        item = CollectionItem(
            id="c",
            comic=ComicDetails(title="T", price_data=record, is_slabbed=True, grade="9.8"),
        )

        assert item_grade(item) == 9.8
        assert get_comic_value(item) == Decimal("800")


class TestCollectionTotals:
    def test_priced_and_unpriced_counts(self, make_item) -> None:
        """500/300/100 plus one null record → 900 total, 3 priced, 1 unpriced."""
        items = [make_item(500), make_item(300), make_item(100), make_item(None)]
        totals = calculate_collection_totals(items)

        assert totals.total_value == Decimal("900.00")
        assert totals.priced_count == 3
        assert totals.unpriced_count == 1
        assert totals.total_count == 4
        assert totals.average_value == Decimal("300.00")

    def test_highest_and_lowest(self, make_item) -> None:
        """Highest/lowest skip unpriced items."""
        items = [make_item(None), make_item(50), make_item(900), make_item(20)]
        totals = calculate_collection_totals(items)

        assert totals.highest_value_item is items[2]
        assert totals.lowest_value_item is items[3]

    def test_ties_keep_first_seen(self, make_item) -> None:
        """Equal values resolve to the earlier item."""
        items = [make_item(100), make_item(100), make_item(100)]
        totals = calculate_collection_totals(items)

        assert totals.highest_value_item is items[0]
        assert totals.lowest_value_item is items[0]

    def test_empty_collection(self) -> None:
        """No items → zeros and no extremes."""
        totals = calculate_collection_totals([])

        assert totals.total_value == Decimal("0")
        assert totals.average_value == Decimal("0")
        assert totals.highest_value_item is None
        assert totals.lowest_value_item is None


class TestCollectionStats:
    def test_publisher_breakdown_sorted_by_value(self, make_item) -> None:
        """Publishers are ranked by total value with percentage share."""
        items = [
            make_item(100, publisher="DC Comics"),
            make_item(300, publisher="Marvel Comics"),
            make_item(100, publisher="Marvel Comics"),
        ]
        stats = calculate_publisher_stats(items)

        assert [s.publisher for s in stats] == ["Marvel Comics", "DC Comics"]
        assert stats[0].count == 2
        assert stats[0].value == Decimal("400.00")
        assert stats[0].percentage == Decimal("80.0")

    def test_financial_stats(self, make_item) -> None:
        """ROI covers only items with a recorded cost."""
        items = [
            make_item(150, purchase_price=100),
            make_item(50, purchase_price=100),
            make_item(500),
        ]
        stats = calculate_financial_stats(items)

        assert stats.total_purchase_cost == Decimal("200.00")
        assert stats.total_estimated_value == Decimal("700.00")
        assert stats.unrealized_gain_loss == Decimal("0.00")
        assert stats.roi_percentage == Decimal("0.0")
        assert stats.comics_with_cost == 2
        assert stats.comics_with_value == 3

    def test_top_publishers_limited(self, make_item) -> None:
        """Only the highest-valued publishers are returned."""
        items = [
            make_item(10, publisher="Image"),
            make_item(30, publisher="DC Comics"),
            make_item(20, publisher="Marvel Comics"),
            make_item(5, publisher=""),
        ]

        top = get_top_publishers(items, limit=2)

        assert [s.publisher for s in top] == ["DC Comics", "Marvel Comics"]


class TestDecadeStats:
    def test_grouped_by_decade_unknown_last(self, make_item) -> None:
        """Release years bucket into decades, oldest first, undated items last."""
        items = [make_item(100), make_item(300), make_item(50), make_item(50)]
        items[0].comic.release_year = "1988"
        items[1].comic.release_year = "1974"
        items[2].comic.release_year = "1981"

        stats = calculate_decade_stats(items)

        assert [s.decade for s in stats] == ["1970s", "1980s", "Unknown"]
        assert stats[0].value == Decimal("300.00")
        assert stats[0].percentage == Decimal("60.0")
        assert stats[1].count == 2
        assert stats[1].value == Decimal("150.00")
        assert stats[2].count == 1

    def test_worthless_collection_has_zero_share(self, make_item) -> None:
        """No value anywhere → every percentage is 0."""
        stats = calculate_decade_stats([make_item(None)])

        assert stats[0].decade == "Unknown"
        assert stats[0].percentage == Decimal("0.0")


class TestGradingStats:
    def test_raw_slabbed_and_company_counts(self, make_item) -> None:
        """Slabs are counted per company; the owner's company wins over the comic's."""
        items = [make_item(10) for _ in range(5)]
        items[0].is_graded = True
        items[0].grading_company = "cgc"
        items[0].comic.grading_company = "CBCS"
        items[0].comic.grade = "9.8"
        items[1].comic.is_slabbed = True
        items[1].comic.grading_company = "CBCS"
        items[1].comic.grade = "9.4"
        items[2].is_graded = True
        items[2].grading_company = "EGS"
        items[2].condition_grade = 9.8
        items[3].comic.is_slabbed = True

        stats = calculate_grading_stats(items)

        assert stats.raw_count == 1
        assert stats.slabbed_count == 4
        assert stats.cgc_count == 1
        assert stats.cbcs_count == 1
        assert stats.pgx_count == 0
        assert stats.other_graded_count == 1
        assert stats.grade_distribution == [("9.8", 2), ("9.4", 1)]

    def test_raw_grades_not_distributed(self, make_item) -> None:
        """Raw books never appear in the grade distribution."""
        item = make_item(10)
        item.condition_grade = 6.0

        stats = calculate_grading_stats([item])

        assert stats.raw_count == 1
        assert stats.grade_distribution == []


class TestKeyComicStats:
    def test_keys_ranked_by_value(self, make_item) -> None:
        """Items with key facts are counted and the most valuable returned first."""
        items = [make_item(100), make_item(500), make_item(900), make_item(50)]
        for item in items[:3]:
            item.comic.key_info = ["1st appearance"]

        stats = calculate_key_comic_stats(items, limit=2)

        assert stats.key_count == 3
        assert stats.top_key_comics == [items[2], items[1]]
