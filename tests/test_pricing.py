"""Tests for the price engine."""

from decimal import Decimal

import pytest

from pricebook.domain import pricing
from pricebook.domain.entities import DealStatus, FormDefaults, Unit


D = Decimal


class TestUnitPrice:
    """Tests for unit_price."""

    @pytest.mark.parametrize(
        "price,quantity,expected",
        [
            ("4.99", "16", "0.31188"),
            ("3.99", "16", "0.24938"),
            ("6.00", "16", "0.375"),
            ("1", "3", "0.33333"),
            ("2", "3", "0.66667"),
            ("12.99", "2", "6.495"),
        ],
    )
    def test_rounds_to_five_places(self, price, quantity, expected):
        """Unit price is price / quantity rounded half away from zero."""
        result = pricing.unit_price(D(price), D(quantity))
        assert result == D(expected)
        assert result > 0

    @pytest.mark.parametrize(
        "price,quantity",
        [("0", "16"), ("4.99", "0"), ("-1", "16"), ("4.99", "-2"), ("0", "0")],
    )
    def test_non_positive_inputs_yield_zero(self, price, quantity):
        """Non-positive price or quantity degrades to 0 instead of raising."""
        assert pricing.unit_price(D(price), D(quantity)) == 0

    def test_is_idempotent(self):
        """Same inputs always give the same output."""
        assert pricing.unit_price(D("4.99"), D("16")) == pricing.unit_price(D("4.99"), D("16"))

    def test_accepts_plain_numbers(self):
        """ints and floats give the same Decimal result as their Decimal forms."""
        assert pricing.unit_price(10, 4) == D("2.5")
        assert pricing.unit_price(4.99, 16) == D("0.31188")
        assert isinstance(pricing.unit_price(10, 4), Decimal)

    @pytest.mark.parametrize(
        "price,quantity",
        [
            (D("NaN"), D("1")),
            (D("1"), D("NaN")),
            (D("Infinity"), D("1")),
            (D("1"), D("-Infinity")),
            (float("nan"), 1),
            (float("inf"), 1),
            (None, D("1")),
            ("abc", D("1")),
        ],
    )
    def test_non_finite_inputs_yield_zero(self, price, quantity):
        """NaN, infinite and non-numeric inputs degrade to 0 instead of raising."""
        assert pricing.unit_price(price, quantity) == 0

    def test_oversized_result_yields_zero(self):
        """A quotient too large to round to five places degrades to 0."""
        assert pricing.unit_price(D("1e40"), D("1")) == 0


class TestHistoricalLow:
    """Tests for historical_low."""

    def test_minimum_of_matching_records(self, record_factory):
        """Returns the lowest unit price among records with the same name."""
        records = [
            record_factory(price="4.99", minutes=0),
            record_factory(price="3.99", minutes=1),
            record_factory(price="6.00", minutes=2),
            record_factory(name="Coffee", price="1.00", minutes=3),
        ]

        low = pricing.historical_low(records, "Black Beans")

        assert low == D("0.24938")
        matching = [r for r in records if r.name == "Black Beans"]
        assert all(low <= r.unit_price for r in matching)

    def test_order_independent(self, record_factory):
        """Input order does not change the result."""
        records = [
            record_factory(price="4.99", minutes=0),
            record_factory(price="3.99", minutes=1),
        ]
        assert pricing.historical_low(records, "Black Beans") == pricing.historical_low(
            list(reversed(records)), "Black Beans"
        )

    def test_empty_name_returns_zero(self, record_factory):
        """An empty item name means no history."""
        assert pricing.historical_low([record_factory()], "") == 0

    def test_no_match_returns_zero(self, record_factory):
        """An unknown item has no history."""
        assert pricing.historical_low([record_factory()], "Coffee") == 0

    def test_name_match_is_case_sensitive(self, record_factory):
        """Names must match exactly."""
        assert pricing.historical_low([record_factory()], "black beans") == 0

    def test_empty_collection(self):
        """No records means no history."""
        assert pricing.historical_low([], "Black Beans") == 0


class TestClassifyDeal:
    """Tests for classify_deal priority order."""

    def test_no_target(self, record_factory):
        """A zero rock bottom is reported as no target, whatever the price."""
        record = record_factory(unit_price="0.1", rock_bottom_price="0")
        assert pricing.classify_deal(record, D("0.5")) == DealStatus.NO_TARGET

    def test_tie_with_low_and_target_is_rock_bottom(self, record_factory):
        """unit price == historical low == target is a new rock bottom, not a good deal."""
        record = record_factory(unit_price="0.25", rock_bottom_price="0.25")
        assert pricing.classify_deal(record, D("0.25")) == DealStatus.NEW_ROCK_BOTTOM

    def test_first_entry_without_history(self, record_factory):
        """With no history, a purchase equal to its own target is a new rock bottom."""
        record = record_factory(price="4.99", quantity="16", rock_bottom_price="0.31188")
        assert pricing.classify_deal(record, D("0")) == DealStatus.NEW_ROCK_BOTTOM

    def test_below_historical_low(self, record_factory):
        """Beating the historical low wins over being under target."""
        record = record_factory(price="3.99", quantity="16", rock_bottom_price="0.24938")
        assert pricing.classify_deal(record, D("0.31188")) == DealStatus.NEW_ROCK_BOTTOM

    def test_good_deal(self, record_factory):
        """At or under target but above the historical low is a good deal."""
        record = record_factory(unit_price="0.26", rock_bottom_price="0.30")
        assert pricing.classify_deal(record, D("0.25")) == DealStatus.GOOD_DEAL

    def test_good_deal_without_history(self, record_factory):
        """Under a manually entered target with no history is a good deal."""
        record = record_factory(unit_price="0.20", rock_bottom_price="0.30")
        assert pricing.classify_deal(record, D("0")) == DealStatus.GOOD_DEAL

    def test_close_deal_eight_percent_over(self, record_factory):
        """8% above target is within the 10% close-deal band."""
        record = record_factory(unit_price="0.27", rock_bottom_price="0.25")
        assert pricing.classify_deal(record, D("0.25")) == DealStatus.CLOSE_DEAL
        assert pricing.classify_deal(record, D("0")) == DealStatus.CLOSE_DEAL

    def test_close_deal_boundary(self, record_factory):
        """Exactly 10% above target is still close."""
        record = record_factory(unit_price="0.275", rock_bottom_price="0.25")
        assert pricing.classify_deal(record, D("0.25")) == DealStatus.CLOSE_DEAL

    def test_bad_deal(self, record_factory):
        """More than 10% above target is a bad deal."""
        record = record_factory(price="6.00", quantity="16", rock_bottom_price="0.25")
        assert record.unit_price == D("0.375")
        assert pricing.classify_deal(record, D("0.24938")) == DealStatus.BAD_DEAL

    def test_is_idempotent(self, record_factory):
        """Classifying twice gives the same answer."""
        record = record_factory(unit_price="0.27", rock_bottom_price="0.25")
        first = pricing.classify_deal(record, D("0.25"))
        assert pricing.classify_deal(record, D("0.25")) == first


class TestDeriveRockBottom:
    """Tests for derive_rock_bottom_for_submission."""

    def test_history_takes_lowest_of_three(self):
        """With history, the stored target is never above the low or the price paid."""
        assert pricing.derive_rock_bottom_for_submission(
            D("0.30"), D("0.31188"), D("0.24938")
        ) == D("0.24938")
        assert pricing.derive_rock_bottom_for_submission(
            D("0.20"), D("0.31188"), D("0.24938")
        ) == D("0.20")
        assert pricing.derive_rock_bottom_for_submission(
            D("0.50"), D("0.25"), D("0.375")
        ) == D("0.25")

    def test_history_with_blank_target(self):
        """A blank (zero) target stays zero when history exists."""
        assert pricing.derive_rock_bottom_for_submission(D("0"), D("0.31188"), D("0.24938")) == 0

    def test_first_purchase_becomes_target(self):
        """No history and no target: the purchase sets its own target."""
        assert pricing.derive_rock_bottom_for_submission(D("0"), D("0"), D("0.31188")) == D(
            "0.31188"
        )

    def test_stated_target_kept_without_history(self):
        """No history: a stated target is stored as given."""
        assert pricing.derive_rock_bottom_for_submission(D("0.5"), D("0"), D("0.31188")) == D(
            "0.5"
        )


class TestSelectItemDefaults:
    """Tests for select_item_defaults."""

    def test_uses_latest_record_and_historical_low(self, record_factory):
        """Unit comes from the newest record; target is the rounded historical low."""
        records = [
            record_factory(price="3.99", unit=Unit.LB, rock_bottom_price="0.24938", minutes=10),
            record_factory(price="4.99", unit=Unit.OZ, rock_bottom_price="0.31188", minutes=0),
        ]

        defaults = pricing.select_item_defaults(records, "Black Beans", D("0.24938"))

        assert defaults == FormDefaults(
            name="Black Beans", unit=Unit.LB, rock_bottom_price=D("0.2494")
        )

    def test_falls_back_to_record_target(self, record_factory):
        """Without a positive low, the latest record's own target is suggested."""
        records = [record_factory(rock_bottom_price="0.31188")]

        defaults = pricing.select_item_defaults(records, "Black Beans", D("0"))

        assert defaults.rock_bottom_price == D("0.3119")

    def test_no_suggestion_when_nothing_known(self, record_factory):
        """No low and no stored target leaves the suggestion empty."""
        records = [record_factory(rock_bottom_price="0")]

        defaults = pricing.select_item_defaults(records, "Black Beans", D("0"))

        assert defaults is not None
        assert defaults.rock_bottom_price is None

    def test_unknown_item(self, record_factory):
        """An item that was never logged yields no defaults."""
        assert pricing.select_item_defaults([record_factory()], "Coffee", D("0")) is None


class TestCatalogAndOrdering:
    """Tests for item_catalog and sort_records."""

    def test_item_catalog_sorted_and_distinct(self, record_factory):
        """Catalog lists each name once, ascending."""
        records = [
            record_factory(name="Coffee", minutes=0),
            record_factory(name="Black Beans", minutes=1),
            record_factory(name="Coffee", minutes=2),
        ]
        assert pricing.item_catalog(records) == ["Black Beans", "Coffee"]

    def test_item_catalog_empty(self):
        """No records, no items."""
        assert pricing.item_catalog([]) == []

    def test_sort_records_newest_first(self, record_factory):
        """Records are ordered by timestamp, newest first."""
        older = record_factory(minutes=0)
        newer = record_factory(minutes=5)
        assert pricing.sort_records([older, newer]) == [newer, older]

    def test_round_money_half_away_from_zero(self):
        """Halves round up."""
        assert pricing.round_money(D("0.311875"), 5) == D("0.31188")
        assert pricing.round_money(D("0.24938"), 4) == D("0.2494")
