"""Price engine: unit prices, historical lows and deal classification.

Every function here is pure. Callers pass the full record collection in and
get a fresh value back; nothing is cached between calls and nothing here
raises for out-of-range numbers.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional, Sequence

from pricebook.domain.entities import (
    DealStatus,
    FormDefaults,
    PurchaseRecord,
)

ZERO = Decimal("0")
UNIT_PRICE_PLACES = 5
DISPLAY_TARGET_PLACES = 4
CLOSE_DEAL_MARGIN = Decimal("1.1")


def round_money(value: Decimal, places: int) -> Decimal:
    """Round a value to a fixed number of fractional digits.

    Halves round away from zero, so 0.311875 becomes 0.31188.
    """
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _number(value) -> Decimal:
    """Convert a plain number to Decimal; unusable values become NaN."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        return Decimal("NaN")


def unit_price(price: Decimal, quantity: Decimal) -> Decimal:
    """Return the price paid per unit of quantity.

    Accepts Decimal, int or float. Non-positive or non-finite price or
    quantity yields 0 rather than an error.
    """
    price = _number(price)
    quantity = _number(quantity)
    if not (price.is_finite() and quantity.is_finite()):
        return ZERO
    if price <= 0 or quantity <= 0:
        return ZERO
    try:
        return round_money(price / quantity, UNIT_PRICE_PLACES)
    except InvalidOperation:
        # Result needs more digits than the decimal context carries
        return ZERO


def historical_low(records: Iterable[PurchaseRecord], item_name: str) -> Decimal:
    """Return the lowest unit price ever recorded for an item.

    Names match exactly (case-sensitive). Returns 0 when ``item_name`` is
    empty or no record matches.
    """
    if not item_name:
        return ZERO
    prices = [record.unit_price for record in records if record.name == item_name]
    if not prices:
        return ZERO
    return min(prices)


def classify_deal(record: PurchaseRecord, historical_low: Decimal) -> DealStatus:
    """Classify a purchase against its target and the item's historical low.

    Rules are checked in order and the first match wins, so a purchase that
    ties the historical low is reported as a new rock bottom even though it
    is also at or under target.
    """
    if record.rock_bottom_price == 0:
        return DealStatus.NO_TARGET

    if historical_low > 0:
        is_rock_bottom = record.unit_price <= historical_low
    else:
        is_rock_bottom = record.unit_price == record.rock_bottom_price
    if is_rock_bottom:
        return DealStatus.NEW_ROCK_BOTTOM

    if record.unit_price <= record.rock_bottom_price:
        return DealStatus.GOOD_DEAL

    if record.unit_price <= record.rock_bottom_price * CLOSE_DEAL_MARGIN:
        return DealStatus.CLOSE_DEAL

    return DealStatus.BAD_DEAL


def derive_rock_bottom_for_submission(
    stated_target: Decimal, historical_low: Decimal, computed_unit_price: Decimal
) -> Decimal:
    """Decide the rock bottom price to store on a new purchase.

    Args:
        stated_target: Target entered by the user, 0 when left blank
        historical_low: Lowest unit price seen so far for the item, 0 if none
        computed_unit_price: Unit price of the purchase being logged

    Returns:
        With history, the lowest of the three values. Without history, the
        purchase's own unit price when no target was given, otherwise the
        stated target unchanged.
    """
    if historical_low > 0:
        return min(stated_target, historical_low, computed_unit_price)
    if stated_target == 0:
        return computed_unit_price
    return stated_target


def select_item_defaults(
    records: Sequence[PurchaseRecord], item_name: str, historical_low: Decimal
) -> Optional[FormDefaults]:
    """Suggest entry values for a previously seen item.

    ``records`` must be ordered newest first; the first match is taken as the
    latest purchase. Returns None when the item has never been logged.
    """
    latest = next((record for record in records if record.name == item_name), None)
    if latest is None:
        return None

    if historical_low > 0:
        suggestion: Optional[Decimal] = round_money(historical_low, DISPLAY_TARGET_PLACES)
    elif latest.rock_bottom_price:
        suggestion = round_money(latest.rock_bottom_price, DISPLAY_TARGET_PLACES)
    else:
        suggestion = None

    return FormDefaults(
        name=latest.name,
        unit=latest.unit,
        rock_bottom_price=suggestion,
    )


def item_catalog(records: Iterable[PurchaseRecord]) -> list[str]:
    """Return the distinct item names, sorted ascending."""
    return sorted({record.name for record in records})


def sort_records(records: Iterable[PurchaseRecord]) -> list[PurchaseRecord]:
    """Return records newest first."""
    return sorted(records, key=lambda record: record.timestamp, reverse=True)
