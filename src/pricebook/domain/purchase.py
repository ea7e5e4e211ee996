"""Purchase domain service."""

import logging
import uuid
from datetime import datetime, UTC
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from pricebook.store.base import RecordStore
from pricebook.domain import pricing
from pricebook.domain.entities import (
    DEFAULT_STORE,
    DEFAULT_UNIT,
    DealStatus,
    FormDefaults,
    PurchaseRecord,
    Unit,
)
from pricebook.domain.errors import (
    ValidationError,
    invalid_purchase_fields,
    invalid_target,
    unknown_unit,
)
from pricebook.domain.session import UserSession

logger = logging.getLogger(__name__)


def _as_decimal(value: Any) -> Optional[Decimal]:
    """Return value as a finite Decimal, or None if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except InvalidOperation:
            return None
    if not value.is_finite():
        return None
    return value


class PurchaseService:
    """Service for logging purchases and reading the price history."""

    def __init__(self, store: RecordStore, session: UserSession):
        """Initialize purchase service.

        Args:
            store: Record store holding the purchase collection
            session: Current user session
        """
        self.store = store
        self.session = session

    def list_records(self) -> list[PurchaseRecord]:
        """List all purchases, newest first.

        Raises:
            PersistenceError: If the store cannot be read
        """
        return self.store.list()

    def item_catalog(self) -> list[str]:
        """Return the sorted distinct item names."""
        return pricing.item_catalog(self.list_records())

    def historical_low(self, item_name: str) -> Decimal:
        """Return the lowest unit price recorded for an item, 0 if none."""
        return pricing.historical_low(self.list_records(), item_name)

    def item_defaults(self, item_name: str) -> Optional[FormDefaults]:
        """Return suggested entry values for a previously logged item.

        Args:
            item_name: Exact item name

        Returns:
            FormDefaults, or None if the item has never been logged
        """
        records = self.list_records()
        low = pricing.historical_low(records, item_name)
        return pricing.select_item_defaults(records, item_name, low)

    def deal_report(
        self, item_name: Optional[str] = None
    ) -> list[tuple[PurchaseRecord, DealStatus]]:
        """Classify every purchase for the history view.

        Args:
            item_name: If given, only purchases of this item are reported

        Returns:
            (record, status) pairs, newest first. Each record is classified
            against the historical low of its own item.
        """
        records = self.list_records()
        if item_name:
            records = [record for record in records if record.name == item_name]

        lows: dict[str, Decimal] = {}
        report = []
        for record in records:
            if record.name not in lows:
                lows[record.name] = pricing.historical_low(records, record.name)
            report.append((record, pricing.classify_deal(record, lows[record.name])))
        return report

    def log_purchase(
        self,
        name: str,
        price: Union[Decimal, int, float],
        quantity: Union[Decimal, int, float],
        unit: Union[Unit, str] = DEFAULT_UNIT,
        store: Optional[str] = None,
        rock_bottom_price: Union[Decimal, int, float, None] = None,
        timestamp: Optional[datetime] = None,
    ) -> PurchaseRecord:
        """Validate and store a new purchase.

        Args:
            name: Item name
            price: Price paid
            quantity: Amount purchased, in ``unit``
            unit: Unit the quantity is measured in
            store: Store name, "Unknown" if blank
            rock_bottom_price: Target unit price, None or 0 for no target
            timestamp: Purchase time, defaults to now

        Returns:
            The stored record

        Raises:
            AuthError: If the session is not authenticated
            ValidationError: If name, price, quantity, unit or target is invalid
            PersistenceError: If the store rejects the record
        """
        self.session.require_authenticated()

        item_name = (name or "").strip()
        price_value = _as_decimal(price)
        quantity_value = _as_decimal(quantity)
        if (
            not item_name
            or price_value is None
            or quantity_value is None
            or price_value <= 0
            or quantity_value <= 0
        ):
            raise ValidationError(invalid_purchase_fields())

        try:
            unit_value = Unit(unit)
        except ValueError:
            raise ValidationError(unknown_unit(unit))

        if rock_bottom_price is None:
            target = pricing.ZERO
        else:
            target = _as_decimal(rock_bottom_price)
            if target is None or target < 0:
                raise ValidationError(invalid_target(rock_bottom_price))

        records = self.list_records()
        low = pricing.historical_low(records, item_name)
        computed = pricing.unit_price(price_value, quantity_value)

        record = PurchaseRecord(
            id=uuid.uuid4().hex,
            name=item_name,
            price=price_value,
            quantity=quantity_value,
            unit=unit_value,
            store=(store or "").strip() or DEFAULT_STORE,
            unit_price=computed,
            rock_bottom_price=pricing.derive_rock_bottom_for_submission(target, low, computed),
            timestamp=timestamp or datetime.now(UTC),
        )

        self.store.append(record)
        logger.info("Logged %s at %s per %s", record.name, record.unit_price, record.unit.value)
        return record
