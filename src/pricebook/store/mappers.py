"""Mapper functions to convert between domain records and stored forms.

The SQL collection stores ORM rows; the local blob stores plain dicts with
camelCase keys. Both convert through here so the domain only ever sees
``PurchaseRecord`` entities.
"""

from datetime import datetime, UTC
from decimal import Decimal, InvalidOperation
from typing import Any

from pricebook.domain import entities as domain
from pricebook.store.models import PurchaseRecord as ORMPurchaseRecord
from pricebook.utils.timestamp_parser import parse_timestamp


def _aware(value: datetime) -> datetime:
    """Attach UTC to naive datetimes.

    SQLite drops the offset, so rows are always written in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _to_decimal(value: Any) -> Decimal:
    """Coerce a stored number (int, float, str or Decimal) to Decimal."""
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Could not read number '{value}': {e}") from e


def record_to_domain(orm_record: ORMPurchaseRecord) -> domain.PurchaseRecord:
    """Convert SQLAlchemy PurchaseRecord model to domain PurchaseRecord entity."""
    return domain.PurchaseRecord(
        id=orm_record.id,
        name=orm_record.name,
        price=_to_decimal(orm_record.price),
        quantity=_to_decimal(orm_record.quantity),
        unit=domain.Unit(orm_record.unit),
        store=orm_record.store,
        unit_price=_to_decimal(orm_record.unit_price),
        rock_bottom_price=_to_decimal(orm_record.rock_bottom_price),
        timestamp=_aware(orm_record.timestamp),
    )


def record_to_orm(
    record: domain.PurchaseRecord, app_id: str, user_id: str
) -> ORMPurchaseRecord:
    """Convert domain PurchaseRecord entity to a SQLAlchemy row in a user's collection."""
    return ORMPurchaseRecord(
        id=record.id,
        app_id=app_id,
        user_id=user_id,
        name=record.name,
        price=record.price,
        quantity=record.quantity,
        unit=record.unit.value,
        store=record.store,
        unit_price=record.unit_price,
        rock_bottom_price=record.rock_bottom_price,
        timestamp=_aware(record.timestamp).astimezone(UTC),
    )


def record_from_dict(data: dict[str, Any]) -> domain.PurchaseRecord:
    """Convert a local blob entry to a domain PurchaseRecord entity.

    Numeric fields may have been written as numbers or strings and are
    coerced the same way either way.

    Raises:
        KeyError: If a required field is missing
        ValueError: If a field holds an unusable value
    """
    return domain.PurchaseRecord(
        id=str(data["id"]),
        name=data["name"],
        price=_to_decimal(data["price"]),
        quantity=_to_decimal(data["quantity"]),
        unit=domain.Unit(data.get("unit") or domain.DEFAULT_UNIT.value),
        store=data.get("store") or domain.DEFAULT_STORE,
        unit_price=_to_decimal(data["unitPrice"]),
        rock_bottom_price=_to_decimal(data.get("rockBottomPrice")),
        timestamp=_aware(parse_timestamp(data["timestamp"])),
    )


def record_to_dict(record: domain.PurchaseRecord) -> dict[str, Any]:
    """Convert a domain PurchaseRecord entity to a local blob entry."""
    return {
        "id": record.id,
        "name": record.name,
        "price": float(record.price),
        "quantity": float(record.quantity),
        "unit": record.unit.value,
        "store": record.store,
        "rockBottomPrice": float(record.rock_bottom_price),
        "unitPrice": float(record.unit_price),
        "timestamp": record.timestamp.isoformat(),
    }
