"""Domain model entities for pricebook.

These are pure data classes representing purchases and the values derived
from them, independent of where the records are persisted. Both the SQL
collection and the local JSON blob map to and from these types.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class Unit(str, Enum):
    """Unit a quantity is measured in.

    Units are display/grouping tags only; no conversion between them is done.
    """

    OZ = "oz"
    LB = "lb"
    EA = "ea"
    G = "g"
    ML = "ml"

    @property
    def label(self) -> str:
        return _UNIT_LABELS[self]


_UNIT_LABELS = {
    Unit.OZ: "Ounces (oz)",
    Unit.LB: "Pounds (lb)",
    Unit.EA: "Each (ea)",
    Unit.G: "Grams (g)",
    Unit.ML: "Milliliters (ml)",
}

DEFAULT_UNIT = Unit.OZ
DEFAULT_STORE = "Unknown"


class DealStatus(Enum):
    """Deal quality of a purchase relative to its target and historical low."""

    NEW_ROCK_BOTTOM = "new_rock_bottom"
    GOOD_DEAL = "good_deal"
    CLOSE_DEAL = "close_deal"
    BAD_DEAL = "bad_deal"
    NO_TARGET = "no_target"

    @property
    def label(self) -> str:
        return _DEAL_STATUS_LABELS[self]


_DEAL_STATUS_LABELS = {
    DealStatus.NEW_ROCK_BOTTOM: "New Rock Bottom Price!",
    DealStatus.GOOD_DEAL: "Good Deal!",
    DealStatus.CLOSE_DEAL: "Close Deal",
    DealStatus.BAD_DEAL: "Bad Deal",
    DealStatus.NO_TARGET: "No Target Set",
}


@dataclass(frozen=True)
class PurchaseRecord:
    """A single logged purchase.

    Records are never edited; a new purchase is always a new record.
    ``rock_bottom_price`` is the target unit price snapshotted when the
    record was created, ``0`` meaning no target.
    """

    id: str
    name: str
    price: Decimal
    quantity: Decimal
    unit: Unit
    store: str
    unit_price: Decimal
    rock_bottom_price: Decimal
    timestamp: datetime


@dataclass(frozen=True)
class FormDefaults:
    """Suggested entry values for a previously seen item."""

    name: str
    unit: Unit
    rock_bottom_price: Optional[Decimal]
