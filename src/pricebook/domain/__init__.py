"""Domain layer for pricebook application."""

from pricebook.domain.entities import DealStatus, FormDefaults, PurchaseRecord, Unit
from pricebook.domain.errors import (
    AuthError,
    DomainError,
    PersistenceError,
    ValidationError,
)

__all__ = [
    "DealStatus",
    "FormDefaults",
    "PurchaseRecord",
    "Unit",
    "AuthError",
    "DomainError",
    "PersistenceError",
    "ValidationError",
]
