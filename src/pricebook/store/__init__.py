"""Record store layer for pricebook application."""

from pricebook.store.base import RecordStore
from pricebook.store.factories import create_record_store

__all__ = ["RecordStore", "create_record_store"]
