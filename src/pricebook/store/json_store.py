"""Local single-file JSON implementation of the purchase record store."""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Optional

from pricebook.domain.entities import PurchaseRecord
from pricebook.domain.errors import PersistenceError, store_failure
from pricebook.domain.pricing import sort_records
from pricebook.store.base import RecordStore
from pricebook.store.mappers import record_from_dict, record_to_dict

logger = logging.getLogger(__name__)

BLOB_NAME = "frugal-price-book-items.json"


class JsonRecordStore(RecordStore):
    """Record store holding the whole collection in one JSON file.

    The file is read in full the first time the collection is needed and
    rewritten in full after every append. A missing file is an empty
    collection.
    """

    def __init__(self, path: Path):
        """Initialize JSON record store.

        Args:
            path: Location of the JSON blob
        """
        super().__init__()
        self.path = Path(path)
        self._records: Optional[list[PurchaseRecord]] = None

    def connect(self) -> None:
        """Load the blob into memory."""
        self._load()

    def disconnect(self) -> None:
        """Forget the in-memory snapshot."""
        self._records = None

    def _load(self) -> list[PurchaseRecord]:
        if self._records is not None:
            return self._records

        if not self.path.exists():
            self._records = []
            return self._records

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"), parse_float=Decimal)
            if not isinstance(raw, list):
                raise ValueError("expected a list of records")
            records = [record_from_dict(entry) for entry in raw]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.exception("Error reading saved items from %s", self.path)
            raise PersistenceError(store_failure("load", e)) from e

        self._records = sort_records(records)
        return self._records

    def _write(self, records: list[PurchaseRecord]) -> None:
        payload = json.dumps([record_to_dict(record) for record in records], indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_name(self.path.name + ".tmp")
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            logger.exception("Error writing saved items to %s", self.path)
            raise PersistenceError(store_failure("save", e)) from e

    def append(self, record: PurchaseRecord) -> None:
        """Add a record at the front of the collection and rewrite the blob."""
        updated = sort_records([record] + self._load())
        self._write(updated)
        self._records = updated
        logger.debug("Appended record %s to %s", record.id, self.path)
        self._notify()

    def list(self) -> list[PurchaseRecord]:
        """List all records, newest first."""
        return list(self._load())
