"""Abstract record store interface."""

from abc import ABC, abstractmethod
from typing import Callable

# Import entities directly to avoid circular import through domain/__init__.py
from pricebook.domain.entities import PurchaseRecord

RecordListener = Callable[[list[PurchaseRecord]], None]


class RecordStore(ABC):
    """Abstract storage for the purchase record collection.

    ``list`` and ``append`` are the whole contract the domain relies on.
    Listeners registered through ``subscribe`` are called with a fresh
    snapshot after every successful ``append`` made through this store.
    """

    def __init__(self):
        self._listeners: list[RecordListener] = []

    @abstractmethod
    def connect(self) -> None:
        """Open the backing medium."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Release the backing medium."""
        pass

    @abstractmethod
    def list(self) -> list[PurchaseRecord]:
        """List all records, newest first.

        Raises:
            PersistenceError: If the backing medium cannot be read
        """
        pass

    @abstractmethod
    def append(self, record: PurchaseRecord) -> None:
        """Durably add a record.

        Raises:
            PersistenceError: If the record could not be stored
        """
        pass

    def subscribe(self, callback: RecordListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unregisters it."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        """Push the current snapshot to every listener."""
        if not self._listeners:
            return
        snapshot = self.list()
        for listener in list(self._listeners):
            listener(list(snapshot))
