"""Record store factory functions."""

import os
from pathlib import Path
from typing import Optional

from pricebook.store.base import RecordStore
from pricebook.store.json_store import BLOB_NAME, JsonRecordStore
from pricebook.store.sqlalchemy_store import DEFAULT_APP_ID, SQLAlchemyRecordStore


def default_data_path() -> Path:
    """Return the local blob path.

    Checks the PRICEBOOK_DATA_PATH environment variable, then defaults to
    ~/.pricebook/frugal-price-book-items.json
    """
    data_path = os.environ.get("PRICEBOOK_DATA_PATH")
    if data_path:
        return Path(data_path)
    return Path.home() / ".pricebook" / BLOB_NAME


def create_json_store(data_path: Optional[str] = None) -> JsonRecordStore:
    """Create a local JSON blob store.

    Args:
        data_path: Path to the JSON file. If None, uses default_data_path()
    """
    path = Path(data_path) if data_path else default_data_path()
    return JsonRecordStore(path)


def create_sqlalchemy_store(
    database_url: str, user_id: Optional[str], app_id: Optional[str] = None
) -> SQLAlchemyRecordStore:
    """Create a per-user SQL collection store.

    Args:
        database_url: SQLAlchemy database URL
        user_id: Authenticated user ID, or None when not signed in
        app_id: Collection namespace. If None, checks PRICEBOOK_APP_ID, then
            defaults to 'demo-app'
    """
    if app_id is None:
        app_id = os.environ.get("PRICEBOOK_APP_ID", DEFAULT_APP_ID)
    return SQLAlchemyRecordStore(database_url, user_id=user_id, app_id=app_id)


def create_record_store(
    database_url: Optional[str] = None,
    data_path: Optional[str] = None,
    user_id: Optional[str] = None,
    app_id: Optional[str] = None,
) -> RecordStore:
    """Select and create the record store for this session.

    A database URL (argument or PRICEBOOK_DATABASE_URL) selects the SQL
    collection; otherwise the local JSON blob is used.
    """
    if database_url is None:
        database_url = os.environ.get("PRICEBOOK_DATABASE_URL")

    if database_url:
        return create_sqlalchemy_store(database_url, user_id=user_id, app_id=app_id)
    return create_json_store(data_path)
