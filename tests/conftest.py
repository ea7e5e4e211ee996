"""Shared pytest fixtures for pricebook tests."""

from datetime import datetime, timedelta, UTC
from decimal import Decimal, ROUND_HALF_UP

import pytest

from pricebook.domain.entities import PurchaseRecord, Unit
from pricebook.domain.purchase import PurchaseService
from pricebook.domain.session import UserSession
from pricebook.store.factories import create_json_store, create_sqlalchemy_store


BASE_TIME = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)


def make_record(
    name="Black Beans",
    price="4.99",
    quantity="16",
    unit_price=None,
    rock_bottom_price="0",
    unit=Unit.OZ,
    store="Unknown",
    minutes=0,
    record_id=None,
):
    """Build a PurchaseRecord with sensible defaults for tests."""
    price = Decimal(price)
    quantity = Decimal(quantity)
    if unit_price is None:
        unit_price = (price / quantity).quantize(Decimal("0.00001"), rounding=ROUND_HALF_UP)
    return PurchaseRecord(
        id=record_id or f"rec-{name}-{minutes}",
        name=name,
        price=price,
        quantity=quantity,
        unit=unit,
        store=store,
        unit_price=Decimal(unit_price),
        rock_bottom_price=Decimal(rock_bottom_price),
        timestamp=BASE_TIME + timedelta(minutes=minutes),
    )


@pytest.fixture
def record_factory():
    """Return the PurchaseRecord builder."""
    return make_record


@pytest.fixture
def data_path(tmp_path):
    """Return a path for a temporary JSON price book."""
    return tmp_path / "pricebook" / "items.json"


@pytest.fixture
def json_store(data_path):
    """Create a JSON record store backed by a temporary file."""
    store = create_json_store(str(data_path))
    store.connect()
    yield store
    store.disconnect()


@pytest.fixture
def database_url(tmp_path):
    """Return a SQLite URL for a temporary shared collection."""
    return f"sqlite:///{tmp_path / 'pricebook.db'}"


@pytest.fixture
def sql_store(database_url):
    """Create a SQL record store for the test user."""
    store = create_sqlalchemy_store(database_url, user_id="user-1", app_id="test-app")
    store.connect()
    yield store
    store.disconnect()


@pytest.fixture
def demo_session():
    """Create a session signed in as the demo user."""
    session = UserSession()
    session.sign_in_demo()
    return session


@pytest.fixture
def purchase_service(json_store, demo_session):
    """Create a PurchaseService over a temporary JSON store."""
    return PurchaseService(json_store, demo_session)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep developer configuration out of the tests."""
    for name in (
        "PRICEBOOK_DATABASE_URL",
        "PRICEBOOK_DATA_PATH",
        "PRICEBOOK_APP_ID",
        "PRICEBOOK_USER_ID",
    ):
        monkeypatch.delenv(name, raising=False)
