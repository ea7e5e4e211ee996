"""SQLAlchemy models for the remote purchase record collection."""

from datetime import datetime, UTC
from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Numeric,
    Index,
    TypeDecorator,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

# Unit prices are always rounded to 5 places before they are stored
UNIT_PRICE = Numeric(18, 5)


class ExactDecimal(TypeDecorator):
    """Decimal stored as its string form.

    Prices, quantities and targets keep every digit the user entered, on
    backends without a native decimal type too.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class PurchaseRecord(Base):
    """Purchase record document.

    Documents are scoped by ``app_id`` and ``user_id``; each pair is one
    user's price book collection.
    """

    __tablename__ = "purchase_records"

    id = Column(String, primary_key=True)
    app_id = Column(String, nullable=False)
    user_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    price = Column(ExactDecimal, nullable=False)
    quantity = Column(ExactDecimal, nullable=False)
    unit = Column(String, nullable=False)
    store = Column(String, nullable=False)
    unit_price = Column(UNIT_PRICE, nullable=False)
    rock_bottom_price = Column(ExactDecimal, nullable=False, default=Decimal("0"))
    timestamp = Column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False
    )

    __table_args__ = (
        Index("ix_purchase_records_collection", "app_id", "user_id", "timestamp"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
