"""Pytest fixtures for testing"""

import pytest
from datetime import datetime
from decimal import Decimal
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from spendwise.api.main import create_app
from spendwise.api.dependencies import get_clock, get_cycle_calculator
from spendwise.domain.cycle import CycleCalculator
from spendwise.domain.models import Transaction
from spendwise.infrastructure.clock import FixedClock
from spendwise.infrastructure.database.models import Base
from spendwise.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Wednesday; with cycle start day 17 the current cycle is Mar 17 - Apr 16
FIXED_NOW = datetime(2024, 3, 20, 10, 30)
CYCLE_START_DAY = 17


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a frozen clock"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: FixedClock(FIXED_NOW)
    app.dependency_overrides[get_cycle_calculator] = lambda: CycleCalculator(CYCLE_START_DAY)
    return TestClient(app)


def _txn(amount: str, occurred_at: datetime, category_id: str = "groceries", card_id: str = "visa") -> Transaction:
    return Transaction(
        amount=Decimal(amount),
        occurred_at=occurred_at,
        category_id=category_id,
        card_id=card_id,
    )


@pytest.fixture
def cycle_transactions() -> list[Transaction]:
    """Spending inside the Mar 17 - Apr 16 2024 cycle, totalling 450"""
    return [
        _txn("120.00", datetime(2024, 3, 18, 9, 0), "groceries", "visa"),
        _txn("80.00", datetime(2024, 3, 19, 20, 15), "dining", "visa"),
        _txn("250.00", datetime(2024, 3, 20, 8, 0), "groceries", "amex"),
    ]
