"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from empire_finance.api.main import create_app
from empire_finance.domain.catalogs import get_loan_offer
from empire_finance.domain.models import Holding, HoldingKind, LoanOffer, LoanType
from empire_finance.infrastructure.database.models import Base
from empire_finance.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


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
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def small_offer() -> LoanOffer:
    """8% / 12 month small business loan, 580 credit required"""
    return get_loan_offer(LoanType.SMALL)


@pytest.fixture
def real_company() -> Holding:
    """Listed company with 20% owned, $1M market value"""
    return Holding(
        id="acme",
        kind=HoldingKind.REAL_COMPANY,
        market_value=1_000_000,
        shares_owned=20,
        current_income=500,
        name="Acme Corp",
        industry="Technology",
        ticker="ACME",
        volatility=0.03,
    )


@pytest.fixture
def venture() -> Holding:
    """Player venture, 60% owned"""
    return Holding(
        id="lemon-1",
        kind=HoldingKind.VENTURE,
        market_value=200_000,
        shares_owned=60,
        current_income=10,
        name="Lemon Co",
        industry="lemonade",
    )
