"""Pytest configuration and shared fixtures."""

import sys
from datetime import datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Import after path setup
from smsfin.core.clock import fixed_clock  # noqa: E402
from smsfin.core.config import AppConfig, BudgetConfig  # noqa: E402
from smsfin.core.models import Transaction, TransactionType  # noqa: E402

# Mid-afternoon, outside the night window
DAY = datetime(2025, 3, 14, 15, 30, 0)
# Inside the night window
NIGHT = datetime(2025, 3, 14, 3, 15, 0)


@pytest.fixture
def make_tx():
    """Factory for transactions with sensible defaults."""
    counter = {"n": 0}

    def _make(
        amount: float = 10000.0,
        category: str = "Alimentación",
        type: TransactionType = TransactionType.EXPENSE,
        entity: str = "Exito",
        timestamp: str = "2025-02-10T12:00:00",
        id: str | None = None,
    ) -> Transaction:
        counter["n"] += 1
        return Transaction(
            id=id or f"tx_{counter['n']}",
            timestamp=timestamp,
            entity=entity,
            amount=amount,
            type=type,
            category=category,
        )

    return _make


@pytest.fixture
def day_clock():
    """Clock frozen in the afternoon."""
    return fixed_clock(DAY)


@pytest.fixture
def night_clock():
    """Clock frozen at 03:15."""
    return fixed_clock(NIGHT)


@pytest.fixture
def budget_config():
    """Default budget policy with a fixed default income."""
    return BudgetConfig(default_monthly_income=2000000.0)


@pytest.fixture
def test_client(day_clock):
    """Create a test client with a frozen clock."""
    from smsfin.main import create_app

    app = create_app(AppConfig(log_level="WARNING"), clock=day_clock)
    with TestClient(app) as client:
        yield client
