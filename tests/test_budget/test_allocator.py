"""Tests for budget/allocator.py"""

import pytest

from smsfin.budget.allocator import (
    BudgetAllocator,
    average_monthly_income,
    expenses_by_category,
    generate_budget,
    round_to_step,
)
from smsfin.core.config import BudgetConfig
from smsfin.core.models import TransactionType

INCOME = TransactionType.INCOME


class TestHelpers:
    """Tests for the allocator helper functions."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0.0, 0.0), (499.99, 0.0), (500.0, 1000.0), (1499.0, 1000.0), (2500.0, 3000.0), (533333.33, 533000.0)],
    )
    def test_round_to_step_half_up(self, value, expected):
        """Halves round up, not to even."""
        assert round_to_step(value, 1000) == expected

    def test_average_monthly_income(self, make_tx):
        """Income is summed per month, then averaged over months with income."""
        history = [
            make_tx(amount=1_000_000.0, type=INCOME, timestamp="2025-01-05"),
            make_tx(amount=500_000.0, type=INCOME, timestamp="2025-01-20"),
            make_tx(amount=2_500_000.0, type=INCOME, timestamp="2025-03-05T09:00:00"),
            make_tx(amount=9_999_999.0, timestamp="2025-02-05"),
        ]
        assert average_monthly_income(history) == pytest.approx(2_000_000.0)

    def test_average_monthly_income_none(self, make_tx):
        """No income at all gives None."""
        assert average_monthly_income([make_tx()]) is None

    def test_expenses_by_category(self, make_tx):
        """Only positive spend from expenses and withdrawals is kept."""
        history = [
            make_tx(amount=100.0, category="A"),
            make_tx(amount=50.0, category="B", type=TransactionType.WITHDRAWAL),
            make_tx(amount=0.0, category="C"),
            make_tx(amount=70.0, category="D", type=TransactionType.TRANSFER),
        ]
        assert expenses_by_category(history) == {"A": 100.0, "B": 50.0}


class TestBudgetAllocator:
    """Tests for BudgetAllocator.generate."""

    def test_empty_history(self, budget_config):
        """No history, no budget."""
        assert BudgetAllocator(budget_config).generate([]) == {}

    def test_income_only_uses_default_split(self, make_tx, budget_config):
        """Income 2,000,000 with no spend splits 1,600,000 30/20/20/30."""
        history = [make_tx(amount=2_000_000.0, type=INCOME, category="Salario", timestamp="2025-01-30")]
        budgets = BudgetAllocator(budget_config).generate(history)

        assert budgets == pytest.approx(
            {"Alimentación": 480000.0, "Transporte": 320000.0, "Servicios": 320000.0, "Compras": 480000.0}
        )
        assert sum(budgets.values()) == pytest.approx(1_600_000.0)

    def test_no_income_falls_back_to_default_income(self, make_tx):
        """Without income the configured default income is used."""
        config = BudgetConfig(default_monthly_income=1_000_000.0)
        history = [make_tx(amount=300.0, category="A"), make_tx(amount=100.0, category="B")]

        assert BudgetAllocator(config).generate(history) == {"A": 600000.0, "B": 200000.0}

    def test_proportional_and_rounded(self, make_tx, budget_config):
        """Goals follow each category's share of spend, rounded to 1,000."""
        history = [
            make_tx(amount=3_000_000.0, type=INCOME, timestamp="2025-01-01"),
            make_tx(amount=100.0, category="Alimentación"),
            make_tx(amount=100.0, category="Transporte"),
            make_tx(amount=100.0, category="Ocio", type=TransactionType.WITHDRAWAL),
        ]
        budgets = BudgetAllocator(budget_config).generate(history)

        # 2,400,000 / 3 = 800,000 each
        assert budgets == {"Alimentación": 800000.0, "Transporte": 800000.0, "Ocio": 800000.0}

    def test_rounding_applied_per_category(self, make_tx, budget_config):
        """Each category is rounded on its own."""
        history = [
            make_tx(amount=1_000_000.0, type=INCOME, timestamp="2025-01-01"),
            make_tx(amount=1.0, category="A"),
            make_tx(amount=2.0, category="B"),
        ]
        budgets = BudgetAllocator(budget_config).generate(history)

        # 800,000 split 1/3 and 2/3
        assert budgets == {"A": 267000.0, "B": 533000.0}

    def test_keys_are_spending_categories_only(self, make_tx, budget_config):
        """Income, transfers and zero-spend categories never appear."""
        history = [
            make_tx(amount=1_000_000.0, type=INCOME, category="Salario", timestamp="2025-01-01"),
            make_tx(amount=5000.0, category="Transferencias", type=TransactionType.TRANSFER),
            make_tx(amount=0.0, category="Gratis"),
            make_tx(amount=10.0, category="Compras"),
        ]
        assert set(BudgetAllocator(budget_config).generate(history)) == {"Compras"}

    def test_custom_policy(self, make_tx):
        """Spending ratio and rounding step come from configuration."""
        config = BudgetConfig(spending_ratio=0.5, rounding_step=100)
        history = [
            make_tx(amount=1000.0, type=INCOME, timestamp="2025-01-01"),
            make_tx(amount=1.0, category="A"),
            make_tx(amount=2.0, category="B"),
        ]
        assert BudgetAllocator(config).generate(history) == {"A": 200.0, "B": 300.0}

    def test_generate_budget_function(self, make_tx):
        """The module function uses default policy."""
        history = [make_tx(amount=2_000_000.0, type=INCOME, timestamp="2025-01-01"), make_tx(amount=5.0)]
        assert generate_budget(history) == {"Alimentación": 1_600_000.0}
