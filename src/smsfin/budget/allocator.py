"""Budget allocation from transaction history."""

import logging
import math
from collections import defaultdict
from collections.abc import Iterable

from smsfin.core.config import BudgetConfig
from smsfin.core.models import Budgets, Transaction, TransactionType

logger = logging.getLogger(__name__)


def round_to_step(value: float, step: int) -> float:
    """Round half up to the nearest multiple of ``step``."""
    return float(math.floor(value / step + 0.5) * step)


def average_monthly_income(history: Iterable[Transaction]) -> float | None:
    """Average income over the months that have any income, or None."""
    by_month: dict[str, float] = defaultdict(float)
    for tx in history:
        if tx.type == TransactionType.INCOME:
            by_month[tx.month] += tx.amount

    if not by_month:
        return None
    return sum(by_month.values()) / len(by_month)


def expenses_by_category(history: Iterable[Transaction]) -> dict[str, float]:
    """Total expense and withdrawal spend per category, zero-spend categories dropped."""
    totals: dict[str, float] = defaultdict(float)
    for tx in history:
        if tx.type.is_spending:
            totals[tx.category] += tx.amount
    return {category: total for category, total in totals.items() if total > 0}


class BudgetAllocator:
    """Proposes monthly category goals from spending history."""

    def __init__(self, config: BudgetConfig | None = None):
        self.config = config or BudgetConfig()

    def generate(self, history: Iterable[Transaction]) -> Budgets:
        """Split a share of average monthly income across spending categories.

        The spendable total is ``spending_ratio`` of the average monthly income
        (or the configured default income when there is none). It is divided in
        proportion to each category's historical spend and rounded to
        ``rounding_step``. Without any spend the fixed default split is used.
        """
        history = tuple(history)
        if not history:
            return {}

        income = average_monthly_income(history)
        if income is None:
            logger.debug("No income in history, using default monthly income %.0f", self.config.default_monthly_income)
            income = self.config.default_monthly_income

        total_budgetable = income * self.config.spending_ratio

        spent = expenses_by_category(history)
        total_spent = sum(spent.values())

        if total_spent == 0:
            logger.info("No spending history, proposing default split of %.0f", total_budgetable)
            return {category: total_budgetable * share for category, share in self.config.default_split.items()}

        budgets = {
            category: round_to_step(total_budgetable * amount / total_spent, self.config.rounding_step)
            for category, amount in spent.items()
        }
        logger.info("Proposed budget for %d categories from %d transactions", len(budgets), len(history))
        return budgets


def generate_budget(history: Iterable[Transaction], config: BudgetConfig | None = None) -> Budgets:
    """Generate a budget proposal with a one-off allocator."""
    return BudgetAllocator(config).generate(history)
