"""Current-month spend measured against the active budget."""

from collections import defaultdict
from collections.abc import Iterable

from pydantic import BaseModel, Field

from smsfin.core.clock import Clock, system_clock
from smsfin.core.models import Budgets, Transaction


class CategoryUsage(BaseModel):
    """Spend against one category goal."""

    category: str
    goal: float
    spent: float
    remaining: float
    progress: float
    over_budget: bool


class BudgetSummary(BaseModel):
    """Budget usage for a month."""

    month: str
    total_budget: float = 0.0
    total_spent: float = 0.0
    total_remaining: float = 0.0
    overall_progress: float = 0.0
    categories: list[CategoryUsage] = Field(default_factory=list)


def summarize_budget_usage(
    history: Iterable[Transaction],
    budgets: Budgets | None,
    month: str | None = None,
    clock: Clock = system_clock,
) -> BudgetSummary:
    """Summarize spend per budget category for ``month`` (``YYYY-MM``).

    Only expenses and withdrawals dated in that month count. ``month`` defaults
    to the clock's current month.
    """
    month = month or clock().strftime("%Y-%m")
    if budgets is None:
        return BudgetSummary(month=month)

    spent: dict[str, float] = defaultdict(float)
    for tx in history:
        if tx.type.is_spending and tx.timestamp.startswith(month):
            spent[tx.category] += tx.amount

    categories = []
    for category, goal in sorted(budgets.items()):
        category_spent = spent.get(category, 0.0)
        progress = category_spent / goal * 100 if goal > 0 else 0.0
        categories.append(
            CategoryUsage(
                category=category,
                goal=goal,
                spent=category_spent,
                remaining=goal - category_spent,
                progress=progress,
                over_budget=progress > 100,
            )
        )

    total_budget = sum(budgets.values())
    total_spent = sum(amount for category, amount in spent.items() if budgets.get(category, 0) > 0)

    return BudgetSummary(
        month=month,
        total_budget=total_budget,
        total_spent=total_spent,
        total_remaining=total_budget - total_spent,
        overall_progress=total_spent / total_budget * 100 if total_budget > 0 else 0.0,
        categories=categories,
    )
