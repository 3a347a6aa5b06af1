"""Budget proposal and usage tracking."""

from .allocator import BudgetAllocator, generate_budget
from .usage import BudgetSummary, CategoryUsage, summarize_budget_usage

__all__ = ["BudgetAllocator", "generate_budget", "BudgetSummary", "CategoryUsage", "summarize_budget_usage"]
