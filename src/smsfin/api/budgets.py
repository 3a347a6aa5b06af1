"""Budget API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from smsfin.api.dependencies import get_allocator, get_clock
from smsfin.api.models import BudgetUsageRequest, GenerateBudgetRequest, GenerateBudgetResponse
from smsfin.budget.allocator import BudgetAllocator
from smsfin.budget.usage import BudgetSummary, summarize_budget_usage
from smsfin.core.clock import Clock

router = APIRouter(prefix="/api/budgets", tags=["budgets"])


@router.post("/generate", response_model=GenerateBudgetResponse)
async def generate_budget(
    request: GenerateBudgetRequest, allocator: BudgetAllocator = Depends(get_allocator)
) -> GenerateBudgetResponse:
    """Propose monthly category goals from the transaction history."""
    try:
        budgets = allocator.generate(request.history)
        return GenerateBudgetResponse(budgets=budgets, total=sum(budgets.values()))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.post("/usage", response_model=BudgetSummary)
async def get_budget_usage(request: BudgetUsageRequest, clock: Clock = Depends(get_clock)) -> BudgetSummary:
    """Summarize this month's (or the given month's) spend against the budget."""
    try:
        return summarize_budget_usage(request.history, request.budgets, request.month, clock)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
