"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field, NonNegativeFloat

from smsfin.core.models import Alert, Transaction


class EvaluateRequest(BaseModel):
    """Request model for evaluating a new transaction."""

    transaction: Transaction
    history: list[Transaction] = Field(default_factory=list)
    budgets: dict[str, NonNegativeFloat] | None = None


class EvaluateResponse(BaseModel):
    """Response model for an evaluation."""

    alerts: list[Alert]
    count: int


class GenerateBudgetRequest(BaseModel):
    """Request model for generating a budget proposal."""

    history: list[Transaction] = Field(default_factory=list)


class GenerateBudgetResponse(BaseModel):
    """Response model for a budget proposal."""

    budgets: dict[str, float]
    total: float


class BudgetUsageRequest(BaseModel):
    """Request model for a monthly budget usage summary."""

    history: list[Transaction] = Field(default_factory=list)
    budgets: dict[str, NonNegativeFloat] | None = None
    month: str | None = Field(None, pattern=r"^\d{4}-\d{2}$")
