"""Dependency injection for API routes."""

from fastapi import Request

from smsfin.anomaly.engine import AnomalyEngine
from smsfin.budget.allocator import BudgetAllocator
from smsfin.core.clock import Clock
from smsfin.core.config import AppConfig


def get_config(request: Request) -> AppConfig:
    """Get application configuration from app state."""
    return request.app.state.config


def get_engine(request: Request) -> AnomalyEngine:
    """Get the anomaly engine from app state."""
    return request.app.state.engine


def get_allocator(request: Request) -> BudgetAllocator:
    """Get the budget allocator from app state."""
    return request.app.state.allocator


def get_clock(request: Request) -> Clock:
    """Get the evaluation clock from app state."""
    return request.app.state.clock
