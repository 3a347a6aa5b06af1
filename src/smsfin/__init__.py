"""Anomaly detection and budget allocation for SMS-derived transactions.

The two entry points are :func:`evaluate_anomalies` and :func:`generate_budget`.
"""

from .anomaly import AnomalyEngine, classification_failure_alert, evaluate_anomalies
from .budget import BudgetAllocator, generate_budget, summarize_budget_usage
from .core.config import AnomalyConfig, AppConfig, BudgetConfig
from .core.models import Alert, AlertSeverity, AlertType, Budgets, Transaction, TransactionType

__version__ = "0.1.0"
__all__ = [
    # Entry points
    "evaluate_anomalies",
    "generate_budget",
    "summarize_budget_usage",
    "classification_failure_alert",
    # Engines
    "AnomalyEngine",
    "BudgetAllocator",
    # Data model
    "Transaction",
    "TransactionType",
    "Alert",
    "AlertSeverity",
    "AlertType",
    "Budgets",
    # Configuration
    "AppConfig",
    "AnomalyConfig",
    "BudgetConfig",
]
