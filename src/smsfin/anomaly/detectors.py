"""Detector rules evaluated against a single new transaction.

Each detector either returns an alert or abstains. Abstention is not an error:
it means the rule has no basis to judge the transaction (not a spending type,
too little history, no budget goal for the category).
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import datetime, timedelta

from smsfin.anomaly.alerts import format_amount, make_alert
from smsfin.core.config import AnomalyConfig
from smsfin.core.models import Alert, AlertSeverity, AlertType, Budgets, Transaction

logger = logging.getLogger(__name__)


def spent_by_category(history: Iterable[Transaction]) -> dict[str, float]:
    """Sum expense and withdrawal amounts per category."""
    totals: dict[str, float] = defaultdict(float)
    for tx in history:
        if tx.type.is_spending:
            totals[tx.category] += tx.amount
    return dict(totals)


def detect_high_spending(
    transaction: Transaction, history: Iterable[Transaction], config: AnomalyConfig, now: datetime
) -> Alert | None:
    """Flag a spend far above the category's historical average."""
    if not transaction.type.is_spending:
        return None

    amounts = [
        tx.amount for tx in history if tx.category == transaction.category and tx.type.is_spending
    ]
    if len(amounts) < config.min_history:
        logger.debug(
            "High-spending abstains for %r: %d of %d transactions", transaction.category, len(amounts), config.min_history
        )
        return None

    average = sum(amounts) / len(amounts)
    amount = format_amount(transaction.amount)

    if transaction.amount > average * config.very_high_multiplier:
        return make_alert(
            transaction,
            f"Alerta crítica: Gasto de {amount} en {transaction.entity} es "
            f"{config.very_high_multiplier * 100:.0f}% superior al promedio en esta categoría.",
            AlertSeverity.HIGH,
            AlertType.ANOMALY,
            now,
        )

    if transaction.amount > average * config.high_multiplier:
        return make_alert(
            transaction,
            f"Gasto inusual de {amount} en {transaction.entity}, muy por encima de tu promedio "
            f"para '{transaction.category}'.",
            AlertSeverity.MEDIUM,
            AlertType.ANOMALY,
            now,
        )

    return None


def detect_duplicate(
    transaction: Transaction, history: Iterable[Transaction], config: AnomalyConfig, now: datetime
) -> Alert | None:
    """Flag a transaction repeating a recent one with the same amount and entity.

    The window is measured back from ``now``, the evaluation time, not from the
    transaction's own timestamp. An aware ``now`` is compared in local time,
    like ``Transaction.occurred_at``.
    """
    local_now = now.astimezone().replace(tzinfo=None) if now.tzinfo is not None else now
    window_start = local_now - timedelta(minutes=config.duplicate_window_minutes)

    for tx in history:
        if tx.id == transaction.id or tx.amount != transaction.amount or tx.entity != transaction.entity:
            continue
        occurred_at = tx.occurred_at
        if occurred_at is not None and occurred_at >= window_start:
            return make_alert(
                transaction,
                f"Alerta crítica: Transacción duplicada detectada por {format_amount(transaction.amount)} "
                f"en {transaction.entity}.",
                AlertSeverity.HIGH,
                AlertType.ANOMALY,
                now,
            )

    return None


def detect_unusual_hour(transaction: Transaction, config: AnomalyConfig, now: datetime) -> Alert | None:
    """Flag a large spend evaluated during the night window."""
    if not transaction.type.is_spending:
        return None

    hour = now.hour
    if (
        config.unusual_hour_start <= hour <= config.unusual_hour_end
        and transaction.amount > config.unusual_hour_min_amount
    ):
        return make_alert(
            transaction,
            f"Alerta: Transacción de {format_amount(transaction.amount)} realizada en un horario "
            f"inusual ({hour}:00).",
            AlertSeverity.MEDIUM,
            AlertType.ANOMALY,
            now,
        )

    return None


def detect_budget_threshold(
    transaction: Transaction,
    budgets: Budgets | None,
    spent: dict[str, float],
    config: AnomalyConfig,
    now: datetime,
) -> list[Alert]:
    """Flag the transaction that crosses a budget usage threshold.

    ``spent`` must be computed from history that does not yet contain
    ``transaction``; usage before and after the transaction is derived from it,
    and only a crossing (before under, after at or over) produces an alert.
    """
    alerts: list[Alert] = []
    if not budgets or not transaction.type.is_spending:
        return alerts

    goal = budgets.get(transaction.category)
    if not goal or goal <= 0:
        return alerts

    post_spend = spent.get(transaction.category, 0.0) + transaction.amount
    pre_usage = (post_spend - transaction.amount) / goal * 100
    post_usage = post_spend / goal * 100

    if post_usage >= config.budget_limit_pct and pre_usage < config.budget_limit_pct:
        alerts.append(
            make_alert(
                transaction,
                f"Límite excedido: Has superado el {config.budget_limit_pct:.0f}% de tu presupuesto "
                f"para '{transaction.category}'.",
                AlertSeverity.HIGH,
                AlertType.BUDGET,
                now,
            )
        )
    elif post_usage >= config.budget_warning_pct and pre_usage < config.budget_warning_pct:
        alerts.append(
            make_alert(
                transaction,
                f"Alerta de presupuesto: Has gastado más del {config.budget_warning_pct:.0f}% de tu "
                f"límite para '{transaction.category}'.",
                AlertSeverity.MEDIUM,
                AlertType.BUDGET,
                now,
            )
        )

    return alerts
