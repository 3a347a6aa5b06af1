"""Alert aggregator running every detector over a new transaction."""

import logging
from collections.abc import Iterable

from smsfin.anomaly.detectors import (
    detect_budget_threshold,
    detect_duplicate,
    detect_high_spending,
    detect_unusual_hour,
    spent_by_category,
)
from smsfin.core.clock import Clock, system_clock
from smsfin.core.config import AnomalyConfig
from smsfin.core.models import Alert, Budgets, Transaction

logger = logging.getLogger(__name__)


class AnomalyEngine:
    """Evaluates a transaction against the behavioral and budget rules."""

    def __init__(self, config: AnomalyConfig | None = None, clock: Clock = system_clock):
        self.config = config or AnomalyConfig()
        self.clock = clock

    def evaluate(
        self,
        transaction: Transaction,
        history: Iterable[Transaction],
        budgets: Budgets | None = None,
    ) -> list[Alert]:
        """Return the alerts raised by ``transaction``.

        Args:
            transaction: The new transaction.
            history: Prior transactions. Must not include ``transaction`` yet,
                otherwise budget crossings are measured against spend that
                already counts it and never fire.
            budgets: Active category goals, or None when no budget is set.

        Returns:
            Alerts ordered high-spending, duplicate, unusual-hour, budget.
        """
        history = tuple(history)
        now = self.clock()

        alerts = [
            alert
            for alert in (
                detect_high_spending(transaction, history, self.config, now),
                detect_duplicate(transaction, history, self.config, now),
                detect_unusual_hour(transaction, self.config, now),
            )
            if alert is not None
        ]

        if budgets is not None:
            spent = spent_by_category(history)
            alerts.extend(detect_budget_threshold(transaction, budgets, spent, self.config, now))

        for alert in alerts:
            logger.info(
                "Alert %s/%s for transaction %s: %s",
                alert.alert_type.value,
                alert.severity.value,
                transaction.id,
                alert.message,
            )
        logger.debug("Evaluated transaction %s against %d prior: %d alerts", transaction.id, len(history), len(alerts))

        return alerts


def evaluate_anomalies(
    transaction: Transaction,
    history: Iterable[Transaction],
    budgets: Budgets | None = None,
    config: AnomalyConfig | None = None,
    clock: Clock = system_clock,
) -> list[Alert]:
    """Evaluate ``transaction`` with a one-off engine."""
    return AnomalyEngine(config, clock).evaluate(transaction, history, budgets)
