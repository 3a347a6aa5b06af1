"""Alert construction helpers."""

from datetime import datetime

from smsfin.core.models import Alert, AlertSeverity, AlertType, Transaction

CLASSIFICATION_FAILURE_MESSAGE = "Error al clasificar el último SMS."


def format_amount(amount: float) -> str:
    """Format an amount with thousands separators, dropping zero decimals."""
    if float(amount).is_integer():
        return f"{amount:,.0f}"
    return f"{amount:,.2f}"


def make_alert(
    transaction: Transaction,
    message: str,
    severity: AlertSeverity,
    alert_type: AlertType,
    now: datetime,
) -> Alert:
    """Build an alert for ``transaction`` stamped with the evaluation time."""
    return Alert(
        timestamp=now.isoformat(),
        transaction_id=transaction.id,
        message=message,
        severity=severity,
        alert_type=alert_type,
    )


def classification_failure_alert(
    message: str = CLASSIFICATION_FAILURE_MESSAGE, now: datetime | None = None
) -> Alert:
    """Alert a caller raises when the external classifier fails.

    It has no triggering transaction, so ``transaction_id`` is empty.
    """
    return Alert(
        timestamp=(now or datetime.now()).isoformat(),
        transaction_id="",
        message=message,
        severity=AlertSeverity.HIGH,
        alert_type=AlertType.ANOMALY,
    )
