"""Core data models for smsfin."""

import logging
import uuid
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

Budgets = dict[str, float]


class TransactionType(str, Enum):
    """Transaction types as reported by the classifier."""

    INCOME = "Ingreso"
    EXPENSE = "Gasto"
    TRANSFER = "Transferencia"
    WITHDRAWAL = "Retiro"
    OTHER = "Otro"

    @property
    def is_spending(self) -> bool:
        """Expenses and withdrawals count toward spending rules."""
        return self in (TransactionType.EXPENSE, TransactionType.WITHDRAWAL)


class AlertSeverity(str, Enum):
    """Alert severity levels."""

    LOW = "Bajo"
    MEDIUM = "Medio"
    HIGH = "Alto"


class AlertType(str, Enum):
    """Distinguishes behavioral rules from budget-threshold rules."""

    ANOMALY = "anomaly"
    BUDGET = "budget"


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


class Transaction(BaseModel):
    """A classified financial movement."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=lambda: _new_id("tx"))
    timestamp: str = Field(..., alias="fecha")
    entity: str = Field(..., alias="entidad")
    amount: float = Field(..., ge=0.0, alias="monto")
    type: TransactionType = Field(TransactionType.OTHER, alias="tipo")
    category: str = Field(..., alias="categoria")
    subcategory: str | None = Field(None, alias="subcategoria")
    raw_sms: str | None = Field(None, alias="rawSms")

    @field_validator("timestamp", mode="before")
    @classmethod
    def validate_timestamp(cls, v: Any) -> Any:
        """Store dates and datetimes as ISO-8601 strings."""
        if isinstance(v, date | datetime):
            return v.isoformat()
        return v

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v: Any) -> TransactionType:
        """Coerce anything that is not a known transaction type to OTHER."""
        if isinstance(v, TransactionType):
            return v
        if isinstance(v, str):
            for member in TransactionType:
                if v == member.value or v.upper() == member.name:
                    return member
        logger.debug("Unknown transaction type %r, falling back to %s", v, TransactionType.OTHER.value)
        return TransactionType.OTHER

    @property
    def month(self) -> str:
        """Month bucket in ``YYYY-MM`` form."""
        return self.timestamp[:7]

    @property
    def occurred_at(self) -> datetime | None:
        """Parsed timestamp as a naive local datetime, or None if unparseable.

        Date-only values are midnight UTC, date-times without an offset are local.
        """
        value = self.timestamp.strip()
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
        if len(value) == 10:
            parsed = parsed.replace(tzinfo=timezone.utc)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
        return parsed


class Alert(BaseModel):
    """Notification produced by the anomaly engine."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=lambda: _new_id("alert"))
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
    transaction_id: str = Field("", alias="transactionId")
    message: str
    severity: AlertSeverity
    alert_type: AlertType = Field(..., alias="alertType")
