"""Anomaly detection rules and the engine aggregating them."""

from .alerts import classification_failure_alert
from .engine import AnomalyEngine, evaluate_anomalies

__all__ = ["AnomalyEngine", "evaluate_anomalies", "classification_failure_alert"]
