"""Anomaly evaluation API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from smsfin.anomaly.engine import AnomalyEngine
from smsfin.api.dependencies import get_engine
from smsfin.api.models import EvaluateRequest, EvaluateResponse

router = APIRouter(prefix="/api/alerts", tags=["alerts"])


@router.post("/evaluate", response_model=EvaluateResponse, response_model_by_alias=True)
async def evaluate_transaction(
    request: EvaluateRequest, engine: AnomalyEngine = Depends(get_engine)
) -> EvaluateResponse:
    """Evaluate a new transaction against its prior history and the active budget."""
    try:
        alerts = engine.evaluate(request.transaction, request.history, request.budgets)
        return EvaluateResponse(alerts=alerts, count=len(alerts))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
