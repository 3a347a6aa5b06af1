"""FastAPI application entry point."""

import logging
import time

import uvicorn
from fastapi import FastAPI, Request

from smsfin.anomaly.engine import AnomalyEngine
from smsfin.api.dependencies import get_config
from smsfin.budget.allocator import BudgetAllocator
from smsfin.core.clock import Clock, system_clock
from smsfin.core.config import AppConfig


def create_app(config: AppConfig | None = None, clock: Clock = system_clock) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or AppConfig()
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = FastAPI(
        title="smsfin - SMS Finance Alerts",
        description="Anomaly detection and budget allocation for classified transactions",
        version="0.1.0",
    )

    # Store in app state
    app.state.config = config
    app.state.engine = AnomalyEngine(config.anomaly, clock)
    app.state.allocator = BudgetAllocator(config.budget)
    app.state.clock = clock

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        if process_time > get_config(request).slow_request_seconds:
            logging.warning("SLOW REQUEST: %s %s took %.3fs", request.method, request.url.path, process_time)

        return response

    from smsfin.api.alerts import router as alerts_router
    from smsfin.api.budgets import router as budgets_router

    app.include_router(alerts_router)
    app.include_router(budgets_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


if __name__ == "__main__":
    uvicorn.run("smsfin.main:create_app", factory=True, host="0.0.0.0", port=8000, reload=True, log_level="info")
