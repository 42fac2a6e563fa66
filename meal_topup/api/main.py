"""FastAPI application factory"""

import uvicorn
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from meal_topup.api.middleware import RequestIDMiddleware, MetricsMiddleware
from meal_topup.api.dependencies import build_report_service
from meal_topup.api.routes import report
from meal_topup.api.routes.schemas import HealthResponse
from meal_topup.infrastructure.observability.logging import setup_logging
from meal_topup.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Meal Top-up",
        description="How much to add to the meal account before the next payday",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Built once so configuration errors surface at startup
    app.state.report_service = build_report_service(settings)

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(report.router, tags=["report"])

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured port"""
    uvicorn.run(app, host="0.0.0.0", port=settings.webserver_port, log_config=None)
