"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from spendwise.api.middleware import RequestIDMiddleware, MetricsMiddleware
from spendwise.api.v1 import bills, cycle, dashboard
from spendwise.infrastructure.observability.logging import setup_logging
from spendwise.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="SpendWise Engine",
        description="Billing cycle, spending analytics and bill schedule service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(cycle.router, prefix="/v1", tags=["cycle"])
    app.include_router(dashboard.router, prefix="/v1", tags=["dashboard"])
    app.include_router(bills.router, prefix="/v1", tags=["bills"])

    return app


app = create_app()
