"""FastAPI application factory"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from loan_gateway.api.middleware import MetricsMiddleware, RequestIDMiddleware
from loan_gateway.api.routes import decision
from loan_gateway.config import Settings, settings
from loan_gateway.domain.decision import LoanDecisionCalculator
from loan_gateway.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level, settings.service_name)


def create_app(app_settings: Settings = settings) -> FastAPI:
    """
    Create and configure FastAPI application.

    Raises:
        ValueError: Business constants in app_settings are inconsistent
    """
    # Policy is validated once, here
    loan_calculator = LoanDecisionCalculator(app_settings.decision_policy())

    app = FastAPI(
        title="Loan Decision Gateway",
        description="Loan eligibility, amount and period decision service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.loan_calculator = loan_calculator

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": app_settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(decision.router, prefix="/loan", tags=["decisions"])

    return app


app = create_app()
