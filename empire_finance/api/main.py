"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from empire_finance.api.middleware import MetricsMiddleware, RequestIDMiddleware
from empire_finance.api.v1 import auto_investment, companies, credit, loans, production, saves, trading
from empire_finance.config import settings
from empire_finance.infrastructure.database.models import Base
from empire_finance.infrastructure.database.session import engine
from empire_finance.infrastructure.observability.logging import setup_logging

setup_logging(settings.log_level)


def init_db() -> None:
    """Create tables for the configured database"""
    Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Entrepreneur Empire Finance",
        description="Loans, share trading, film production and save slots for the Entrepreneur Empire game",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Last added = first executed
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(loans.router, prefix="/v1", tags=["loans"])
    app.include_router(credit.router, prefix="/v1", tags=["credit"])
    app.include_router(trading.router, prefix="/v1", tags=["trading"])
    app.include_router(production.router, prefix="/v1", tags=["productions"])
    app.include_router(auto_investment.router, prefix="/v1", tags=["auto-investment"])
    app.include_router(companies.router, prefix="/v1", tags=["companies"])
    app.include_router(saves.router, prefix="/v1", tags=["saves"])

    return app


app = create_app()
