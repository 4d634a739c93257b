# backend/courtbook/routes/health.py
"""Root banner, liveness and Prometheus metrics."""

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST

from ..core.config import settings
from ..core.constants import ROOT_MESSAGE
from ..monitoring.prometheus_metrics import prometheus_metrics
from ..schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return ROOT_MESSAGE


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", environment=settings.environment)


@router.get("/metrics")
def metrics() -> Response:
    return Response(content=prometheus_metrics.get_metrics(), media_type=CONTENT_TYPE_LATEST)
