# src/subshift/api/routes/metrics.py
from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from subshift.api.metrics import metrics

PROMETHEUS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

router = APIRouter(tags=["metrics"])


@router.get("/metrics", response_class=PlainTextResponse, include_in_schema=False)
def prom_metrics() -> PlainTextResponse:
    return PlainTextResponse(metrics().to_prometheus_text(), media_type=PROMETHEUS_CONTENT_TYPE)
