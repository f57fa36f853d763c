"""Health check and metrics endpoints (no version prefix)."""

from __future__ import annotations

from fastapi import APIRouter, Response

from posture import __version__
from posture.observability import generate_metrics

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok", "version": __version__}


@router.get("/metrics")
def metrics():
    """Prometheus-compatible metrics endpoint."""
    return Response(content=generate_metrics(), media_type="text/plain; charset=utf-8")
