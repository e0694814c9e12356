"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from shared.observability import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "workload-aggregator"}


@router.get("/ready")
async def readiness_check(request: Request) -> dict:
    """Readiness check - verifies the cluster source can be listed."""
    clusters_supplier = request.app.state.clusters_supplier

    try:
        clusters = await clusters_supplier.get_clusters()
    except Exception as e:
        logger.warning("Cluster source not ready", error=str(e))
        return {"status": "not_ready", "clusters": "unavailable"}

    return {"status": "ready", "clusters": len(clusters)}
