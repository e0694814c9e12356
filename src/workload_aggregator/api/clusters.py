"""Cluster listing endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from shared.models import ClusterSummary
from shared.observability import get_logger

from ..locators import ServiceLocatorError

logger = get_logger(__name__)

router = APIRouter()


class ClusterListResponse(BaseModel):
    """Known clusters, without credentials."""

    items: list[ClusterSummary]


@router.get(
    "/clusters",
    response_model=ClusterListResponse,
    summary="List clusters",
    description="List the clusters workloads are aggregated from.",
)
async def list_clusters(request: Request):
    """List known clusters."""
    clusters_supplier = request.app.state.clusters_supplier

    try:
        clusters = await clusters_supplier.get_clusters()
    except ServiceLocatorError as e:
        logger.error("Listing clusters failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": "CLUSTER_RESOLUTION_FAILED", "message": str(e)},
        ) from e

    return ClusterListResponse(
        items=[
            ClusterSummary(name=c.name, url=c.url, auth_provider=c.auth_provider)
            for c in clusters
        ]
    )
