"""Service workload endpoints."""

from __future__ import annotations

from uuid import uuid4

import httpx
from fastapi import APIRouter, HTTPException, Request, status

from shared.models import KubernetesRequestBody, ObjectsByEntityResponse
from shared.observability import RequestContextManager, get_logger

from ..auth import AuthDecorationError, AuthProviderNotFoundError
from ..fetchers import ClusterTlsConfigError
from ..services.objects_service import ClusterResolutionError, get_objects_for_service

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/services/{service_id}",
    response_model=ObjectsByEntityResponse,
    summary="Get workloads for a service",
    description="Aggregate workload objects of a service across all of its clusters.",
)
async def get_service_objects(
    request: Request,
    service_id: str,
    request_body: KubernetesRequestBody,
):
    """Get workload objects for a service from every cluster it runs on."""
    request_id = request.headers.get("x-request-id") or uuid4().hex

    async with RequestContextManager(request_id=request_id, service_id=service_id):
        try:
            return await get_objects_for_service(
                service_id=service_id,
                fetcher=request.app.state.fetcher,
                service_locator=request.app.state.service_locator,
                logger=logger,
                request_body=request_body,
                auth_registry=request.app.state.auth_registry,
            )
        except ClusterResolutionError as e:
            logger.error("Cluster resolution failed", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail={"error": "CLUSTER_RESOLUTION_FAILED", "message": str(e)},
            ) from e
        except AuthProviderNotFoundError as e:
            logger.error("Auth provider not registered", provider=e.provider)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={"error": "AUTH_PROVIDER_NOT_FOUND", "message": str(e)},
            ) from e
        except AuthDecorationError as e:
            logger.warning("Cluster auth decoration failed", cluster=e.cluster_name, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"error": "AUTH_DECORATION_FAILED", "message": str(e)},
            ) from e
        except (httpx.HTTPError, ClusterTlsConfigError) as e:
            logger.error("Cluster fetch failed", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail={"error": "CLUSTER_FETCH_FAILED", "message": str(e)},
            ) from e
