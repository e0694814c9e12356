"""Workload Aggregator FastAPI Application.

The Workload Aggregator provides:
- Service to cluster resolution
- Per-cluster credential decoration
- Concurrent workload fetches across clusters, merged per service
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from shared.config import ClusterLocatorMethod, WorkloadAggregatorSettings
from shared.observability import get_logger, log_request_end, log_request_start, setup_logging

from .api import clusters, health, services
from .auth import get_auth_translator_registry
from .clients.cluster_registry import ClusterRegistryClient
from .fetchers import KubernetesClientBasedFetcher
from .locators import (
    ClusterRegistrySupplier,
    ConfigClusterSupplier,
    KubernetesClustersSupplier,
    MultiTenantServiceLocator,
)

settings = WorkloadAggregatorSettings()
setup_logging(log_level=settings.log_level, log_format=settings.log_format)
logger = get_logger(__name__)


def build_clusters_supplier(
    settings: WorkloadAggregatorSettings,
) -> tuple[KubernetesClustersSupplier, ClusterRegistryClient | None]:
    """Create the cluster supplier selected by configuration."""
    if settings.cluster_locator_method == ClusterLocatorMethod.HTTP:
        client = ClusterRegistryClient(settings.cluster_registry_url)
        return ClusterRegistrySupplier(client), client

    return ConfigClusterSupplier(settings.clusters), None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown of:
    - Cluster supplier and service locator
    - Auth translator registry
    - Kubernetes fetcher
    """
    logger.info("Starting Workload Aggregator service", version=settings.app_version)

    clusters_supplier, registry_client = build_clusters_supplier(settings)
    app.state.clusters_supplier = clusters_supplier
    app.state.service_locator = MultiTenantServiceLocator(clusters_supplier)
    app.state.auth_registry = get_auth_translator_registry()
    app.state.fetcher = KubernetesClientBasedFetcher(timeout=settings.fetch_timeout_seconds)

    logger.info(
        "Workload Aggregator service started successfully",
        cluster_locator_method=settings.cluster_locator_method,
        auth_providers=sorted(app.state.auth_registry.providers()),
    )

    yield

    # Shutdown
    logger.info("Shutting down Workload Aggregator service")
    if registry_client is not None:
        await registry_client.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Fleet Workloads - Workload Aggregator",
        description="Workload state of a service across every cluster it runs on",
        version=settings.app_version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        client_ip = request.client.host if request.client else None
        log_request_start(logger, request.method, request.url.path, client_ip)
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        log_request_end(logger, request.method, request.url.path, response.status_code, duration_ms)
        return response

    app.include_router(health.router, tags=["Health"])
    app.include_router(services.router, prefix="/api/v1", tags=["Services"])
    app.include_router(clusters.router, prefix="/api/v1", tags=["Clusters"])

    return app


app = create_app()
