"""Workload objects for a service, aggregated across every cluster it runs on.

Pipeline per request: resolve clusters, decorate each with credentials
(concurrently), fetch from each (concurrently), merge in locator order.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from shared.models import (
    CatalogEntity,
    ClusterDetails,
    ClusterObjects,
    ClusterReference,
    FetchResponseWrapper,
    KubernetesObjectType,
    KubernetesRequestBody,
    ObjectFetchParams,
    ObjectsByEntityResponse,
)
from shared.observability import get_logger

from ..auth import AuthTranslatorRegistry, get_auth_translator_registry
from ..concurrency import gather_or_cancel
from ..fetchers import KubernetesFetcher
from ..locators import KubernetesServiceLocator

module_logger = get_logger(__name__)

DEFAULT_OBJECT_TYPES: frozenset[KubernetesObjectType] = frozenset(
    {
        KubernetesObjectType.PODS,
        KubernetesObjectType.SERVICES,
        KubernetesObjectType.CONFIGMAPS,
        KubernetesObjectType.DEPLOYMENTS,
        KubernetesObjectType.REPLICASETS,
        KubernetesObjectType.HORIZONTAL_POD_AUTOSCALERS,
        KubernetesObjectType.INGRESSES,
    }
)


class ClusterResolutionError(Exception):
    """Raised when the clusters of a service cannot be resolved."""

    def __init__(self, service_id: str, cause: BaseException):
        self.service_id = service_id
        super().__init__(f"Failed to resolve clusters for service {service_id}: {cause!s}")


def parse_label_selector(match_labels: Mapping[str, Any] | None) -> str:
    """Render matchLabels as a ``key=value,key=value`` selector.

    Keys and values are passed through verbatim, in mapping order.
    """
    if not match_labels:
        return ""
    return ",".join(f"{key}={value}" for key, value in match_labels.items())


def match_labels_from_entity(entity: CatalogEntity | None) -> Mapping[str, Any] | None:
    """Extract ``spec.kubernetes.selector.matchLabels`` from a catalog entity."""
    if entity is None:
        return None
    node: Any = entity.spec
    for key in ("kubernetes", "selector", "matchLabels"):
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node if isinstance(node, Mapping) else None


async def get_objects_for_service(
    service_id: str,
    fetcher: KubernetesFetcher,
    service_locator: KubernetesServiceLocator,
    logger: structlog.stdlib.BoundLogger | None,
    request_body: KubernetesRequestBody,
    object_types_to_fetch: frozenset[KubernetesObjectType] = DEFAULT_OBJECT_TYPES,
    auth_registry: AuthTranslatorRegistry | None = None,
) -> ObjectsByEntityResponse:
    """Fan out to all clusters the service lives in and aggregate their objects.

    Args:
        service_id: Logical service to look up
        fetcher: Per-cluster object fetcher
        service_locator: Maps the service to its clusters
        logger: Log sink (defaults to this module's logger)
        request_body: Caller credentials and the catalog entity
        object_types_to_fetch: Object kinds to fetch from every cluster
        auth_registry: Auth translators (defaults to the process registry)

    Returns:
        One entry per resolved cluster, in locator order

    Raises:
        ClusterResolutionError: The locator failed
        AuthProviderNotFoundError: A cluster names an unregistered provider
        AuthDecorationError: A cluster could not be decorated with credentials
    """
    logger = logger or module_logger
    registry = auth_registry or get_auth_translator_registry()

    try:
        cluster_details = await service_locator.get_clusters_by_service_id(service_id)
    except Exception as e:
        raise ClusterResolutionError(service_id, e) from e

    if not cluster_details:
        logger.info("No clusters found for service", service_id=service_id)
        return ObjectsByEntityResponse(items=[])

    # Unknown providers fail before any decoration starts
    translators = [registry.resolve(cd.auth_provider) for cd in cluster_details]

    decorated: list[ClusterDetails] = await gather_or_cancel(
        translator.decorate_cluster_details_with_auth(cd, request_body)
        for translator, cd in zip(translators, cluster_details)
    )

    label_selector = parse_label_selector(match_labels_from_entity(request_body.entity))

    logger.info(
        "Resolved clusters for service",
        service_id=service_id,
        clusters=[cd.name for cd in decorated],
    )

    results: list[FetchResponseWrapper] = await gather_or_cancel(
        fetcher.fetch_objects_for_service(
            ObjectFetchParams(
                service_id=service_id,
                cluster_details=cd,
                object_types_to_fetch=object_types_to_fetch,
                label_selector=label_selector,
            )
        )
        for cd in decorated
    )

    return ObjectsByEntityResponse(
        items=[
            ClusterObjects(
                cluster=ClusterReference(name=located.name),
                resources=result.responses,
                errors=result.errors,
            )
            for located, result in zip(cluster_details, results)
        ]
    )
