"""Kubernetes API fetcher.

Lists every requested object type across all namespaces of one cluster,
filtered by label selector. One HTTP request per object type, issued
concurrently.
"""

from __future__ import annotations

import ssl
import time
from abc import ABC, abstractmethod

import httpx

from shared.models import (
    ClusterDetails,
    FetchError,
    FetchResponse,
    FetchResponseWrapper,
    KubernetesErrorType,
    KubernetesObjectType,
    ObjectFetchParams,
)
from shared.observability import get_logger, log_external_call_end, log_external_call_start

from ..concurrency import gather_or_cancel

logger = get_logger(__name__)

OBJECT_TYPE_PATHS: dict[KubernetesObjectType, str] = {
    KubernetesObjectType.PODS: "/api/v1/pods",
    KubernetesObjectType.SERVICES: "/api/v1/services",
    KubernetesObjectType.CONFIGMAPS: "/api/v1/configmaps",
    KubernetesObjectType.DEPLOYMENTS: "/apis/apps/v1/deployments",
    KubernetesObjectType.REPLICASETS: "/apis/apps/v1/replicasets",
    KubernetesObjectType.HORIZONTAL_POD_AUTOSCALERS: "/apis/autoscaling/v1/horizontalpodautoscalers",
    KubernetesObjectType.INGRESSES: "/apis/networking.k8s.io/v1/ingresses",
}


class ClusterTlsConfigError(Exception):
    """Raised when a cluster's CA bundle cannot be loaded."""

    def __init__(self, cluster_name: str, message: str):
        self.cluster_name = cluster_name
        super().__init__(f"{message} (cluster={cluster_name})")


class KubernetesFetcher(ABC):
    """Fetches workload objects from a single cluster.

    Failures to fetch an individual object type are reported in the returned
    ``errors``; only a failure of the whole call is raised.
    """

    @abstractmethod
    async def fetch_objects_for_service(self, params: ObjectFetchParams) -> FetchResponseWrapper:
        pass


def status_to_error_type(status_code: int) -> KubernetesErrorType:
    """Classify an HTTP error status returned by an API server."""
    if status_code == 400:
        return KubernetesErrorType.BAD_REQUEST
    if status_code in (401, 403):
        return KubernetesErrorType.UNAUTHORIZED_ERROR
    if status_code == 404:
        return KubernetesErrorType.NOT_FOUND
    if status_code >= 500:
        return KubernetesErrorType.SYSTEM_ERROR
    return KubernetesErrorType.UNKNOWN_ERROR


class KubernetesClientBasedFetcher(KubernetesFetcher):
    """Fetcher talking to the Kubernetes REST API with httpx."""

    def __init__(
        self,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.transport = transport

    async def fetch_objects_for_service(self, params: ObjectFetchParams) -> FetchResponseWrapper:
        cluster = params.cluster_details
        # Stable order keeps responses reproducible across calls
        object_types = sorted(params.object_types_to_fetch, key=lambda t: t.value)

        async with self._client_for(cluster) as client:
            results = await gather_or_cancel(
                self._fetch_object_type(client, cluster, object_type, params.label_selector)
                for object_type in object_types
            )

        wrapper = FetchResponseWrapper()
        for result in results:
            if isinstance(result, FetchError):
                wrapper.errors.append(result)
            else:
                wrapper.responses.append(result)
        return wrapper

    def _client_for(self, cluster: ClusterDetails) -> httpx.AsyncClient:
        """Build an HTTP client carrying the cluster's TLS and auth settings."""
        verify: bool | ssl.SSLContext = not cluster.skip_tls_verify
        if cluster.ca_file and not cluster.skip_tls_verify:
            try:
                verify = ssl.create_default_context(cafile=cluster.ca_file)
            except OSError as e:
                raise ClusterTlsConfigError(
                    cluster.name, f"Cannot load CA bundle {cluster.ca_file}: {e!s}"
                ) from e

        headers = {"Accept": "application/json"}
        if cluster.service_account_token:
            headers["Authorization"] = f"Bearer {cluster.service_account_token}"

        return httpx.AsyncClient(
            base_url=cluster.url.rstrip("/"),
            headers=headers,
            verify=verify,
            timeout=httpx.Timeout(self.timeout, connect=5.0),
            transport=self.transport,
        )

    async def _fetch_object_type(
        self,
        client: httpx.AsyncClient,
        cluster: ClusterDetails,
        object_type: KubernetesObjectType,
        label_selector: str,
    ) -> FetchResponse | FetchError:
        path = OBJECT_TYPE_PATHS[object_type]
        query = {"labelSelector": label_selector} if label_selector else {}
        operation = f"list {object_type.value}"

        log_external_call_start(logger, cluster.name, operation)
        start = time.perf_counter()
        try:
            response = await client.get(path, params=query)
        except httpx.HTTPError as e:
            duration_ms = (time.perf_counter() - start) * 1000
            log_external_call_end(logger, cluster.name, operation, False, duration_ms, str(e))
            raise

        duration_ms = (time.perf_counter() - start) * 1000

        if not response.is_success:
            log_external_call_end(
                logger,
                cluster.name,
                operation,
                False,
                duration_ms,
                f"HTTP {response.status_code}",
            )
            return FetchError(
                error_type=status_to_error_type(response.status_code),
                object_type=object_type,
                status_code=response.status_code,
                resource_path=path,
                message=response.text[:200] or None,
            )

        try:
            data = response.json()
        except ValueError:
            data = None
        items = (data.get("items") or []) if isinstance(data, dict) else None
        if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
            log_external_call_end(
                logger,
                cluster.name,
                operation,
                False,
                duration_ms,
                "response is not an object list",
            )
            return FetchError(
                error_type=KubernetesErrorType.UNKNOWN_ERROR,
                object_type=object_type,
                status_code=response.status_code,
                resource_path=path,
                message=f"Unexpected {object_type.value} list body: {response.text[:200]}",
            )

        log_external_call_end(logger, cluster.name, operation, True, duration_ms)
        return FetchResponse(type=object_type, resources=items)
