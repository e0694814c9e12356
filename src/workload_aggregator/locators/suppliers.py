"""Cluster suppliers: the sources a service locator draws clusters from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from shared.config import ClusterConfig
from shared.models import AuthProvider, ClusterDetails
from shared.observability import get_logger

from ..clients.cluster_registry import ClusterRegistryClient, ClusterRegistryError

logger = get_logger(__name__)


class ServiceLocatorError(Exception):
    """Raised when clusters cannot be listed or located."""

    pass


class KubernetesClustersSupplier(ABC):
    """Provides the set of known clusters, in a stable order."""

    @abstractmethod
    async def get_clusters(self) -> list[ClusterDetails]:
        pass


class ConfigClusterSupplier(KubernetesClustersSupplier):
    """Clusters declared in configuration, in declaration order."""

    def __init__(self, clusters: list[ClusterConfig]):
        self._clusters = [
            ClusterDetails(**cluster.model_dump()) for cluster in clusters
        ]

    async def get_clusters(self) -> list[ClusterDetails]:
        return list(self._clusters)


class ClusterRegistrySupplier(KubernetesClustersSupplier):
    """Clusters registered in the Cluster Registry, in the order it lists them.

    Registry entries carry no credentials; clusters default to the
    ``serviceAccount`` provider unless the entry names another one.
    """

    def __init__(self, client: ClusterRegistryClient, state: str | None = "ONLINE"):
        self.client = client
        self.state = state

    async def get_clusters(self) -> list[ClusterDetails]:
        try:
            items = await self.client.list_clusters(state=self.state)
        except ClusterRegistryError as e:
            raise ServiceLocatorError(str(e)) from e

        clusters = []
        for item in items:
            try:
                clusters.append(self._to_cluster_details(item))
            except (KeyError, ValidationError) as e:
                raise ServiceLocatorError(
                    f"Malformed cluster entry from registry: {item.get('name', '<unnamed>')}"
                ) from e
        return clusters

    @staticmethod
    def _to_cluster_details(item: dict[str, Any]) -> ClusterDetails:
        return ClusterDetails(
            name=item["name"],
            url=item.get("api_server_url") or item["url"],
            auth_provider=item.get("auth_provider") or AuthProvider.SERVICE_ACCOUNT.value,
            oidc_token_provider=item.get("oidc_token_provider"),
            skip_tls_verify=item.get("skip_tls_verify", False),
        )
