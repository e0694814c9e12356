"""Service locators: map a service to the clusters it runs on."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shared.models import ClusterDetails

from .suppliers import KubernetesClustersSupplier


class KubernetesServiceLocator(ABC):
    """Resolves a service id to an ordered list of clusters."""

    @abstractmethod
    async def get_clusters_by_service_id(self, service_id: str) -> list[ClusterDetails]:
        pass


class MultiTenantServiceLocator(KubernetesServiceLocator):
    """Every service is assumed to run on every known cluster."""

    def __init__(self, clusters_supplier: KubernetesClustersSupplier):
        self.clusters_supplier = clusters_supplier

    async def get_clusters_by_service_id(self, service_id: str) -> list[ClusterDetails]:
        return await self.clusters_supplier.get_clusters()
