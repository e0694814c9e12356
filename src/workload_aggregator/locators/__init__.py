"""Cluster location for services."""

from .service_locator import KubernetesServiceLocator, MultiTenantServiceLocator
from .suppliers import (
    ClusterRegistrySupplier,
    ConfigClusterSupplier,
    KubernetesClustersSupplier,
    ServiceLocatorError,
)

__all__ = [
    "ClusterRegistrySupplier",
    "ConfigClusterSupplier",
    "KubernetesClustersSupplier",
    "KubernetesServiceLocator",
    "MultiTenantServiceLocator",
    "ServiceLocatorError",
]
