"""Per-cluster workload fetchers."""

from .kubernetes_client import (
    OBJECT_TYPE_PATHS,
    ClusterTlsConfigError,
    KubernetesClientBasedFetcher,
    KubernetesFetcher,
    status_to_error_type,
)

__all__ = [
    "OBJECT_TYPE_PATHS",
    "ClusterTlsConfigError",
    "KubernetesClientBasedFetcher",
    "KubernetesFetcher",
    "status_to_error_type",
]
