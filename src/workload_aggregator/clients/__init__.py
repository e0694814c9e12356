"""Clients for the Workload Aggregator."""

from .cluster_registry import ClusterRegistryClient, ClusterRegistryError

__all__ = [
    "ClusterRegistryClient",
    "ClusterRegistryError",
]
