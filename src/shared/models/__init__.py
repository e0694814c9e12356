"""Shared data models for Fleet Workloads.

All models follow these conventions:
- Field names: lowercase snake_case
- Enums: values as sent on the wire
"""

# Base
from .base import FleetBaseModel

# Catalog requests
from .catalog import (
    CatalogEntity,
    KubernetesRequestAuth,
    KubernetesRequestBody,
)

# Cluster domain
from .cluster import (
    AuthProvider,
    ClusterDetails,
    ClusterSummary,
)

# Workload fetch and aggregation
from .kubernetes import (
    ClusterObjects,
    ClusterReference,
    FetchError,
    FetchResponse,
    FetchResponseWrapper,
    KubernetesErrorType,
    KubernetesObjectType,
    ObjectFetchParams,
    ObjectsByEntityResponse,
)

__all__ = [
    # Base
    "FleetBaseModel",
    # Catalog
    "CatalogEntity",
    "KubernetesRequestAuth",
    "KubernetesRequestBody",
    # Cluster
    "AuthProvider",
    "ClusterDetails",
    "ClusterSummary",
    # Kubernetes
    "ClusterObjects",
    "ClusterReference",
    "FetchError",
    "FetchResponse",
    "FetchResponseWrapper",
    "KubernetesErrorType",
    "KubernetesObjectType",
    "ObjectFetchParams",
    "ObjectsByEntityResponse",
]
