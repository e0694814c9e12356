"""Kubernetes workload fetch and aggregation models."""

from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field

from .base import FleetBaseModel
from .cluster import ClusterDetails


class KubernetesObjectType(str, Enum):
    """Workload object kinds fetchable per cluster."""

    PODS = "pods"
    SERVICES = "services"
    CONFIGMAPS = "configmaps"
    DEPLOYMENTS = "deployments"
    REPLICASETS = "replicasets"
    HORIZONTAL_POD_AUTOSCALERS = "horizontalpodautoscalers"
    INGRESSES = "ingresses"


class KubernetesErrorType(str, Enum):
    """Classification of a per-object-type fetch failure."""

    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED_ERROR = "UNAUTHORIZED_ERROR"
    NOT_FOUND = "NOT_FOUND"
    SYSTEM_ERROR = "SYSTEM_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ObjectFetchParams(FleetBaseModel):
    """Everything a fetcher needs to query one cluster."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    service_id: str
    cluster_details: ClusterDetails
    object_types_to_fetch: frozenset[KubernetesObjectType]
    label_selector: str = ""


class FetchResponse(FleetBaseModel):
    """Objects of one type returned by one cluster."""

    type: KubernetesObjectType
    resources: list[dict[str, Any]] = Field(default_factory=list)


class FetchError(FleetBaseModel):
    """A failure to fetch one object type from one cluster."""

    error_type: KubernetesErrorType = KubernetesErrorType.UNKNOWN_ERROR
    object_type: KubernetesObjectType | None = None
    status_code: int | None = None
    resource_path: str | None = None
    message: str | None = None


class FetchResponseWrapper(FleetBaseModel):
    """Fetcher outcome for one cluster; data and errors may coexist."""

    responses: list[FetchResponse] = Field(default_factory=list)
    errors: list[FetchError] = Field(default_factory=list)


class ClusterReference(FleetBaseModel):
    """Identity of the cluster a result came from."""

    name: str


class ClusterObjects(FleetBaseModel):
    """One cluster's entry in an aggregated response."""

    cluster: ClusterReference
    resources: list[FetchResponse] = Field(default_factory=list)
    errors: list[FetchError] = Field(default_factory=list)


class ObjectsByEntityResponse(FleetBaseModel):
    """Aggregated workload state, one item per resolved cluster in locator order."""

    items: list[ClusterObjects] = Field(default_factory=list)
