"""Services for the Workload Aggregator."""

from .objects_service import (
    DEFAULT_OBJECT_TYPES,
    ClusterResolutionError,
    get_objects_for_service,
    match_labels_from_entity,
    parse_label_selector,
)

__all__ = [
    "DEFAULT_OBJECT_TYPES",
    "ClusterResolutionError",
    "get_objects_for_service",
    "match_labels_from_entity",
    "parse_label_selector",
]
