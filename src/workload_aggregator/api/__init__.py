"""API endpoints for the Workload Aggregator."""

from . import clusters, health, services

__all__ = ["clusters", "health", "services"]
