"""Workload Aggregator service.

Resolves a service to the clusters it runs on and aggregates live workload
objects from all of them into one response.
"""

__version__ = "0.1.0"
