"""Fleet Workloads Shared Package.

Components used by the workload aggregator service:
- models: Pydantic data models
- config: Configuration management
- observability: Structured logging
"""

__version__ = "0.1.0"
