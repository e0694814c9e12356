"""Configuration management module.

This module provides:
- Environment-based configuration with validation
- Service-specific settings classes
- Cached settings access via get_settings()
"""

from .settings import (
    ClusterConfig,
    ClusterLocatorMethod,
    Environment,
    LogFormat,
    LogLevel,
    Settings,
    WorkloadAggregatorSettings,
    get_settings,
)

__all__ = [
    # Main settings
    "Settings",
    "get_settings",
    # Enums
    "Environment",
    "LogLevel",
    "LogFormat",
    "ClusterLocatorMethod",
    # Service-specific settings
    "ClusterConfig",
    "WorkloadAggregatorSettings",
]
