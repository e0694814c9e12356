"""Cluster Registry client for service-to-service communication."""

from __future__ import annotations

from typing import Any

import httpx

from shared.observability import get_logger

logger = get_logger(__name__)


class ClusterRegistryError(Exception):
    """Raised when the Cluster Registry cannot list clusters."""

    pass


class ClusterRegistryClient:
    """Client for the Cluster Registry API."""

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(10.0, connect=5.0),
            transport=transport,
        )

    async def list_clusters(self, state: str | None = None) -> list[dict[str, Any]]:
        """List registered clusters.

        Raises:
            ClusterRegistryError: If the registry is unreachable or answers non-200
        """
        params = {}
        if state:
            params["state"] = state

        try:
            response = await self.client.get("/api/v1/clusters", params=params)
        except httpx.HTTPError as e:
            logger.error("Error listing clusters", error=str(e))
            raise ClusterRegistryError(f"Cluster Registry unreachable: {e!s}") from e

        if response.status_code != 200:
            logger.warning(
                "Failed to list clusters",
                status_code=response.status_code,
            )
            raise ClusterRegistryError(
                f"Cluster Registry returned HTTP {response.status_code}"
            )

        data = response.json()
        return data.get("items", [])

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
