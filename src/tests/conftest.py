"""Pytest configuration and shared fixtures."""

import asyncio
import os
from typing import Any

import pytest

# Set test environment before importing settings
os.environ["ENV"] = "development"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "text"

from shared.models import (  # noqa: E402
    ClusterDetails,
    FetchResponseWrapper,
    KubernetesRequestBody,
    ObjectFetchParams,
)
from workload_aggregator.auth import (  # noqa: E402
    AuthDecorationError,
    AuthTranslatorRegistry,
    KubernetesAuthTranslator,
)
from workload_aggregator.fetchers import KubernetesFetcher  # noqa: E402
from workload_aggregator.locators import KubernetesServiceLocator  # noqa: E402


class FakeServiceLocator(KubernetesServiceLocator):
    """Locator returning a fixed cluster list, or raising."""

    def __init__(
        self,
        clusters: list[ClusterDetails] | None = None,
        error: Exception | None = None,
    ):
        self.clusters = clusters or []
        self.error = error
        self.calls: list[str] = []

    async def get_clusters_by_service_id(self, service_id: str) -> list[ClusterDetails]:
        self.calls.append(service_id)
        if self.error:
            raise self.error
        return list(self.clusters)


class RecordingAuthTranslator(KubernetesAuthTranslator):
    """Translator stamping a tag-specific token, recording every call."""

    def __init__(self, tag: str, events: list[tuple[str, str]]):
        self.tag = tag
        self.events = events
        self.calls: list[tuple[ClusterDetails, KubernetesRequestBody]] = []
        self.delays: dict[str, float] = {}
        self.fail_for: set[str] = set()

    async def decorate_cluster_details_with_auth(
        self,
        cluster_details: ClusterDetails,
        request_body: KubernetesRequestBody,
    ) -> ClusterDetails:
        self.calls.append((cluster_details, request_body))
        await asyncio.sleep(self.delays.get(cluster_details.name, 0))
        if cluster_details.name in self.fail_for:
            raise AuthDecorationError(cluster_details.name, f"{self.tag} credentials rejected")
        self.events.append(("decorated", cluster_details.name))
        return cluster_details.model_copy(
            update={"service_account_token": f"{self.tag}:{cluster_details.name}"}
        )


class FakeFetcher(KubernetesFetcher):
    """Fetcher returning canned results per cluster name."""

    def __init__(self, events: list[tuple[str, str]]):
        self.events = events
        self.calls: list[ObjectFetchParams] = []
        self.results: dict[str, FetchResponseWrapper] = {}
        self.delays: dict[str, float] = {}
        self.errors: dict[str, Exception] = {}

    async def fetch_objects_for_service(self, params: ObjectFetchParams) -> FetchResponseWrapper:
        name = params.cluster_details.name
        self.calls.append(params)
        self.events.append(("fetch_started", name))
        await asyncio.sleep(self.delays.get(name, 0))
        if name in self.errors:
            raise self.errors[name]
        self.events.append(("fetched", name))
        return self.results.get(name, FetchResponseWrapper())


@pytest.fixture
def events() -> list[tuple[str, str]]:
    """Shared ordered log of decoration and fetch events."""
    return []


@pytest.fixture
def alpha_translator(events) -> RecordingAuthTranslator:
    return RecordingAuthTranslator("alpha", events)


@pytest.fixture
def beta_translator(events) -> RecordingAuthTranslator:
    return RecordingAuthTranslator("beta", events)


@pytest.fixture
def auth_registry(alpha_translator, beta_translator) -> AuthTranslatorRegistry:
    registry = AuthTranslatorRegistry()
    registry.register(alpha_translator, provider="alpha")
    registry.register(beta_translator, provider="beta")
    return registry


@pytest.fixture
def clusters() -> list[ClusterDetails]:
    """Three clusters spread over two auth providers."""
    return [
        ClusterDetails(name="east", url="https://east.example.com:6443", auth_provider="alpha"),
        ClusterDetails(name="west", url="https://west.example.com:6443", auth_provider="beta"),
        ClusterDetails(name="edge", url="https://edge.example.com:6443", auth_provider="alpha"),
    ]


@pytest.fixture
def service_locator(clusters) -> FakeServiceLocator:
    return FakeServiceLocator(clusters)


@pytest.fixture
def make_locator():
    """Build a locator with custom clusters or a failure."""
    return FakeServiceLocator


@pytest.fixture
def fetcher(events) -> FakeFetcher:
    return FakeFetcher(events)


@pytest.fixture
def entity_data() -> dict[str, Any]:
    """Catalog entity for a service with a kubernetes selector."""
    return {
        "apiVersion": "backstage.io/v1alpha1",
        "kind": "Component",
        "metadata": {"name": "checkout"},
        "spec": {
            "type": "service",
            "kubernetes": {
                "selector": {"matchLabels": {"app": "checkout", "tier": "web"}},
            },
        },
    }


@pytest.fixture
def request_body(entity_data) -> KubernetesRequestBody:
    return KubernetesRequestBody(entity=entity_data)


@pytest.fixture
def sample_cluster_data() -> dict[str, Any]:
    """Sample cluster configuration for testing."""
    return {
        "name": "test-cluster-01",
        "url": "https://api.test-cluster.example.com:6443",
        "auth_provider": "serviceAccount",
        "service_account_token": "sa-token",
        "skip_tls_verify": True,
    }


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (require external services)"
    )
    config.addinivalue_line("markers", "slow: Slow tests")
