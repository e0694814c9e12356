"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from shared.models import (
    AuthProvider,
    CatalogEntity,
    ClusterDetails,
    ClusterObjects,
    ClusterReference,
    FetchError,
    FetchResponse,
    KubernetesErrorType,
    KubernetesObjectType,
    KubernetesRequestBody,
    ObjectFetchParams,
    ObjectsByEntityResponse,
)


class TestClusterDetails:
    """Tests for ClusterDetails model."""

    def test_minimal(self):
        cluster = ClusterDetails(name="prod", url="https://prod:6443", auth_provider="google")

        assert cluster.service_account_token is None
        assert cluster.skip_tls_verify is False
        assert cluster.ca_file is None

    def test_immutable(self, sample_cluster_data):
        cluster = ClusterDetails(**sample_cluster_data)

        with pytest.raises(ValidationError):
            cluster.service_account_token = "other"

    def test_copy_with_credentials(self, sample_cluster_data):
        cluster = ClusterDetails(**sample_cluster_data)

        decorated = cluster.model_copy(update={"service_account_token": "fresh"})

        assert decorated.service_account_token == "fresh"
        assert cluster.service_account_token == "sa-token"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ClusterDetails(name="", url="https://prod:6443", auth_provider="google")

    def test_unregistered_provider_accepted(self):
        """Provider keys are resolved at lookup time, not validated here."""
        cluster = ClusterDetails(name="prod", url="https://prod:6443", auth_provider="aws")

        assert cluster.auth_provider == "aws"
        assert "aws" not in {p.value for p in AuthProvider}


class TestObjectFetchParams:
    """Tests for ObjectFetchParams model."""

    def test_object_types_coerced_to_enum_set(self, sample_cluster_data):
        params = ObjectFetchParams(
            service_id="checkout",
            cluster_details=ClusterDetails(**sample_cluster_data),
            object_types_to_fetch=["pods", "ingresses", "pods"],
        )

        assert params.object_types_to_fetch == frozenset(
            {KubernetesObjectType.PODS, KubernetesObjectType.INGRESSES}
        )
        assert all(isinstance(t, KubernetesObjectType) for t in params.object_types_to_fetch)
        assert params.label_selector == ""

    def test_unknown_object_type_rejected(self, sample_cluster_data):
        with pytest.raises(ValidationError):
            ObjectFetchParams(
                service_id="checkout",
                cluster_details=ClusterDetails(**sample_cluster_data),
                object_types_to_fetch=["secrets"],
            )


class TestKubernetesRequestBody:
    """Tests for the request body models."""

    def test_auth_defaults(self, entity_data):
        body = KubernetesRequestBody(entity=entity_data)

        assert body.auth.google is None
        assert body.auth.oidc == {}

    def test_entity_required(self):
        with pytest.raises(ValidationError):
            KubernetesRequestBody(auth={"google": "token"})

    def test_entity_keeps_unknown_fields(self, entity_data):
        entity = CatalogEntity(**entity_data, relations=[{"type": "ownedBy"}])

        assert entity.api_version == "backstage.io/v1alpha1"
        assert entity.model_extra == {"relations": [{"type": "ownedBy"}]}
        assert entity.spec["kubernetes"]["selector"]["matchLabels"]["app"] == "checkout"


class TestObjectsByEntityResponse:
    """Tests for the aggregated response model."""

    def test_wire_shape(self):
        response = ObjectsByEntityResponse(
            items=[
                ClusterObjects(
                    cluster=ClusterReference(name="prod"),
                    resources=[
                        FetchResponse(type=KubernetesObjectType.PODS, resources=[{"kind": "Pod"}])
                    ],
                    errors=[
                        FetchError(
                            error_type=KubernetesErrorType.SYSTEM_ERROR,
                            object_type=KubernetesObjectType.SERVICES,
                            status_code=500,
                        )
                    ],
                )
            ]
        )

        assert response.model_dump() == {
            "items": [
                {
                    "cluster": {"name": "prod"},
                    "resources": [{"type": "pods", "resources": [{"kind": "Pod"}]}],
                    "errors": [
                        {
                            "error_type": "SYSTEM_ERROR",
                            "object_type": "services",
                            "status_code": 500,
                            "resource_path": None,
                            "message": None,
                        }
                    ],
                }
            ]
        }

    def test_fetch_error_defaults_to_unknown(self):
        assert FetchError().error_type == "UNKNOWN_ERROR"
