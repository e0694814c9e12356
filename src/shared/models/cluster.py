"""Cluster domain models."""

from enum import Enum

from pydantic import ConfigDict, Field

from .base import FleetBaseModel


class AuthProvider(str, Enum):
    """Built-in authentication providers for cluster access."""

    SERVICE_ACCOUNT = "serviceAccount"
    GOOGLE = "google"
    OIDC = "oidc"
    LOCAL_KUBECTL_PROXY = "localKubectlProxy"


class ClusterDetails(FleetBaseModel):
    """Connection details of one cluster a service may run on.

    Produced by a cluster locator, then copied with credentials filled in by an
    auth translator. Instances are immutable; decoration returns a new one.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Cluster name, unique within a resolution")
    url: str = Field(description="Kubernetes API server URL")
    # Kept as a plain string so unregistered providers surface at lookup time
    auth_provider: str = Field(description="Auth provider key")
    service_account_token: str | None = Field(
        default=None, description="Bearer token used against the API server"
    )
    oidc_token_provider: str | None = Field(
        default=None, description="Key into auth.oidc of the request body"
    )
    skip_tls_verify: bool = False
    ca_file: str | None = Field(default=None, description="Path to a PEM CA bundle")


class ClusterSummary(FleetBaseModel):
    """Public view of a configured cluster (no credentials)."""

    name: str
    url: str
    auth_provider: str
