"""Catalog entity and request body models."""

from typing import Any

from pydantic import ConfigDict, Field

from .base import FleetBaseModel


class CatalogEntity(FleetBaseModel):
    """Catalog entity describing a service.

    Only ``spec.kubernetes.selector.matchLabels`` is interpreted; everything
    else is carried through untouched.
    """

    model_config = ConfigDict(extra="allow")

    api_version: str | None = Field(default=None, alias="apiVersion")
    kind: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    spec: dict[str, Any] = Field(default_factory=dict)


class KubernetesRequestAuth(FleetBaseModel):
    """Caller-supplied credentials forwarded to auth translators."""

    google: str | None = Field(default=None, description="Google OAuth access token")
    oidc: dict[str, str] = Field(
        default_factory=dict, description="OIDC tokens keyed by token provider name"
    )


class KubernetesRequestBody(FleetBaseModel):
    """Body of a workload lookup request."""

    auth: KubernetesRequestAuth = Field(default_factory=KubernetesRequestAuth)
    entity: CatalogEntity
