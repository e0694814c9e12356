"""Auth translator implementations.

Supports:
- Service account tokens from cluster configuration
- Google OAuth access tokens forwarded by the caller
- OIDC tokens forwarded by the caller, keyed by token provider
- Unauthenticated local kubectl proxies
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

from jose import JWTError, jwt

from shared.models import AuthProvider, ClusterDetails, KubernetesRequestBody
from shared.observability import get_logger

logger = get_logger(__name__)


class AuthDecorationError(Exception):
    """Raised when a cluster cannot be decorated with credentials."""

    def __init__(self, cluster_name: str, message: str):
        self.cluster_name = cluster_name
        super().__init__(f"{message} (cluster={cluster_name})")


class KubernetesAuthTranslator(ABC):
    """Abstract base class for auth translators.

    A translator returns a copy of the cluster details carrying whatever the
    fetcher needs to authenticate against that cluster.
    """

    provider: AuthProvider

    @abstractmethod
    async def decorate_cluster_details_with_auth(
        self,
        cluster_details: ClusterDetails,
        request_body: KubernetesRequestBody,
    ) -> ClusterDetails:
        """Return cluster details decorated with credentials."""
        pass


class ServiceAccountKubernetesAuthTranslator(KubernetesAuthTranslator):
    """Uses the service account token configured for the cluster."""

    provider = AuthProvider.SERVICE_ACCOUNT

    async def decorate_cluster_details_with_auth(
        self,
        cluster_details: ClusterDetails,
        request_body: KubernetesRequestBody,
    ) -> ClusterDetails:
        return cluster_details


class GoogleKubernetesAuthTranslator(KubernetesAuthTranslator):
    """Forwards the caller's Google access token to GKE clusters."""

    provider = AuthProvider.GOOGLE

    async def decorate_cluster_details_with_auth(
        self,
        cluster_details: ClusterDetails,
        request_body: KubernetesRequestBody,
    ) -> ClusterDetails:
        token = request_body.auth.google
        if not token:
            raise AuthDecorationError(
                cluster_details.name,
                "Google token not found under auth.google in request body",
            )
        return cluster_details.model_copy(update={"service_account_token": token})


class OidcKubernetesAuthTranslator(KubernetesAuthTranslator):
    """Forwards the caller's OIDC token for the cluster's token provider.

    Tokens that parse as JWTs are checked for expiry before being forwarded;
    signatures are left to the API server. Opaque tokens are passed as is.
    """

    provider = AuthProvider.OIDC

    async def decorate_cluster_details_with_auth(
        self,
        cluster_details: ClusterDetails,
        request_body: KubernetesRequestBody,
    ) -> ClusterDetails:
        token_provider = cluster_details.oidc_token_provider
        if not token_provider:
            raise AuthDecorationError(
                cluster_details.name,
                "oidc_token_provider must be configured for oidc clusters",
            )

        token = request_body.auth.oidc.get(token_provider)
        if not token:
            raise AuthDecorationError(
                cluster_details.name,
                f"OIDC token not found under auth.oidc.{token_provider} in request body",
            )

        if self._is_expired(token):
            raise AuthDecorationError(
                cluster_details.name,
                f"OIDC token for {token_provider} has expired",
            )

        return cluster_details.model_copy(update={"service_account_token": token})

    @staticmethod
    def _is_expired(token: str) -> bool:
        try:
            claims = jwt.get_unverified_claims(token)
        except JWTError:
            logger.debug("OIDC token is not a JWT, skipping expiry check")
            return False

        exp = claims.get("exp")
        if exp is None:
            return False
        return float(exp) <= time.time()


class NoopKubernetesAuthTranslator(KubernetesAuthTranslator):
    """No credentials; for clusters reached through `kubectl proxy`."""

    provider = AuthProvider.LOCAL_KUBECTL_PROXY

    async def decorate_cluster_details_with_auth(
        self,
        cluster_details: ClusterDetails,
        request_body: KubernetesRequestBody,
    ) -> ClusterDetails:
        return cluster_details.model_copy(update={"service_account_token": None})
