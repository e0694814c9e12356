"""Cluster authentication strategies."""

from .registry import (
    AuthProviderNotFoundError,
    AuthTranslatorRegistry,
    create_default_registry,
    get_auth_translator_registry,
)
from .translators import (
    AuthDecorationError,
    GoogleKubernetesAuthTranslator,
    KubernetesAuthTranslator,
    NoopKubernetesAuthTranslator,
    OidcKubernetesAuthTranslator,
    ServiceAccountKubernetesAuthTranslator,
)

__all__ = [
    "AuthDecorationError",
    "AuthProviderNotFoundError",
    "AuthTranslatorRegistry",
    "GoogleKubernetesAuthTranslator",
    "KubernetesAuthTranslator",
    "NoopKubernetesAuthTranslator",
    "OidcKubernetesAuthTranslator",
    "ServiceAccountKubernetesAuthTranslator",
    "create_default_registry",
    "get_auth_translator_registry",
]
