"""Registry of auth translators keyed by provider."""

from __future__ import annotations

from collections.abc import Iterable

from shared.models import AuthProvider
from shared.observability import get_logger

from .translators import (
    GoogleKubernetesAuthTranslator,
    KubernetesAuthTranslator,
    NoopKubernetesAuthTranslator,
    OidcKubernetesAuthTranslator,
    ServiceAccountKubernetesAuthTranslator,
)

logger = get_logger(__name__)


class AuthProviderNotFoundError(LookupError):
    """Raised when no translator is registered for a provider key."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(
            f"authProvider '{provider}' has no KubernetesAuthTranslator associated with it"
        )


class AuthTranslatorRegistry:
    """Maps provider keys to auth translators."""

    def __init__(self):
        self._translators: dict[str, KubernetesAuthTranslator] = {}

    def register(
        self,
        translator: KubernetesAuthTranslator,
        provider: str | AuthProvider | None = None,
    ) -> None:
        key = _key(provider if provider is not None else translator.provider)
        if key in self._translators:
            logger.warning("Replacing auth translator", provider=key)
        self._translators[key] = translator

    def resolve(self, provider: str | AuthProvider) -> KubernetesAuthTranslator:
        """Get the translator for a provider key.

        Raises:
            AuthProviderNotFoundError: If the key is not registered
        """
        key = _key(provider)
        translator = self._translators.get(key)
        if translator is None:
            raise AuthProviderNotFoundError(key)
        return translator

    def providers(self) -> Iterable[str]:
        return self._translators.keys()

    def has_provider(self, provider: str | AuthProvider) -> bool:
        return _key(provider) in self._translators


def _key(provider: str | AuthProvider) -> str:
    return provider.value if isinstance(provider, AuthProvider) else provider


def create_default_registry() -> AuthTranslatorRegistry:
    """Create a registry holding every built-in translator."""
    registry = AuthTranslatorRegistry()
    registry.register(ServiceAccountKubernetesAuthTranslator())
    registry.register(GoogleKubernetesAuthTranslator())
    registry.register(OidcKubernetesAuthTranslator())
    registry.register(NoopKubernetesAuthTranslator())
    return registry


_REGISTRY: AuthTranslatorRegistry | None = None


def get_auth_translator_registry() -> AuthTranslatorRegistry:
    """Get the process-wide registry, populated with built-in translators."""
    global _REGISTRY
    if _REGISTRY is None:
        _REGISTRY = create_default_registry()
    return _REGISTRY
