"""Provider registry.

An in-memory catalog of provider instances keyed by ProviderType, plus
helpers that build a best-effort registry from the environment and check
which of its providers are usable.
"""

import asyncio
import logging
import threading
from typing import Callable, Dict, List, Optional, Union

from ..core.capabilities import ProviderCapabilities, matches_flags
from ..models.generation import ProviderConfig, ProviderType
from .base import Provider
from .factory import ConstructionResult, ProviderFactory

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Registry of provider instances.

    Holds at most one instance per ProviderType. Registering a second
    instance under the same type replaces the first. All catalog access
    goes through a single lock so the registry can be shared between
    threads.
    """

    def __init__(self):
        self._providers: Dict[ProviderType, Provider] = {}
        self._lock = threading.Lock()

    def register(self, provider: Provider) -> None:
        """Register a provider instance under its own type, replacing any prior one."""
        with self._lock:
            replaced = provider.type in self._providers
            self._providers[provider.type] = provider
        logger.debug(
            f"{'Replaced' if replaced else 'Registered'} provider '{provider.type.value}' "
            f"(model={provider.current_model})"
        )

    def get(self, provider_type: Union[ProviderType, str]) -> Optional[Provider]:
        """Get a provider by type.

        Args:
            provider_type: ProviderType member or its string value

        Returns:
            Provider instance or None if not registered or unknown
        """
        key = ProviderType.parse(provider_type)
        if key is None:
            return None
        with self._lock:
            return self._providers.get(key)

    def has(self, provider_type: Union[ProviderType, str]) -> bool:
        return self.get(provider_type) is not None

    def list(self) -> List[ProviderType]:
        """Registered provider types, in registration order."""
        with self._lock:
            return list(self._providers.keys())

    def get_all(self) -> List[Provider]:
        """Registered provider instances, same order as ``list``."""
        with self._lock:
            return list(self._providers.values())

    def unregister(self, provider_type: Union[ProviderType, str]) -> bool:
        """Remove a provider.

        Returns:
            True if a provider was removed, False if none was registered
        """
        key = ProviderType.parse(provider_type)
        if key is None:
            return False
        with self._lock:
            removed = self._providers.pop(key, None)
        if removed is not None:
            logger.debug(f"Unregistered provider '{key.value}'")
        return removed is not None

    def clear(self) -> None:
        with self._lock:
            self._providers.clear()

    def find(self, predicate: Callable[[ProviderCapabilities], bool]) -> List[ProviderType]:
        """Registered provider types whose capabilities satisfy ``predicate``."""
        return [p.type for p in self.get_all() if predicate(p.get_capabilities())]

    def find_by_capability(self, **flags) -> List[ProviderType]:
        """Registered provider types matching all capability flags.

        Example: ``registry.find_by_capability(supports_vision=True)``.
        """
        return self.find(lambda caps: matches_flags(caps, **flags))

    def __len__(self) -> int:
        with self._lock:
            return len(self._providers)

    def __contains__(self, provider_type) -> bool:
        return self.has(provider_type)

    @classmethod
    def create_default(cls) -> "ProviderRegistry":
        """
        Create a registry with every built-in provider that can be constructed.

        Each provider is built from environment configuration in isolation.
        Providers that fail (missing API key, invalid host) are logged and
        left out; this method never raises.

        Returns:
            Best-effort registry, holding between zero and all known providers
        """
        registry = cls()
        for result in cls._construct_defaults():
            if result.ok:
                registry.register(result.provider)
            else:
                logger.info(f"Skipping provider '{result.provider_type.value}': {result.reason}")
        return registry

    @staticmethod
    def _construct_defaults() -> List[ConstructionResult]:
        results = []
        for provider_type in ProviderType:
            try:
                config = ProviderConfig.from_env(provider_type)
            except Exception as e:
                results.append(ConstructionResult(provider_type, error=e))
                continue
            results.append(ProviderFactory.try_create(config))
        return results

    @classmethod
    async def detect_available(cls, concurrent: bool = True) -> List[ProviderType]:
        """
        Detect providers whose configuration validates.

        Builds a default registry and runs ``validate_config`` on each
        provider. Providers that return False or raise are excluded.

        Args:
            concurrent: Run validations concurrently (the result is the same
                either way)

        Returns:
            Usable provider types, in ``create_default`` order
        """
        providers = cls.create_default().get_all()

        try:
            if concurrent:
                outcomes = await asyncio.gather(
                    *(provider.validate_config() for provider in providers),
                    return_exceptions=True
                )
            else:
                outcomes = []
                for provider in providers:
                    try:
                        outcomes.append(await provider.validate_config())
                    except Exception as e:
                        outcomes.append(e)
        finally:
            # Instances built for the check are throwaway; release their clients
            await asyncio.gather(
                *(provider.close() for provider in providers),
                return_exceptions=True
            )

        available = []
        for provider, outcome in zip(providers, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.info(f"Provider '{provider.type.value}' unavailable: {outcome}")
            elif outcome:
                available.append(provider.type)
            else:
                logger.info(f"Provider '{provider.type.value}' failed configuration check")
        return available
