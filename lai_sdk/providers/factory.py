"""Provider construction.

The factory maps each ProviderType to its adapter class. ``try_create``
turns construction into a result value so bulk construction can keep
going when one provider cannot be built.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Type, Union

from ..core.capabilities import ProviderCapabilities, get_provider_capabilities
from ..models.generation import ProviderConfig, ProviderType
from .anthropic.adapter import AnthropicProvider
from .base import Provider, UnknownProviderError
from .gemini.adapter import GeminiProvider
from .ollama.adapter import OllamaProvider
from .openai.adapter import OpenAIProvider


PROVIDER_CLASSES: Dict[ProviderType, Type[Provider]] = {
    ProviderType.OPENAI: OpenAIProvider,
    ProviderType.ANTHROPIC: AnthropicProvider,
    ProviderType.GEMINI: GeminiProvider,
    ProviderType.OLLAMA: OllamaProvider,
}


@dataclass(frozen=True)
class ConstructionResult:
    """Outcome of one provider construction attempt.

    Exactly one of ``provider`` and ``error`` is set.
    """
    provider_type: ProviderType
    provider: Optional[Provider] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.provider is not None

    @property
    def reason(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class ProviderFactory:
    """Builds provider adapters from ProviderConfig."""

    @staticmethod
    def supported_types() -> List[ProviderType]:
        return list(PROVIDER_CLASSES)

    @staticmethod
    def create(config: ProviderConfig) -> Provider:
        """
        Build the adapter for ``config.type``.

        Raises:
            UnknownProviderError: If no adapter is registered for the type
            ProviderConfigError: If the adapter rejects the configuration
        """
        provider_cls = PROVIDER_CLASSES.get(config.type)
        # ProviderConfig already rejects unknown strings; this catches a
        # ProviderType member with no entry in PROVIDER_CLASSES.
        if provider_cls is None:
            raise UnknownProviderError(
                f"No adapter for provider type '{config.type}'",
                provider=str(config.type)
            )
        return provider_cls(config)

    @staticmethod
    def try_create(config: ProviderConfig) -> ConstructionResult:
        """Like ``create`` but returns failures instead of raising them."""
        try:
            return ConstructionResult(config.type, provider=ProviderFactory.create(config))
        except Exception as e:
            return ConstructionResult(config.type, error=e)

    @staticmethod
    def get_capabilities(
        provider: Union[ProviderType, str]
    ) -> Optional[ProviderCapabilities]:
        """Capabilities for a provider type without instantiating it."""
        return get_provider_capabilities(provider)
