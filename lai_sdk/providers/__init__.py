"""
Provider Layer

The Provider interface, the four built-in vendor adapters, the factory
that builds them from configuration and the registry that holds them.
"""

from .base import Provider, ProviderConfigError, ProviderError, UnknownProviderError
from .anthropic.adapter import AnthropicProvider
from .factory import ConstructionResult, PROVIDER_CLASSES, ProviderFactory
from .gemini.adapter import GeminiProvider
from .ollama.adapter import OllamaProvider
from .openai.adapter import OpenAIProvider
from .registry import ProviderRegistry

__all__ = [
    "Provider",
    "ProviderError",
    "ProviderConfigError",
    "UnknownProviderError",
    "ProviderFactory",
    "ConstructionResult",
    "PROVIDER_CLASSES",
    "ProviderRegistry",
    "OpenAIProvider",
    "AnthropicProvider",
    "GeminiProvider",
    "OllamaProvider",
]
