"""
LAI SDK - One interface over multiple AI completion providers.

This package provides a unified interface for:
- OpenAI (GPT models)
- Anthropic (Claude models)
- Google Gemini
- Ollama (local models)

Features:
- Static capability table for choosing providers before instantiation
- Provider registry with best-effort construction from the environment
- Availability detection via live configuration checks
- Stream aggregation with chunk/complete/error observers
"""

__version__ = "0.1.0"

from .core.capabilities import (
    DEFAULT_CAPABILITIES,
    PROVIDER_CAPABILITIES,
    ProviderCapabilities,
    ProviderFeatures,
    get_provider_capabilities,
)
from .models.generation import (
    CompletionOptions,
    ProviderConfig,
    ProviderResponse,
    ProviderType,
)
from .providers import (
    Provider,
    ProviderConfigError,
    ProviderError,
    ProviderFactory,
    ProviderRegistry,
)
from .streaming import (
    CancellationToken,
    StreamCallbacks,
    StreamCancelledError,
    StreamManager,
    handle_stream,
)

__all__ = [
    # Registry and factory
    "ProviderRegistry",
    "ProviderFactory",
    "Provider",

    # Streaming
    "StreamManager",
    "StreamCallbacks",
    "CancellationToken",
    "StreamCancelledError",
    "handle_stream",

    # Capabilities
    "PROVIDER_CAPABILITIES",
    "DEFAULT_CAPABILITIES",
    "ProviderCapabilities",
    "ProviderFeatures",
    "get_provider_capabilities",

    # Models
    "ProviderType",
    "ProviderConfig",
    "CompletionOptions",
    "ProviderResponse",

    # Errors
    "ProviderError",
    "ProviderConfigError",
]
