"""Data models shared across providers, the registry and streaming."""

from .generation import (
    CompletionOptions,
    ProviderConfig,
    ProviderResponse,
    ProviderType,
)

__all__ = [
    "CompletionOptions",
    "ProviderConfig",
    "ProviderResponse",
    "ProviderType",
]
