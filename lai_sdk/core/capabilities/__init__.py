"""Capability table and capability-driven selection.

This layer handles:
- Static per-provider capability descriptors
- Lookup with explicit absence for unknown providers
- Filtering providers by capability before instantiation
"""

from .models import (
    DEFAULT_CAPABILITIES,
    PROVIDER_CAPABILITIES,
    ProviderCapabilities,
    ProviderFeatures,
    get_provider_capabilities,
)
from .policy import (
    filter_providers,
    largest_context_provider,
    matches_flags,
    providers_with,
    providers_without_api_key,
)

__all__ = [
    "DEFAULT_CAPABILITIES",
    "PROVIDER_CAPABILITIES",
    "ProviderCapabilities",
    "ProviderFeatures",
    "get_provider_capabilities",
    # Selection helpers
    "filter_providers",
    "largest_context_provider",
    "matches_flags",
    "providers_with",
    "providers_without_api_key",
]
