"""
Capability-driven provider selection helpers.

These functions work purely against the static capability table, so a
caller can narrow the provider set before instantiating anything.
"""

from typing import Callable, Iterable, List, Optional

from ...models.generation import ProviderType
from .models import ProviderCapabilities, ProviderFeatures, PROVIDER_CAPABILITIES

CapabilityPredicate = Callable[[ProviderCapabilities], bool]


def filter_providers(
    predicate: CapabilityPredicate,
    candidates: Optional[Iterable[ProviderType]] = None,
) -> List[ProviderType]:
    """
    Return the providers whose capabilities satisfy ``predicate``.

    Args:
        predicate: Called with each provider's capability descriptor
        candidates: Providers to consider (defaults to all known providers)

    Returns:
        Matching providers, in candidate order
    """
    if candidates is None:
        candidates = list(ProviderType)
    return [p for p in candidates if predicate(PROVIDER_CAPABILITIES[p])]


def matches_flags(caps: ProviderCapabilities, **flags) -> bool:
    """Check descriptor fields (or feature flags) against expected values.

    Unknown names are looked up on ``caps.features``; a name that exists on
    neither raises ValueError.
    """
    for name, expected in flags.items():
        if name in ProviderCapabilities.model_fields:
            actual = getattr(caps, name)
        elif name in ProviderFeatures.model_fields:
            actual = caps.has_feature(name)
        else:
            raise ValueError(f"Unknown capability: {name}")
        if actual != expected:
            return False
    return True


def providers_with(**flags) -> List[ProviderType]:
    """Providers whose descriptors match all given flags.

    Example: ``providers_with(supports_embeddings=True)``.
    """
    return filter_providers(lambda caps: matches_flags(caps, **flags))


def providers_without_api_key() -> List[ProviderType]:
    return providers_with(requires_api_key=False)


def largest_context_provider(
    candidates: Optional[Iterable[ProviderType]] = None,
) -> Optional[ProviderType]:
    """Provider with the largest context window (first wins on ties)."""
    best = None
    for provider in candidates if candidates is not None else ProviderType:
        if best is None or (
            PROVIDER_CAPABILITIES[provider].max_context_length
            > PROVIDER_CAPABILITIES[best].max_context_length
        ):
            best = provider
    return best
