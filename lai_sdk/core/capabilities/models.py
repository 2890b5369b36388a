"""
Provider capability models for feature detection.

Defines what each provider supports so callers can choose a provider
by capability instead of hardcoding provider names.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ...models.generation import ProviderType


class ProviderFeatures(BaseModel):
    """Fine-grained, provider-specific feature flags."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    function_calling: Optional[bool] = Field(None, description="Function calling support")
    json_mode: Optional[bool] = Field(None, description="Native JSON output mode")
    tool_use: Optional[bool] = Field(None, description="Tool use support")


class ProviderCapabilities(BaseModel):
    """Capabilities supported by a provider."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    supports_streaming: bool = Field(..., description="Real-time streaming responses")
    supports_embeddings: bool = Field(..., description="Embedding generation")
    supports_vision: bool = Field(..., description="Image inputs")
    requires_api_key: bool = Field(..., description="API key required for authentication")
    max_context_length: int = Field(..., gt=0, description="Maximum context window in tokens")
    supported_file_types: Optional[FrozenSet[str]] = Field(None, description="File types accepted as context")
    features: Optional[ProviderFeatures] = Field(None, description="Additional provider-specific features")

    def has_feature(self, name: str) -> bool:
        """Return True if the named feature flag is set on this descriptor."""
        if self.features is None:
            return False
        return bool(getattr(self.features, name, False))


# Fallback for callers that need a descriptor rather than an absent result.
# Never attributed to a real provider identifier.
DEFAULT_CAPABILITIES = ProviderCapabilities(
    supports_streaming=True,
    supports_embeddings=False,
    supports_vision=False,
    requires_api_key=True,
    max_context_length=4096,
)


_PROVIDER_CAPABILITIES = {
    ProviderType.OPENAI: ProviderCapabilities(
        supports_streaming=True,
        supports_embeddings=True,
        supports_vision=True,
        requires_api_key=True,
        max_context_length=128000,  # GPT-4 Turbo
        features=ProviderFeatures(
            function_calling=True,
            json_mode=True,
            tool_use=True,
        ),
    ),

    ProviderType.ANTHROPIC: ProviderCapabilities(
        supports_streaming=True,
        supports_embeddings=False,
        supports_vision=True,
        requires_api_key=True,
        max_context_length=200000,  # Claude 3
        features=ProviderFeatures(
            function_calling=True,
            tool_use=True,
        ),
    ),

    ProviderType.GEMINI: ProviderCapabilities(
        supports_streaming=True,
        supports_embeddings=False,
        supports_vision=True,
        requires_api_key=True,
        max_context_length=1000000,  # Gemini 1.5 Pro
        features=ProviderFeatures(
            function_calling=True,
        ),
    ),

    ProviderType.OLLAMA: ProviderCapabilities(
        supports_streaming=True,
        supports_embeddings=True,
        supports_vision=False,  # Depends on model
        requires_api_key=False,
        max_context_length=4096,  # Varies by model
    ),
}

missing = set(ProviderType) - set(_PROVIDER_CAPABILITIES)
if missing:
    raise RuntimeError(f"No capability descriptor for: {sorted(p.value for p in missing)}")
del missing

# Read-only view keyed by ProviderType
PROVIDER_CAPABILITIES: Mapping[ProviderType, ProviderCapabilities] = MappingProxyType(_PROVIDER_CAPABILITIES)


def get_provider_capabilities(
    provider: Union[ProviderType, str]
) -> Optional[ProviderCapabilities]:
    """
    Look up the capability descriptor for a provider.

    Args:
        provider: ProviderType member or its string value

    Returns:
        ProviderCapabilities, or None for identifiers outside the known set
    """
    provider_type = ProviderType.parse(provider)
    if provider_type is None:
        return None
    return PROVIDER_CAPABILITIES[provider_type]
