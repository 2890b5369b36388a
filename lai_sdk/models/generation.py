from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class ProviderType(str, Enum):
    """Supported AI completion providers."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"
    OLLAMA = "ollama"

    @classmethod
    def parse(cls, value) -> Optional["ProviderType"]:
        """Resolve a string or member to a ProviderType, or None if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class CompletionOptions(BaseModel):
    """
    Normalized completion request shared by every provider.

    Adapters translate these fields into their vendor-specific request
    bodies; fields left as None fall back to the adapter's defaults.
    """
    prompt: str = Field(..., description="User prompt")
    model: Optional[str] = Field(None, description="Model override; defaults to the provider's current model")
    temperature: Optional[float] = Field(None, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: Optional[int] = Field(None, ge=1, description="Maximum tokens to generate")
    system_prompt: Optional[str] = Field(None, description="System instruction")


class ProviderResponse(BaseModel):
    """Response model for a non-streaming completion."""
    content: str
    tokens_used: Optional[int] = None
    model: str
    finish_reason: Optional[str] = None


class ProviderConfig(BaseModel):
    """Configuration used to construct a provider adapter."""
    type: ProviderType
    api_key: Optional[str] = None
    model: Optional[str] = None
    base_url: Optional[str] = None
    timeout: Optional[float] = Field(None, gt=0, description="Request timeout in seconds")

    @classmethod
    def from_env(cls, provider_type: ProviderType) -> "ProviderConfig":
        """Build a config for ``provider_type`` from environment variables."""
        from ..config.providers import load_provider_config
        return load_provider_config(provider_type)
