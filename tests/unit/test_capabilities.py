"""Unit tests for the provider capability table and selection helpers."""

import pytest
from pydantic import ValidationError

from lai_sdk.core.capabilities import (
    DEFAULT_CAPABILITIES,
    PROVIDER_CAPABILITIES,
    ProviderCapabilities,
    filter_providers,
    get_provider_capabilities,
    largest_context_provider,
    matches_flags,
    providers_with,
    providers_without_api_key,
)
from lai_sdk.models.generation import ProviderConfig, ProviderType
from lai_sdk.providers.factory import ProviderFactory


class TestCapabilityTable:
    """Test the static capability table."""

    def test_every_provider_has_capabilities(self):
        """Every known provider type has exactly one descriptor."""
        assert set(PROVIDER_CAPABILITIES) == set(ProviderType)

    def test_openai_capabilities(self):
        """OpenAI supports vision, embeddings and JSON mode."""
        caps = PROVIDER_CAPABILITIES[ProviderType.OPENAI]

        assert caps.supports_streaming is True
        assert caps.supports_embeddings is True
        assert caps.supports_vision is True
        assert caps.requires_api_key is True
        assert caps.max_context_length == 128000
        assert caps.features.function_calling is True
        assert caps.features.json_mode is True
        assert caps.features.tool_use is True

    def test_anthropic_capabilities(self):
        """Anthropic has a 200k context and no embeddings."""
        caps = PROVIDER_CAPABILITIES[ProviderType.ANTHROPIC]

        assert caps.supports_streaming is True
        assert caps.supports_embeddings is False
        assert caps.supports_vision is True
        assert caps.requires_api_key is True
        assert caps.max_context_length == 200000
        assert caps.features.function_calling is True
        assert caps.features.tool_use is True
        assert caps.features.json_mode is None

    def test_gemini_capabilities(self):
        """Gemini advertises the largest context window."""
        caps = PROVIDER_CAPABILITIES[ProviderType.GEMINI]

        assert caps.supports_streaming is True
        assert caps.supports_embeddings is False
        assert caps.supports_vision is True
        assert caps.requires_api_key is True
        assert caps.max_context_length == 1000000
        assert caps.features.function_calling is True

    def test_ollama_capabilities(self):
        """Ollama runs locally without an API key."""
        caps = PROVIDER_CAPABILITIES[ProviderType.OLLAMA]

        assert caps.supports_streaming is True
        assert caps.supports_embeddings is True
        assert caps.supports_vision is False
        assert caps.requires_api_key is False
        assert caps.max_context_length == 4096
        assert caps.features is None

    def test_lookup_is_deterministic(self):
        """Repeated lookups return the same descriptor."""
        for provider_type in ProviderType:
            first = get_provider_capabilities(provider_type)
            second = get_provider_capabilities(provider_type.value)
            assert first == second
            assert first is PROVIDER_CAPABILITIES[provider_type]

    def test_unknown_provider_is_absent(self):
        """Unknown identifiers yield None, never the default descriptor."""
        assert get_provider_capabilities("mistral") is None
        assert get_provider_capabilities("") is None

    def test_default_capabilities(self):
        """The fallback descriptor is not one of the table entries."""
        assert DEFAULT_CAPABILITIES.supports_streaming is True
        assert DEFAULT_CAPABILITIES.requires_api_key is True
        assert DEFAULT_CAPABILITIES.max_context_length == 4096
        assert DEFAULT_CAPABILITIES not in PROVIDER_CAPABILITIES.values()

    def test_table_is_read_only(self):
        """The capability table cannot be mutated."""
        with pytest.raises(TypeError):
            PROVIDER_CAPABILITIES[ProviderType.OPENAI] = DEFAULT_CAPABILITIES

    def test_descriptors_are_immutable(self):
        """Capability descriptors are frozen."""
        caps = PROVIDER_CAPABILITIES[ProviderType.OPENAI]
        with pytest.raises(ValidationError):
            caps.max_context_length = 1

    def test_supported_file_types_are_frozen(self):
        """File type lists are stored as immutable tuples."""
        caps = ProviderCapabilities(
            supports_streaming=True,
            supports_embeddings=False,
            supports_vision=False,
            requires_api_key=False,
            max_context_length=2048,
            supported_file_types=["py", "md"],
        )
        assert caps.supported_file_types == frozenset({"py", "md"})


class TestProviderCapabilityReporting:
    """Providers report the table entry for their type."""

    @pytest.mark.parametrize("provider_type", [
        ProviderType.OPENAI, ProviderType.ANTHROPIC, ProviderType.GEMINI
    ])
    def test_keyed_provider_reports_table_entry(self, provider_type):
        """A keyed adapter reports its table entry."""
        provider = ProviderFactory.create(ProviderConfig(type=provider_type, api_key="test-key"))
        assert provider.get_capabilities() == PROVIDER_CAPABILITIES[provider_type]

    def test_ollama_reports_table_entry(self, clean_env):
        """The Ollama adapter reports its table entry."""
        provider = ProviderFactory.create(ProviderConfig(type=ProviderType.OLLAMA))
        assert provider.get_capabilities() == PROVIDER_CAPABILITIES[ProviderType.OLLAMA]

    def test_factory_capabilities_without_instantiation(self):
        """The factory answers capability queries without building a provider."""
        openai_caps = ProviderFactory.get_capabilities("openai")
        anthropic_caps = ProviderFactory.get_capabilities(ProviderType.ANTHROPIC)

        assert openai_caps.supports_embeddings is True
        assert anthropic_caps.supports_embeddings is False
        assert ProviderFactory.get_capabilities("unknown") is None


class TestCapabilitySelection:
    """Test capability-based provider filtering."""

    def test_all_providers_stream(self):
        """Every provider supports streaming."""
        streaming = filter_providers(lambda caps: caps.supports_streaming)
        assert len(streaming) == 4

    def test_embedding_providers(self):
        """Embeddings are offered by OpenAI and Ollama."""
        assert providers_with(supports_embeddings=True) == [ProviderType.OPENAI, ProviderType.OLLAMA]

    def test_vision_providers(self):
        """Vision support matches the table."""
        assert providers_with(supports_vision=True) == [
            ProviderType.OPENAI, ProviderType.ANTHROPIC, ProviderType.GEMINI
        ]

    def test_providers_without_api_key(self):
        """Only Ollama works without an API key."""
        assert providers_without_api_key() == [ProviderType.OLLAMA]

    def test_feature_flags(self):
        """Feature flags combine with top-level capabilities."""
        assert providers_with(json_mode=True) == [ProviderType.OPENAI]
        assert providers_with(tool_use=True, supports_vision=True) == [
            ProviderType.OPENAI, ProviderType.ANTHROPIC
        ]

    def test_unknown_flag_rejected(self):
        """An unknown flag name raises."""
        with pytest.raises(ValueError):
            matches_flags(DEFAULT_CAPABILITIES, supports_teleport=True)

    def test_largest_context(self):
        """The largest context belongs to Gemini."""
        assert largest_context_provider() == ProviderType.GEMINI
        assert largest_context_provider([ProviderType.OPENAI, ProviderType.OLLAMA]) == ProviderType.OPENAI
        assert largest_context_provider([]) is None

    def test_filter_respects_candidate_order(self):
        """Filtering keeps the order of the candidates."""
        candidates = [ProviderType.OLLAMA, ProviderType.OPENAI]
        assert filter_providers(lambda caps: caps.supports_embeddings, candidates) == candidates
