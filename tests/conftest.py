"""Shared pytest fixtures for LAI SDK tests."""

import pytest
from dotenv import load_dotenv
from unittest.mock import Mock, AsyncMock

# Load environment variables from .env file for tests
load_dotenv()

from lai_sdk.models.generation import CompletionOptions, ProviderConfig, ProviderType
from tests.helpers.streaming_mocks import (
    async_iter, create_anthropic_stream, create_openai_stream
)


PROVIDER_ENV_VARS = [
    "OPENAI_API_KEY", "OPENAI_BASE_URL", "LAI_OPENAI_MODEL",
    "ANTHROPIC_API_KEY", "ANTHROPIC_BASE_URL", "LAI_ANTHROPIC_MODEL",
    "GEMINI_API_KEY", "GOOGLE_API_KEY", "GEMINI_BASE_URL", "LAI_GEMINI_MODEL",
    "OLLAMA_HOST", "LAI_OLLAMA_MODEL",
]


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no I/O")
    config.addinivalue_line("markers", "integration: end-to-end tests across layers")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every provider-related environment variable."""
    for key in PROVIDER_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_env_vars(clean_env, monkeypatch):
    """Mock credentials for every provider that needs one."""
    env_vars = {
        "OPENAI_API_KEY": "test-openai-key",
        "ANTHROPIC_API_KEY": "test-anthropic-key",
        "GEMINI_API_KEY": "test-gemini-key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def sample_options():
    """Sample completion options."""
    return CompletionOptions(
        prompt="Test prompt",
        temperature=0.5,
        max_tokens=100,
        system_prompt="You are helpful"
    )


@pytest.fixture
def openai_config():
    return ProviderConfig(type=ProviderType.OPENAI, api_key="test-key", model="gpt-4o-mini")


@pytest.fixture
def anthropic_config():
    return ProviderConfig(type=ProviderType.ANTHROPIC, api_key="test-key", model="claude-3-5-sonnet-20241022")


@pytest.fixture
def mock_openai_client():
    """Mock OpenAI client."""
    client = AsyncMock()

    completion = Mock()
    completion.choices = [Mock(message=Mock(content="Test response"), finish_reason="stop")]
    completion.usage = Mock(prompt_tokens=10, completion_tokens=5, total_tokens=15)
    completion.model = "gpt-4o-mini-2024-07-18"

    chunks = ["Test", " response", " streaming"]

    async def create_response(**kwargs):
        if kwargs.get("stream"):
            return create_openai_stream(chunks)
        return completion

    client.chat.completions.create = AsyncMock(side_effect=create_response)
    client.models.list = Mock(
        side_effect=lambda: async_iter([Mock(id="gpt-4o-mini"), Mock(id="gpt-4o")])
    )

    return client


@pytest.fixture
def mock_anthropic_client():
    """Mock Anthropic client."""
    client = AsyncMock()

    message = Mock()
    message.content = [Mock(type="text", text="Test "), Mock(type="text", text="response")]
    message.stop_reason = "end_turn"
    message.usage = Mock(input_tokens=10, output_tokens=5)

    chunks = ["Test", " response"]

    async def create_response(**kwargs):
        if kwargs.get("stream"):
            return create_anthropic_stream(chunks)
        return message

    client.messages.create = AsyncMock(side_effect=create_response)
    client.models.list = Mock(
        side_effect=lambda: async_iter([Mock(id="claude-3-5-sonnet-20241022")])
    )

    return client
