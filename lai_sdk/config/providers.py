# Provider settings resolved from the environment
import os
from typing import Dict, Optional

from dotenv import load_dotenv

from ..models.generation import ProviderConfig, ProviderType
from .constants import MODEL_OVERRIDE_ENV_PREFIX

# Load environment variables
load_dotenv()


PROVIDER_SETTINGS: Dict[ProviderType, Dict] = {
    ProviderType.OPENAI: {
        "api_key_env": ("OPENAI_API_KEY",),
        "base_url_env": "OPENAI_BASE_URL",
        "default_model": "gpt-4o-mini",
        "default_base_url": None,  # SDK default
    },
    ProviderType.ANTHROPIC: {
        "api_key_env": ("ANTHROPIC_API_KEY",),
        "base_url_env": "ANTHROPIC_BASE_URL",
        "default_model": "claude-3-5-sonnet-20241022",
        "default_base_url": None,
    },
    ProviderType.GEMINI: {
        "api_key_env": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
        "base_url_env": "GEMINI_BASE_URL",
        "default_model": "gemini-1.5-pro",
        "default_base_url": "https://generativelanguage.googleapis.com/v1beta",
    },
    ProviderType.OLLAMA: {
        "api_key_env": (),
        "base_url_env": "OLLAMA_HOST",
        "default_model": "llama3",
        "default_base_url": "http://localhost:11434",
    },
}


def model_override_env(provider_type: ProviderType) -> str:
    """Name of the env var that overrides a provider's default model."""
    return f"{MODEL_OVERRIDE_ENV_PREFIX}{provider_type.value.upper()}_MODEL"


def get_default_model(provider_type: ProviderType) -> str:
    """Get the default model for a provider, honouring the env override."""
    settings = PROVIDER_SETTINGS[provider_type]
    return os.getenv(model_override_env(provider_type)) or settings["default_model"]


def get_default_base_url(provider_type: ProviderType) -> Optional[str]:
    settings = PROVIDER_SETTINGS[provider_type]
    return os.getenv(settings["base_url_env"]) or settings["default_base_url"]


def _first_env(names) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def load_provider_config(provider_type: ProviderType) -> ProviderConfig:
    """
    Build a ProviderConfig from environment variables.

    Missing credentials are left as None; it is the adapter's job to
    refuse construction when it needs one.

    Args:
        provider_type: Provider to build a config for

    Returns:
        ProviderConfig populated from the environment
    """
    settings = PROVIDER_SETTINGS[provider_type]
    return ProviderConfig(
        type=provider_type,
        api_key=_first_env(settings["api_key_env"]),
        model=get_default_model(provider_type),
        base_url=get_default_base_url(provider_type),
    )
