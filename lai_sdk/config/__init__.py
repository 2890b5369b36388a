"""Configuration module for LAI SDK."""

from .providers import (
    PROVIDER_SETTINGS,
    get_default_base_url,
    get_default_model,
    load_provider_config,
)

# Import all constants
from .constants import *

__all__ = [
    "PROVIDER_SETTINGS",
    "get_default_base_url",
    "get_default_model",
    "load_provider_config",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_BUFFER_SIZE",
]
