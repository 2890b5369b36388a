"""
Shared constants for the LAI SDK.

Defaults applied by adapters and the stream manager when the caller
does not supply a value.
"""

# Request defaults
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_MAX_TOKENS = 1024

# Streaming
DEFAULT_BUFFER_SIZE = 10  # characters per re-chunked buffer

# Environment variable prefix for model overrides (e.g. LAI_OPENAI_MODEL)
MODEL_OVERRIDE_ENV_PREFIX = "LAI_"
