"""
Error mapping utilities for provider adapters.

Converts vendor SDK and transport exceptions into ProviderError so that
callers see one exception type regardless of the provider.
"""

from typing import Optional

import httpx

from .base import ProviderError


PROVIDER_LABELS = {
    "openai": "OpenAI",
    "anthropic": "Anthropic",
    "gemini": "Gemini",
    "ollama": "Ollama",
}

RATE_LIMIT_PHRASES = ('rate limit', 'too many requests', 'quota exceeded', 'too_many_requests')


class ErrorMapper:
    """Maps provider-specific errors to standardized ProviderError."""

    # HTTP status codes that indicate retryable errors
    RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    @staticmethod
    def get_status_code(error: Exception) -> Optional[int]:
        status_code = getattr(error, 'status_code', None)
        if status_code is None and isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code
        return status_code

    @staticmethod
    def is_retryable(error: Exception) -> bool:
        """
        Determine if an error is retryable.

        Args:
            error: The exception to check

        Returns:
            bool: True if the error is retryable
        """
        status_code = ErrorMapper.get_status_code(error)
        if status_code is not None and status_code in ErrorMapper.RETRYABLE_STATUS_CODES:
            return True

        if isinstance(error, (httpx.TimeoutException, httpx.ConnectError)):
            return True

        error_msg = str(error).lower()
        return any(phrase in error_msg for phrase in RATE_LIMIT_PHRASES)

    @staticmethod
    def get_retry_after(error: Exception) -> Optional[float]:
        """
        Extract retry-after value from error if available.

        Args:
            error: The exception to check

        Returns:
            Optional[float]: Seconds to wait before retry, or None
        """
        response = getattr(error, 'response', None)
        headers = getattr(response, 'headers', None)
        if headers is not None:
            retry_after = headers.get('Retry-After')
            if retry_after:
                try:
                    return float(retry_after)
                except ValueError:
                    pass

        return getattr(error, 'retry_after', None)

    @staticmethod
    def map_error(error: Exception, provider: str) -> ProviderError:
        """
        Map a vendor or transport error to ProviderError.

        ProviderErrors pass through unchanged.

        Args:
            error: The exception raised by the vendor SDK or httpx
            provider: Provider name (e.g., "openai")

        Returns:
            ProviderError with status, retry metadata and the original error
        """
        if isinstance(error, ProviderError):
            return error

        label = PROVIDER_LABELS.get(provider, provider)
        status_code = ErrorMapper.get_status_code(error)
        error_type = type(error).__name__

        if status_code == 401 or error_type == 'AuthenticationError':
            message = f"{label} authentication failed: {error}"
            status_code = status_code or 401
        elif status_code == 429 or error_type == 'RateLimitError':
            message = f"{label} rate limit exceeded: {error}"
            status_code = status_code or 429
        elif isinstance(error, httpx.TimeoutException):
            message = f"{label} request timed out: {error}"
        elif isinstance(error, httpx.ConnectError):
            message = f"{label} connection failed: {error}"
        else:
            message = f"{label} API error: {error}"

        provider_error = ProviderError(
            message=message,
            provider=provider,
            status_code=status_code,
            retry_after=ErrorMapper.get_retry_after(error)
        )
        provider_error.is_retryable = ErrorMapper.is_retryable(error)
        provider_error.original_error = error

        return provider_error
