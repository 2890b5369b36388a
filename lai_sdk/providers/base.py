"""
Base Provider Interface

This module defines the abstract base class every vendor adapter must
implement, plus the exception types adapters raise. The registry and the
stream manager only ever talk to providers through this interface.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator, List, Optional

from ..core.capabilities import PROVIDER_CAPABILITIES, ProviderCapabilities
from ..models.generation import CompletionOptions, ProviderConfig, ProviderResponse, ProviderType


class Provider(ABC):
    """
    Abstract base class for AI completion providers.

    A provider instance is bound to exactly one ``ProviderType`` and
    carries a ``current_model`` used when a request does not name one.

    The adapter is responsible for:
    - Translating CompletionOptions to the vendor request shape
    - Making API calls to the vendor
    - Normalizing responses to ProviderResponse
    - Mapping vendor errors to ProviderError

    Adapters should NOT contain retry, rate-limiting or cross-provider logic.
    """

    type: ProviderType
    current_model: str

    @abstractmethod
    async def complete(self, options: CompletionOptions) -> ProviderResponse:
        """
        Issue a non-streaming completion.

        Args:
            options: Prompt and sampling options

        Returns:
            ProviderResponse with content, model, and optional token count
            and finish reason

        Raises:
            ProviderError: For vendor/transport failures
        """
        pass

    @abstractmethod
    def stream(self, options: CompletionOptions) -> AsyncIterator[str]:
        """
        Issue a streaming completion.

        Implementations are async generators: calling ``stream`` returns a
        single-pass iterator of text fragments in arrival order.

        Raises:
            ProviderError: While iterating, for vendor/transport failures
        """
        pass

    @abstractmethod
    async def list_models(self) -> List[str]:
        """List model identifiers available to this provider."""
        pass

    @abstractmethod
    async def validate_config(self) -> bool:
        """
        Check that the current configuration is usable.

        Typically exercises a cheap API call. Returns False rather than
        raising when the provider is unreachable or misconfigured.
        """
        pass

    def get_capabilities(self) -> ProviderCapabilities:
        """Report this provider's static capability descriptor."""
        return PROVIDER_CAPABILITIES[self.type]

    def resolve_model(self, options: CompletionOptions) -> str:
        """Model to use for a request: the explicit one, else current_model."""
        return options.model or self.current_model

    async def close(self) -> None:
        """Release network resources held by the adapter."""
        pass

    @classmethod
    def _resolve_config(cls, config: Optional[ProviderConfig]) -> ProviderConfig:
        """Use ``config`` if given, else read one from the environment."""
        if config is None:
            return ProviderConfig.from_env(cls.type)
        if config.type != cls.type:
            raise ProviderConfigError(
                f"{cls.__name__} cannot be built from a '{config.type.value}' config",
                provider=cls.type.value
            )
        return config

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.type.value!r}, model={self.current_model!r})"


class ProviderError(Exception):
    """
    Base exception for provider-related errors.

    Raised for transport errors, authentication failures, rate limiting
    and other vendor-side failures. ``is_retryable`` is informational;
    this package never retries on its own.

    Attributes:
        provider: Provider name
        status_code: HTTP status code if applicable
        retry_after: Seconds the vendor asked to wait, if given
        is_retryable: Whether a higher layer could reasonably retry
        original_error: The wrapped exception, if any
    """

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: Optional[int] = None,
        retry_after: Optional[float] = None
    ):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.retry_after = retry_after
        self.is_retryable = False  # Set by the error mapper
        self.original_error: Optional[BaseException] = None


class ProviderConfigError(ProviderError):
    """A provider could not be constructed from its configuration."""


class UnknownProviderError(ProviderError):
    """A provider type outside the supported set was requested."""
