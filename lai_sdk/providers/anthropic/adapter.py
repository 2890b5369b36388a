from typing import AsyncIterator, List, Optional

from anthropic import AsyncAnthropic

from ..base import Provider, ProviderConfigError
from ..errors import ErrorMapper
from ...config.constants import DEFAULT_TIMEOUT_SECONDS
from ...config.providers import get_default_model
from ...models.generation import CompletionOptions, ProviderConfig, ProviderResponse, ProviderType
from ...observability.logging import ProviderLogger
from .parsers import extract_stream_text, extract_text_from_messages_response, extract_total_tokens
from .payloads import build_messages_params


logger = ProviderLogger("anthropic")


class AnthropicProvider(Provider):
    """Anthropic Claude Messages API provider."""

    type = ProviderType.ANTHROPIC

    def __init__(self, config: Optional[ProviderConfig] = None):
        config = self._resolve_config(config)
        if not config.api_key:
            raise ProviderConfigError(
                "Anthropic API key not configured (set ANTHROPIC_API_KEY)",
                provider=self.type.value
            )
        self._client: Optional[AsyncAnthropic] = None
        self._api_key = config.api_key
        self._base_url = config.base_url
        self._timeout = config.timeout or DEFAULT_TIMEOUT_SECONDS
        self.current_model = config.model or get_default_model(self.type)

    @property
    def client(self) -> AsyncAnthropic:
        """Lazy initialization of Anthropic client."""
        if self._client is None:
            self._client = AsyncAnthropic(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout
            )
        return self._client

    async def complete(self, options: CompletionOptions) -> ProviderResponse:
        model = self.resolve_model(options)
        with logger.track_request("complete", model):
            try:
                response = await self.client.messages.create(
                    **build_messages_params(options, model)
                )
            except Exception as e:
                raise ErrorMapper.map_error(e, self.type.value)

            return ProviderResponse(
                content=extract_text_from_messages_response(response),
                tokens_used=extract_total_tokens(response),
                model=model,
                finish_reason=getattr(response, "stop_reason", None)
            )

    async def stream(self, options: CompletionOptions) -> AsyncIterator[str]:
        model = self.resolve_model(options)
        with logger.track_request("stream", model) as trace:
            params = build_messages_params(options, model)
            params["stream"] = True
            try:
                stream = await self.client.messages.create(**params)
                async for event in stream:
                    text = extract_stream_text(event)
                    if text:
                        trace.record_fragment(text)
                        yield text
            except Exception as e:
                raise ErrorMapper.map_error(e, self.type.value)

    async def list_models(self) -> List[str]:
        try:
            return [model.id async for model in self.client.models.list()]
        except Exception as e:
            raise ErrorMapper.map_error(e, self.type.value)

    async def validate_config(self) -> bool:
        """Check the API key by listing models."""
        try:
            await self.list_models()
            return True
        except Exception as e:
            logger.debug("Configuration check failed", model=self.current_model, error_msg=str(e))
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
