from typing import AsyncIterator, List, Optional

from openai import AsyncOpenAI

from ..base import Provider, ProviderConfigError
from ..errors import ErrorMapper
from ...config.constants import DEFAULT_TIMEOUT_SECONDS
from ...config.providers import get_default_model
from ...models.generation import CompletionOptions, ProviderConfig, ProviderResponse, ProviderType
from ...observability.logging import ProviderLogger
from .parsers import (
    extract_finish_reason,
    extract_model,
    extract_stream_delta,
    extract_text_from_chat_completion,
    extract_total_tokens,
)
from .payloads import build_chat_params

logger = ProviderLogger("openai")


class OpenAIProvider(Provider):
    """OpenAI Chat Completions provider."""

    type = ProviderType.OPENAI

    def __init__(self, config: Optional[ProviderConfig] = None):
        config = self._resolve_config(config)
        if not config.api_key:
            raise ProviderConfigError(
                "OpenAI API key not configured (set OPENAI_API_KEY)",
                provider=self.type.value
            )
        self._client: Optional[AsyncOpenAI] = None
        self._api_key = config.api_key
        self._base_url = config.base_url
        self._timeout = config.timeout or DEFAULT_TIMEOUT_SECONDS
        self.current_model = config.model or get_default_model(self.type)

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy initialization of OpenAI client."""
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout
            )
        return self._client

    async def complete(self, options: CompletionOptions) -> ProviderResponse:
        model = self.resolve_model(options)
        with logger.track_request("complete", model):
            try:
                response = await self.client.chat.completions.create(
                    **build_chat_params(options, model)
                )
            except Exception as e:
                raise ErrorMapper.map_error(e, self.type.value)

            return ProviderResponse(
                content=extract_text_from_chat_completion(response),
                tokens_used=extract_total_tokens(response),
                model=extract_model(response, model),
                finish_reason=extract_finish_reason(response)
            )

    async def stream(self, options: CompletionOptions) -> AsyncIterator[str]:
        model = self.resolve_model(options)
        with logger.track_request("stream", model) as trace:
            params = build_chat_params(options, model)
            params["stream"] = True
            try:
                stream = await self.client.chat.completions.create(**params)
                async for chunk in stream:
                    text = extract_stream_delta(chunk)
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
