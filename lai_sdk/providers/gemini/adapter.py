from typing import AsyncIterator, List, Optional

import httpx

from ..base import Provider, ProviderConfigError
from ..errors import ErrorMapper
from ...config.constants import DEFAULT_TIMEOUT_SECONDS
from ...config.providers import get_default_base_url, get_default_model
from ...models.generation import CompletionOptions, ProviderConfig, ProviderResponse, ProviderType
from ...observability.logging import ProviderLogger
from .parsers import (
    extract_finish_reason,
    extract_text,
    extract_total_tokens,
    parse_sse_line,
    strip_model_prefix,
)
from .payloads import build_generate_content_body, model_path

logger = ProviderLogger("gemini")


class GeminiProvider(Provider):
    """Google Gemini provider over the Generative Language REST API."""

    type = ProviderType.GEMINI

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        config = self._resolve_config(config)
        if not config.api_key:
            raise ProviderConfigError(
                "Gemini API key not configured (set GEMINI_API_KEY or GOOGLE_API_KEY)",
                provider=self.type.value
            )
        self._api_key = config.api_key
        self._base_url = config.base_url or get_default_base_url(self.type)
        self._timeout = config.timeout or DEFAULT_TIMEOUT_SECONDS
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None
        self.current_model = config.model or get_default_model(self.type)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy initialization of the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"x-goog-api-key": self._api_key}
            )
        return self._client

    async def complete(self, options: CompletionOptions) -> ProviderResponse:
        model = self.resolve_model(options)
        with logger.track_request("complete", model):
            try:
                response = await self.client.post(
                    model_path(model, "generateContent"),
                    json=build_generate_content_body(options)
                )
                response.raise_for_status()
                payload = response.json()
            except Exception as e:
                raise ErrorMapper.map_error(e, self.type.value)

            return ProviderResponse(
                content=extract_text(payload),
                tokens_used=extract_total_tokens(payload),
                model=model,
                finish_reason=extract_finish_reason(payload)
            )

    async def stream(self, options: CompletionOptions) -> AsyncIterator[str]:
        model = self.resolve_model(options)
        with logger.track_request("stream", model) as trace:
            try:
                async with self.client.stream(
                    "POST",
                    model_path(model, "streamGenerateContent"),
                    params={"alt": "sse"},
                    json=build_generate_content_body(options)
                ) as response:
                    response.raise_for_status()
                    async for line in response.aiter_lines():
                        payload = parse_sse_line(line)
                        if payload is None:
                            continue
                        text = extract_text(payload)
                        if text:
                            trace.record_fragment(text)
                            yield text
            except Exception as e:
                raise ErrorMapper.map_error(e, self.type.value)

    async def list_models(self) -> List[str]:
        """List models, following nextPageToken pagination."""
        models: List[str] = []
        params = {}
        try:
            while True:
                response = await self.client.get("models", params=params)
                response.raise_for_status()
                payload = response.json()
                models.extend(strip_model_prefix(m["name"]) for m in payload.get("models", []))
                page_token = payload.get("nextPageToken")
                if not page_token:
                    return models
                params = {"pageToken": page_token}
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
        """Close the HTTP client unless it was passed in by the caller."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
