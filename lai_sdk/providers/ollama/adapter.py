from typing import AsyncIterator, List, Optional

import httpx

from ..base import Provider, ProviderConfigError, ProviderError
from ..errors import ErrorMapper
from ...config.constants import DEFAULT_TIMEOUT_SECONDS
from ...config.providers import get_default_base_url, get_default_model
from ...models.generation import CompletionOptions, ProviderConfig, ProviderResponse, ProviderType
from ...observability.logging import ProviderLogger
from .parsers import extract_total_tokens, parse_ndjson_line
from .payloads import build_generate_body

logger = ProviderLogger("ollama")


class OllamaProvider(Provider):
    """Local Ollama server provider. No API key required."""

    type = ProviderType.OLLAMA

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        config = self._resolve_config(config)
        base_url = config.base_url or get_default_base_url(self.type)
        if not base_url.startswith(("http://", "https://")):
            raise ProviderConfigError(
                f"Invalid Ollama host '{base_url}' (expected http:// or https:// URL)",
                provider=self.type.value
            )
        self._base_url = base_url.rstrip("/")
        self._timeout = config.timeout or DEFAULT_TIMEOUT_SECONDS
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None
        self.current_model = config.model or get_default_model(self.type)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy initialization of the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self._client

    async def complete(self, options: CompletionOptions) -> ProviderResponse:
        model = self.resolve_model(options)
        with logger.track_request("complete", model):
            try:
                response = await self.client.post(
                    "/api/generate",
                    json=build_generate_body(options, model, stream=False)
                )
                response.raise_for_status()
                payload = response.json()
            except Exception as e:
                raise ErrorMapper.map_error(e, self.type.value)

            return ProviderResponse(
                content=payload.get("response", ""),
                tokens_used=extract_total_tokens(payload),
                model=payload.get("model") or model,
                finish_reason=payload.get("done_reason")
            )

    async def stream(self, options: CompletionOptions) -> AsyncIterator[str]:
        model = self.resolve_model(options)
        with logger.track_request("stream", model) as trace:
            try:
                async with self.client.stream(
                    "POST",
                    "/api/generate",
                    json=build_generate_body(options, model, stream=True)
                ) as response:
                    response.raise_for_status()
                    async for line in response.aiter_lines():
                        payload = parse_ndjson_line(line)
                        if payload is None:
                            continue
                        if "error" in payload:
                            raise ProviderError(
                                f"Ollama stream error: {payload['error']}",
                                provider=self.type.value
                            )
                        text = payload.get("response")
                        if text:
                            trace.record_fragment(text)
                            yield text
                        if payload.get("done"):
                            break
            except Exception as e:
                raise ErrorMapper.map_error(e, self.type.value)

    async def list_models(self) -> List[str]:
        """List locally pulled models via /api/tags."""
        try:
            response = await self.client.get("/api/tags")
            response.raise_for_status()
            return [m["name"] for m in response.json().get("models", [])]
        except Exception as e:
            raise ErrorMapper.map_error(e, self.type.value)

    async def validate_config(self) -> bool:
        """Check that the Ollama server is reachable."""
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
