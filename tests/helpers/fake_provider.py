"""In-memory Provider implementation for registry and streaming tests."""

from typing import AsyncIterator, List, Optional

from lai_sdk.models.generation import CompletionOptions, ProviderResponse, ProviderType
from lai_sdk.providers.base import Provider


class FakeProvider(Provider):
    """Provider that streams canned chunks and reports a fixed validation result."""

    def __init__(
        self,
        provider_type: ProviderType = ProviderType.OPENAI,
        model: str = "fake-model",
        chunks: Optional[List[str]] = None,
        valid: bool = True,
    ):
        self.type = provider_type
        self.current_model = model
        self.chunks = chunks if chunks is not None else ["Hello", " ", "world"]
        self.valid = valid

    async def complete(self, options: CompletionOptions) -> ProviderResponse:
        return ProviderResponse(
            content="".join(self.chunks),
            model=self.resolve_model(options),
            finish_reason="stop"
        )

    async def stream(self, options: CompletionOptions) -> AsyncIterator[str]:
        for chunk in self.chunks:
            yield chunk

    async def list_models(self) -> List[str]:
        return [self.current_model]

    async def validate_config(self) -> bool:
        return self.valid
