"""
Example: Choosing and Streaming from a Provider

This example shows how to narrow the provider set with the capability
table, build a registry from the environment and drain a stream with
observers.
"""

import asyncio

from lai_sdk import (
    CompletionOptions,
    ProviderRegistry,
    StreamCallbacks,
    StreamManager,
)
from lai_sdk.core.capabilities import largest_context_provider, providers_with


def example_capability_selection():
    """Pick providers before instantiating anything."""
    print("=== Capability Selection ===\n")

    print(f"Embedding providers: {[p.value for p in providers_with(supports_embeddings=True)]}")
    print(f"Local providers: {[p.value for p in providers_with(requires_api_key=False)]}")
    print(f"Largest context window: {largest_context_provider().value}")
    print()


async def example_streaming():
    """Stream from the first usable provider."""
    print("=== Streaming with Observers ===\n")

    available = await ProviderRegistry.detect_available()
    if not available:
        print("No providers available; set an API key or start Ollama")
        return

    registry = ProviderRegistry.create_default()
    provider = registry.get(available[0])
    print(f"Using {provider.type.value} ({provider.current_model})\n")

    chunk_count = 0

    def on_chunk(chunk):
        nonlocal chunk_count
        chunk_count += 1
        print(chunk, end="", flush=True)

    def on_complete(text):
        print(f"\n\nReceived {chunk_count} chunks, {len(text)} characters")

    try:
        await StreamManager().handle_stream(
            provider.stream(CompletionOptions(prompt="Write a haiku about Python programming")),
            StreamCallbacks(on_chunk=on_chunk, on_complete=on_complete)
        )
    finally:
        await provider.close()


async def example_buffered_streaming():
    """Re-chunk a stream into larger pieces."""
    print("\n=== Buffered Streaming ===\n")

    provider = ProviderRegistry.create_default().get("ollama")
    if provider is None:
        print("Ollama not configured")
        return

    manager = StreamManager()
    try:
        stream = manager.buffer_stream(
            provider.stream(CompletionOptions(prompt="Count from one to twenty")),
            buffer_size=40
        )
        async for piece in stream:
            print(f"[{len(piece)}] {piece!r}")
    except Exception as e:
        print(f"Error: {e}")
    finally:
        await provider.close()


async def main():
    example_capability_selection()
    await example_streaming()
    await example_buffered_streaming()


if __name__ == "__main__":
    asyncio.run(main())
