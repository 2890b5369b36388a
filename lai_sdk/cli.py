"""CLI entry point for LAI SDK."""

import argparse
import asyncio
from typing import Optional

from .core.capabilities import PROVIDER_CAPABILITIES
from .models.generation import CompletionOptions
from .providers.registry import ProviderRegistry
from .streaming import StreamCallbacks, StreamManager


def show_capabilities():
    """Print the capability table."""
    print("Provider Capabilities:")
    print("-" * 50)
    for provider_type, caps in PROVIDER_CAPABILITIES.items():
        print(f"{provider_type.value}:")
        print(f"  - Streaming: {caps.supports_streaming}")
        print(f"  - Embeddings: {caps.supports_embeddings}")
        print(f"  - Vision: {caps.supports_vision}")
        print(f"  - API Key Required: {caps.requires_api_key}")
        print(f"  - Max Context: {caps.max_context_length:,} tokens")


def list_providers():
    """List providers that could be constructed from the environment."""
    registry = ProviderRegistry.create_default()
    registered = registry.list()
    print(f"Registered providers: {', '.join(p.value for p in registered) or '(none)'}")
    for provider in registry.get_all():
        print(f"  {provider.type.value}: {provider.current_model}")


async def detect_providers():
    """Print providers whose configuration validates."""
    available = await ProviderRegistry.detect_available()
    if not available:
        print("No providers available")
        return
    print("Available providers:")
    for provider_type in available:
        print(f"  ✓ {provider_type.value}")


async def stream_completion(provider_name: str, prompt: str, model: Optional[str] = None,
                            buffer_size: Optional[int] = None):
    """Stream a completion from one provider, printing fragments as they arrive."""
    registry = ProviderRegistry.create_default()
    provider = registry.get(provider_name)
    if provider is None:
        print(f"Error: provider '{provider_name}' is not configured")
        return

    manager = StreamManager()
    callbacks = StreamCallbacks(on_chunk=lambda chunk: print(chunk, end='', flush=True))
    try:
        stream = provider.stream(CompletionOptions(prompt=prompt, model=model))
        if buffer_size is not None:
            stream = manager.buffer_stream(stream, buffer_size)
        await manager.handle_stream(stream, callbacks)
        print()
    except ValueError as e:
        print(f"Error: {str(e)}")
    except Exception as e:
        print(f"\nError: {str(e)}")
    finally:
        await provider.close()


def main():
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="LAI SDK CLI")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('capabilities', help='Show the provider capability table')
    subparsers.add_parser('providers', help='List providers configured in the environment')
    subparsers.add_parser('detect', help='Check which configured providers are usable')

    stream_parser = subparsers.add_parser('stream', help='Stream a completion')
    stream_parser.add_argument('provider', help='Provider (openai, anthropic, gemini, ollama)')
    stream_parser.add_argument('prompt', help='Text prompt')
    stream_parser.add_argument('--model', help='Model override')
    stream_parser.add_argument('--buffer-size', type=int, help='Re-chunk output into pieces of N characters')

    args = parser.parse_args()

    if args.command == 'capabilities':
        show_capabilities()
    elif args.command == 'providers':
        list_providers()
    elif args.command == 'detect':
        asyncio.run(detect_providers())
    elif args.command == 'stream':
        asyncio.run(stream_completion(args.provider, args.prompt, args.model, args.buffer_size))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
