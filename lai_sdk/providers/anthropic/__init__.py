from .adapter import AnthropicProvider

__all__ = ["AnthropicProvider"]
