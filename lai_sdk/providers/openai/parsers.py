from __future__ import annotations

from typing import Any, Optional


def extract_text_from_chat_completion(response: Any) -> str:
    """Extract message content from a chat.completions.create response.

    Returns empty string if nothing is found.
    """
    choices = getattr(response, "choices", None)
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


def extract_finish_reason(response: Any) -> Optional[str]:
    choices = getattr(response, "choices", None)
    if not choices:
        return None
    return getattr(choices[0], "finish_reason", None)


def extract_model(response: Any, default: str) -> str:
    """Model reported by the API (may be a dated snapshot), else ``default``."""
    model = getattr(response, "model", None)
    return model if isinstance(model, str) and model else default


def extract_total_tokens(response: Any) -> Optional[int]:
    usage = getattr(response, "usage", None)
    if usage is None:
        return None
    total = getattr(usage, "total_tokens", None)
    return int(total) if isinstance(total, int) else None


def extract_stream_delta(chunk: Any) -> str:
    """Text carried by one streamed chat completion chunk ('' for none)."""
    choices = getattr(chunk, "choices", None)
    if not choices:
        return ""
    delta = getattr(choices[0], "delta", None)
    content = getattr(delta, "content", None)
    return content if isinstance(content, str) else ""
