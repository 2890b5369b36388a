from __future__ import annotations

from typing import Any, Optional


def extract_text_from_messages_response(response: Any) -> str:
    """Extract concatenated text from Anthropic messages.create response."""
    text_content = ""
    for content_block in getattr(response, "content", None) or []:
        if getattr(content_block, "type", None) == "text":
            text_content += getattr(content_block, "text", "") or ""
    return text_content


def extract_total_tokens(response: Any) -> Optional[int]:
    usage = getattr(response, "usage", None)
    if usage is None:
        return None
    input_tokens = getattr(usage, "input_tokens", None)
    output_tokens = getattr(usage, "output_tokens", None)
    if not isinstance(input_tokens, int) or not isinstance(output_tokens, int):
        return None
    return input_tokens + output_tokens


def extract_stream_text(event: Any) -> str:
    """Text from a content_block_delta stream event ('' for other events)."""
    if getattr(event, "type", None) != "content_block_delta":
        return ""
    text = getattr(getattr(event, "delta", None), "text", None)
    return text if isinstance(text, str) else ""
