from __future__ import annotations

from typing import Any, Dict, List

from ...models.generation import CompletionOptions


def build_messages(options: CompletionOptions) -> List[Dict[str, str]]:
    """Chat Completions message list: optional system message, then the prompt."""
    messages = []
    if options.system_prompt:
        messages.append({"role": "system", "content": options.system_prompt})
    messages.append({"role": "user", "content": options.prompt})
    return messages


def build_chat_params(options: CompletionOptions, model: str) -> Dict[str, Any]:
    """Assemble keyword arguments for chat.completions.create."""
    params: Dict[str, Any] = {
        "model": model,
        "messages": build_messages(options),
    }
    if options.temperature is not None:
        params["temperature"] = options.temperature
    if options.max_tokens is not None:
        params["max_tokens"] = options.max_tokens
    return params
