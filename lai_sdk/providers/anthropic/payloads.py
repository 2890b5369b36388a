from __future__ import annotations

from typing import Any, Dict

from ...config.constants import DEFAULT_MAX_TOKENS
from ...models.generation import CompletionOptions


def build_messages_params(options: CompletionOptions, model: str) -> Dict[str, Any]:
    """Assemble keyword arguments for messages.create.

    The Messages API takes the system prompt as a top-level field and
    requires max_tokens.
    """
    params: Dict[str, Any] = {
        "model": model,
        "messages": [{"role": "user", "content": options.prompt}],
        "max_tokens": options.max_tokens or DEFAULT_MAX_TOKENS,
    }
    if options.system_prompt:
        params["system"] = options.system_prompt
    if options.temperature is not None:
        # Anthropic caps temperature at 1.0
        params["temperature"] = min(options.temperature, 1.0)
    return params
