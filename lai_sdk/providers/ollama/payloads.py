from __future__ import annotations

from typing import Any, Dict

from ...models.generation import CompletionOptions


def build_generate_body(options: CompletionOptions, model: str, stream: bool) -> Dict[str, Any]:
    """Request body for POST /api/generate."""
    body: Dict[str, Any] = {
        "model": model,
        "prompt": options.prompt,
        "stream": stream,
    }
    if options.system_prompt:
        body["system"] = options.system_prompt

    model_options: Dict[str, Any] = {}
    if options.temperature is not None:
        model_options["temperature"] = options.temperature
    if options.max_tokens is not None:
        model_options["num_predict"] = options.max_tokens
    if model_options:
        body["options"] = model_options
    return body
