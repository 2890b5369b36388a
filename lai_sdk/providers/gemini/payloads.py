from __future__ import annotations

from typing import Any, Dict

from ...models.generation import CompletionOptions


def build_generate_content_body(options: CompletionOptions) -> Dict[str, Any]:
    """Request body for models/{model}:generateContent and :streamGenerateContent."""
    body: Dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": options.prompt}]}],
    }
    if options.system_prompt:
        body["systemInstruction"] = {"parts": [{"text": options.system_prompt}]}

    generation_config: Dict[str, Any] = {}
    if options.temperature is not None:
        generation_config["temperature"] = options.temperature
    if options.max_tokens is not None:
        generation_config["maxOutputTokens"] = options.max_tokens
    if generation_config:
        body["generationConfig"] = generation_config
    return body


def model_path(model: str, method: str) -> str:
    """Relative URL for a model method, accepting ids with or without 'models/'."""
    if model.startswith("models/"):
        model = model[len("models/"):]
    return f"models/{model}:{method}"
