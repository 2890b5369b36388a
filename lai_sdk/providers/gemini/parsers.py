from __future__ import annotations

import json
from typing import Any, Dict, Optional


def extract_text(payload: Dict[str, Any]) -> str:
    """Concatenate text parts of the first candidate."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts if isinstance(part, dict))


def extract_finish_reason(payload: Dict[str, Any]) -> Optional[str]:
    candidates = payload.get("candidates") or []
    if not candidates:
        return None
    return candidates[0].get("finishReason")


def extract_total_tokens(payload: Dict[str, Any]) -> Optional[int]:
    usage = payload.get("usageMetadata") or {}
    total = usage.get("totalTokenCount")
    return total if isinstance(total, int) else None


def parse_sse_line(line: str) -> Optional[Dict[str, Any]]:
    """Decode one ``data: {...}`` line of an SSE stream; None for anything else."""
    if not line.startswith("data:"):
        return None
    data = line[len("data:"):].strip()
    if not data:
        return None
    return json.loads(data)


def strip_model_prefix(name: str) -> str:
    return name[len("models/"):] if name.startswith("models/") else name
