from __future__ import annotations

import json
from typing import Any, Dict, Optional


def parse_ndjson_line(line: str) -> Optional[Dict[str, Any]]:
    """Decode one line of Ollama's newline-delimited JSON stream."""
    line = line.strip()
    if not line:
        return None
    return json.loads(line)


def extract_total_tokens(payload: Dict[str, Any]) -> Optional[int]:
    """prompt_eval_count + eval_count, when Ollama reports them."""
    counts = [payload.get("prompt_eval_count"), payload.get("eval_count")]
    counts = [c for c in counts if isinstance(c, int)]
    return sum(counts) if counts else None
