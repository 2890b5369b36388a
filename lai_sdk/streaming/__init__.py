"""Streaming layer for real-time provider responses.

This layer handles:
- Draining fragment streams into a final string
- Relaying fragments to on_chunk / on_complete / on_error observers
- Re-chunking streams into buffered pieces
- Caller-driven cancellation
"""

from .manager import StreamManager, handle_stream
from .types import (
    CancellationToken,
    StreamCallbacks,
    StreamCancelledError,
    StreamError,
)

__all__ = [
    "StreamManager",
    "handle_stream",
    "StreamCallbacks",
    "CancellationToken",
    "StreamError",
    "StreamCancelledError",
]
