from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union


ChunkCallback = Callable[[str], Union[None, Awaitable[None]]]
CompleteCallback = Callable[[str], Union[None, Awaitable[None]]]
ErrorCallback = Callable[[Exception], Union[None, Awaitable[None]]]


@dataclass
class StreamCallbacks:
    """Observers for a drained stream.

    Each handler is optional and may be a plain function or a coroutine
    function.

    Attributes:
        on_chunk: Called with each fragment, in arrival order
        on_complete: Called once with the full text when the stream ends
        on_error: Called once with the exception if the stream fails
    """
    on_chunk: Optional[ChunkCallback] = None
    on_complete: Optional[CompleteCallback] = None
    on_error: Optional[ErrorCallback] = None


class CancellationToken:
    """Caller-owned flag checked by the stream manager before each fragment."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"


class StreamError(Exception):
    """Base exception for the streaming layer."""


class StreamCancelledError(StreamError):
    """Raised when a CancellationToken stops a stream early.

    Attributes:
        partial_text: Fragments accumulated before cancellation
    """

    def __init__(self, partial_text: str, message: Any = "Stream cancelled"):
        super().__init__(message)
        self.partial_text = partial_text
