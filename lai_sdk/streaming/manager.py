"""Stream aggregation.

Drains a provider's fragment stream into one string while relaying
fragments to caller-supplied observers, or re-chunks the stream into
larger buffered pieces.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, AsyncIterator, Callable, List, Optional

from ..config.constants import DEFAULT_BUFFER_SIZE
from .types import CancellationToken, StreamCallbacks, StreamCancelledError

logger = logging.getLogger(__name__)


class StreamManager:
    """Consumes fragment streams one fragment at a time, in order."""

    async def handle_stream(
        self,
        stream: AsyncIterator[str],
        callbacks: Optional[StreamCallbacks] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> str:
        """Drain ``stream`` and return the accumulated text.

        Each fragment is appended and then handed to ``on_chunk``; the next
        fragment is not pulled until the observer returns. Observer errors
        are logged and ignored. If the stream itself raises, ``on_error`` is
        called once and the exception propagates; ``on_complete`` is only
        called after a clean finish.

        Args:
            stream: Async iterator of text fragments (consumed once)
            callbacks: Optional observers
            cancel_token: Optional token checked before each fragment is pulled

        Returns:
            Concatenation of all fragments

        Raises:
            StreamCancelledError: If ``cancel_token`` was cancelled
            Exception: Whatever the stream raised
        """
        callbacks = callbacks or StreamCallbacks()
        chunks = []

        try:
            await _check_cancelled(stream, cancel_token, chunks)
            async for chunk in stream:
                chunks.append(chunk)
                await _notify(callbacks.on_chunk, chunk, "on_chunk")
                await _check_cancelled(stream, cancel_token, chunks)
        except StreamCancelledError:
            raise
        except Exception as e:
            await _notify(callbacks.on_error, e, "on_error")
            raise

        full_response = ''.join(chunks)
        await _notify(callbacks.on_complete, full_response, "on_complete")
        return full_response

    async def stream_to_string(
        self,
        stream: AsyncIterator[str],
        cancel_token: Optional[CancellationToken] = None,
    ) -> str:
        """Drain ``stream`` with no observers."""
        return await self.handle_stream(stream, cancel_token=cancel_token)

    def buffer_stream(
        self,
        stream: AsyncIterator[str],
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> AsyncIterator[str]:
        """Re-chunk ``stream`` into pieces of at least ``buffer_size`` characters.

        A piece is emitted as soon as the buffer reaches ``buffer_size``;
        whatever remains when the stream ends is emitted once more.
        Character order is preserved.

        Raises:
            ValueError: If ``buffer_size`` is not positive (raised here,
                before any fragment is consumed)
        """
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        return _buffered(stream, buffer_size)


async def _buffered(stream: AsyncIterator[str], buffer_size: int) -> AsyncIterator[str]:
    buffer = ''

    async for chunk in stream:
        buffer += chunk

        if len(buffer) >= buffer_size:
            yield buffer
            buffer = ''

    if buffer:
        yield buffer


async def _notify(callback: Optional[Callable[[Any], Any]], value: Any, name: str) -> None:
    """Call an observer, awaiting it if needed; failures are only logged."""
    if callback is None:
        return
    try:
        result = callback(value)
        if inspect.isawaitable(result):
            await result
    except Exception as e:
        logger.warning(f"Error in {name} callback: {e}", exc_info=True)


async def _check_cancelled(
    stream: AsyncIterator[str],
    cancel_token: Optional[CancellationToken],
    chunks: List[str],
) -> None:
    """Close ``stream`` and raise if ``cancel_token`` has been set."""
    if cancel_token is None or not cancel_token.cancelled:
        return
    await _close_stream(stream)
    raise StreamCancelledError(''.join(chunks))


async def _close_stream(stream: AsyncIterator[str]) -> None:
    aclose = getattr(stream, "aclose", None)
    if aclose is None:
        return
    try:
        await aclose()
    except Exception as e:
        logger.debug(f"Error closing cancelled stream: {e}")


async def handle_stream(
    stream: AsyncIterator[str],
    callbacks: Optional[StreamCallbacks] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> str:
    """Convenience wrapper around ``StreamManager().handle_stream``."""
    return await StreamManager().handle_stream(stream, callbacks, cancel_token)
