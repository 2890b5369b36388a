"""
Structured logging for provider adapters.

Every adapter logs through a ProviderLogger so that lines share one shape,
``[provider=... model=... request_id=...] message``, and every vendor call
is wrapped in ``track_request``. For streams the yielded RequestTrace also
counts the fragments handed to the caller.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional


@dataclass
class RequestTrace:
    """Bookkeeping for one vendor call."""
    method: str
    model: str
    request_id: str
    started_at: float = field(default_factory=time.monotonic)
    fragments: int = 0
    characters: int = 0

    def record_fragment(self, text: str) -> None:
        self.fragments += 1
        self.characters += len(text)

    @property
    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self.started_at) * 1000)

    def log_fields(self) -> Dict[str, Any]:
        fields = {
            "request_id": self.request_id,
            "method": self.method,
            "duration_ms": self.elapsed_ms,
        }
        if self.method == "stream":
            fields["fragments"] = self.fragments
            fields["chars"] = self.characters
        return fields


class ProviderLogger:
    """Logger bound to one provider name (``lai_sdk.providers.<name>``)."""

    def __init__(self, provider_name: str):
        self.provider = provider_name
        self.logger = logging.getLogger(f"lai_sdk.providers.{provider_name}")

    def _format_message(self, message: str, **fields) -> str:
        parts = [f"provider={self.provider}"]
        parts.extend(f"{key}={value}" for key, value in fields.items() if value is not None)
        return f"[{' '.join(parts)}] {message}"

    def debug(self, message: str, model: Optional[str] = None, **fields):
        self.logger.debug(self._format_message(message, model=model, **fields))

    @contextmanager
    def track_request(
        self,
        method: str,
        model: str,
        request_id: Optional[str] = None
    ) -> Iterator[RequestTrace]:
        """
        Time a vendor call and log its outcome.

        Logs the start at DEBUG, a clean finish at INFO and a failure at
        ERROR (the exception is re-raised). A stream the consumer stops
        early is logged at DEBUG as abandoned.

        Args:
            method: "complete" or "stream"
            model: Model the request targets
            request_id: Correlation id (a short random one if omitted)

        Yields:
            RequestTrace; stream adapters call ``record_fragment`` per fragment
        """
        trace = RequestTrace(method, model, request_id or uuid.uuid4().hex[:8])
        self.debug(f"Starting {method} request", model=model, request_id=trace.request_id)

        try:
            yield trace
        except GeneratorExit:
            self.debug(f"Abandoned {method} request", model=model, **trace.log_fields())
            raise
        except Exception as e:
            self.logger.error(self._format_message(
                f"Failed {method} request",
                model=model,
                error_type=type(e).__name__,
                error_msg=str(e),
                **trace.log_fields()
            ))
            raise

        self.logger.info(self._format_message(
            f"Completed {method} request", model=model, **trace.log_fields()
        ))
