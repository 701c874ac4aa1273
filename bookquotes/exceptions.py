"""Custom exceptions for BookQuotes services."""
from typing import Optional


class InvalidInputError(Exception):
    """Raised when a request is rejected before any network I/O (empty query, missing fields)."""


class TransportError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors or a non-2xx status."""

    def __init__(self, url: str, original: Optional[Exception] = None, status_code: Optional[int] = None):
        self.url = url
        self.original = original
        self.status_code = status_code
        if original is not None:
            reason = str(original)
        elif status_code is not None:
            reason = f"status {status_code}"
        else:
            reason = "unknown error"
        super().__init__(f"HTTP fetch failed for {url}: {reason}")


class UpstreamError(Exception):
    """Raised by synchronous operations when the remote site cannot be reached.

    The message is meant to be shown to the caller as-is.
    """

    def __init__(self, message: str, transport_error: Optional[TransportError] = None):
        self.transport_error = transport_error
        super().__init__(message)
