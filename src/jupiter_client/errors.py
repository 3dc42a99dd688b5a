"""Exceptions raised by the Jupiter client."""

from typing import Optional


class JupiterError(Exception):
    """Base exception for all Jupiter client failures."""
    pass


class InvalidRequest(JupiterError):
    """Raised when a request fails local validation.

    Never reaches the network.
    """
    pass


class TransportError(JupiterError):
    """Raised when the HTTP transport fails (connect, read, timeout)."""
    pass


class RemoteError(JupiterError):
    """Raised when the Jupiter API answers with a non-success status."""

    def __init__(self, status_code: int, message: str, error_code: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.error_code = error_code
        super().__init__(f"Jupiter API error {status_code}: {message}")


class DecodeError(JupiterError):
    """Raised when a response body is not JSON or does not match the schema."""
    pass
