from __future__ import annotations

from typing import Optional

from .models import ErrorPayload


class ProfileError(Exception):
    """Base exception for the SDK."""


class ConfigurationError(ProfileError):
    """Client is not configured for the requested URL"""


class TransportError(ProfileError):
    """Network errors - no response was received"""


class TransportTimeoutError(TransportError):
    """Timeout errors"""


class RemoteError(ProfileError):
    """API errors with status codes.

    ``kind`` and ``message`` come from the server error body when it has
    them. ``message`` falls back to the raw transport text.
    """

    def __init__(
        self,
        status_code: int,
        raw_message: str,
        payload: Optional[ErrorPayload] = None,
    ):
        self.status_code = status_code
        self.raw_message = raw_message
        self.payload = payload
        self.kind = payload.type if payload else None
        server_message = payload.message if payload else None
        self.message = server_message or raw_message
        if self.kind and server_message:
            super().__init__(f"{self.kind}: {server_message}")
        else:
            super().__init__(raw_message)


class NotFoundError(RemoteError):
    """404 responses"""


class NotFoundLookupError(ProfileError, LookupError):
    """A lookup returned no results"""
