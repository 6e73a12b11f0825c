"""
Profile service SDK.

Async client for creating profiles and managing the profile agents that act
on their behalf, including the capabilities delegated to those agents.
"""

from .client import ProfileClient
from .exceptions import (
    ConfigurationError,
    NotFoundError,
    NotFoundLookupError,
    ProfileError,
    RemoteError,
    TransportError,
    TransportTimeoutError,
)
from .models import ClientConfig, ErrorPayload, ServiceUrls
from .resources.agents import ProfileAgentsResource
from .resources.profiles import ProfilesResource

__all__ = [
    "ProfileClient",
    # Configuration
    "ClientConfig",
    "ServiceUrls",
    # Resources
    "ProfilesResource",
    "ProfileAgentsResource",
    # Errors
    "ErrorPayload",
    "ProfileError",
    "ConfigurationError",
    "TransportError",
    "TransportTimeoutError",
    "RemoteError",
    "NotFoundError",
    "NotFoundLookupError",
]

__version__ = "1.0.0"
