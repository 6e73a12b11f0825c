from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_PROFILES_PATH = "/profiles"
DEFAULT_PROFILE_AGENTS_PATH = "/profile-agents"
DEFAULT_TIMEOUT_SECONDS = 30.0

# Values read from .env; None until the first lookup
_dotenv_values: Optional[Dict[str, str]] = None


def load_dotenv_file(path: Path | str = ".env") -> Dict[str, str]:
    """Read a .env file for get_env_var. os.environ is left untouched."""
    global _dotenv_values
    env_path = Path(path)
    values: Dict[str, str] = {}
    if env_path.is_file():
        try:
            values = {k: v for k, v in dotenv_values(env_path).items() if v is not None}
        except OSError as e:
            logger.warning(f"Could not read {env_path}: {e}")
    _dotenv_values = values
    return values


def get_env_var(name: str, default: Optional[str] = None) -> Optional[str]:
    """Look up a setting: process environment, then .env, then default."""
    if _dotenv_values is None:
        load_dotenv_file()
    value = os.getenv(name)
    if value is None:
        value = _dotenv_values.get(name, default)
    return value


class ServiceUrls(BaseModel):
    """Collection paths for the profile service."""
    profiles: str = Field(default=DEFAULT_PROFILES_PATH, description="Path of the profiles collection")
    profile_agents: str = Field(default=DEFAULT_PROFILE_AGENTS_PATH, description="Path of the profile agents collection")


class ClientConfig(BaseModel):
    """Profile service client configuration."""
    base_url: Optional[str] = Field(default=None, description="Protocol, host and port, e.g. https://example.com")
    urls: ServiceUrls = Field(default_factory=ServiceUrls)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, description="Request timeout")
    api_key: Optional[str] = Field(default=None, description="Opaque bearer token sent with every request")
    base_url_env_var: str = Field(default="PROFILE_SERVICE_BASE_URL", description="Environment variable for the base URL")
    api_key_env_var: str = Field(default="PROFILE_SERVICE_API_KEY", description="Environment variable for the API key")
    timeout_env_var: str = Field(default="PROFILE_SERVICE_TIMEOUT", description="Environment variable for the timeout")

    def load_env_vars(self) -> None:
        """Load configuration from environment variables if present."""
        if not self.base_url:
            self.base_url = get_env_var(self.base_url_env_var)

        if not self.api_key:
            self.api_key = get_env_var(self.api_key_env_var)

        if self.timeout_seconds == DEFAULT_TIMEOUT_SECONDS:
            env_timeout = get_env_var(self.timeout_env_var)
            if env_timeout:
                try:
                    self.timeout_seconds = float(env_timeout)
                except ValueError as exc:
                    from .exceptions import ConfigurationError

                    raise ConfigurationError(
                        f"{self.timeout_env_var} must be a number of seconds, got {env_timeout!r}"
                    ) from exc


class ErrorPayload(BaseModel):
    """Error body returned by the profile service on non-2xx responses."""
    model_config = ConfigDict(extra="ignore")

    type: Optional[str] = None
    message: Optional[str] = None
    details: Optional[Any] = None

    @classmethod
    def from_body(cls, body: Any) -> Optional["ErrorPayload"]:
        """Parse a decoded response body, returning None if it is not an error object."""
        if not isinstance(body, dict):
            return None
        try:
            return cls.model_validate(body)
        except ValidationError:
            return None
