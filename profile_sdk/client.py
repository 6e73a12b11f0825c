from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from .models import ClientConfig, ServiceUrls
from .resources.agents import ProfileAgentsResource
from .resources.profiles import ProfilesResource
from .transport import Transport


class ProfileClient:
    """Client for the profile service.

    Every method issues one HTTP request and returns the decoded response
    body, or a boolean for operations the server answers with 204.

    Example:
        async with ProfileClient(base_url="https://example.com") as client:
            profile = await client.create_profile(account="urn:uuid:a1")
            agent = await client.get_agent_by_profile(
                profile=profile["id"], account="urn:uuid:a1"
            )
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        urls: Optional[ServiceUrls] = None,
        timeout: Optional[float] = None,
        api_key: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the profile client.

        Args:
            base_url: Protocol, host and port that relative paths resolve against
            urls: Collection paths (default: /profiles and /profile-agents)
            timeout: Request timeout in seconds (default: 30.0)
            api_key: Optional opaque bearer token
            config: A ready configuration; explicit arguments override its fields
            http_transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        config = config.model_copy(deep=True) if config else ClientConfig()
        if base_url is not None:
            config.base_url = base_url
        if urls is not None:
            config.urls = urls
        if timeout is not None:
            config.timeout_seconds = timeout
        if api_key is not None:
            config.api_key = api_key
        self.config = config
        self._transport = Transport(
            config.base_url, config.api_key, config.timeout_seconds, http_transport
        )

        self.profiles = ProfilesResource(self._transport, config.urls)
        self.agents = ProfileAgentsResource(self._transport, config.urls)

    @classmethod
    def from_env(cls, config: Optional[ClientConfig] = None, **kwargs: Any) -> "ProfileClient":
        """Build a client from PROFILE_SERVICE_* environment variables and .env.

        Fields already set on ``config`` take precedence over the environment.
        """
        config = config.model_copy(deep=True) if config else ClientConfig()
        config.load_env_vars()
        return cls(config=config, **kwargs)

    @property
    def base_url(self) -> Optional[str]:
        return self.config.base_url

    async def __aenter__(self) -> "ProfileClient":
        await self._transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self._transport.__aexit__(exc_type, exc, tb)

    def set_api_key(self, api_key: Optional[str]) -> None:
        self._transport.set_api_key(api_key)

    # Profiles

    async def create_profile(
        self,
        account: str,
        did_method: Optional[str] = None,
        did_options: Optional[Dict[str, Any]] = None,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.profiles.create(account, did_method, did_options, url=url)

    # Profile agents

    async def create_agent(
        self,
        account: Optional[str] = None,
        profile: Optional[str] = None,
        token: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.agents.create(account, profile, token, url=url)

    async def claim_agent(
        self, profile_agent: str, account: Optional[str] = None, url: Optional[str] = None
    ) -> None:
        await self.agents.claim(profile_agent, account, url=url)

    async def list_agents(
        self, account: Optional[str] = None, url: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return await self.agents.list(account, url=url)

    async def get_agent(
        self, id: str, account: Optional[str] = None, url: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.agents.get(id, account, url=url)

    async def delete_agent(
        self, id: str, account: Optional[str] = None, url: Optional[str] = None
    ) -> bool:
        """Delete a profile agent. A 404 counts as deleted."""
        return await self.agents.delete(id, account, url=url)

    async def get_agent_by_profile(
        self, profile: str, account: str, url: Optional[str] = None
    ) -> Dict[str, Any]:
        """Get the profile agent of a profile.

        Raises:
            NotFoundLookupError: If the profile has no agent
        """
        return await self.agents.get_by_profile(profile, account, url=url)

    # Capabilities

    async def delegate_agent_capability(
        self,
        profile_agent_id: str,
        account: str,
        zcap: Dict[str, Any],
        controller: Optional[str] = None,
        invoker: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.agents.delegate_capability(
            profile_agent_id, account, zcap, controller=controller, invoker=invoker, url=url
        )

    async def delegate_agent_capabilities(
        self,
        profile_agent_id: str,
        account: str,
        invoker: str,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.agents.delegate_capabilities(profile_agent_id, account, invoker, url=url)

    async def set_capability_set(
        self,
        profile_agent_id: str,
        account: str,
        zcaps: Dict[str, Any],
        url: Optional[str] = None,
    ) -> bool:
        return await self.agents.set_capability_set(profile_agent_id, account, zcaps, url=url)

    update_capability_set = set_capability_set

    async def delete_capability_set(
        self, profile_agent_id: str, account: str, url: Optional[str] = None
    ) -> bool:
        """Delete the capability set of a profile agent. A 404 counts as deleted."""
        return await self.agents.delete_capability_set(profile_agent_id, account, url=url)
