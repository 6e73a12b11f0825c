"""Profile agents resource - agents acting on behalf of a profile, and their capabilities."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import NotFoundError, NotFoundLookupError, RemoteError
from ..models import ErrorPayload, ServiceUrls
from ..transport import Transport, decode_json, item_path

logger = logging.getLogger(__name__)


class ProfileAgentsResource:
    """Resource for the profile agents collection.

    Delete operations are idempotent: a 404 from the server means the
    resource is already gone and is reported as success.
    """

    def __init__(self, transport: Transport, urls: ServiceUrls) -> None:
        self._transport = transport
        self._urls = urls

    def _collection(self, url: Optional[str]) -> str:
        return url or self._urls.profile_agents

    async def create(
        self,
        account: Optional[str] = None,
        profile: Optional[str] = None,
        token: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a profile agent.

        Args:
            account: Account ID
            profile: Profile ID the agent acts for
            token: Application token
            url: Override of the profile agents collection path

        Returns:
            The created profile agent
        """
        resp = await self._transport.request(
            "POST",
            self._collection(url),
            json={"account": account, "profile": profile, "token": token},
        )
        return decode_json(resp)

    async def claim(
        self,
        profile_agent: str,
        account: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        """Claim a profile agent by associating an account with it."""
        # 204 with no body on success
        await self._transport.request(
            "POST",
            item_path(self._collection(url), profile_agent, "claim"),
            json={"account": account},
        )

    async def list(
        self,
        account: Optional[str] = None,
        url: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """List the profile agents of an account."""
        resp = await self._transport.request(
            "GET",
            self._collection(url),
            params={"account": account},
        )
        return decode_json(resp)

    async def get(
        self,
        id: str,
        account: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Get one profile agent."""
        resp = await self._transport.request(
            "GET",
            item_path(self._collection(url), id),
            params={"account": account},
        )
        return decode_json(resp)

    async def delete(
        self,
        id: str,
        account: Optional[str] = None,
        url: Optional[str] = None,
    ) -> bool:
        """Delete a profile agent.

        Returns:
            True if the server answered 204 or reported the agent as not found
        """
        try:
            resp = await self._transport.request(
                "DELETE",
                item_path(self._collection(url), id),
                params={"account": account},
            )
        except NotFoundError:
            logger.info(f"Profile agent {id} already deleted")
            return True
        return resp.status_code == 204

    async def get_by_profile(
        self,
        profile: str,
        account: str,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Get the profile agent of a profile.

        Raises:
            NotFoundLookupError: If the server returns no agent for the profile
        """
        resp = await self._transport.request(
            "GET",
            self._collection(url),
            params={"profile": profile, "account": account},
        )
        agents = decode_json(resp)
        if not isinstance(agents, list):
            message = f"Expected a list of profile agents, got {type(agents).__name__}"
            raise RemoteError(
                resp.status_code,
                message,
                ErrorPayload(type="InvalidResponse", message=message),
            )
        if not agents:
            raise NotFoundLookupError('"profileAgent" not found.')
        return agents[0]

    async def delegate_capability(
        self,
        profile_agent_id: str,
        account: str,
        zcap: Dict[str, Any],
        controller: Optional[str] = None,
        invoker: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Have a profile agent delegate one of its capabilities.

        Args:
            profile_agent_id: Profile agent ID
            account: Account ID
            zcap: The capability to delegate
            controller: Controller to delegate the capability to
            invoker: Invoker to delegate the capability to, for servers that use that field
            url: Override of the profile agents collection path

        Returns:
            The delegated capability
        """
        resp = await self._transport.request(
            "POST",
            item_path(self._collection(url), profile_agent_id, "capabilities", "delegate"),
            json={"account": account, "controller": controller, "invoker": invoker, "zcap": zcap},
        )
        return decode_json(resp)

    async def delegate_capabilities(
        self,
        profile_agent_id: str,
        account: str,
        invoker: str,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Have a profile agent delegate its capabilities to an invoker.

        The server chooses which capabilities to delegate.

        Returns:
            The delegated capabilities
        """
        resp = await self._transport.request(
            "POST",
            item_path(self._collection(url), profile_agent_id, "capabilities", "delegate"),
            json={"account": account, "invoker": invoker},
        )
        return decode_json(resp)

    async def set_capability_set(
        self,
        profile_agent_id: str,
        account: str,
        zcaps: Dict[str, Any],
        url: Optional[str] = None,
    ) -> bool:
        """Replace the capability set of a profile agent.

        Args:
            profile_agent_id: Profile agent ID
            account: Account ID
            zcaps: Mapping of capability names to zcaps

        Returns:
            True if the server answered 204
        """
        resp = await self._transport.request(
            "POST",
            item_path(self._collection(url), profile_agent_id, "capability-set"),
            json={"zcaps": zcaps},
            params={"account": account},
        )
        return resp.status_code == 204

    update_capability_set = set_capability_set

    async def delete_capability_set(
        self,
        profile_agent_id: str,
        account: str,
        url: Optional[str] = None,
    ) -> bool:
        """Delete the capability set of a profile agent.

        Returns:
            True if the server answered 204 or reported the set as not found
        """
        try:
            resp = await self._transport.request(
                "DELETE",
                item_path(self._collection(url), profile_agent_id, "capability-set"),
                params={"account": account},
            )
        except NotFoundError:
            logger.info(f"Capability set of profile agent {profile_agent_id} already deleted")
            return True
        return resp.status_code == 204
