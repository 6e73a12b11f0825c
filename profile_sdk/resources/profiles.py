"""Profiles resource - creating profiles on the profile service."""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..models import ServiceUrls
from ..transport import Transport, decode_json


class ProfilesResource:
    """Resource for the profiles collection."""

    def __init__(self, transport: Transport, urls: ServiceUrls) -> None:
        self._transport = transport
        self._urls = urls

    async def create(
        self,
        account: str,
        did_method: Optional[str] = None,
        did_options: Optional[Dict[str, Any]] = None,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a profile owned by an account.

        Args:
            account: Account ID that will own the profile
            did_method: DID method for the profile DID (e.g. "key", "v1")
            did_options: Optional DID method options
            url: Override of the profiles collection path

        Returns:
            The created profile as returned by the server
        """
        resp = await self._transport.request(
            "POST",
            url or self._urls.profiles,
            json={"account": account, "didMethod": did_method, "didOptions": did_options},
        )
        return decode_json(resp)
