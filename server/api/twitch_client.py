"""Asynchronous Twitch Helix client authenticated with app access tokens."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, Union

import httpx

from server.api.auth import AppTokenProvider, TwitchCredentials
from server.api.categories import Category
from server.api.errors import TwitchAPIError, TwitchAuthError, TwitchRequestError

__all__ = [
    "TokenProvider",
    "TwitchAPIError",
    "TwitchAuthError",
    "TwitchClient",
    "TwitchRequestError",
]

logger = logging.getLogger(__name__)


class TokenProvider(Protocol):
    async def get_token(self) -> str:
        ...


class TwitchClient:
    """Thin wrapper around the Twitch Helix API.

    Every public call acquires its own token through ``token_provider`` and
    performs one Helix request. Failures raise ``TwitchAPIError`` subclasses;
    nothing is retried.
    """

    def __init__(
        self,
        credentials: TwitchCredentials,
        *,
        token_provider: Optional[TokenProvider] = None,
        base_url: str = "https://api.twitch.tv/helix",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout)
        self._transport = transport
        self._tokens = token_provider or AppTokenProvider(
            credentials,
            timeout=timeout,
            transport=transport,
        )

    async def auth_headers(self) -> Dict[str, str]:
        token = await self._tokens.get_token()
        return {
            "Authorization": f"Bearer {token}",
            "Client-Id": self.credentials.client_id,
        }

    async def get_broadcaster_id(self, channel_name: str) -> Optional[str]:
        """Resolve a channel login to its broadcaster ID, or None if unknown."""
        payload = await self._request(
            "GET",
            "/users",
            params=[("login", channel_name)],
            context="Error fetching broadcaster info",
        )
        users = payload.get("data") or []
        if not users:
            logger.info("No Twitch user found for login %r", channel_name)
            return None
        return str(users[0]["id"])

    async def get_schedule(self, broadcaster_id: str) -> Dict[str, Any]:
        """Return the decoded ``/schedule`` response, pagination included."""
        return await self._request(
            "GET",
            "/schedule",
            params=[("broadcaster_id", broadcaster_id)],
            context="Error fetching schedule",
        )

    async def get_categories(
        self,
        category_ids: Sequence[str],
        width: int,
        height: int,
    ) -> List[Category]:
        """Fetch categories in one request with box art sized to width x height."""
        if not category_ids:
            return []
        payload = await self._request(
            "GET",
            "/games",
            params=[("id", category_id) for category_id in category_ids],
            context="Error fetching categories",
        )
        return [
            Category.from_payload(entry, width=width, height=height)
            for entry in payload.get("data") or []
        ]

    async def _request(
        self,
        method: str,
        path: str,
        *,
        context: str,
        params: Optional[Union[Dict[str, Any], Sequence[Tuple[str, Any]]]] = None,
    ) -> Dict[str, Any]:
        headers = await self.auth_headers()
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    method,
                    url,
                    headers=headers,
                    params=params,
                )
        except httpx.RequestError as exc:
            raise TwitchRequestError(f"{context}: {exc}") from exc

        if not response.is_success:
            raise TwitchRequestError(
                f"{context}: HTTP {response.status_code} {response.reason_phrase}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise TwitchRequestError(f"{context}: invalid JSON body") from exc
