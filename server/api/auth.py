"""App access tokens via the OAuth client credentials grant."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import httpx
from pydantic import BaseModel, ValidationError

from server.api.errors import TwitchAuthError

DEFAULT_TOKEN_URL = "https://id.twitch.tv/oauth2/token"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwitchCredentials:
    """Application credentials registered with Twitch."""

    client_id: str
    client_secret: str
    grant_type: str = "client_credentials"
    token_url: str = DEFAULT_TOKEN_URL

    @classmethod
    def from_env(cls) -> "TwitchCredentials":
        return cls(
            client_id=os.getenv("TWITCH_CLIENT_ID", ""),
            client_secret=os.getenv("TWITCH_CLIENT_SECRET", ""),
            grant_type=os.getenv("TWITCH_GRANT_TYPE", "client_credentials"),
            token_url=os.getenv("TWITCH_TOKEN_URL", DEFAULT_TOKEN_URL),
        )


class TokenResponse(BaseModel):
    access_token: str
    expires_in: int
    token_type: str


class AppTokenProvider:
    """Fetch a fresh app access token on every call.

    Nothing is cached; each ``get_token`` costs one round trip to the token
    endpoint. Anything exposing an async ``get_token()`` can replace this class
    in ``TwitchClient``.
    """

    def __init__(
        self,
        credentials: TwitchCredentials,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.credentials = credentials
        self.timeout = httpx.Timeout(timeout)
        self._transport = transport

    async def get_token(self) -> str:
        payload = {
            "grant_type": self.credentials.grant_type,
            "client_id": self.credentials.client_id,
            "client_secret": self.credentials.client_secret,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.credentials.token_url, data=payload)
        except httpx.RequestError as exc:
            raise TwitchAuthError(f"Error fetching access token: {exc}") from exc

        if not response.is_success:
            raise TwitchAuthError(
                "Error fetching access token: "
                f"HTTP {response.status_code} {response.reason_phrase}"
            )

        try:
            token = TokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise TwitchAuthError(f"Error fetching access token: {exc}") from exc

        logger.debug("Fetched app access token (expires in %ss)", token.expires_in)
        return token.access_token
