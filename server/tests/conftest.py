"""Shared fixtures: an in-memory Twitch backend served through httpx.MockTransport."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest

from server.api.auth import TwitchCredentials
from server.api.twitch_client import TwitchClient

TOKEN_URL = "https://id.twitch.tv/oauth2/token"
HELIX_URL = "https://api.twitch.tv/helix"

CREDENTIALS = TwitchCredentials(
    client_id="cid",
    client_secret="secret",
    grant_type="client_credentials",
    token_url=TOKEN_URL,
)

Route = Union[Tuple[int, Any], Callable[[httpx.Request], httpx.Response]]


class FakeTwitch:
    """Route table keyed by URL path; records every request it serves."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.routes: Dict[str, Route] = {
            "/oauth2/token": (
                200,
                {"access_token": "tok", "expires_in": 3600, "token_type": "bearer"},
            ),
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": "Not Found"})
        if callable(route):
            return route(request)
        status, body = route
        return httpx.Response(status, json=body)

    def client(self) -> TwitchClient:
        return TwitchClient(
            CREDENTIALS,
            base_url=HELIX_URL,
            transport=httpx.MockTransport(self.handler),
        )

    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def fake_twitch() -> FakeTwitch:
    return FakeTwitch()
