# trackcard/client.py
"""HTTP helpers for the Spotify Web API."""

from typing import Callable, Dict

import httpx

from .constants import SPOTIFY_API


ClientFactory = Callable[[], httpx.AsyncClient]


def default_client() -> httpx.AsyncClient:
    """Client used when none is injected. Requests run until the transport settles."""
    return httpx.AsyncClient(timeout=None)


def bearer_headers(token: str) -> Dict[str, str]:
    """Authorization header for an app-level access token."""
    return {"Authorization": f"Bearer {token}"}


async def spotify_request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    token: str,
    *,
    params: dict | None = None,
) -> httpx.Response:
    """Make an authenticated request to the Spotify API."""
    url = f"{SPOTIFY_API}{path}"
    return await client.request(method, url, headers=bearer_headers(token), params=params)
