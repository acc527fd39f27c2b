# trackcard/search.py
"""Top-1 track search and the card projection of its result."""

from typing import Any, Dict, NamedTuple, Optional

import httpx

from .client import spotify_request
from .constants import PLACEHOLDER_COVER


class TrackCard(NamedTuple):
    """What the card shows: a title line and a cover image."""
    title: str
    image_url: str


async def search_top_track(client: httpx.AsyncClient, token: str, query: str) -> httpx.Response:
    """
    Search for the single best track match.

    The raw response is returned so the caller can map each status code
    to its own message.
    """
    return await spotify_request(
        client, "GET", "/search", token,
        params={"q": query, "type": "track", "limit": 1},
    )


def first_item(payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    items = ((payload or {}).get("tracks") or {}).get("items") or []
    return items[0] if items else None


def format_title(item: Dict[str, Any]) -> str:
    artists = ", ".join(a["name"] for a in (item.get("artists") or []))
    return f"{item['name']} — {artists}"


def project_track(item: Dict[str, Any]) -> TrackCard:
    images = (item.get("album") or {}).get("images") or []
    image_url = (images[0] or {}).get("url") if images else None
    return TrackCard(title=format_title(item), image_url=image_url or PLACEHOLDER_COVER)
