# trackcard/view.py
"""
Search view controller: owns the credential, the query and the card state.

Both the web page and the MCP tools drive a single instance of
SearchViewController; everything they display comes from snapshot().
"""

import asyncio
import logging
import time
from typing import Any, Callable, Dict, NamedTuple, Optional

from . import constants as c
from .auth import Credential, request_client_token
from .client import ClientFactory, default_client
from .search import TrackCard, first_item, project_track, search_top_track

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


class ViewStatus(NamedTuple):
    """Status line, derived from the controller state at render time."""
    kind: str  # loading | error | missing-credentials | ready
    message: str


class SearchViewController:
    def __init__(
        self,
        client_id: str,
        client_secret: str,
        *,
        client_factory: Optional[ClientFactory] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.client_id = client_id or ""
        self.client_secret = client_secret or ""
        self._client_factory = client_factory or default_client
        self._clock = clock or now_ms

        self.query = ""
        self.credential: Optional[Credential] = None
        self.loading = False
        self.error = ""
        self.card = TrackCard(title=c.DEFAULT_TITLE, image_url=c.PLACEHOLDER_COVER)

        self._activation: Optional[asyncio.Task] = None
        self._seq = 0

    @property
    def has_client_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)

    @property
    def credential_valid(self) -> bool:
        return self.credential is not None and self.credential.is_valid(self._clock())

    @property
    def status(self) -> ViewStatus:
        if self.loading:
            return ViewStatus("loading", c.STATUS_LOADING)
        if self.error:
            return ViewStatus("error", f"Error: {self.error}")
        if not self.has_client_credentials:
            return ViewStatus("missing-credentials", c.STATUS_MISSING_CREDENTIALS)
        return ViewStatus("ready", c.STATUS_READY)

    def snapshot(self) -> Dict[str, Any]:
        status = self.status
        return {
            "title": self.card.title,
            "image_url": self.card.image_url,
            "status": status.kind,
            "message": status.message,
            "loading": self.loading,
            "error": self.error,
        }

    async def activate(self) -> None:
        """
        One-shot credential exchange. Does nothing when the client id or
        secret is missing. Callers arriving while the exchange is in flight
        wait for it; later calls return at once.
        There is no retry and no refresh: an expired token stays expired.
        """
        if self._activation is None:
            self._activation = asyncio.ensure_future(self._exchange_token())
        await asyncio.shield(self._activation)

    async def _exchange_token(self) -> None:
        if not self.has_client_credentials:
            logger.warning("SPOTIFY_CLIENT_ID/SPOTIFY_CLIENT_SECRET not set; search disabled")
            return

        try:
            async with self._client_factory() as client:
                self.credential = await request_client_token(
                    client, self.client_id, self.client_secret, self._clock()
                )
        except Exception:
            logger.exception("token exchange failed")
            self.credential = None
            self.error = c.TOKEN_FAILED

    def set_query(self, text: str) -> None:
        self.query = text

    async def submit(self, query: Optional[str] = None) -> None:
        """
        Run one search for the current query and update the card.

        Every failure ends up as a message in self.error; nothing is raised.
        When submissions overlap, only the most recent one may change the
        card, the error or the loading flag.
        """
        if query is not None:
            self.set_query(query)

        self.error = ""
        q = self.query.strip()
        if not q:
            return

        if not self.credential_valid:
            self.error = c.TOKEN_MISSING_OR_EXPIRED
            return

        self._seq += 1
        seq = self._seq
        self.loading = True
        try:
            card, error = await self._lookup(q, self.credential.token)
            if seq != self._seq:
                logger.debug("dropping stale result for %r", q)
                return
            if error:
                self.error = error
            else:
                self.card = card
                logger.info("card updated: %s", card.title)
        except Exception:
            logger.exception("search for %r failed", q)
            if seq == self._seq:
                self.error = c.SEARCH_FAILED
        finally:
            if seq == self._seq:
                self.loading = False

    async def _lookup(self, q: str, token: str) -> tuple[Optional[TrackCard], str]:
        async with self._client_factory() as client:
            r = await search_top_track(client, token, q)

        if r.status_code == 401:
            logger.warning("search rejected the token: %s", r.text)
            return None, c.TOKEN_REJECTED
        if not r.is_success:
            logger.warning("search failed: %s %s", r.status_code, r.text)
            return None, f"Spotify API error: {r.status_code} {r.text}"

        item = first_item(r.json())
        if not item:
            return None, c.NO_TRACK_FOUND
        return project_track(item), ""
