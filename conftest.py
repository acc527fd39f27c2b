"""Shared fakes for the Spotify endpoints and the clock."""

import httpx
import pytest

from trackcard.view import SearchViewController


START_MS = 1_700_000_000_000


def track_payload(name="Song", artists=("A", "B"), image="U"):
    item = {"name": name, "artists": [{"name": a} for a in artists], "album": {"images": []}}
    if image:
        item["album"]["images"].append({"url": image})
    return {"tracks": {"items": [item]}}


class FakeClock:
    def __init__(self, now=START_MS):
        self.now = now

    def __call__(self):
        return self.now


class FakeSpotify:
    """Answers the token and search endpoints and remembers every request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.token_response = httpx.Response(200, json={"access_token": "T", "expires_in": 100})
        self.search_response = httpx.Response(200, json=track_payload())
        self.loading_seen: list[bool] = []
        self.view = None

    @property
    def token_requests(self):
        return [r for r in self.requests if r.url.host == "accounts.spotify.com"]

    @property
    def search_requests(self):
        return [r for r in self.requests if r.url.host == "api.spotify.com"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "accounts.spotify.com":
            return self.token_response
        if self.view is not None:
            self.loading_seen.append(self.view.loading)
        return self.search_response

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def spotify():
    return FakeSpotify()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_view(spotify, clock):
    def _make(client_id="id", client_secret="secret"):
        view = SearchViewController(
            client_id, client_secret, client_factory=spotify.client, clock=clock
        )
        spotify.view = view
        return view
    return _make
