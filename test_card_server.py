from fastapi.testclient import TestClient

from card_server import create_app
from trackcard import constants as c


def test_index_shows_default_card_and_ready_status(make_view, spotify):
    with TestClient(create_app(make_view())) as client:
        r = client.get("/")

    assert r.status_code == 200
    assert "MUSIC PLAYER" in r.text
    assert c.DEFAULT_TITLE in r.text
    assert c.STATUS_READY in r.text
    assert len(spotify.token_requests) == 1


def test_search_renders_top_match(make_view, spotify):
    with TestClient(create_app(make_view())) as client:
        r = client.get("/search", params={"q": "song"})
        status = client.get("/status").json()

    assert "Song — A, B" in r.text
    assert 'src="U"' in r.text
    assert 'value="song"' in r.text
    assert status["title"] == "Song — A, B"
    assert status["status"] == "ready"
    assert status["loading"] is False


def test_missing_credentials_page(make_view, spotify):
    with TestClient(create_app(make_view("", ""))) as client:
        r = client.get("/search", params={"q": "song"})
        client.get("/search", params={"q": ""})
        status = client.get("/status").json()

    assert spotify.requests == []
    assert c.TOKEN_MISSING_OR_EXPIRED in r.text
    assert status["status"] == "missing-credentials"
    assert status["message"] == c.STATUS_MISSING_CREDENTIALS


def test_query_is_escaped(make_view, spotify):
    with TestClient(create_app(make_view())) as client:
        r = client.get("/search", params={"q": '"><script>x</script>'})

    assert "<script>x</script>" not in r.text
    assert "&lt;script&gt;" in r.text


def test_placeholder_cover(make_view):
    with TestClient(create_app(make_view())) as client:
        r = client.get(c.PLACEHOLDER_COVER)

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("image/svg+xml")
    assert r.text.startswith("<svg")


def test_search_form_has_icon(make_view):
    with TestClient(create_app(make_view())) as client:
        page = client.get("/").text
        icon = client.get(c.SEARCH_ICON)

    assert f'<img class="search-icon" src="{c.SEARCH_ICON}"' in page
    assert icon.status_code == 200
    assert icon.headers["content-type"].startswith("image/svg+xml")
