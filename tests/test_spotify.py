from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs, urlparse

import pytest
import responses

from aryzona.spotify import (
    PLAYLIST_ITEMS_FIELDS,
    TOKEN_URL,
    Spotify,
    SpotifyError,
    Token,
)

PLAYLIST_ID = "1D6l3qeCbryB9COT1CGalw"
TRACK_ID = "6K4t31amVTZDgR3sKmwUJJ"
TRACK_URL = f"https://api.spotify.com/v1/tracks/{TRACK_ID}"
PLAYLIST_URL = f"https://api.spotify.com/v1/playlists/{PLAYLIST_ID}"
ITEMS_URL = f"https://api.spotify.com/v1/playlists/{PLAYLIST_ID}/tracks"

TRACK_JSON = {"name": "The Less I Know The Better", "artists": [{"name": "Tame Impala"}]}


def _items(count):
    return [{"track": TRACK_JSON} for _ in range(count)]


PLAYLIST_JSON = {
    "name": "forbidden",
    "images": [
        {"url": "https://images.example.com/640.jpg", "height": 640, "width": 640},
        {"url": "https://images.example.com/300.jpg", "height": 300, "width": 300},
        {"url": "https://images.example.com/60.jpg", "height": None, "width": None},
    ],
    "owner": {"display_name": "mauriciofsnts"},
    "tracks": {"items": _items(3), "limit": 100, "total": 30},
}


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _token(mocked, expires_in=3600, status=200):
    mocked.add(
        responses.POST,
        TOKEN_URL,
        json={"access_token": "token", "token_type": "Bearer", "expires_in": expires_in},
        status=status,
    )


def _client():
    return Spotify("client-id", "secret")


def _token_calls(mocked):
    return sum(1 for call in mocked.calls if call.request.url == TOKEN_URL)


def test_get_track(mocked):
    _token(mocked)
    mocked.add(responses.GET, TRACK_URL, json=TRACK_JSON)
    track = _client().get_track(TRACK_ID)
    assert track.name == "The Less I Know The Better"
    assert len(track.artists) == 1
    assert track.artists[0] == "Tame Impala"


def test_get_playlist(mocked):
    _token(mocked)
    mocked.add(responses.GET, PLAYLIST_URL, json=PLAYLIST_JSON)
    playlist = _client().get_playlist(PLAYLIST_ID)
    assert playlist.name == "forbidden"
    assert playlist.owner_display_name == "mauriciofsnts"
    assert len(playlist.images) == 3
    assert all(image.url for image in playlist.images)
    assert playlist.images[2].height == 0
    assert playlist.tracks.total > 25


def test_get_playlist_items(mocked):
    _token(mocked)
    mocked.add(
        responses.GET, ITEMS_URL, json={"items": _items(10), "limit": 10, "total": 30}
    )
    items = _client().get_playlist_items(PLAYLIST_ID, 10, 0)
    assert len(items.items) == 10
    assert items.total > 25
    assert items.items[0].name == TRACK_JSON["name"]

    query = parse_qs(urlparse(mocked.calls[-1].request.url).query)
    assert query == {"limit": ["10"], "offset": ["0"], "fields": [PLAYLIST_ITEMS_FIELDS]}


def test_request_carries_bearer_token(mocked):
    _token(mocked)
    mocked.add(responses.GET, TRACK_URL, json=TRACK_JSON)
    track = _client().get_track(TRACK_ID)
    assert track.name == "The Less I Know The Better"
    assert mocked.calls[-1].request.headers["Authorization"] == "Bearer token"
    body = parse_qs(mocked.calls[0].request.body)
    assert body["grant_type"] == ["client_credentials"]
    assert body["client_id"] == ["client-id"]


def test_token_is_reused_while_valid(mocked):
    _token(mocked)
    mocked.add(responses.GET, TRACK_URL, json=TRACK_JSON)
    client = _client()
    first = client.get_track(TRACK_ID)
    second = client.get_track(TRACK_ID)
    assert first.name == second.name == "The Less I Know The Better"
    assert _token_calls(mocked) == 1


def test_expired_token_is_renewed(mocked):
    _token(mocked, expires_in=-1)
    mocked.add(responses.GET, TRACK_URL, json=TRACK_JSON)
    client = _client()
    first = client.get_track(TRACK_ID)
    second = client.get_track(TRACK_ID)
    assert first.artists == second.artists == ["Tame Impala"]
    assert _token_calls(mocked) == 2


def test_error_status_raises(mocked):
    _token(mocked)
    mocked.add(responses.GET, TRACK_URL, status=404)
    with pytest.raises(SpotifyError, match="status code 404"):
        _client().get_track(TRACK_ID)


def test_token_failure_raises(mocked):
    _token(mocked, status=401)
    with pytest.raises(SpotifyError, match="cannot generate token"):
        _client().get_track(TRACK_ID)


def test_token_expiry():
    now = datetime.now(timezone.utc)
    valid = Token("token", "Bearer", 3600, now + timedelta(hours=1))
    stale = Token("token", "Bearer", 3600, now - timedelta(seconds=1))
    assert valid.expired() is False
    assert stale.expired() is True