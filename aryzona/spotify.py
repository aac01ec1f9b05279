"""A small client for the Spotify Web API (client-credentials flow)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import requests

TOKEN_URL = "https://accounts.spotify.com/api/token"
API_URL = "https://api.spotify.com/v1"
PLAYLIST_ITEMS_FIELDS = "name,total,limit,items(track(name,artists(name)))"

_TIMEOUT = 10


class SpotifyError(Exception):
    """The Spotify API refused a request or answered with an error."""


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


@dataclass
class Token:
    """An access token and the moment it stops being valid."""

    access_token: str
    token_type: str
    expires_in: int
    expires_at: datetime

    def expired(self) -> bool:
        """True once the expiry moment has passed."""
        return _now() > self.expires_at


@dataclass
class Track:
    """A track's name and the names of its artists."""

    name: str = ""
    artists: list[str] = field(default_factory=list)


@dataclass
class PlaylistImage:
    """One cover image of a playlist."""

    url: str = ""
    height: int = 0
    width: int = 0


@dataclass
class PlaylistItems:
    """A page of playlist tracks and the total number of tracks."""

    items: list[Track] = field(default_factory=list)
    limit: int = 0
    total: int = 0


@dataclass
class Playlist:
    """A playlist with its cover images, owner and first page of tracks."""

    name: str = ""
    images: list[PlaylistImage] = field(default_factory=list)
    owner_display_name: str = ""
    tracks: PlaylistItems = field(default_factory=PlaylistItems)


def _parse_track(data: Any) -> Track:
    data = _dict(data)
    return Track(
        name=_str(data.get("name")),
        artists=[_str(_dict(artist).get("name")) for artist in _list(data.get("artists"))],
    )


def _parse_playlist_items(data: Any) -> PlaylistItems:
    data = _dict(data)
    return PlaylistItems(
        items=[_parse_track(_dict(item).get("track")) for item in _list(data.get("items"))],
        limit=_int(data.get("limit")),
        total=_int(data.get("total")),
    )


def _parse_playlist(data: Any) -> Playlist:
    data = _dict(data)
    images = [
        PlaylistImage(
            url=_str(_dict(image).get("url")),
            height=_int(_dict(image).get("height")),
            width=_int(_dict(image).get("width")),
        )
        for image in _list(data.get("images"))
    ]
    return Playlist(
        name=_str(data.get("name")),
        images=images,
        owner_display_name=_str(_dict(data.get("owner")).get("display_name")),
        tracks=_parse_playlist_items(data.get("tracks")),
    )


def _json(response: requests.Response) -> Any:
    return json.loads(response.content)


class Spotify:
    """Spotify API client that fetches and renews its own access token."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._token: Optional[Token] = None
        self._session = session if session is not None else requests.Session()

    def _generate_token(self) -> Token:
        requested_at = _now()
        response = self._session.post(
            TOKEN_URL,
            data={
                "grant_type": "client_credentials",
                "client_id": self._client_id,
                "client_secret": self._client_secret,
            },
            timeout=_TIMEOUT,
        )
        if response.status_code != 200:
            raise SpotifyError(
                f"spotify: cannot generate token, got status code {response.status_code}"
            )
        data = _dict(_json(response))
        expires_in = _int(data.get("expires_in"))
        return Token(
            access_token=_str(data.get("access_token")),
            token_type=_str(data.get("token_type")),
            expires_in=expires_in,
            expires_at=requested_at + timedelta(seconds=expires_in),
        )

    def _ensure_token(self) -> Token:
        if self._token is None or self._token.expired():
            try:
                self._token = self._generate_token()
            except (SpotifyError, requests.RequestException, ValueError) as error:
                raise SpotifyError(f"spotify: cannot generate token: {error}") from error
        return self._token

    def _get(self, path: str, what: str, params: Optional[dict[str, Any]] = None) -> Any:
        token = self._ensure_token()
        response = self._session.get(
            f"{API_URL}/{path}",
            params=params,
            headers={"Authorization": f"Bearer {token.access_token}"},
            timeout=_TIMEOUT,
        )
        if response.status_code != 200:
            raise SpotifyError(
                f"spotify: cannot get {what}, got status code {response.status_code}"
            )
        return _json(response)

    def get_playlist(self, playlist_id: str) -> Playlist:
        """A playlist with its first page of tracks."""
        return _parse_playlist(self._get(f"playlists/{playlist_id}", "playlist"))

    def get_playlist_items(self, playlist_id: str, limit: int, offset: int) -> PlaylistItems:
        """A page of a playlist's tracks."""
        data = self._get(
            f"playlists/{playlist_id}/tracks",
            "playlist items",
            params={"limit": limit, "offset": offset, "fields": PLAYLIST_ITEMS_FIELDS},
        )
        return _parse_playlist_items(data)

    def get_track(self, track_id: str) -> Track:
        """A single track."""
        return _parse_track(self._get(f"tracks/{track_id}", "track items"))