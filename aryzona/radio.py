"""Live radio stations that can be played like any other playable."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional

import requests

_TIMEOUT = 10
_CIDADE_NOW_PLAYING = (
    "https://np.tritondigital.com/public/nowplaying"
    "?mountName=RADIOCIDADEAAC&numberToFetch=1&eventType=track"
)
_HUNTER_STATIONS = "https://api.hunter.fm/stations/"
_CDATA = re.compile(r"CDATA\[([^\]]+)\]")
_HUNTER_ID = re.compile(r"^https://hls\.hunter\.fm/(\w+)/\w+.m3u8$")


@dataclass(frozen=True)
class RadioChannel:
    """A live stream with an id and a display name."""

    id: str
    name: str
    url: str

    def can_pause(self) -> bool:
        return False

    def is_live(self) -> bool:
        return True

    def is_local(self) -> bool:
        return False

    def is_opus(self) -> bool:
        return False

    @property
    def duration(self) -> timedelta:
        """Live streams have no length."""
        return timedelta(0)

    def direct_url(self) -> str:
        return self.url

    def thumbnail_url(self) -> str:
        return ""

    @property
    def share_url(self) -> str:
        return ""

    def full_title(self) -> tuple[str, str]:
        """The title and artist now playing, empty when unknown."""
        return "", ""


def _fetch(url: str) -> Optional[bytes]:
    try:
        response = requests.get(url, timeout=_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException:
        return None
    return response.content


class CidadeRadio(RadioChannel):
    """The Rádio Cidade stream."""

    @property
    def share_url(self) -> str:
        return "https://radiocidade.fm/"

    def full_title(self) -> tuple[str, str]:
        body = _fetch(_CIDADE_NOW_PLAYING)
        if body is None:
            return "", ""
        matches = _CDATA.findall(body.decode("utf-8", errors="replace"))
        if len(matches) < 4:
            return "", ""
        return matches[2], matches[3]


def _path(value: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False)


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


class HunterRadio(RadioChannel):
    """A Hunter FM station, identified by its stream URL."""

    def _station_id(self) -> Optional[str]:
        match = _HUNTER_ID.match(self.url)
        return match.group(1) if match else None

    @property
    def share_url(self) -> str:
        station = self._station_id()
        if station is None:
            return ""
        return f"https://hunter.fm/{station}/"

    def full_title(self) -> tuple[str, str]:
        station = self._station_id()
        if station is None:
            return "", ""
        body = _fetch(_HUNTER_STATIONS)
        if body is None:
            return "", ""
        try:
            data = json.loads(body)
        except ValueError:
            return "", ""

        stations = data.values() if isinstance(data, dict) else _as_list(data)
        for value in stations:
            if _text(_path(value, "url")) != station:
                continue
            title = _text(_path(value, "live", "now", "name"))
            artist = ", ".join(_text(a) for a in _as_list(_path(value, "live", "now", "singers")))
            feats = _as_list(_path(value, "live", "now", "feats"))
            if feats:
                artist += " feat. " + ", ".join(_text(f) for f in feats)
            return title, artist
        return "", ""


_RADIOS: tuple[RadioChannel, ...] = (
    CidadeRadio("cidade", "Rádio Cidade", "https://18003.live.streamtheworld.com/RADIOCIDADEAAC.aac"),
    HunterRadio("pisadinha", "Rádio Hunter Pisadinha", "https://hls.hunter.fm/pisadinha/320.m3u8"),
    HunterRadio("pop", "Rádio Hunter Pop", "https://hls.hunter.fm/pop/192.m3u8"),
    HunterRadio("pop2k", "Rádio Hunter Pop 2k", "https://hls.hunter.fm/pop2k/192.m3u8"),
    HunterRadio("rock", "Rádio Hunter Rock", "https://hls.hunter.fm/rock/192.m3u8"),
    HunterRadio("sertanejo", "Rádio Hunter Sertanejo", "https://hls.hunter.fm/sertanejo/192.m3u8"),
    HunterRadio("smash", "Rádio Hunter Smash", "https://hls.hunter.fm/smash/192.m3u8"),
    HunterRadio("80s", "Rádio Hunter 80s", "https://hls.hunter.fm/80s/192.m3u8"),
    HunterRadio("tropical", "Rádio Hunter Tropical", "https://hls.hunter.fm/tropical/192.m3u8"),
    HunterRadio("lofi-hunter", "Rádio Hunter Lofi", "https://hls.hunter.fm/lofi/192.m3u8"),
)
_RADIO_MAP = {radio.id: radio for radio in _RADIOS}


def radio_list() -> list[RadioChannel]:
    """All known stations, in display order."""
    return list(_RADIOS)


def radio_by_id(radio_id: str) -> Optional[RadioChannel]:
    """The station with this id, or None."""
    return _RADIO_MAP.get(radio_id)