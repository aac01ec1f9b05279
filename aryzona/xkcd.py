"""Fetching xkcd comics."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

import requests

_TIMEOUT = 10


@dataclass(frozen=True)
class Comic:
    """One xkcd comic as the JSON API describes it."""

    num: int = 0
    img: str = ""
    title: str = ""
    alt: str = ""
    year: str = ""
    month: str = ""
    day: str = ""
    transcript: str = ""
    safe_title: str = ""
    news: str = ""

    @classmethod
    def _from_json(cls, data: Any) -> Comic:
        if not isinstance(data, dict):
            raise ValueError("comic data must be a JSON object")
        return cls(
            num=int(data.get("num", 0)),
            img=str(data.get("img", "")),
            title=str(data.get("title", "")),
            alt=str(data.get("alt", "")),
            year=str(data.get("year", "")),
            month=str(data.get("month", "")),
            day=str(data.get("day", "")),
            transcript=str(data.get("transcript", "")),
            safe_title=str(data.get("safe_title", "")),
            news=str(data.get("news", "")),
        )


def get_by_num(num: int) -> Comic:
    """The comic with this number; 0 means the latest one."""
    if num == 0:
        url = "https://xkcd.com/info.0.json"
    else:
        url = f"https://xkcd.com/{num}/info.0.json"
    response = requests.get(url, timeout=_TIMEOUT)
    response.raise_for_status()
    return Comic._from_json(response.json())


def get_latest() -> Comic:
    """The most recent comic."""
    return get_by_num(0)


def get_random() -> Comic:
    """A comic picked at random (a pick of 0 gives the latest)."""
    latest = get_latest()
    return get_by_num(random.randrange(latest.num))