"""Random animal pictures from public APIs."""

from __future__ import annotations

import json
from typing import Any

import requests

_TIMEOUT = 10
_DOG_BASE = "https://random.dog/"


def _fetch(url: str) -> bytes:
    response = requests.get(url, timeout=_TIMEOUT)
    response.raise_for_status()
    return response.content


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _load(body: bytes) -> Any:
    try:
        return json.loads(body)
    except ValueError:
        return None


def get_random_cat() -> str:
    """The URL of a random cat picture ("" when the answer holds none)."""
    data = _load(_fetch("https://api.thecatapi.com/v1/images/search"))
    if isinstance(data, list) and data and isinstance(data[0], dict):
        return _text(data[0].get("url"))
    return ""


def get_random_dog() -> str:
    """The URL of a random dog picture or video."""
    name = _fetch("https://random.dog/woof").decode("utf-8")
    return f"{_DOG_BASE}{name}"


def get_random_dog_image() -> str:
    """The URL of a random dog picture (JPEG only)."""
    name = _fetch("https://random.dog/woof?include=jpg").decode("utf-8")
    return f"{_DOG_BASE}{name}"


def get_random_fox() -> str:
    """The URL of a random fox picture ("" when the answer holds none)."""
    data = _load(_fetch("https://randomfox.ca/floof/"))
    if isinstance(data, dict):
        return _text(data.get("image"))
    return ""