"""Random jokes from a public joke API."""

from __future__ import annotations

import json
from dataclasses import dataclass

import requests

JOKE_URL = "https://official-joke-api.appspot.com/random_joke"
_TIMEOUT = 10


@dataclass(frozen=True)
class Joke:
    """A joke: a setup and its punchline."""

    id: int = 0
    type: str = ""
    setup: str = ""
    punchline: str = ""


def get_random_joke() -> Joke:
    """Fetch one random joke."""
    response = requests.get(JOKE_URL, timeout=_TIMEOUT)
    response.raise_for_status()
    data = json.loads(response.content)
    if not isinstance(data, dict):
        raise ValueError("joke must be a JSON object")
    return Joke(
        id=int(data.get("id", 0)),
        type=str(data.get("type", "")),
        setup=str(data.get("setup", "")),
        punchline=str(data.get("punchline", "")),
    )