"""News feeds (RSS 2.0 and Atom) reduced to a common shape."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Optional, Union
from xml.etree.ElementTree import Element, ParseError

import requests
from defusedxml import ElementTree as SafeET

_TIMEOUT = 10
_ATOM = "{http://www.w3.org/2005/Atom}"
_DC = "{http://purl.org/dc/elements/1.1/}"
_ITUNES = "{http://www.itunes.com/dtds/podcast-1.0.dtd}"

_NAME_IN_PARENS = re.compile(r"^\S+@\S+\s*\((.*)\)$")
_NAME_BEFORE_ADDRESS = re.compile(r"^(.*?)\s*<[^>]*>$")


@dataclass
class NewsEntry:
    """One article of a feed."""

    title: str = ""
    thumbnail_url: str = ""
    description: str = ""
    url: str = ""
    author: str = ""
    posted_at: Optional[datetime] = None
    edited_at: Optional[datetime] = None


@dataclass
class NewsFeed:
    """A feed and its articles."""

    title: str = ""
    description: str = ""
    thumbnail_url: str = ""
    url: str = ""
    author: str = ""
    entries: list[NewsEntry] = field(default_factory=list)


def _text(element: Optional[Element], path: str) -> str:
    if element is None:
        return ""
    found = element.find(path)
    if found is None:
        return ""
    return "".join(found.itertext()).strip()


def _first(values: Iterable[str]) -> str:
    return next((value for value in values if value), "")


def _author_name(raw: str) -> str:
    raw = raw.strip()
    if not raw:
        return ""
    match = _NAME_IN_PARENS.match(raw)
    if match:
        return match.group(1).strip()
    match = _NAME_BEFORE_ADDRESS.match(raw)
    if match:
        return match.group(1).strip().strip('"')
    if "@" in raw and " " not in raw:
        return ""
    return raw


def _parse_date(text: str) -> Optional[datetime]:
    if not text:
        return None
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_rss(root: Element) -> NewsFeed:
    channel = root.find("channel")
    if channel is None:
        raise ValueError("RSS document has no channel")

    thumbnail_url = _text(channel, "image/url")
    author = _first(
        _author_name(_text(channel, path))
        for path in ("managingEditor", "webMaster", f"{_DC}creator", f"{_ITUNES}author")
    )

    entries = [
        NewsEntry(
            title=_text(item, "title"),
            url=_text(item, "link"),
            description=_text(item, "description"),
            thumbnail_url=thumbnail_url,
            author=_first(
                _author_name(_text(item, path))
                for path in ("author", f"{_DC}creator", f"{_ITUNES}author")
            ),
            posted_at=_parse_date(_text(item, "pubDate") or _text(item, f"{_DC}date")),
            edited_at=_parse_date(_text(item, f"{_ATOM}updated")),
        )
        for item in channel.findall("item")
    ]

    return NewsFeed(
        title=_text(channel, "title"),
        description=_text(channel, "description"),
        url=_text(channel, "link"),
        author=author,
        thumbnail_url=thumbnail_url,
        entries=entries,
    )


def _atom_link(element: Element) -> str:
    links = element.findall(f"{_ATOM}link")
    for link in links:
        if link.get("rel", "alternate") == "alternate" and link.get("href"):
            return link.get("href", "")
    return _first(link.get("href", "") for link in links)


def _atom_author(element: Element) -> str:
    return _first(_text(author, f"{_ATOM}name") for author in element.findall(f"{_ATOM}author"))


def _parse_atom(root: Element) -> NewsFeed:
    thumbnail_url = _text(root, f"{_ATOM}logo") or _text(root, f"{_ATOM}icon")
    entries = [
        NewsEntry(
            title=_text(entry, f"{_ATOM}title"),
            url=_atom_link(entry),
            description=_text(entry, f"{_ATOM}summary"),
            thumbnail_url=thumbnail_url,
            author=_atom_author(entry),
            posted_at=_parse_date(_text(entry, f"{_ATOM}published")),
            edited_at=_parse_date(_text(entry, f"{_ATOM}updated")),
        )
        for entry in root.findall(f"{_ATOM}entry")
    ]
    return NewsFeed(
        title=_text(root, f"{_ATOM}title"),
        description=_text(root, f"{_ATOM}subtitle"),
        url=_atom_link(root),
        author=_atom_author(root),
        thumbnail_url=thumbnail_url,
        entries=entries,
    )


def parse_feed_xml(data: Union[bytes, str]) -> NewsFeed:
    """Parse an RSS 2.0 or Atom document."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        root: Any = SafeET.fromstring(data)
    except ParseError as error:
        raise ValueError(f"invalid feed XML: {error}") from error
    if root.tag == "rss":
        return _parse_rss(root)
    if root.tag == f"{_ATOM}feed":
        return _parse_atom(root)
    raise ValueError(f"unsupported feed format: {root.tag}")


def parse_feed(feed_url: str) -> NewsFeed:
    """Download and parse a feed."""
    response = requests.get(feed_url, timeout=_TIMEOUT)
    response.raise_for_status()
    return parse_feed_xml(response.content)


def get_cnn_top_stories_feed() -> NewsFeed:
    """CNN top stories."""
    return parse_feed("http://rss.cnn.com/rss/cnn_topstories.rss")


def get_cnn_tech_feed() -> NewsFeed:
    """CNN technology news."""
    return parse_feed("http://rss.cnn.com/rss/cnn_tech.rss")


def get_cnn_world_feed() -> NewsFeed:
    """CNN world news."""
    return parse_feed("http://rss.cnn.com/rss/cnn_world.rss")


def get_thn_feed() -> NewsFeed:
    """The Hacker News security news."""
    return parse_feed("https://feeds.feedburner.com/TheHackersNews?format=xml")