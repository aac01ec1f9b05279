from datetime import datetime, timezone

import pytest
import requests
import responses

from aryzona import news

CNN_DESCRIPTION = (
    "CNN.com delivers up-to-the-minute news and information on the latest top "
    "stories, weather, entertainment, politics and more."
)
CNN_IMAGE = "http://i2.cdn.turner.com/cnn/2015/images/09/24/cnn.digital.png"
THN_DESCRIPTION = (
    "Most trusted, widely-read independent cybersecurity news source for everyone; "
    "supported by hackers and IT professionals — Send TIPs to [email]"
)

ITEM = """
<item>
  <title><![CDATA[Story title]]></title>
  <link>https://news.example.com/story</link>
  <description>Story description</description>
  <author>editor@example.com (Jane Doe)</author>
  <pubDate>Mon, 02 Jan 2006 15:04:05 GMT</pubDate>
</item>
"""


def _rss(title, description, link, image=""):
    image_xml = (
        f"<image><url>{image}</url><title>{title}</title><link>{link}</link></image>"
        if image
        else ""
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom"><channel>'
        f"<title><![CDATA[{title}]]></title>"
        f"<description><![CDATA[{description}]]></description>"
        f"<link>{link}</link>"
        '<atom:link href="https://feeds.example.com/self" rel="self"/>'
        f"{image_xml}{ITEM}</channel></rss>"
    ).encode("utf-8")


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.mark.parametrize(
    ("getter", "feed_url", "title", "link"),
    [
        (
            news.get_cnn_top_stories_feed,
            "http://rss.cnn.com/rss/cnn_topstories.rss",
            "CNN.com - RSS Channel - HP Hero",
            "https://www.cnn.com/index.html",
        ),
        (
            news.get_cnn_world_feed,
            "http://rss.cnn.com/rss/cnn_world.rss",
            "CNN.com - RSS Channel - World",
            "https://www.cnn.com/world/index.html",
        ),
        (
            news.get_cnn_tech_feed,
            "http://rss.cnn.com/rss/cnn_tech.rss",
            "CNN.com - RSS Channel - App Tech Section",
            "https://www.cnn.com/app-tech-section/index.html",
        ),
    ],
)
def test_cnn_feeds(mocked, getter, feed_url, title, link):
    mocked.add(responses.GET, feed_url, body=_rss(title, CNN_DESCRIPTION, link, CNN_IMAGE))
    feed = getter()
    assert feed.title == title
    assert feed.description == CNN_DESCRIPTION
    assert feed.author == ""
    assert feed.url == link
    assert feed.thumbnail_url == CNN_IMAGE
    assert len(feed.entries) == 1
    assert feed.entries[0].thumbnail_url == CNN_IMAGE


def test_thn_feed(mocked):
    mocked.add(
        responses.GET,
        "https://feeds.feedburner.com/TheHackersNews?format=xml",
        body=_rss("The Hacker News", THN_DESCRIPTION, "https://thehackernews.com"),
    )
    feed = news.get_thn_feed()
    assert feed.title == "The Hacker News"
    assert feed.description == THN_DESCRIPTION
    assert feed.author == ""
    assert feed.url == "https://thehackernews.com"
    assert feed.thumbnail_url == ""
    assert len(feed.entries) == 1


def test_rss_item_fields():
    feed = news.parse_feed_xml(_rss("T", "D", "https://news.example.com"))
    entry = feed.entries[0]
    assert entry.title == "Story title"
    assert entry.url == "https://news.example.com/story"
    assert entry.description == "Story description"
    assert entry.author == "Jane Doe"
    assert entry.posted_at == datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)
    assert entry.edited_at is None


def test_atom_feed():
    document = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Atom Title</title>
  <subtitle>Atom subtitle</subtitle>
  <link rel="self" href="https://atom.example.com/feed"/>
  <link rel="alternate" href="https://atom.example.com/"/>
  <logo>https://atom.example.com/logo.png</logo>
  <author><name>Feed Author</name></author>
  <entry>
    <title>Entry</title>
    <link href="https://atom.example.com/entry"/>
    <summary>Summary</summary>
    <author><name>Entry Author</name></author>
    <published>2006-01-02T15:04:05Z</published>
    <updated>2006-01-03T15:04:05Z</updated>
  </entry>
</feed>"""
    feed = news.parse_feed_xml(document)
    assert feed.title == "Atom Title"
    assert feed.description == "Atom subtitle"
    assert feed.url == "https://atom.example.com/"
    assert feed.author == "Feed Author"
    assert feed.thumbnail_url == "https://atom.example.com/logo.png"
    entry = feed.entries[0]
    assert entry.url == "https://atom.example.com/entry"
    assert entry.author == "Entry Author"
    assert entry.description == "Summary"
    assert entry.posted_at == datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)
    assert entry.edited_at == datetime(2006, 1, 3, 15, 4, 5, tzinfo=timezone.utc)
    assert entry.thumbnail_url == feed.thumbnail_url


def test_invalid_xml_raises():
    with pytest.raises(ValueError):
        news.parse_feed_xml(b"<rss><channel>")


def test_unknown_document_raises():
    with pytest.raises(ValueError, match="unsupported"):
        news.parse_feed_xml(b"<html><body/></html>")


def test_http_error_raises(mocked):
    mocked.add(responses.GET, "https://feeds.example.com/feed.xml", status=404)
    with pytest.raises(requests.HTTPError):
        news.parse_feed("https://feeds.example.com/feed.xml")