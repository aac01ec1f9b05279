# aryzona

Building blocks for a chat bot: translated messages, dice notation,
Brazilian document generators, a chat-platform data model with an
in-memory bot, a music queue, radio stations and small clients for web
content (live soccer scores, xkcd, Spotify, random animals, jokes and
news feeds).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `aryzona.i18n` – language files (`<root_dir>/<name>.json`), `Entry`
  strings with `{index:name}` placeholders, `RawJSONMap.get_path`,
  `find_language_name`, `get_language`.
- `aryzona.dice` – `parse_notation` for `N`, `dF`, `Nd`, `NdF` and `d`;
  raises `InvalidNotationError`.
- `aryzona.brdoc` – `generate_cpf`, `generate_cnpj`, `calculate_digit`.
- `aryzona.model` – channels, messages, embeds, buttons, `Permissions`
  flags, presences and event types.
- `aryzona.bot` – the `BotAdapter` interface, `DummyBot`,
  `use_implementation`, `create_bot`, `as_mention`, `disable_buttons`.
- `aryzona.playable` – the `Playable` protocol and `DummyPlayable`.
- `aryzona.queue` – `Queue` with `APPEND`, `REMOVE` and `SHUFFLE` events.
- `aryzona.radio` – `radio_list`, `radio_by_id`, `CidadeRadio`, `HunterRadio`.
- `aryzona.livescore` – `list_lives`, `fetch_match_info`,
  `fetch_match_info_by_team_name`, the JSON parsers and `MatchTracker`.
- `aryzona.xkcd`, `aryzona.joke`, `aryzona.animals`, `aryzona.news`,
  `aryzona.spotify` – web content clients.

## Examples

Dice notation:

```python
from aryzona.dice import parse_notation

notation = parse_notation("2d10")
print(notation.dices, notation.faces)  # 2 10
print(str(notation))                   # 2d10
```

Translated entries with positional placeholders:

```python
from aryzona.i18n import Entry

Entry("Hello {0:name}").render("World")  # "Hello World"
```

Loading a language file (`<root_dir>/en_US.json`):

```python
from aryzona.i18n import find_language_name, get_language

lang = get_language(find_language_name("en"), "./assets/i18n")
definition = lang.command_definition("ping")
```

A music queue with events:

```python
from aryzona.playable import DummyPlayable
from aryzona.queue import Queue, QueueEntry, QueueEvent

queue = Queue()
queue.on(QueueEvent.APPEND, lambda data: print("added at", data.index))
queue.append(QueueEntry(playable=DummyPlayable(name="song"), requester="someone"))
print(len(queue), queue.first().playable.name)
```

Radio stations:

```python
from aryzona.radio import radio_by_id, radio_list

for radio in radio_list():
    print(radio.id, radio.name)
print(radio_by_id("rock").share_url)  # https://hunter.fm/rock/
```

Building embeds and permissions:

```python
from aryzona.model import Embed, Permissions, new_permissions

embed = Embed().with_title("Hi").with_field("Key", "Value").with_color(0xC0FFEE)
perms = new_permissions(Permissions.SEND_MESSAGES, Permissions.CONNECT)
perms.has(Permissions.CONNECT)  # True
```

Web content:

```python
from aryzona import animals, joke, news, xkcd

comic = xkcd.get_by_num(1)
print(comic.title)
print(joke.get_random_joke().setup)
print(animals.get_random_dog())
feed = news.get_thn_feed()
```

Live soccer scores. A `MatchTracker` keeps followed matches; each call
to `update_all` refreshes them once and calls their listeners:

```python
from aryzona.livescore import MatchTracker, list_lives

for match in list_lives():
    print(match.t1.name, match.score.t1_score, "x", match.score.t2_score, match.t2.name)

tracker = MatchTracker()
live = tracker.get_live_match(match_id)
live.add_listener("me", lambda match, error: print(match, error))
tracker.update_all()
```

Spotify (client credentials):

```python
from aryzona.spotify import Spotify

client_secret = "secret"
client = Spotify("my-client-id", client_secret)
track = client.get_track(track_id)
print(track.name, track.artists)
```

## What this package does not do

- It does not connect to a chat service. `DummyBot` only records what
  it is asked to do; a real `BotAdapter` implementation must be supplied.
- It does not parse or run chat commands, and does not stream audio:
  the queue and playables hold what should be played, nothing plays it.
- It runs no HTTP server and no background loop; `MatchTracker.update_all`
  must be called by the program that uses it.
- It stores nothing: no database, no per-user or per-server settings.
- It ships no language files; `get_language` reads them from the given
  directory.