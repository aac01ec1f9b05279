"""Live soccer scores: match listings, match details and followed matches."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Union

import requests

BASE_ASSET_URL = "https://lsm-static-prod.livescore.com/high"
BASE_API_URL = "https://prod-public-api.livescore.com/v1/api/app"
UPDATE_PERIOD_SECONDS = 30
FINISHED_TIME = "FT"

_TIMEOUT = 10
_session = requests.Session()


class EventType(IntEnum):
    """Kinds of match incidents the score service reports."""

    GOAL = 36
    FOUL_PENALTY_GOAL = 37
    OVERTIME_GOAL = 47
    YELLOW_CARD = 43
    RED_CARD = 44
    DOUBLE_YELLOW_CARD = 45
    PENALTY_GOAL = 41
    PENALTY_MISSED = 40


@dataclass
class TeamInfo:
    """A team's name and images."""

    name: str = ""
    img_url: str = ""
    img_id: str = ""


@dataclass
class Score:
    """Goals of each team."""

    t1_score: int = 0
    t2_score: int = 0


@dataclass
class Event:
    """An incident in a match, with the score right after it."""

    score: Score = field(default_factory=Score)
    player_name: str = ""
    minute: int = 0
    extra_minute: int = 0
    half: int = 0
    type: Union[EventType, int] = 0
    team: Optional[TeamInfo] = None


@dataclass
class MatchInfo:
    """What is known about a match."""

    score: Score = field(default_factory=Score)
    t1: TeamInfo = field(default_factory=TeamInfo)
    t2: TeamInfo = field(default_factory=TeamInfo)
    id: str = ""
    cup_name: str = ""
    stadium_name: str = ""
    stadium_city: str = ""
    time: str = ""
    events: list[Event] = field(default_factory=list)

    def banner_url(self, external_url: str) -> str:
        """The banner image served by our HTTP server, or "" without team images."""
        if not self.t1.img_id or not self.t2.img_id:
            return ""
        return f"{external_url}/soccer/banner-{self.t1.img_id}-{self.t2.img_id}.png"


def team_img_url(team_id: str) -> str:
    """The URL of a team's badge image."""
    return f"{BASE_ASSET_URL}/enet/{team_id}.png"


def _get(data: Any, path: str) -> Any:
    value = data
    for part in path.split("."):
        if isinstance(value, dict):
            value = value.get(part)
        elif isinstance(value, list) and part.isdigit():
            index = int(part)
            value = value[index] if index < len(value) else None
        else:
            return None
    return value


def _str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return json.dumps(value, ensure_ascii=False)


def _int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            try:
                return int(float(text))
            except ValueError:
                return 0
    return 0


def _array(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _event_type(value: int) -> Union[EventType, int]:
    try:
        return EventType(value)
    except ValueError:
        return value


def parse_team(data: Any) -> TeamInfo:
    """Build a team from its JSON object."""
    return TeamInfo(
        name=_str(_get(data, "Nm")),
        img_url=f"{BASE_ASSET_URL}/{_str(_get(data, 'Img'))}",
        img_id=_str(_get(data, "Pids.1.0")),
    )


def _parse_event(half: int, team1: TeamInfo, team2: TeamInfo, data: Any) -> list[Event]:
    events: list[Event] = []
    for sub_event in _array(_get(data, "Incs")):
        events.extend(_parse_event(half, team1, team2, sub_event))
    team = team1 if _int(_get(data, "Nm")) == 1 else team2
    events.append(
        Event(
            player_name=_str(_get(data, "Pn")),
            minute=_int(_get(data, "Min")),
            extra_minute=_int(_get(data, "MinEx")),
            score=Score(
                t1_score=_int(_get(data, "Sc.0")),
                t2_score=_int(_get(data, "Sc.1")),
            ),
            type=_event_type(_int(_get(data, "IT"))),
            half=half,
            team=team,
        )
    )
    return events


def parse_events(team1: TeamInfo, team2: TeamInfo, data: Any) -> list[Event]:
    """All incidents of a match: halves 1 and 2, then overtime (3) and penalties (4)."""
    events: list[Event] = []
    for half in range(1, 5):
        for item in _array(_get(data, f"Incs-s.{half}")):
            events.extend(_parse_event(half, team1, team2, item))
    return events


def _score(data: Any) -> Score:
    return Score(t1_score=_int(_get(data, "Tr1")), t2_score=_int(_get(data, "Tr2")))


def parse_match(data: Any) -> MatchInfo:
    """Build full match details from a scoreboard JSON document."""
    team1 = parse_team(_get(data, "T1.0"))
    team2 = parse_team(_get(data, "T2.0"))
    cup_name = f"{_str(_get(data, 'Stg.Cnm'))} {_str(_get(data, 'Stg.Sdn'))}".strip()
    return MatchInfo(
        id=_str(_get(data, "Eid")),
        score=_score(data),
        time=_str(_get(data, "Eps")),
        stadium_name=_str(_get(data, "Vnm")),
        stadium_city=_str(_get(data, "VCity")),
        cup_name=cup_name,
        t1=team1,
        t2=team2,
        events=parse_events(team1, team2, data),
    )


def parse_match_for_listing(data: Any) -> MatchInfo:
    """Build the short match summary used in listings."""
    return MatchInfo(
        id=_str(_get(data, "Eid")),
        time=_str(_get(data, "Eps")),
        score=_score(data),
        t1=parse_team(_get(data, "T1.0")),
        t2=parse_team(_get(data, "T2.0")),
    )


def _fetch_json(url: str) -> Any:
    response = _session.get(url, timeout=_TIMEOUT)
    try:
        return json.loads(response.content)
    except ValueError:
        return {}


def list_lives() -> list[MatchInfo]:
    """Every soccer match being played now, across all competitions."""
    data = _fetch_json(f"{BASE_API_URL}/live/soccer/-3.00")
    return [
        parse_match_for_listing(match)
        for stage in _array(_get(data, "Stages"))
        for match in _array(_get(stage, "Events"))
    ]


def fetch_match_info(match_id: str) -> MatchInfo:
    """Full details of one match."""
    return parse_match(_fetch_json(f"{BASE_API_URL}/scoreboard/soccer/{match_id}"))


def fetch_match_info_by_team_name(team_name: str) -> Optional[MatchInfo]:
    """Details of the live match a team plays in, or None."""
    wanted = team_name.casefold()
    for match in list_lives():
        if match.t1.name.casefold() == wanted or match.t2.name.casefold() == wanted:
            return fetch_match_info(match.id)
    return None


class MatchHasFinishedError(Exception):
    """The match is over and cannot be followed."""

    def __init__(self) -> None:
        super().__init__("match has finished")


class MatchAlreadyFollowedError(Exception):
    """The match is already being followed."""

    def __init__(self) -> None:
        super().__init__("match already followed")


class ListenerNotFoundError(KeyError):
    """No listener is registered under that id."""


Listener = Callable[[Optional["LiveMatch"], Optional[Exception]], Any]


@dataclass
class LiveMatch:
    """A followed match, its last two snapshots and who wants updates."""

    match_id: str
    current_data: Optional[MatchInfo] = None
    previous_data: Optional[MatchInfo] = None
    listeners: dict[str, Listener] = field(default_factory=dict)
    tracker: Optional[MatchTracker] = field(default=None, repr=False, compare=False)

    def add_listener(self, listener_id: str, listener: Listener) -> None:
        """Register (or replace) a listener called after every update."""
        self.listeners[listener_id] = listener

    def remove_listener(self, listener_id: str) -> None:
        """Drop a listener; the match stops being followed when none are left."""
        if listener_id not in self.listeners:
            raise ListenerNotFoundError(listener_id)
        del self.listeners[listener_id]
        if not self.listeners and self.tracker is not None:
            self.tracker.unfollow_match(self.match_id)


class MatchTracker:
    """Keeps followed matches and refreshes them on demand."""

    def __init__(self, fetcher: Callable[[str], MatchInfo] = fetch_match_info) -> None:
        self._fetch = fetcher
        self.followed: dict[str, LiveMatch] = {}

    def get_live_match(self, match_id: str) -> LiveMatch:
        """The followed match, starting to follow it if needed."""
        match = self.followed.get(match_id)
        if match is not None:
            return match
        info = self._fetch(match_id)
        if info.time == FINISHED_TIME:
            raise MatchHasFinishedError()
        match = LiveMatch(match_id=match_id, current_data=info, tracker=self)
        self.followed[match_id] = match
        return match

    def unfollow_match(self, match_id: str) -> None:
        """Stop following a match; unknown ids are ignored."""
        self.followed.pop(match_id, None)

    def _update(self, live_match: LiveMatch) -> None:
        try:
            info = self._fetch(live_match.match_id)
        except Exception as error:  # noqa: BLE001 - handed to listeners
            for listener in list(live_match.listeners.values()):
                listener(None, error)
            self.unfollow_match(live_match.match_id)
            return

        live_match.previous_data = live_match.current_data
        live_match.current_data = info
        for listener in list(live_match.listeners.values()):
            listener(live_match, None)

        if info.time == FINISHED_TIME:
            self.unfollow_match(live_match.match_id)
            for listener in list(live_match.listeners.values()):
                listener(live_match, MatchHasFinishedError())

    def update_all(self) -> None:
        """Refresh every followed match once and notify its listeners."""
        for live_match in list(self.followed.values()):
            self._update(live_match)