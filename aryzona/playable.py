"""Things that can be played in a voice channel."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class Playable(Protocol):
    """Something the voice player can stream."""

    @property
    def name(self) -> str: ...

    @property
    def share_url(self) -> str: ...

    @property
    def duration(self) -> timedelta: ...

    def can_pause(self) -> bool: ...

    def is_live(self) -> bool: ...

    def is_opus(self) -> bool: ...

    def is_local(self) -> bool: ...

    def direct_url(self) -> str: ...

    def thumbnail_url(self) -> str: ...

    def full_title(self) -> tuple[str, str]: ...


@dataclass
class DummyPlayable:
    """A playable that streams nothing; used in tests."""

    name: str = ""
    artist: str = ""
    title: str = ""
    share_url: str = ""
    duration: timedelta = field(default_factory=timedelta)

    def can_pause(self) -> bool:
        return False

    def is_opus(self) -> bool:
        return True

    def is_local(self) -> bool:
        return True

    def is_live(self) -> bool:
        return False

    def direct_url(self) -> str:
        return ""

    def thumbnail_url(self) -> str:
        return ""

    def full_title(self) -> tuple[str, str]:
        """The title and the artist."""
        return self.title, self.artist