"""The play queue of a voice channel, with change events."""

from __future__ import annotations

import random
from collections import defaultdict
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from aryzona.playable import Playable


class QueueEvent(str, Enum):
    """Changes a queue announces to its listeners."""

    APPEND = "APPEND"
    REMOVE = "REMOVE"
    SHUFFLE = "SHUFFLE"


@dataclass
class QueueEntry:
    """A playable and the id of the user who asked for it."""

    playable: Playable
    requester: str


@dataclass
class AppendEventData:
    """Sent with APPEND: the added entries and where they went."""

    items: list[QueueEntry]
    queue: Queue
    index: int
    is_many: bool


@dataclass
class RemoveEventData:
    """Sent with REMOVE: the removed entry and where it was."""

    queue: Queue
    index: int
    item: QueueEntry


class Queue:
    """An ordered list of entries; the first one is the one playing."""

    def __init__(self) -> None:
        self._entries: list[QueueEntry] = []
        self._listeners: defaultdict[Any, list[Callable[..., Any]]] = defaultdict(list)

    def on(self, event: QueueEvent, listener: Callable[..., Any]) -> None:
        """Call ``listener`` with the event's data whenever ``event`` is emitted."""
        self._listeners[event].append(listener)

    def emit(self, event: QueueEvent, *args: Any) -> None:
        """Call every listener of ``event`` with ``args``."""
        for listener in list(self._listeners[event]):
            listener(*args)

    def shuffle(self) -> None:
        """Shuffle the queue, leaving the entry being played in place."""
        entries = self._entries
        for i in range(len(entries)):
            j = random.randint(0, i)
            if i == 0 or j == 0:
                continue
            entries[i], entries[j] = entries[j], entries[i]
        self.emit(QueueEvent.SHUFFLE)

    def append(self, item: QueueEntry) -> None:
        """Add an entry at the end."""
        self._entries.append(item)
        self.emit(
            QueueEvent.APPEND,
            AppendEventData(items=[item], queue=self, index=len(self) - 1, is_many=False),
        )

    def append_many(self, *args: QueueEntry) -> None:
        """Add several entries at the end, announced as one event."""
        items = list(args)
        self._entries.extend(items)
        self.emit(
            QueueEvent.APPEND,
            AppendEventData(items=items, queue=self, index=len(self) - 1, is_many=True),
        )

    def append_at(self, index: int, item: QueueEntry) -> None:
        """Insert an entry so that it ends up at ``index``."""
        if not 0 <= index <= len(self._entries):
            raise IndexError(f"index {index} out of range")
        self._entries.insert(index, item)
        self.emit(
            QueueEvent.APPEND,
            AppendEventData(items=[item], queue=self, index=index, is_many=False),
        )

    def items(self) -> list[QueueEntry]:
        """A copy of all entries, in order."""
        return list(self._entries)

    def clear(self) -> None:
        """Drop every entry without announcing it."""
        self._entries = []

    def first(self) -> QueueEntry | None:
        """The entry being played, or None when the queue is empty."""
        return self._entries[0] if self._entries else None

    def remove(self, index: int) -> None:
        """Remove the entry at ``index``; does nothing on an empty queue."""
        if not self._entries:
            return
        if not 0 <= index < len(self._entries):
            raise IndexError(f"index {index} out of range")
        item = self._entries.pop(index)
        self.emit(QueueEvent.REMOVE, RemoveEventData(queue=self, index=index, item=item))

    def __getitem__(self, index: int) -> QueueEntry:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[QueueEntry]:
        return iter(list(self._entries))