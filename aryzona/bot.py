"""The bot interface, an in-memory implementation and small helpers."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime, timedelta
from typing import Any, Optional

from aryzona.model import (
    ButtonComponent,
    ButtonStyle,
    ComplexMessage,
    Embed,
    EventType,
    Guild,
    Member,
    Message,
    Presence,
    TextChannel,
    User,
    VoiceChannel,
    VoiceConnection,
    VoiceState,
)


class BotAdapter(ABC):
    """Everything the bot needs from a chat-service implementation."""

    @abstractmethod
    def implementation(self) -> str: ...

    @abstractmethod
    def init(self, token: str) -> None: ...

    @abstractmethod
    def started_at(self) -> Optional[datetime]: ...

    @abstractmethod
    def is_live(self) -> bool: ...

    @abstractmethod
    def listen(self, event: EventType, handler: Callable[..., Any]) -> None: ...

    @abstractmethod
    def start(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...

    @abstractmethod
    def self_user(self) -> Optional[User]: ...

    @abstractmethod
    def get_member(
        self, guild_id: str, channel_id: str, user_id: str
    ) -> Optional[Member]: ...

    @abstractmethod
    def count_users_in_voice_channel(self, channel: VoiceChannel) -> int: ...

    @abstractmethod
    def send_message(self, channel_id: str, content: str) -> Optional[Message]: ...

    @abstractmethod
    def send_complex_message(
        self, channel_id: str, message: ComplexMessage
    ) -> Optional[Message]: ...

    @abstractmethod
    def edit_complex_message(
        self, message: Message, new_message: ComplexMessage
    ) -> Optional[Message]: ...

    @abstractmethod
    def send_reply_message(self, message: Message, content: str) -> Optional[Message]: ...

    @abstractmethod
    def send_reply_embed_message(
        self, message: Message, embed: Embed
    ) -> Optional[Message]: ...

    @abstractmethod
    def send_embed_message(self, channel_id: str, embed: Embed) -> Optional[Message]: ...

    @abstractmethod
    def edit_message_content(
        self, message: Message, new_content: str
    ) -> Optional[Message]: ...

    @abstractmethod
    def edit_message_embed(self, message: Message, embed: Embed) -> Optional[Message]: ...

    @abstractmethod
    def open_channel_with_user(self, user_id: str) -> Optional[TextChannel]: ...

    @abstractmethod
    def open_guild(self, guild_id: str) -> Optional[Guild]: ...

    @abstractmethod
    def latency(self) -> timedelta: ...

    @abstractmethod
    def join_voice_channel(
        self, guild_id: str, channel_id: str
    ) -> Optional[VoiceConnection]: ...

    @abstractmethod
    def find_user_voice_state(
        self, guild_id: str, user_id: str
    ) -> Optional[VoiceState]: ...

    @abstractmethod
    def update_presence(self, presence: Presence) -> None: ...

    @abstractmethod
    def guild_count(self) -> int: ...

    @abstractmethod
    def register_slash_commands(self) -> None: ...


class DummyGuild:
    """A fixed guild used by the dummy bot."""

    def id(self) -> str:
        return "1233"


class DummyVoiceChannel:
    """A fixed voice channel used by the dummy bot."""

    def id(self) -> str:
        return "12335"

    def guild(self) -> Guild:
        return DummyGuild()


class DummyVoiceState:
    """A voice state that always points at the dummy voice channel."""

    def channel(self) -> VoiceChannel:
        return DummyVoiceChannel()


class DummyBot(BotAdapter):
    """A bot that talks to no service and records what it was asked to do."""

    def __init__(
        self,
        user: Optional[User] = None,
        members: Optional[Mapping[str, Member]] = None,
        voice_users: Optional[Mapping[str, int]] = None,
    ) -> None:
        self.token: Optional[str] = None
        self.running = False
        self.presence: Optional[Presence] = None
        self.slash_commands_registered = False
        self.listeners: dict[EventType, list[Callable[..., Any]]] = {}
        self.sent: list[tuple[str, Any]] = []
        self.replies: list[tuple[Message, Any]] = []
        self.edits: list[tuple[Message, Any]] = []
        self._user = user
        self._members = dict(members or {})
        self._voice_users = dict(voice_users or {})
        self._started_at: Optional[datetime] = None

    def implementation(self) -> str:
        return "Dummy Bot"

    def init(self, token: str) -> None:
        self.token = token

    def started_at(self) -> Optional[datetime]:
        return self._started_at

    def is_live(self) -> bool:
        return True

    def listen(self, event: EventType, handler: Callable[..., Any]) -> None:
        self.listeners.setdefault(event, []).append(handler)

    def start(self) -> None:
        self.running = True
        self._started_at = datetime.now()

    def stop(self) -> None:
        self.running = False

    def self_user(self) -> Optional[User]:
        return self._user

    def get_member(self, guild_id: str, channel_id: str, user_id: str) -> Optional[Member]:
        return self._members.get(user_id)

    def count_users_in_voice_channel(self, channel: VoiceChannel) -> int:
        return self._voice_users.get(channel.id(), 0)

    def _send(self, channel_id: str, payload: Any) -> Optional[Message]:
        self.sent.append((channel_id, payload))
        return None

    def _reply(self, message: Message, payload: Any) -> Optional[Message]:
        self.replies.append((message, payload))
        return None

    def _edit(self, message: Message, payload: Any) -> Optional[Message]:
        self.edits.append((message, payload))
        return None

    def send_message(self, channel_id: str, content: str) -> Optional[Message]:
        return self._send(channel_id, content)

    def send_complex_message(
        self, channel_id: str, message: ComplexMessage
    ) -> Optional[Message]:
        return self._send(channel_id, message)

    def edit_complex_message(
        self, message: Message, new_message: ComplexMessage
    ) -> Optional[Message]:
        return self._edit(message, new_message)

    def send_reply_message(self, message: Message, content: str) -> Optional[Message]:
        return self._reply(message, content)

    def send_reply_embed_message(self, message: Message, embed: Embed) -> Optional[Message]:
        return self._reply(message, embed)

    def send_embed_message(self, channel_id: str, embed: Embed) -> Optional[Message]:
        return self._send(channel_id, embed)

    def edit_message_content(self, message: Message, new_content: str) -> Optional[Message]:
        return self._edit(message, new_content)

    def edit_message_embed(self, message: Message, embed: Embed) -> Optional[Message]:
        return self._edit(message, embed)

    def open_channel_with_user(self, user_id: str) -> Optional[TextChannel]:
        return None

    def open_guild(self, guild_id: str) -> Optional[Guild]:
        return DummyGuild()

    def latency(self) -> timedelta:
        return timedelta(seconds=20)

    def join_voice_channel(self, guild_id: str, channel_id: str) -> Optional[VoiceConnection]:
        return None

    def find_user_voice_state(self, guild_id: str, user_id: str) -> Optional[VoiceState]:
        return DummyVoiceState()

    def update_presence(self, presence: Presence) -> None:
        self.presence = presence

    def guild_count(self) -> int:
        return 0

    def register_slash_commands(self) -> None:
        self.slash_commands_registered = True


_bot: Optional[BotAdapter] = None


def use_implementation(bot: Optional[BotAdapter]) -> None:
    """Select the bot implementation the rest of the program talks to."""
    global _bot
    _bot = bot


def create_bot(token: str) -> None:
    """Initialise the selected implementation with the given token."""
    if _bot is None:
        raise RuntimeError("no bot implementation selected")
    _bot.init(token)


def as_mention(user_id: str) -> str:
    """The markup that mentions a user."""
    return f"<@{user_id}>"


def disable_buttons(
    components: Sequence[Any], selected_index: int
) -> list[ButtonComponent]:
    """Disabled copies of the buttons; all but the selected one turn secondary."""
    disabled = []
    for index, component in enumerate(components):
        if not isinstance(component, ButtonComponent):
            raise TypeError(f"component {index} is not a button")
        changes: dict[str, Any] = {"disabled": True}
        if index != selected_index:
            changes["style"] = ButtonStyle.SECONDARY
        disabled.append(dataclasses.replace(component, **changes))
    return disabled