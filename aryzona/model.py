"""Chat-service data model: channels, messages, embeds, permissions and events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import Any, Optional, Protocol, runtime_checkable


class ChannelType(str, Enum):
    """Whether a text channel belongs to a guild or is a direct chat."""

    GUILD = "GUILD"
    DIRECT = "DIRECT"


@runtime_checkable
class Guild(Protocol):
    """A guild (server)."""

    def id(self) -> str: ...


@runtime_checkable
class User(Protocol):
    """A user account."""

    def id(self) -> str: ...


@runtime_checkable
class TextChannel(Protocol):
    """A channel messages can be sent to."""

    def id(self) -> str: ...

    def guild(self) -> Guild: ...

    def type(self) -> ChannelType: ...


@runtime_checkable
class VoiceChannel(Protocol):
    """A voice channel inside a guild."""

    def id(self) -> str: ...

    def guild(self) -> Guild: ...


@runtime_checkable
class Message(Protocol):
    """A message that was sent to a channel."""

    def id(self) -> str: ...

    def author(self) -> User: ...

    def channel(self) -> TextChannel: ...

    def content(self) -> str: ...


@runtime_checkable
class Role(Protocol):
    """A guild role."""

    def id(self) -> str: ...

    def name(self) -> str: ...

    def permissions(self) -> "Permissions": ...

    def position(self) -> int: ...

    def color(self) -> int: ...

    def mentionable(self) -> bool: ...


@runtime_checkable
class Member(Protocol):
    """A user as a member of a guild."""

    def roles(self) -> list[Role]: ...

    def permissions(self) -> "Permissions": ...


@runtime_checkable
class VoiceState(Protocol):
    """Where a user currently is in voice."""

    def channel(self) -> VoiceChannel: ...


@runtime_checkable
class VoiceConnection(Protocol):
    """An open voice connection that accepts Opus frames."""

    def write_opus(self, data: bytes) -> int: ...

    def speaking(self, speaking: bool) -> None: ...

    def disconnect(self) -> None: ...


class ButtonStyle(IntEnum):
    """Visual style of a button."""

    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4


@dataclass
class ButtonComponent:
    """A clickable button attached to a message."""

    label: str = ""
    id: str = ""
    base_id: str = ""
    emoji: str = ""
    style: ButtonStyle = ButtonStyle.PRIMARY
    disabled: bool = False


@dataclass
class MessageComponentRow:
    """A row of message components."""

    components: list[Any] = field(default_factory=list)


@dataclass
class EmbedField:
    """A name/value pair shown inside an embed."""

    name: str
    value: str
    inline: bool = False


@dataclass
class Embed:
    """A rich embed; the ``with_*`` methods modify it and return it."""

    fields: list[EmbedField] = field(default_factory=list)
    title: str = ""
    description: str = ""
    image_url: str = ""
    thumbnail_url: str = ""
    footer: str = ""
    color: int = 0
    url: str = ""

    def with_color(self, color: int) -> Embed:
        self.color = color
        return self

    def with_title(self, title: str) -> Embed:
        self.title = title
        return self

    def with_description(self, description: str) -> Embed:
        self.description = description
        return self

    def with_field_inline(self, name: str, value: str) -> Embed:
        self.fields.append(EmbedField(name=name, value=value, inline=True))
        return self

    def with_field(self, name: str, value: str) -> Embed:
        self.fields.append(EmbedField(name=name, value=value, inline=False))
        return self

    def with_image(self, url: str) -> Embed:
        self.image_url = url
        return self

    def with_thumbnail(self, url: str) -> Embed:
        self.thumbnail_url = url
        return self

    def with_url(self, url: str) -> Embed:
        self.url = url
        return self

    def with_footer(self, text: str) -> Embed:
        self.footer = text
        return self


@dataclass
class ComplexMessage:
    """A message with text, embeds and component rows, optionally a reply."""

    content: str = ""
    embeds: list[Embed] = field(default_factory=list)
    component_rows: list[MessageComponentRow] = field(default_factory=list)
    reply_to: Optional[Message] = None


class Permissions(IntFlag):
    """Permission bit flags, as the chat service defines them."""

    CREATE_INSTANT_INVITE = 1 << 0
    KICK_MEMBERS = 1 << 1
    BAN_MEMBERS = 1 << 2
    ADMINISTRATOR = 1 << 3
    MANAGE_CHANNELS = 1 << 4
    MANAGE_GUILD = 1 << 5
    ADD_REACTIONS = 1 << 6
    VIEW_AUDIT_LOG = 1 << 7
    PRIORITY_SPEAKER = 1 << 8
    STREAM = 1 << 9
    VIEW_CHANNEL = 1 << 10
    SEND_MESSAGES = 1 << 11
    SEND_TTS_MESSAGES = 1 << 12
    MANAGE_MESSAGES = 1 << 13
    EMBED_LINKS = 1 << 14
    ATTACH_FILES = 1 << 15
    READ_MESSAGE_HISTORY = 1 << 16
    MENTION_EVERYONE = 1 << 17
    USE_EXTERNAL_EMOJIS = 1 << 18
    VIEW_GUILD_INSIGHTS = 1 << 19
    CONNECT = 1 << 20
    SPEAK = 1 << 21
    MUTE_MEMBERS = 1 << 22
    DEAFEN_MEMBERS = 1 << 23
    MOVE_MEMBERS = 1 << 24
    USE_VAD = 1 << 25
    CHANGE_NICKNAME = 1 << 26
    MANAGE_NICKNAMES = 1 << 27
    MANAGE_ROLES = 1 << 28
    MANAGE_WEBHOOKS = 1 << 29
    MANAGE_EMOJIS_AND_STICKERS = 1 << 30
    USE_SLASH_COMMANDS = 1 << 31
    REQUEST_TO_SPEAK = 1 << 32
    MANAGE_EVENTS = 1 << 33
    MANAGE_THREADS = 1 << 34
    CREATE_PUBLIC_THREADS = 1 << 35
    CREATE_PRIVATE_THREADS = 1 << 36
    USE_EXTERNAL_STICKERS = 1 << 37
    SEND_MESSAGES_IN_THREADS = 1 << 38
    START_EMBEDDED_ACTIVITIES = 1 << 39
    MODERATE_MEMBERS = 1 << 40

    ALL_TEXT = (
        VIEW_CHANNEL
        | SEND_MESSAGES
        | SEND_TTS_MESSAGES
        | MANAGE_MESSAGES
        | EMBED_LINKS
        | ATTACH_FILES
        | READ_MESSAGE_HISTORY
        | MENTION_EVERYONE
        | USE_EXTERNAL_EMOJIS
        | USE_SLASH_COMMANDS
        | MANAGE_THREADS
        | CREATE_PUBLIC_THREADS
        | CREATE_PRIVATE_THREADS
        | USE_EXTERNAL_STICKERS
        | ADD_REACTIONS
        | SEND_MESSAGES_IN_THREADS
    )

    ALL_VOICE = (
        VIEW_CHANNEL
        | CONNECT
        | SPEAK
        | STREAM
        | MUTE_MEMBERS
        | DEAFEN_MEMBERS
        | MOVE_MEMBERS
        | USE_VAD
        | PRIORITY_SPEAKER
        | REQUEST_TO_SPEAK
        | START_EMBEDDED_ACTIVITIES
    )

    ALL_CHANNEL = (
        ALL_TEXT | ALL_VOICE | CREATE_INSTANT_INVITE | MANAGE_ROLES | MANAGE_CHANNELS
    )

    ALL = (
        ALL_CHANNEL
        | KICK_MEMBERS
        | BAN_MEMBERS
        | MANAGE_GUILD
        | ADMINISTRATOR
        | MANAGE_WEBHOOKS
        | MANAGE_EMOJIS_AND_STICKERS
        | MANAGE_NICKNAMES
        | CHANGE_NICKNAME
        | VIEW_AUDIT_LOG
        | MANAGE_EVENTS
    )

    def has(self, perm: int) -> bool:
        """True when every bit of ``perm`` is set."""
        return has_flag(int(self), int(perm))

    def add(self, perm: int) -> Permissions:
        """A new set with the bits of ``perm`` added."""
        return Permissions(int(self) | int(perm))


def new_permissions(*args: int) -> Permissions:
    """Combine the given permissions into one set."""
    combined = 0
    for perm in args:
        combined |= int(perm)
    return Permissions(combined)


def has_flag(flag: int, has: int) -> bool:
    """True when every bit of ``has`` is set in ``flag``."""
    return flag & has == has


class PresenceType(IntEnum):
    """What the bot shows itself as doing."""

    PLAYING = 0
    LISTENING = 1
    STREAMING = 2


@dataclass
class Presence:
    """The bot's status line."""

    title: str = ""
    type: PresenceType = PresenceType.PLAYING
    extra: str = ""


class EventType(IntEnum):
    """Events a bot implementation can deliver to listeners."""

    READY = 0
    MESSAGE_CREATED = 1
    VOICE_STATE_UPDATED = 2


class EventNotSupportedError(Exception):
    """The bot implementation cannot deliver this event."""

    def __init__(self, event: Any = None) -> None:
        message = "event not supported"
        if event is not None:
            message = f"{message}: {event}"
        super().__init__(message)
        self.event = event