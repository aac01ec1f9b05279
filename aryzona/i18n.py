"""Translated strings: languages, entries and command definitions."""

from __future__ import annotations

import json
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union

DEFAULT_ROOT_DIR = Path("assets/i18n")

COMMAND_NAMES = (
    "even", "pick", "news", "roll", "follow", "unfollow", "live", "score",
    "cnpj", "cpf", "password", "source", "ping", "donate", "uptime", "resume",
    "shuffle", "skip", "stop", "lyric", "pause", "volume", "playing", "radio",
    "help", "play", "dog", "cat", "fox", "uuid", "joke", "xkcd", "language",
    "server",
)


class LanguageName(str, Enum):
    """Languages the bot ships translations for."""

    ENGLISH = "en_US"
    PORTUGUESE = "pt_BR"

    def discord_name(self) -> str:
        """The locale name as the chat service spells it (``en-US``)."""
        return self.value.replace("_", "-", 1)


DEFAULT_LANGUAGE_NAME = LanguageName.ENGLISH
LANGUAGE_NAMES = tuple(LanguageName)


def find_language_name(name: str) -> LanguageName:
    """Map a locale such as ``pt_BR`` to a supported language, or the default."""
    prefix = name.split("_")[0]
    if prefix == "en":
        return LanguageName.ENGLISH
    if prefix == "pt":
        return LanguageName.PORTUGUESE
    return DEFAULT_LANGUAGE_NAME


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


class Entry(str):
    """A translated string with ``{index:name}`` placeholders."""

    def render(self, *args: Any) -> str:
        """Replace each ``{i:name}`` placeholder with the i-th argument."""
        text = str(self)
        for index, arg in enumerate(args):
            replacement = _format_value(arg)
            text = re.sub(
                rf"\{{{index}:\w+\}}",
                lambda _match, value=replacement: value,
                text,
                flags=re.ASCII,
            )
        return text


class _KeyPathError(LookupError):
    prefix = "invalid key path"

    def __init__(self, key: Any) -> None:
        super().__init__(f"{self.prefix}: {key} ({type(key).__name__})")
        self.key = key


class InvalidKeyTypeError(_KeyPathError):
    """A key in a path is neither a string nor an integer."""

    prefix = "invalid key type"


class InvalidMapAccessError(_KeyPathError):
    """A string key was used on something that is not an object."""

    prefix = "invalid map access"


class InvalidArrayAccessError(_KeyPathError):
    """An integer key was used on something that is not an array."""

    prefix = "invalid array access"


class RawJSONMap(dict):
    """The untouched JSON object of a language file."""

    def get_path(self, *args: Any) -> Any:
        """Follow a path of object keys and array indexes into the map."""
        if not args:
            return self
        first, *rest = args
        if not isinstance(first, str):
            raise InvalidKeyTypeError(first)
        value = self.get(first)
        for key in rest:
            if isinstance(key, bool) or not isinstance(key, (str, int)):
                raise InvalidKeyTypeError(key)
            if isinstance(key, str):
                if not isinstance(value, dict):
                    raise InvalidMapAccessError(key)
                value = value.get(key)
            else:
                if not isinstance(value, list):
                    raise InvalidArrayAccessError(key)
                if not 0 <= key < len(value):
                    raise IndexError(f"index {key} out of range")
                value = value[key]
        return value


def _fold(key: str) -> str:
    return key.replace("_", "").lower()


def _wrap(value: Any) -> Any:
    if isinstance(value, str):
        return Entry(value)
    if isinstance(value, dict):
        return _Section(value)
    if isinstance(value, list):
        return [_wrap(item) for item in value]
    return value


class _Section(Mapping):
    """A JSON object whose keys match case-insensitively, also as attributes."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = {_fold(key): _wrap(value) for key, value in data.items()}

    def __getitem__(self, key: str) -> Any:
        return self._data[_fold(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


@dataclass
class ParameterDefinition:
    """Translated name and description of a command parameter."""

    name: Entry = Entry("")
    description: Entry = Entry("")


@dataclass
class CommandDefinition:
    """Translated name, description, parameters and sub-commands of a command."""

    name: Entry = Entry("")
    description: Entry = Entry("")
    parameters: list[ParameterDefinition] = field(default_factory=list)
    sub_commands: list[CommandDefinition] = field(default_factory=list)


def _entry(value: Any, what: str) -> Entry:
    if value is None:
        return Entry("")
    if not isinstance(value, Entry):
        raise ValueError(f"{what} must be a string")
    return value


def _section(value: Any, what: str) -> _Section:
    if value is None:
        return _Section({})
    if not isinstance(value, _Section):
        raise ValueError(f"{what} must be a JSON object")
    return value


def _parse_definition(value: Any) -> CommandDefinition | None:
    if value is None:
        return None
    section = _section(value, "definition")
    parameters = [
        ParameterDefinition(
            name=_entry(param.get("name"), "parameter name"),
            description=_entry(param.get("description"), "parameter description"),
        )
        for param in (_section(p, "parameter") for p in section.get("parameters") or [])
    ]
    sub_commands = [
        _parse_definition(_section(sub, "sub command"))
        for sub in section.get("subcommands") or []
    ]
    return CommandDefinition(
        name=_entry(section.get("name"), "command name"),
        description=_entry(section.get("description"), "command description"),
        parameters=parameters,
        sub_commands=sub_commands,
    )


class _CommandSection(_Section):
    """A command's translations, linked to the shared language sections."""

    def __init__(
        self,
        base: _Section,
        *,
        common: _Section,
        meta: _Section,
        locale: _Section,
        raw_map: RawJSONMap,
    ) -> None:
        self._data = dict(base._data)
        self._common = common
        self._meta = meta
        self._locale = locale
        self._raw_map = raw_map
        self._definition = _parse_definition(self._data.get("definition"))

    @property
    def common(self) -> _Section:
        return self._common

    @property
    def meta(self) -> _Section:
        return self._meta

    @property
    def locale(self) -> _Section:
        return self._locale

    @property
    def raw_map(self) -> RawJSONMap:
        return self._raw_map

    @property
    def definition(self) -> CommandDefinition | None:
        return self._definition


@dataclass
class Language:
    """A loaded language file."""

    lang_name: Union[LanguageName, str]
    meta: _Section
    common: _Section
    locale: _Section
    raw_map: RawJSONMap
    commands: dict[str, _CommandSection] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """The name the language file declares for itself."""
        return str(self.meta.get("name", ""))

    def command(self, name: str) -> _CommandSection | None:
        """The translations of a command, or None when it has none."""
        return self.commands.get(name)

    def command_definition(self, name: str) -> CommandDefinition | None:
        """The translated definition of a command, or None."""
        command = self.commands.get(name)
        if command is None:
            return None
        return command.definition


_loaded: dict[tuple[str, str], Language] = {}


def _load_language(lang_name: Union[LanguageName, str], path: Path) -> Language:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a JSON object")

    raw_map = RawJSONMap(data)
    root = _Section(data)
    meta = _section(root.get("meta"), "meta")
    common = _section(root.get("common"), "common")
    locale = _section(root.get("locale"), "locale")
    command_sections = _section(root.get("commands"), "commands")

    commands = {}
    for command_name in COMMAND_NAMES:
        raw = command_sections.get(command_name)
        if raw is None:
            continue
        commands[command_name] = _CommandSection(
            _section(raw, f"command {command_name}"),
            common=common,
            meta=meta,
            locale=locale,
            raw_map=raw_map,
        )

    return Language(
        lang_name=lang_name,
        meta=meta,
        common=common,
        locale=locale,
        raw_map=raw_map,
        commands=commands,
    )


def get_language(
    name: Union[LanguageName, str], root_dir: Union[str, Path] = DEFAULT_ROOT_DIR
) -> Language:
    """Load ``<root_dir>/<name>.json`` once and return the cached language."""
    value = name.value if isinstance(name, LanguageName) else str(name)
    root = Path(root_dir)
    key = (str(root), value)
    language = _loaded.get(key)
    if language is None:
        try:
            lang_name: Union[LanguageName, str] = LanguageName(value)
        except ValueError:
            lang_name = value
        language = _load_language(lang_name, root / f"{value}.json")
        _loaded[key] = language
    return language