"""Parsing of dice notation such as ``2d6``, ``d20`` or ``10``."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NOTATION = re.compile(r"(\d+)|(\d*)d(\d*)", re.ASCII)
_MAX_INT = 2**63 - 1


class InvalidNotationError(ValueError):
    """The text is not valid dice notation."""

    def __init__(self, text: str = "") -> None:
        super().__init__(f"invalid notation: {text!r}")


@dataclass(frozen=True)
class DiceNotation:
    """A number of dice and the number of faces each has."""

    dices: int
    faces: int

    def __str__(self) -> str:
        return f"{self.dices}d{self.faces}"


DEFAULT_DICE = DiceNotation(dices=1, faces=6)


def _parse_number(text: str, default: int, source: str) -> int:
    if not text:
        return default
    value = int(text)
    if value > _MAX_INT:
        raise InvalidNotationError(source)
    return value


def parse_notation(text: str) -> DiceNotation:
    """Parse ``N``, ``dF``, ``Nd``, ``NdF`` or ``d``; missing parts default to 1d6."""
    match = _NOTATION.fullmatch(text)
    if match is None:
        raise InvalidNotationError(text)

    raw_only, raw_dices, raw_faces = (group or "" for group in match.groups())
    faces_text = raw_only if raw_only else raw_faces

    dices = _parse_number(raw_dices, 1, text)
    faces = _parse_number(faces_text, 6, text)

    if faces <= 0 or dices <= 0:
        raise InvalidNotationError(text)
    return DiceNotation(dices=dices, faces=faces)