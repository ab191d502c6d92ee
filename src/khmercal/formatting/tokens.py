"""
Format-string mini-language.

Each recognised character is a field; everything else is literal text.
There is no escaping.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Tuple, Union


class FieldKind(Enum):
    WEEKDAY = "W"
    WEEKDAY_SHORT = "w"
    MOON_DAY = "d"
    MOON_DAY_PADDED = "D"
    MOON_STATUS_SHORT = "n"
    MOON_STATUS = "N"
    MOON_DAY_SYMBOL = "o"
    MONTH = "m"
    ANIMAL_YEAR = "a"
    ERA_YEAR = "e"
    BE_YEAR = "b"
    AD_YEAR = "c"
    JOLAK_SAKARAJ = "j"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Field:
    kind: FieldKind


Token = Union[Literal, Field]

_FIELDS = {k.value: k for k in FieldKind}


@lru_cache(maxsize=256)
def parse_format(fmt: str) -> Tuple[Token, ...]:
    """Split ``fmt`` into fields and runs of literal text."""
    out: list[Token] = []
    buf: list[str] = []
    for ch in fmt:
        kind = _FIELDS.get(ch)
        if kind is None:
            buf.append(ch)
            continue
        if buf:
            out.append(Literal("".join(buf)))
            buf = []
        out.append(Field(kind))
    if buf:
        out.append(Literal("".join(buf)))
    return tuple(out)
