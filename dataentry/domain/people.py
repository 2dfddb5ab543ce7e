"""Domain helpers for person entries: age parsing and listing format."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from dataentry.core.errors import InputError

AGE_PATTERN = re.compile(r"[+-]?\d+")
AGE_MIN = -(2**31)
AGE_MAX = 2**31 - 1


@dataclass(frozen=True)
class Person:
    name: str
    age: int


def parse_age(value: str | None) -> int:
    """
    Parse the raw age text as a signed 32-bit integer.

    Any Unicode decimal digits are accepted, so "٣٠" is 30. Surrounding
    whitespace and underscores are rejected, so " 30" or "1_0" raise InputError
    just like "abc".
    """
    text = value or ""
    if not AGE_PATTERN.fullmatch(text):
        raise InputError(f"age must be an integer, got {text!r}")
    age = int(text)
    if not AGE_MIN <= age <= AGE_MAX:
        raise InputError(f"age out of range: {text}")
    return age


def format_listing(people: Iterable[Tuple[str, int]]) -> str:
    """Render one ``"<name>, <age>"`` line per entry, in the given order."""
    return "".join(f"{name}, {age}\n" for name, age in people)
