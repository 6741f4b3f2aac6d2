from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import zip_longest

from .errors import MalformedVersion


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class Version:
    components: tuple[int, ...]

    @classmethod
    def parse(cls, value: str | Version) -> Version:
        if isinstance(value, Version):
            return value
        if not isinstance(value, str):
            raise MalformedVersion(value)
        text = value.strip()
        if not text:
            raise MalformedVersion(value)
        components: list[int] = []
        for segment in text.split("."):
            # isdigit alone accepts non-ASCII digits such as "²"
            if not (segment.isascii() and segment.isdigit()):
                raise MalformedVersion(value)
            try:
                components.append(int(segment))
            except ValueError as exc:
                # CPython caps integer conversion at 4300 digits
                raise MalformedVersion(value) from exc
        return cls(components=tuple(components))

    def __str__(self) -> str:
        return ".".join(str(component) for component in self.components)


def compare_versions(left: str | Version, right: str | Version) -> Ordering:
    """Compare two dotted versions, padding the shorter one with zeros."""
    left_parts = Version.parse(left).components
    right_parts = Version.parse(right).components
    for a, b in zip_longest(left_parts, right_parts, fillvalue=0):
        if a < b:
            return Ordering.LESS
        if a > b:
            return Ordering.GREATER
    return Ordering.EQUAL
