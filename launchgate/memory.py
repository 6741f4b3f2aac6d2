from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import hashlib
import json
import logging
import os
from typing import Any, Protocol


MEMORY_VERSION = 1


class Rememberable(Protocol):
    def fingerprint_fields(self) -> dict[str, Any]:
        ...


def fingerprint(subject: Rememberable) -> str:
    """Content-derived key: equal subjects share an entry across fetches."""
    canonical = json.dumps(
        subject.fingerprint_fields(),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


@dataclass
class Memory:
    shown: dict[str, datetime] = field(default_factory=dict)

    def remember(self, subject: Rememberable, timestamp: datetime | None = None) -> None:
        self.shown.setdefault(fingerprint(subject), timestamp or datetime.now(timezone.utc))

    def forget(self, subject: Rememberable) -> None:
        self.shown.pop(fingerprint(subject), None)

    def has_been_shown(self, subject: Rememberable) -> bool:
        return fingerprint(subject) in self.shown

    def clear(self) -> None:
        self.shown.clear()


def _parse_datetime(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _to_iso(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def load_memory(path: str) -> Memory:
    if not os.path.exists(path):
        return Memory()

    with open(path, "r", encoding="utf-8") as handle:
        raw = json.load(handle)

    if not isinstance(raw, dict):
        return Memory()

    if raw.get("version") != MEMORY_VERSION:
        logging.getLogger(__name__).warning(
            "Ignoring memory file %s with unsupported version %r", path, raw.get("version")
        )
        return Memory()

    return Memory(shown=_parse_shown(raw.get("shown")))


def save_memory(path: str, memory: Memory) -> None:
    payload = {
        "version": MEMORY_VERSION,
        "shown": {key: _to_iso(ts) for key, ts in memory.shown.items()},
    }
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)


def _parse_shown(value: Any) -> dict[str, datetime]:
    if not isinstance(value, dict):
        return {}
    now = datetime.now(timezone.utc)
    shown: dict[str, datetime] = {}
    for key, ts in value.items():
        try:
            shown[str(key)] = _parse_datetime(ts) if isinstance(ts, str) else now
        except ValueError:
            shown[str(key)] = now
    return shown
