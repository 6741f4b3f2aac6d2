from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AlertSubject:
    message: str
    blocking: bool = False

    def fingerprint_fields(self) -> dict[str, Any]:
        return {"kind": "alert", "message": self.message, "blocking": self.blocking}


@dataclass(frozen=True)
class UpdateSubject:
    version: str
    message: str

    def fingerprint_fields(self) -> dict[str, Any]:
        return {"kind": "update", "version": self.version.strip(), "message": self.message}


@dataclass
class LaunchGateConfiguration:
    alert: AlertSubject | None = None
    optional_update: UpdateSubject | None = None
    required_update: UpdateSubject | None = None

    def is_empty(self) -> bool:
        return self.alert is None and self.optional_update is None and self.required_update is None
