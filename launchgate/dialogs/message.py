from __future__ import annotations

from dataclasses import dataclass


ALERT = "alert"
OPTIONAL_UPDATE = "optional_update"
REQUIRED_UPDATE = "required_update"


@dataclass
class DialogMessage:
    kind: str
    title: str
    message: str
    dismissible: bool
    url: str | None = None
    version: str | None = None


def alert_message(message: str, blocking: bool) -> DialogMessage:
    return DialogMessage(kind=ALERT, title="Notice", message=message, dismissible=not blocking)


def optional_update_message(message: str, version: str, update_url: str) -> DialogMessage:
    return DialogMessage(
        kind=OPTIONAL_UPDATE,
        title="Update available",
        message=message or f"Version {version} is available.",
        dismissible=True,
        url=update_url,
        version=version,
    )


def required_update_message(message: str, version: str, update_url: str) -> DialogMessage:
    return DialogMessage(
        kind=REQUIRED_UPDATE,
        title="Update required",
        message=message or f"Version {version} or newer is required to continue.",
        dismissible=False,
        url=update_url,
        version=version,
    )
