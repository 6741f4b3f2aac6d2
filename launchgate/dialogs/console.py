from __future__ import annotations

import sys
from typing import TextIO

from .base import BaseDialogManager
from .message import DialogMessage, alert_message, optional_update_message, required_update_message
from ..configuration import AlertSubject, UpdateSubject


class ConsoleDialogManager(BaseDialogManager):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def display_alert_dialog(self, subject: AlertSubject, blocking: bool) -> None:
        self._write(alert_message(subject.message, blocking))

    def display_optional_update_dialog(self, subject: UpdateSubject, update_url: str) -> None:
        self._write(optional_update_message(subject.message, subject.version, update_url))

    def display_required_update_dialog(self, subject: UpdateSubject, update_url: str) -> None:
        self._write(required_update_message(subject.message, subject.version, update_url))

    def _write(self, dialog: DialogMessage) -> None:
        stream = self._stream or sys.stdout
        stream.write(_render(dialog))
        stream.flush()


def _render(dialog: DialogMessage) -> str:
    lines = [f"== {dialog.title} ==", dialog.message]
    if dialog.url:
        lines.append(f"Update: {dialog.url}")
    lines.append("[Dismiss]" if dialog.dismissible else "[Cannot be dismissed]")
    return "\n".join(lines) + "\n"
