from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
from typing import Any

import httpx

from .base import BaseDialogManager
from .message import DialogMessage, alert_message, optional_update_message, required_update_message
from ..configuration import AlertSubject, UpdateSubject


@dataclass
class WebhookSettings:
    url: str
    headers: dict[str, str]
    timeout_seconds: int
    user_agent: str


class WebhookDialogManager(BaseDialogManager):
    """Forwards each dialog as a JSON POST, for hosts that render dialogs out of process."""

    def __init__(self, settings: WebhookSettings, transport: httpx.BaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    def display_alert_dialog(self, subject: AlertSubject, blocking: bool) -> None:
        self._send(alert_message(subject.message, blocking))

    def display_optional_update_dialog(self, subject: UpdateSubject, update_url: str) -> None:
        self._send(optional_update_message(subject.message, subject.version, update_url))

    def display_required_update_dialog(self, subject: UpdateSubject, update_url: str) -> None:
        self._send(required_update_message(subject.message, subject.version, update_url))

    def _send(self, dialog: DialogMessage) -> None:
        headers = {"User-Agent": self._settings.user_agent}
        headers.update(self._settings.headers)

        with httpx.Client(timeout=self._settings.timeout_seconds, transport=self._transport) as client:
            response = client.post(self._settings.url, json=_build_payload(dialog), headers=headers)
        if not 200 <= response.status_code < 300:
            self._logger.error("Dialog webhook failed with status %s", response.status_code)
            response.raise_for_status()


def _build_payload(dialog: DialogMessage) -> dict[str, Any]:
    return {key: value for key, value in asdict(dialog).items() if value is not None}
