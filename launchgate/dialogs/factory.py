from __future__ import annotations

import logging
from typing import Any, Callable

from .base import BaseDialogManager
from .console import ConsoleDialogManager
from .webhook import WebhookDialogManager, WebhookSettings
from ..config import Config
from ..configuration import AlertSubject, UpdateSubject


class CompositeDialogManager(BaseDialogManager):
    """Fans each dialog out to every manager; fails only when all of them fail."""

    def __init__(self, managers: list[BaseDialogManager]) -> None:
        self.managers = managers
        self._logger = logging.getLogger(__name__)

    def display_alert_dialog(self, subject: AlertSubject, blocking: bool) -> None:
        self._fan_out(lambda manager: manager.display_alert_dialog(subject, blocking))

    def display_optional_update_dialog(self, subject: UpdateSubject, update_url: str) -> None:
        self._fan_out(lambda manager: manager.display_optional_update_dialog(subject, update_url))

    def display_required_update_dialog(self, subject: UpdateSubject, update_url: str) -> None:
        self._fan_out(lambda manager: manager.display_required_update_dialog(subject, update_url))

    def _fan_out(self, display: Callable[[BaseDialogManager], None]) -> None:
        last_error: Exception | None = None
        delivered = False
        for manager in self.managers:
            try:
                display(manager)
            except Exception as exc:
                self._logger.error("%s failed: %s", type(manager).__name__, exc)
                last_error = exc
                continue
            delivered = True
        if not delivered and last_error is not None:
            raise last_error


def build_dialog_manager(config: Config) -> BaseDialogManager | None:
    managers: list[BaseDialogManager] = []
    for target in config.presenters:
        manager = _build_target(target.type, target.settings, config)
        if manager:
            managers.append(manager)
    if not managers:
        return None
    if len(managers) == 1:
        return managers[0]
    return CompositeDialogManager(managers)


def _build_target(target_type: str, settings: dict[str, Any], config: Config) -> BaseDialogManager | None:
    logger = logging.getLogger(__name__)
    normalized = target_type.lower()
    if normalized == "console":
        return ConsoleDialogManager()
    if normalized == "webhook":
        url = _normalize_url(settings.get("url"))
        if not url:
            logger.warning("Skipping webhook presenter without a usable http(s) url")
            return None
        headers = settings.get("headers")
        if headers is None:
            headers = {}
        return WebhookDialogManager(
            WebhookSettings(
                url=url,
                headers={str(k): str(v) for k, v in headers.items()},
                timeout_seconds=config.settings.request_timeout_seconds,
                user_agent=config.settings.user_agent,
            )
        )
    logger.warning("Unknown presenter type %r", target_type)
    return None


def _normalize_url(value: Any) -> str | None:
    if not value or not isinstance(value, str):
        return None
    if "${" in value:
        return None
    if not (value.startswith("http://") or value.startswith("https://")):
        return None
    return value
