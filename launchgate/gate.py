from __future__ import annotations

import logging
import re
from typing import Callable

from .configuration import AlertSubject, LaunchGateConfiguration, UpdateSubject
from .decisions import (
    should_show_alert_dialog,
    should_show_optional_update_dialog,
    should_show_required_update_dialog,
)
from .dialogs.base import BaseDialogManager
from .errors import ConfigurationParseError, InvalidURL, MalformedVersion, MissingAppVersion
from .memory import Memory
from .parser import parse_configuration
from .remote.base import BaseRemoteFileManager
from .remote.http import HTTPFetchSettings, HTTPRemoteFileManager


URL_CHARACTERS = re.compile(r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+$")
URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:(?P<rest>.+)$")
BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_USER_AGENT = "launchgate/0.1"


def validate_url(value: object, field: str = "url") -> str:
    if not isinstance(value, str) or not URL_CHARACTERS.match(value):
        raise InvalidURL(value, field=field)
    if BAD_PERCENT_ESCAPE.search(value) or not URL_SCHEME.match(value):
        raise InvalidURL(value, field=field)
    return value


class LaunchGate:
    """Decides which launch dialogs to present from a remote configuration.

    Evaluation order is fixed: a required update, when eligible, is presented
    alone; otherwise an optional update and an alert are evaluated independently
    and each is remembered once presented.
    """

    def __init__(
        self,
        config_uri: str,
        update_uri: str,
        *,
        memory: Memory | None = None,
        dialog_manager: BaseDialogManager | None = None,
        app_version_provider: Callable[[], str | None] | None = None,
        platform: str | None = None,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.configuration_file_url = validate_url(config_uri, field="config_uri")
        self.update_url = validate_url(update_uri, field="update_uri")
        self.memory = memory if memory is not None else Memory()
        self.dialog_manager = dialog_manager
        self.platform = platform
        self._app_version_provider = app_version_provider
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent
        self._logger = logging.getLogger(__name__)

    def current_app_version(self) -> str | None:
        if self._app_version_provider is None:
            return None
        return self._app_version_provider()

    async def check(
        self,
        remote_file_manager: BaseRemoteFileManager | None = None,
        dialog_manager: BaseDialogManager | None = None,
    ) -> None:
        manager = remote_file_manager or HTTPRemoteFileManager(
            HTTPFetchSettings(
                url=self.configuration_file_url,
                timeout_seconds=self._timeout_seconds,
                user_agent=self._user_agent,
            )
        )

        def on_complete(data: bytes) -> None:
            try:
                config = parse_configuration(data, self.platform)
            except ConfigurationParseError as exc:
                self._logger.error("Ignoring remote configuration: %s", exc)
                return
            self.display_dialog_if_necessary(config, dialog_manager)

        await manager.fetch_remote_file(on_complete)

    def display_dialog_if_necessary(
        self,
        config: LaunchGateConfiguration,
        dialog_manager: BaseDialogManager | None = None,
    ) -> None:
        presenter = dialog_manager or self.dialog_manager
        if presenter is None:
            self._logger.warning("No dialog manager configured; skipping launch gate")
            return

        try:
            app_version = self._require_app_version()
        except MissingAppVersion as exc:
            self._logger.warning("Skipping launch gate: %s", exc)
            return

        required = config.required_update
        if required and self._evaluate(
            "requiredUpdate", lambda: self.should_show_required_update_dialog(required, app_version)
        ):
            self._present(
                "requiredUpdate",
                lambda: presenter.display_required_update_dialog(required, self.update_url),
            )
            return

        optional = config.optional_update
        if optional and self._evaluate(
            "optionalUpdate", lambda: self.should_show_optional_update_dialog(optional, app_version)
        ):
            if self._present(
                "optionalUpdate",
                lambda: presenter.display_optional_update_dialog(optional, self.update_url),
            ):
                self.memory.remember(optional)

        alert = config.alert
        if alert and self._evaluate("alert", lambda: self.should_show_alert_dialog(alert)):
            if self._present("alert", lambda: presenter.display_alert_dialog(alert, alert.blocking)):
                self.memory.remember(alert)

    def should_show_alert_dialog(self, alert: AlertSubject) -> bool:
        return should_show_alert_dialog(alert, self.memory)

    def should_show_optional_update_dialog(self, update: UpdateSubject, app_version: str) -> bool:
        return should_show_optional_update_dialog(update, app_version, self.memory)

    def should_show_required_update_dialog(self, update: UpdateSubject, app_version: str) -> bool:
        return should_show_required_update_dialog(update, app_version)

    def _require_app_version(self) -> str:
        try:
            app_version = self.current_app_version()
        except Exception as exc:
            raise MissingAppVersion(f"app version provider failed: {exc}") from exc
        if not app_version:
            raise MissingAppVersion("current app version is unavailable")
        return app_version

    def _evaluate(self, section: str, predicate: Callable[[], bool]) -> bool:
        try:
            result = predicate()
        except MalformedVersion as exc:
            self._logger.warning("Skipping %s section: %s", section, exc)
            return False
        self._logger.debug("%s eligible=%s", section, result)
        return result

    def _present(self, section: str, display: Callable[[], None]) -> bool:
        try:
            display()
        except Exception as exc:
            self._logger.error("Presenting %s dialog failed: %s", section, exc)
            return False
        self._logger.info("Presented %s dialog", section)
        return True
