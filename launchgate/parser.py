from __future__ import annotations

import json
import logging
from typing import Any

from .configuration import AlertSubject, LaunchGateConfiguration, UpdateSubject
from .errors import ConfigurationParseError


def parse_configuration(data: bytes | str, platform: str | None = None) -> LaunchGateConfiguration:
    """Map the remote JSON document onto a LaunchGateConfiguration.

    When ``platform`` is given the sections are read from that top-level key
    (for example ``"ios"``); otherwise they are read from the document root.
    Sections with missing or mistyped fields are dropped rather than failing
    the whole document.
    """
    try:
        raw = json.loads(data)
    except (UnicodeDecodeError, ValueError) as exc:
        raise ConfigurationParseError(f"Configuration is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationParseError("Configuration root must be an object")

    if platform:
        section = raw.get(platform)
        if not isinstance(section, dict):
            raise ConfigurationParseError(f"Configuration has no object for platform {platform!r}")
        raw = section

    return LaunchGateConfiguration(
        alert=_parse_alert(raw.get("alert")),
        optional_update=_parse_update(raw.get("optionalUpdate"), "optionalVersion", "optionalUpdate"),
        required_update=_parse_update(raw.get("requiredUpdate"), "minimumVersion", "requiredUpdate"),
    )


def _parse_alert(value: Any) -> AlertSubject | None:
    if value is None:
        return None
    logger = logging.getLogger(__name__)
    if not isinstance(value, dict):
        logger.warning("Ignoring alert section: expected an object")
        return None
    message = value.get("message")
    blocking = value.get("blocking", False)
    if not isinstance(message, str) or not isinstance(blocking, bool):
        logger.warning("Ignoring alert section: message must be a string and blocking a boolean")
        return None
    return AlertSubject(message=message, blocking=blocking)


def _parse_update(value: Any, version_key: str, name: str) -> UpdateSubject | None:
    if value is None:
        return None
    logger = logging.getLogger(__name__)
    if not isinstance(value, dict):
        logger.warning("Ignoring %s section: expected an object", name)
        return None
    version = value.get(version_key)
    message = value.get("message", "")
    if not isinstance(version, str) or not isinstance(message, str):
        logger.warning("Ignoring %s section: %s and message must be strings", name, version_key)
        return None
    return UpdateSubject(version=version, message=message)
