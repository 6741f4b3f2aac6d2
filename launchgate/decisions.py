from __future__ import annotations

from .configuration import AlertSubject, UpdateSubject
from .memory import Memory
from .version import Ordering, Version, compare_versions


def should_show_alert_dialog(alert: AlertSubject, memory: Memory) -> bool:
    if alert.blocking:
        return True
    if memory.has_been_shown(alert):
        return False
    return bool(alert.message)


def should_show_optional_update_dialog(
    update: UpdateSubject,
    app_version: str | Version,
    memory: Memory,
) -> bool:
    if memory.has_been_shown(update):
        return False
    return _is_behind(app_version, update)


def should_show_required_update_dialog(update: UpdateSubject, app_version: str | Version) -> bool:
    # Never consults memory: the dialog returns every launch until the app is upgraded.
    return _is_behind(app_version, update)


def _is_behind(app_version: str | Version, update: UpdateSubject) -> bool:
    return compare_versions(app_version, update.version) is Ordering.LESS
