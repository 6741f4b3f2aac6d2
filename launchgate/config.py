from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

import yaml


@dataclass
class GateConfig:
    config_uri: str
    update_uri: str
    platform: str | None


@dataclass
class AppConfig:
    version: str | None
    distribution: str | None


@dataclass
class Settings:
    state_file: str
    request_timeout_seconds: int
    user_agent: str


@dataclass
class PresenterTarget:
    type: str
    settings: dict[str, Any]


@dataclass
class Config:
    gate: GateConfig
    app: AppConfig
    settings: Settings
    presenters: list[PresenterTarget]


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    if isinstance(value, dict):
        return {key: _expand_env(val) for key, val in value.items()}
    return value


def _require_dict(value: Any, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a mapping")
    return value


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def load_config(path: str) -> Config:
    with open(path, "r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    data = _expand_env(raw)
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")

    gate = _load_gate(_require_dict(data.get("gate"), "gate"))

    app_raw = _require_dict(data.get("app"), "app")
    app = AppConfig(
        version=_optional_str(app_raw.get("version")),
        distribution=_optional_str(app_raw.get("distribution")),
    )

    settings_raw = _require_dict(data.get("settings"), "settings")
    timeout = int(settings_raw.get("request_timeout_seconds", 10))
    if timeout <= 0:
        raise ValueError("settings.request_timeout_seconds must be > 0")

    settings = Settings(
        state_file=str(settings_raw.get("state_file", "./launchgate_state.json")),
        request_timeout_seconds=timeout,
        user_agent=str(settings_raw.get("user_agent", "launchgate/0.1")),
    )

    return Config(
        gate=gate,
        app=app,
        settings=settings,
        presenters=_load_presenters(data.get("present")),
    )


def _load_gate(raw: dict[str, Any]) -> GateConfig:
    config_uri = raw.get("config_uri")
    update_uri = raw.get("update_uri")
    if not config_uri or not isinstance(config_uri, str):
        raise ValueError("gate.config_uri is required")
    if not update_uri or not isinstance(update_uri, str):
        raise ValueError("gate.update_uri is required")
    return GateConfig(
        config_uri=config_uri,
        update_uri=update_uri,
        platform=_optional_str(raw.get("platform")),
    )


def _load_presenters(value: Any) -> list[PresenterTarget]:
    if value is None:
        return [PresenterTarget(type="console", settings={})]
    if not isinstance(value, list):
        raise ValueError("present must be a list")
    targets: list[PresenterTarget] = []
    for entry in value:
        if not isinstance(entry, dict):
            raise ValueError("present entries must be mappings")
        target_type = entry.get("type")
        if not target_type:
            raise ValueError("present entries must include type")
        settings = {k: v for k, v in entry.items() if k != "type"}
        targets.append(PresenterTarget(type=str(target_type), settings=settings))
    return targets
