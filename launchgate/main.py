from __future__ import annotations

# One gating pass per invocation:
# 1) Load settings and the dismissal memory from the state file.
# 2) Fetch and parse the remote configuration, present whatever is eligible.
# 3) Persist the memory so dismissed dialogs stay dismissed on the next launch.

import argparse
import asyncio
from importlib import metadata
import logging
from pathlib import Path
from typing import Callable

from .config import AppConfig, load_config
from .dialogs.factory import build_dialog_manager
from .errors import InvalidURL
from .gate import LaunchGate
from .memory import Memory, load_memory, save_memory


async def main() -> None:
    args = _parse_args()
    if args.init_config:
        _init_config(Path(args.config))
        return
    config = load_config(args.config)
    _configure_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if args.reset_memory:
        save_memory(config.settings.state_file, Memory())
        logger.info("Cleared launch gate memory at %s", config.settings.state_file)
        return

    memory = load_memory(config.settings.state_file)
    dialog_manager = build_dialog_manager(config)
    if dialog_manager is None:
        raise SystemExit("At least one presenter is required. Set present entries in the config file.")

    try:
        gate = LaunchGate(
            config.gate.config_uri,
            config.gate.update_uri,
            memory=memory,
            dialog_manager=dialog_manager,
            app_version_provider=_app_version_provider(args.app_version, config.app),
            platform=config.gate.platform,
            timeout_seconds=config.settings.request_timeout_seconds,
            user_agent=config.settings.user_agent,
        )
    except InvalidURL as exc:
        raise SystemExit(str(exc))

    await gate.check()
    save_memory(config.settings.state_file, memory)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Launch-time update and alert gate")
    parser.add_argument("--config", default="./launchgate.yaml")
    parser.add_argument("--app-version", help="Version of the running application")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--init-config", action="store_true", help="Create a launchgate.yaml template and exit")
    parser.add_argument("--reset-memory", action="store_true", help="Forget every shown dialog and exit")
    return parser.parse_args()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")


def _init_config(target: Path) -> None:
    if target.exists():
        raise SystemExit(f"Config already exists at {target}")
    root = Path(__file__).resolve().parents[1]
    template = root / "launchgate.example.yaml"
    if not template.exists():
        raise SystemExit("launchgate.example.yaml not found")
    target.write_text(template.read_text(encoding="utf-8"), encoding="utf-8")
    print(f"Wrote config template to {target}")


def _app_version_provider(explicit: str | None, app: AppConfig) -> Callable[[], str | None]:
    def provider() -> str | None:
        if explicit:
            return explicit
        if app.version:
            return app.version
        if app.distribution:
            try:
                return metadata.version(app.distribution)
            except metadata.PackageNotFoundError:
                logging.getLogger(__name__).warning(
                    "Distribution %s is not installed; app version unknown", app.distribution
                )
        return None

    return provider


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
