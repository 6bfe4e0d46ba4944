from __future__ import annotations

import argparse
import logging
import sys
import threading
from signal import SIGINT, SIGTERM, signal
from typing import TYPE_CHECKING

import httpx
from dotenv import load_dotenv

from dockotter import __version__
from dockotter.app import sync
from dockotter.config import ConfigurationError, configure_logging, get_app_config
from dockotter.domain.errors import InventoryFetchError
from dockotter.health import HEALTH_PORT, StatusBoard, serve_health

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

HEALTH_CHECK_URL = f"http://localhost:{HEALTH_PORT}/health"


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dock-otter",
        description="Publish Dokploy application domains as Pangolin proxy resources",
        epilog=(
            "Configuration is read from the environment: DOKPLOY_URL, DOKPLOY_API_KEY, "
            "DOKPLOY_TOKEN, DOKPLOY_SESSION, PANGOLIN_URL, PANGOLIN_TOKEN, PANGOLIN_API_KEY, "
            "POLL_INTERVAL, RETRY_ATTEMPTS, RETRY_DELAY, RUN_ONCE, FORCE_SYNC, LOG_LEVEL."
        ),
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"Dock Otter {__version__}",
    )
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Check whether a running instance reports healthy and exit",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        default=None,
        help="Run a single reconciliation pass and exit (overrides RUN_ONCE)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        default=None,
        help="Republish every resource, even ones already published (overrides FORCE_SYNC)",
    )
    return parser.parse_args(list(argv))


def health_check(url: str = HEALTH_CHECK_URL) -> bool:
    try:
        response = httpx.get(url, timeout=5.0)
    except httpx.HTTPError:
        return False
    return response.status_code == httpx.codes.OK


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    if parsed_args.health_check:
        sys.exit(0 if health_check() else 1)

    configure_logging()
    log.info("Dock Otter %s starting up...", __version__)

    try:
        config = get_app_config(run_once=parsed_args.once, force_sync=parsed_args.force)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(1)

    sync_config = config.sync

    board = StatusBoard()
    stop_event = threading.Event()

    if sync_config.run_once:
        log.info("Running in manual mode (single execution)")
        try:
            result = sync(config, board=board)
        except InventoryFetchError:
            log.exception("Manual sync failed")
            sys.exit(1)
        if result is not None and not result.ok:
            log.warning("Manual sync finished with %s errored resources", result.errored)
            return
        log.info("Manual sync completed successfully")
        return

    serve_health(board)
    _install_signal_handlers(stop_event)
    sync(config, stop_event=stop_event, board=board)
    log.info("Dock Otter stopped")


def _install_signal_handlers(stop_event: threading.Event) -> None:
    def handler(_signal_received: int, _frame: FrameType | None) -> None:
        log.info("Shutting down gracefully...")
        stop_event.set()

    signal(SIGINT, handler)
    signal(SIGTERM, handler)


def run() -> None:
    load_dotenv()
    main()


if __name__ == "__main__":
    run()
