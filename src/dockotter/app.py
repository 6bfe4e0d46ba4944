"""Application orchestration entry points."""

from __future__ import annotations

import threading
import time
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from dockotter.adapters.dokploy import DokployInventoryReader
from dockotter.adapters.pangolin import PangolinPublisher
from dockotter.domain.errors import InventoryFetchError
from dockotter.domain.reconciliation import Reconciler

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import timedelta

    from dockotter.config.app import AppConfig
    from dockotter.domain.model import PassResult, Project
    from dockotter.domain.ports import InventoryFetcher
    from dockotter.health import StatusBoard


log = getLogger(__name__)


def build_reconciler(
    config: AppConfig,
    *,
    reader: InventoryFetcher | None = None,
    publisher: PangolinPublisher | None = None,
) -> Reconciler:
    return Reconciler(
        fetch_inventory=reader or DokployInventoryReader(config=config.dokploy),
        publish=publisher or PangolinPublisher(config=config.pangolin),
        retry_attempts=config.sync.retry_attempts,
        retry_delay=config.sync.retry_delay,
        force=config.sync.force_sync,
    )


def summarize_inventory(projects: Iterable[Project]) -> tuple[int, int, int]:
    """Return ``(projects, apps, domains)`` totals across both entry groups."""

    project_count = app_count = domain_count = 0
    for project in projects:
        project_count += 1
        for entry in project.entries():
            app_count += 1
            domain_count += len(entry.domains)
    return project_count, app_count, domain_count


def check_connectivity(reader: InventoryFetcher, publisher: PangolinPublisher) -> bool:
    """Probe both APIs once at startup. Failures are logged, never raised."""

    log.info("Testing API connectivity...")
    try:
        projects = reader()
    except InventoryFetchError as exc:
        log.warning("Dokploy connection failed: %s", exc)
        return False

    project_count, app_count, domain_count = summarize_inventory(projects)
    log.info(
        "Dokploy connected: projects=%s, apps=%s, domains=%s",
        project_count,
        app_count,
        domain_count,
    )

    try:
        status = publisher.probe()
    except httpx.HTTPError as exc:
        log.warning("Pangolin connectivity test failed: %s", exc)
    else:
        log.info("Pangolin API accessible: status=%s", status)
    return True


def run_reconciliation(
    reconciler: Reconciler,
    *,
    run_once: bool,
    interval: timedelta,
    stop_event: threading.Event | None = None,
    board: StatusBoard | None = None,
) -> PassResult | None:
    """Run a single pass, or passes on a fixed interval until ``stop_event`` is set.

    In single-pass mode a failed inventory fetch propagates to the caller. In
    continuous mode it is logged and the next scheduled pass starts from
    scratch. A pass that has started always runs to completion; ``stop_event``
    is only honoured between passes. Returns the last completed pass result.
    """

    if run_once:
        try:
            result = reconciler.run_pass()
        except InventoryFetchError as exc:
            if board is not None:
                board.record_failure(exc)
            raise
        if board is not None:
            board.record_pass(result)
        return result

    stop = stop_event or threading.Event()
    period = interval.total_seconds()
    last_result: PassResult | None = None

    log.info("Starting adapter: poll_interval=%s", interval)
    while not stop.is_set():
        started = time.monotonic()
        try:
            last_result = reconciler.run_pass()
        except InventoryFetchError as exc:
            log.error("Sync failed: %s", exc)  # noqa: TRY400
            if board is not None:
                board.record_failure(exc)
        else:
            if board is not None:
                board.record_pass(last_result)

        remaining = max(0.0, period - (time.monotonic() - started))
        if stop.wait(remaining):
            break

    return last_result


def sync(
    config: AppConfig,
    *,
    stop_event: threading.Event | None = None,
    board: StatusBoard | None = None,
) -> PassResult | None:
    """Wire the Dokploy reader and Pangolin publisher and run the configured mode."""

    reader = DokployInventoryReader(config=config.dokploy)
    publisher = PangolinPublisher(config=config.pangolin)
    reconciler = build_reconciler(config, reader=reader, publisher=publisher)

    log.info(
        "Authentication configured: dokploy_auth=%s, pangolin_auth=%s",
        config.dokploy.describe_auth(),
        config.pangolin.describe_auth(),
    )

    if not config.sync.run_once:
        check_connectivity(reader, publisher)

    return run_reconciliation(
        reconciler,
        run_once=config.sync.run_once,
        interval=config.sync.poll_interval,
        stop_event=stop_event,
        board=board,
    )
