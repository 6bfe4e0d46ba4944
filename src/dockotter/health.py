"""Liveness and metrics endpoint served next to the reconciliation loop."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from dockotter import __version__

if TYPE_CHECKING:
    from dockotter.domain.model import PassResult

log = getLogger(__name__)

SERVICE_NAME = "dock-otter"
HEALTH_HOST = "0.0.0.0"  # noqa: S104
HEALTH_PORT = 8080


@dataclass(frozen=True, slots=True)
class SyncStatus:
    passes: int = 0
    failed_passes: int = 0
    last_result: PassResult | None = None
    last_error: str | None = None
    last_pass_at: datetime | None = None


class StatusBoard:
    """Latest loop status, replaced wholesale after every pass.

    Only the loop thread writes; the health server reads whichever snapshot is
    current.
    """

    def __init__(self) -> None:
        self._status = SyncStatus()

    @property
    def current(self) -> SyncStatus:
        return self._status

    def record_pass(self, result: PassResult) -> None:
        status = self._status
        self._status = replace(
            status,
            passes=status.passes + 1,
            last_result=result,
            last_error=None,
            last_pass_at=datetime.now(UTC),
        )

    def record_failure(self, error: BaseException) -> None:
        status = self._status
        self._status = replace(
            status,
            passes=status.passes + 1,
            failed_passes=status.failed_passes + 1,
            last_error=str(error),
            last_pass_at=datetime.now(UTC),
        )


def render_metrics(status: SyncStatus) -> str:
    lines = [
        "# Basic metrics endpoint",
        "dock_otter_up 1",
        f"dock_otter_passes_total {status.passes}",
        f"dock_otter_failed_passes_total {status.failed_passes}",
    ]
    if status.last_result is not None:
        lines.extend(
            [
                f"dock_otter_last_pass_processed {status.last_result.processed}",
                f"dock_otter_last_pass_skipped {status.last_result.skipped}",
                f"dock_otter_last_pass_errored {status.last_result.errored}",
            ]
        )
    return "\n".join(lines) + "\n"


def create_health_app(board: StatusBoard) -> FastAPI:
    app = FastAPI(title="Dock Otter", version=__version__, docs_url=None, redoc_url=None)

    @app.get("/health")
    async def health() -> dict[str, object]:
        status = board.current
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": __version__,
            "timestamp": datetime.now(UTC).isoformat(timespec="seconds"),
            "passes": status.passes,
            "last_error": status.last_error,
        }

    @app.get("/metrics", response_class=PlainTextResponse)
    async def metrics() -> PlainTextResponse:
        return PlainTextResponse(render_metrics(board.current))

    return app


def serve_health(
    board: StatusBoard,
    *,
    host: str = HEALTH_HOST,
    port: int = HEALTH_PORT,
) -> threading.Thread:
    """Start the health server on a daemon thread and return the thread."""

    server = uvicorn.Server(
        uvicorn.Config(create_health_app(board), host=host, port=port, log_level="warning")
    )
    thread = threading.Thread(target=server.run, name="health-server", daemon=True)
    thread.start()
    log.info("Health check server starting on %s:%s", host, port)
    return thread
