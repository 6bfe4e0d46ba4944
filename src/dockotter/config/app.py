"""Top-level configuration for one Dock Otter process."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger

from .dokploy import DokployConfig, get_dokploy_config
from .pangolin import PangolinConfig, get_pangolin_config
from .sync import SyncConfig, get_sync_config

log = getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    dokploy: DokployConfig
    pangolin: PangolinConfig
    sync: SyncConfig = field(default_factory=SyncConfig)


def get_app_config(
    *, run_once: bool | None = None, force_sync: bool | None = None
) -> AppConfig:
    """Load and validate the full configuration from the environment.

    ``run_once`` and ``force_sync`` override ``RUN_ONCE`` and ``FORCE_SYNC``
    before validation, so the poll interval floor follows the effective mode.
    """

    config = AppConfig(
        dokploy=get_dokploy_config(),
        pangolin=get_pangolin_config(),
        sync=get_sync_config(run_once=run_once, force_sync=force_sync),
    )
    log.info(
        "Configuration loaded: dokploy_url=%s, pangolin_url=%s, poll_interval=%s, "
        "retry_attempts=%s, retry_delay=%s, run_once=%s, force_sync=%s",
        config.dokploy.base_url,
        config.pangolin.base_url,
        config.sync.poll_interval,
        config.sync.retry_attempts,
        config.sync.retry_delay,
        config.sync.run_once,
        config.sync.force_sync,
    )
    return config
