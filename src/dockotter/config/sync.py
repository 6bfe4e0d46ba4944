"""Reconciliation loop settings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import timedelta

from .env import get_bool_env, get_duration_env, get_int_env
from .errors import ConfigurationError

DEFAULT_POLL_INTERVAL = timedelta(seconds=30)
MIN_POLL_INTERVAL = timedelta(seconds=5)
DEFAULT_RETRY_ATTEMPTS = 3
MIN_RETRY_ATTEMPTS = 1
MAX_RETRY_ATTEMPTS = 10
DEFAULT_RETRY_DELAY = timedelta(seconds=5)


@dataclass(frozen=True, slots=True)
class SyncConfig:
    poll_interval: timedelta = DEFAULT_POLL_INTERVAL
    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS
    retry_delay: timedelta = DEFAULT_RETRY_DELAY
    run_once: bool = False
    force_sync: bool = False

    def with_overrides(
        self, *, run_once: bool | None = None, force_sync: bool | None = None
    ) -> SyncConfig:
        return replace(
            self,
            run_once=self.run_once if run_once is None else run_once,
            force_sync=self.force_sync if force_sync is None else force_sync,
        )


def get_sync_config(
    *, run_once: bool | None = None, force_sync: bool | None = None
) -> SyncConfig:
    """Read loop settings from the environment; explicit flags win over it."""

    config = SyncConfig(
        poll_interval=get_duration_env("POLL_INTERVAL", DEFAULT_POLL_INTERVAL),
        retry_attempts=get_int_env("RETRY_ATTEMPTS", DEFAULT_RETRY_ATTEMPTS),
        retry_delay=get_duration_env("RETRY_DELAY", DEFAULT_RETRY_DELAY),
        run_once=get_bool_env("RUN_ONCE", default=False),
        force_sync=get_bool_env("FORCE_SYNC", default=False),
    ).with_overrides(run_once=run_once, force_sync=force_sync)
    validate_sync_config(config)
    return config


def validate_sync_config(config: SyncConfig) -> None:
    # the interval only matters in continuous mode
    if not config.run_once and config.poll_interval < MIN_POLL_INTERVAL:
        raise ConfigurationError("POLL_INTERVAL must be at least 5 seconds")
    if not MIN_RETRY_ATTEMPTS <= config.retry_attempts <= MAX_RETRY_ATTEMPTS:
        raise ConfigurationError(
            f"RETRY_ATTEMPTS must be between {MIN_RETRY_ATTEMPTS} and {MAX_RETRY_ATTEMPTS}"
        )
    if config.retry_delay < timedelta(0):
        raise ConfigurationError("RETRY_DELAY must not be negative")
