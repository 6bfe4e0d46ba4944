from __future__ import annotations

import pytest

from dockotter.config.pangolin import PangolinConfig

DOCK_OTTER_ENV_NAMES = (
    "DOKPLOY_URL",
    "DOKPLOY_API_KEY",
    "DOKPLOY_TOKEN",
    "DOKPLOY_SESSION",
    "PANGOLIN_URL",
    "PANGOLIN_TOKEN",
    "PANGOLIN_API_KEY",
    "POLL_INTERVAL",
    "RETRY_ATTEMPTS",
    "RETRY_DELAY",
    "RUN_ONCE",
    "FORCE_SYNC",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ``.env`` or shell exports out of the tests."""
    for name in DOCK_OTTER_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def pangolin_config() -> PangolinConfig:
    return PangolinConfig(base_url="http://pangolin.test", token="pangolin-token")
