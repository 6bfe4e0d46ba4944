"""Pangolin (target system) configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .dokploy import USER_AGENT
from .env import get_env
from .errors import MissingConfigurationError
from .http_resilience import NO_RETRY, ResilienceConfig, validate_base_url

PANGOLIN_DEFAULT_URL = "http://pangolin:3001"
BLUEPRINTS_PATH = "/v1/blueprints"
DOCS_PATH = "/v1/docs"


@dataclass(frozen=True)
class PangolinConfig:
    """Holds the Pangolin base URL and its bearer credential."""

    base_url: str
    token: str | None = None
    api_key: str | None = None

    @property
    def bearer(self) -> str | None:
        return self.token or self.api_key

    def describe_auth(self) -> str:
        if self.token:
            return "Bearer token"
        if self.api_key:
            return "Bearer token (from API key)"
        return "none"

    def resilience(self) -> ResilienceConfig:
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        if self.bearer:
            headers["Authorization"] = f"Bearer {self.bearer}"
        # publish retries are owned by the reconciler, the transport must not add more
        return ResilienceConfig(
            name="pangolin",
            base_url=self.base_url,
            retry=NO_RETRY,
            default_headers=headers,
        )


def get_pangolin_config() -> PangolinConfig:
    config = PangolinConfig(
        base_url=get_env("PANGOLIN_URL", PANGOLIN_DEFAULT_URL) or PANGOLIN_DEFAULT_URL,
        token=get_env("PANGOLIN_TOKEN"),
        api_key=get_env("PANGOLIN_API_KEY"),
    )
    validate_pangolin_config(config)
    return config


def validate_pangolin_config(config: PangolinConfig) -> None:
    validate_base_url("PANGOLIN_URL", config.base_url)
    if config.bearer is None:
        raise MissingConfigurationError(
            "Pangolin authentication required (PANGOLIN_TOKEN or PANGOLIN_API_KEY)"
        )
