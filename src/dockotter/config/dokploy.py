"""Dokploy (source system) configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger

from dockotter import __version__

from .env import get_env
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy, validate_base_url

log = getLogger(__name__)

DOKPLOY_DEFAULT_URL = "http://dokploy:3000"
USER_AGENT = f"dock-otter/{__version__}"
DOKPLOY_RATE_LIMIT = RateLimit(max_calls=5, per_seconds=1.0)


@dataclass(frozen=True)
class DokployConfig:
    """Holds the Dokploy base URL and whichever credentials were supplied."""

    base_url: str
    api_key: str | None = None
    token: str | None = None
    session: str | None = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key or self.token or self.session)

    def describe_auth(self) -> str:
        if self.api_key:
            return "API key"
        if self.token:
            return "Bearer token"
        if self.session:
            return "Session cookie"
        return "none"

    def auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if self.session:
            headers["Cookie"] = f"session={self.session}"
        return headers

    def resilience(self) -> ResilienceConfig:
        return ResilienceConfig(
            name="dokploy",
            base_url=self.base_url,
            retry=RetryPolicy(),
            ratelimit=DOKPLOY_RATE_LIMIT,
            default_headers={
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
                **self.auth_headers(),
            },
        )


def get_dokploy_config() -> DokployConfig:
    config = DokployConfig(
        base_url=get_env("DOKPLOY_URL", DOKPLOY_DEFAULT_URL) or DOKPLOY_DEFAULT_URL,
        api_key=get_env("DOKPLOY_API_KEY"),
        token=get_env("DOKPLOY_TOKEN"),
        session=get_env("DOKPLOY_SESSION"),
    )
    validate_dokploy_config(config)
    return config


def validate_dokploy_config(config: DokployConfig) -> None:
    validate_base_url("DOKPLOY_URL", config.base_url)
    if not config.has_credentials:
        # anonymous access may still work on some installations
        log.warning("No Dokploy authentication configured - API calls may fail")
