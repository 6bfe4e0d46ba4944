"""HTTP publisher for Pangolin blueprints."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from dockotter.adapters.http_resilience import ResilientClient
from dockotter.config.pangolin import BLUEPRINTS_PATH, DOCS_PATH
from dockotter.domain.errors import PublishError

from .translator import to_blueprint

if TYPE_CHECKING:
    from dockotter.adapters.http_resilience import ClientFactory
    from dockotter.config.http_resilience import ResilienceConfig
    from dockotter.config.pangolin import PangolinConfig
    from dockotter.domain.model import ResourceDeclaration

log = getLogger(__name__)

YAML_CONTENT_TYPE = "application/yaml"


@dataclass(slots=True)
class PangolinPublisher:
    """Submit one resource declaration per call as a single-resource YAML blueprint."""

    config: PangolinConfig
    resilience: ResilienceConfig | None = None
    client_factory: ClientFactory = field(default=ResilientClient)

    def __call__(self, declaration: ResourceDeclaration) -> None:
        body = to_blueprint([declaration]).to_yaml()
        log.debug("Blueprint YAML for %s:\n%s", declaration.name, body)
        asyncio.run(self._post_blueprint(body))

    def probe(self) -> int:
        """Return the status code of Pangolin's docs endpoint; transport errors propagate."""

        return asyncio.run(self._probe_async())

    async def _post_blueprint(self, body: str) -> None:
        async with self.client_factory(self._resilience()) as client:
            try:
                response = await client.post(
                    BLUEPRINTS_PATH,
                    content=body.encode("utf-8"),
                    headers={"Content-Type": YAML_CONTENT_TYPE},
                )
            except httpx.HTTPError as exc:
                raise PublishError(f"failed to create blueprint: {exc}") from exc

        if not response.is_success:
            log.error(
                "Pangolin API error: status=%s, response=%s", response.status_code, response.text
            )
            raise PublishError(
                f"pangolin API returned status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

    async def _probe_async(self) -> int:
        async with self.client_factory(self._resilience()) as client:
            response = await client.get(DOCS_PATH)
        return response.status_code

    def _resilience(self) -> ResilienceConfig:
        return self.resilience or self.config.resilience()
