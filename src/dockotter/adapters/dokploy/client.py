"""HTTP reader for the Dokploy project inventory."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from dockotter.adapters.http_resilience import ResilientClient
from dockotter.domain.errors import InventoryFetchError

from .schema import DokployProject, ProjectList
from .translator import to_project

if TYPE_CHECKING:
    from dockotter.adapters.http_resilience import ClientFactory
    from dockotter.config.dokploy import DokployConfig
    from dockotter.config.http_resilience import ResilienceConfig
    from dockotter.domain.model import Project

log = getLogger(__name__)

CANDIDATE_ENDPOINTS: tuple[str, ...] = (
    "/api/projects",
    "/api/project/all",
    "/api/project",
    "/api/applications",
)
"""Listing paths used by different Dokploy releases, most recent first."""


class _EndpointFailure(Exception):
    """One candidate endpoint did not yield a decodable inventory."""


@dataclass(slots=True)
class DokployInventoryReader:
    """Fetch projects from the first candidate endpoint that answers with a valid listing.

    Candidates are tried in order and the first decodable 200 wins; later
    candidates are never requested. When all fail, the raised
    :class:`InventoryFetchError` wraps only the last failure.
    """

    config: DokployConfig
    endpoints: tuple[str, ...] = CANDIDATE_ENDPOINTS
    resilience: ResilienceConfig | None = None
    client_factory: ClientFactory = field(default=ResilientClient)

    def __call__(self) -> list[Project]:
        payloads = asyncio.run(self._fetch_projects_async())
        return [to_project(payload) for payload in payloads]

    async def _fetch_projects_async(self) -> list[DokployProject]:
        resilience = self.resilience or self.config.resilience()
        last_error: Exception | None = None

        async with self.client_factory(resilience) as client:
            for endpoint in self.endpoints:
                try:
                    projects = await self._request_projects(client, endpoint)
                except _EndpointFailure as exc:
                    log.debug("Dokploy endpoint %s failed: %s", endpoint, exc.__cause__ or exc)
                    last_error = exc.__cause__ or exc
                    continue
                log.info("Found working Dokploy endpoint: %s", endpoint)
                return projects

        raise InventoryFetchError(
            f"all endpoints failed, last error: {last_error}"
        ) from last_error

    async def _request_projects(
        self,
        client: ResilientClient,
        endpoint: str,
    ) -> list[DokployProject]:
        try:
            response = await client.get(endpoint)
        except httpx.HTTPError as exc:
            raise _EndpointFailure(endpoint) from exc

        if response.status_code != httpx.codes.OK:
            raise _EndpointFailure(f"endpoint {endpoint} returned status {response.status_code}")

        try:
            return ProjectList.validate_json(response.content)
        except ValueError as exc:
            raise _EndpointFailure(endpoint) from exc
