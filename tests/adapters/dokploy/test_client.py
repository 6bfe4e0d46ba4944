from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import httpx
import pytest

from dockotter.adapters.dokploy import CANDIDATE_ENDPOINTS, DokployInventoryReader
from dockotter.config.dokploy import DokployConfig
from dockotter.config.http_resilience import NO_RETRY
from dockotter.domain.errors import InventoryFetchError
from tests.helpers.http import make_client_factory

if TYPE_CHECKING:
    from collections.abc import Callable

    from tests.adapters.dokploy.conftest import DokployPayload


def _reader(
    config: DokployConfig,
    handler: Callable[[httpx.Request], httpx.Response],
) -> DokployInventoryReader:
    return DokployInventoryReader(
        config=config,
        resilience=replace(config.resilience(), retry=NO_RETRY),
        client_factory=make_client_factory(handler),
    )


def test_reader_falls_back_to_next_endpoint(
    dokploy_config: DokployConfig, projects_payload: DokployPayload
) -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        if request.url.path == "/api/projects":
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, json=projects_payload)

    projects = _reader(dokploy_config, handler)()

    assert requested == ["/api/projects", "/api/project/all"]
    assert [project.name for project in projects] == ["Storefront", "Empty"]


def test_reader_stops_at_first_success(
    dokploy_config: DokployConfig, projects_payload: DokployPayload
) -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        return httpx.Response(200, json=projects_payload)

    _reader(dokploy_config, handler)()

    assert requested == [CANDIDATE_ENDPOINTS[0]]


def test_reader_skips_undecodable_body(
    dokploy_config: DokployConfig, projects_payload: DokployPayload
) -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        if request.url.path == "/api/projects":
            return httpx.Response(200, text="<html>login</html>")
        if request.url.path == "/api/project/all":
            return httpx.Response(200, json={"message": "not a list"})
        return httpx.Response(200, json=projects_payload)

    projects = _reader(dokploy_config, handler)()

    assert requested == ["/api/projects", "/api/project/all", "/api/project"]
    assert len(projects) == 2


def test_reader_reports_only_last_failure(dokploy_config: DokployConfig) -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        if request.url.path == "/api/projects":
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(503, text="unavailable")

    with pytest.raises(InventoryFetchError) as exc:
        _reader(dokploy_config, handler)()

    assert requested == list(CANDIDATE_ENDPOINTS)
    message = str(exc.value)
    assert message.startswith("all endpoints failed, last error:")
    assert "/api/applications returned status 503" in message
    assert "connection refused" not in message


def test_reader_wraps_transport_error_as_cause(dokploy_config: DokployConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(InventoryFetchError) as exc:
        _reader(dokploy_config, handler)()

    assert isinstance(exc.value.__cause__, httpx.ConnectError)


def test_reader_sends_configured_credentials(projects_payload: DokployPayload) -> None:
    config = DokployConfig(
        base_url="http://dokploy.test",
        api_key="key",
        token="tok",
        session="sess",
    )
    seen: list[httpx.Headers] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers)
        return httpx.Response(200, json=projects_payload)

    _reader(config, handler)()

    headers = seen[0]
    assert headers["X-API-Key"] == "key"
    assert headers["Authorization"] == "Bearer tok"
    assert headers["Cookie"] == "session=sess"
    assert headers["Accept"] == "application/json"
    assert headers["User-Agent"].startswith("dock-otter/")
