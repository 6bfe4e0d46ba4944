from __future__ import annotations

from typing import TYPE_CHECKING

from dockotter.adapters.dokploy import to_project
from dockotter.adapters.dokploy.schema import ProjectList
from dockotter.domain.model import DomainBinding, EntryKind

if TYPE_CHECKING:
    from tests.adapters.dokploy.conftest import DokployPayload


def test_projects_translate_into_inventory(projects_payload: DokployPayload) -> None:
    projects = [to_project(item) for item in ProjectList.validate_python(projects_payload)]

    assert [project.project_id for project in projects] == ["proj-1", "proj-2"]
    storefront, empty = projects
    assert empty.applications == ()
    assert empty.compose == ()

    shop, worker = storefront.applications
    assert shop.application_id == "app-1"
    assert shop.app_name == "shop-a1b2c3"
    assert shop.port == 3000
    assert shop.is_running
    assert shop.kind is EntryKind.APPLICATION
    assert shop.project_id == "proj-1"
    assert shop.domains == (
        DomainBinding(
            host="shop.example.com",
            path="/",
            port=0,
            https=True,
            certificate="letsencrypt",
            domain_id="dom-1",
        ),
        DomainBinding(
            host="api.shop.example.com",
            path="/v1",
            port=8080,
            https=False,
            domain_id="dom-2",
        ),
    )

    assert not worker.is_running
    assert worker.domains == ()


def test_compose_entries_use_compose_id_and_status(projects_payload: DokployPayload) -> None:
    storefront = to_project(ProjectList.validate_python(projects_payload)[0])

    (analytics,) = storefront.compose
    assert analytics.application_id == "cmp-1"
    assert analytics.kind is EntryKind.COMPOSE
    assert analytics.status == "done"
    assert analytics.project_id == "proj-1"
    assert analytics.domains[0].path == "/"
    assert list(storefront.entries())[-1] is analytics
