from __future__ import annotations

from dockotter.domain.model import (
    ELIGIBLE_STATUS,
    DomainBinding,
    EntryKind,
    InventoryEntry,
    Project,
)


def make_binding(
    host: str = "app.example.com",
    *,
    path: str = "/",
    port: int = 0,
    https: bool = False,
) -> DomainBinding:
    return DomainBinding(host=host, path=path, port=port, https=https)


def make_entry(
    name: str = "web",
    *,
    app_name: str | None = None,
    status: str = ELIGIBLE_STATUS,
    port: int = 0,
    domains: tuple[DomainBinding, ...] | None = None,
    kind: EntryKind = EntryKind.APPLICATION,
) -> InventoryEntry:
    return InventoryEntry(
        application_id=f"{name}-id",
        name=name,
        app_name=app_name if app_name is not None else f"{name}-internal",
        status=status,
        port=port,
        domains=domains if domains is not None else (make_binding(f"{name}.example.com"),),
        kind=kind,
    )


def make_project(
    *,
    applications: tuple[InventoryEntry, ...] = (),
    compose: tuple[InventoryEntry, ...] = (),
    name: str = "default",
) -> Project:
    return Project(
        project_id=f"{name}-project",
        name=name,
        applications=applications,
        compose=compose,
    )
