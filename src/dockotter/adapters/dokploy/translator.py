"""Translate Dokploy payloads into domain inventory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dockotter.domain.model import DomainBinding, EntryKind, InventoryEntry, Project

if TYPE_CHECKING:
    from .schema import DokployApplication, DokployDomain, DokployProject


def to_binding(payload: DokployDomain) -> DomainBinding:
    return DomainBinding(
        host=payload.host.strip(),
        path=payload.path or "/",
        port=payload.port,
        https=payload.https,
        certificate=payload.certificate,
        domain_id=payload.domain_id,
    )


def to_entry(
    payload: DokployApplication,
    *,
    kind: EntryKind,
    project_id: str | None = None,
) -> InventoryEntry:
    return InventoryEntry(
        application_id=payload.identifier,
        name=payload.name,
        app_name=payload.app_name,
        status=payload.status,
        port=payload.port,
        domains=tuple(to_binding(domain) for domain in payload.domains),
        kind=kind,
        project_id=payload.project_id or project_id,
    )


def to_project(payload: DokployProject) -> Project:
    return Project(
        project_id=payload.project_id,
        name=payload.name,
        description=payload.description,
        applications=tuple(
            to_entry(app, kind=EntryKind.APPLICATION, project_id=payload.project_id)
            for app in payload.applications
        ),
        compose=tuple(
            to_entry(app, kind=EntryKind.COMPOSE, project_id=payload.project_id)
            for app in payload.compose
        ),
    )
