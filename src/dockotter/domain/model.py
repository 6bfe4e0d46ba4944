"""Domain objects for inventory observed on Dokploy and resources declared on Pangolin."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

ELIGIBLE_STATUS = "done"
"""Dokploy reports a successfully deployed, running application as ``done``."""

MIN_PORT = 1
MAX_PORT = 65535


class EntryKind(StrEnum):
    APPLICATION = "application"
    COMPOSE = "compose"


class ForwardingMethod(StrEnum):
    HTTP = "http"
    HTTPS = "https"


@dataclass(frozen=True, slots=True)
class DomainBinding:
    """A public host (and optional path/port) attached to an application."""

    host: str
    path: str = "/"
    port: int = 0
    https: bool = False
    certificate: str | None = None
    domain_id: str | None = None


@dataclass(frozen=True, slots=True)
class InventoryEntry:
    """One deployed application or compose stack and its domain bindings."""

    application_id: str
    name: str
    app_name: str
    status: str
    port: int = 0
    domains: tuple[DomainBinding, ...] = ()
    kind: EntryKind = EntryKind.APPLICATION
    project_id: str | None = None

    @property
    def is_running(self) -> bool:
        return self.status == ELIGIBLE_STATUS


@dataclass(frozen=True, slots=True)
class Project:
    project_id: str
    name: str
    description: str | None = None
    applications: tuple[InventoryEntry, ...] = ()
    compose: tuple[InventoryEntry, ...] = ()

    def entries(self) -> Iterator[InventoryEntry]:
        """Yield standalone applications first, then compose stacks."""

        yield from self.applications
        yield from self.compose


@dataclass(frozen=True, slots=True)
class ForwardingTarget:
    hostname: str
    port: int
    method: ForwardingMethod = ForwardingMethod.HTTP
    path: str = "/"
    enabled: bool = True

    def __post_init__(self) -> None:
        if not MIN_PORT <= self.port <= MAX_PORT:
            raise ValueError(f"Port {self.port} outside {MIN_PORT}-{MAX_PORT}")


@dataclass(frozen=True, slots=True)
class ResourceDeclaration:
    """A Pangolin proxy resource, one per (application, domain binding) pair."""

    name: str
    full_domain: str
    ssl: bool
    targets: tuple[ForwardingTarget, ...]
    protocol: str = "http"
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class PassResult:
    """Counters reported at the end of one reconciliation pass."""

    processed: int = 0
    skipped: int = 0
    errored: int = 0

    @property
    def total(self) -> int:
        return self.processed + self.skipped + self.errored

    @property
    def ok(self) -> bool:
        return self.errored == 0
