"""Derive Pangolin resource declarations from Dokploy inventory.

Every step of :func:`derive` is a hard gate: the first failing check raises
:class:`DerivationError` and no declaration is produced.
"""

from __future__ import annotations

from .errors import DerivationError
from .model import (
    DomainBinding,
    ForwardingMethod,
    ForwardingTarget,
    InventoryEntry,
    ResourceDeclaration,
)

MAX_RESOURCE_NAME_LENGTH = 63
HTTP_DEFAULT_PORT = 80
HTTPS_DEFAULT_PORT = 443
ROOT_PATH = "/"


def resource_name(application_name: str, host: str) -> str:
    """Return the Pangolin resource name for an application/host pair.

    The name doubles as the idempotency key. Distinct pairs that collapse onto
    the same 63-character prefix address the same resource; the last publish wins.
    """

    name = f"{application_name}-{host}".lower()
    name = name.replace(".", "-").replace("_", "-")
    return name[:MAX_RESOURCE_NAME_LENGTH]


def resolve_port(*, domain_port: int, app_port: int, https: bool) -> int:
    if domain_port > 0:
        return domain_port
    if app_port > 0:
        return app_port
    return HTTPS_DEFAULT_PORT if https else HTTP_DEFAULT_PORT


def resolve_path(path: str | None) -> str:
    if path and path != ROOT_PATH:
        return path
    return ROOT_PATH


def derive(entry: InventoryEntry, binding: DomainBinding) -> ResourceDeclaration:
    """Build the single-target declaration for ``binding`` on ``entry``."""

    if not binding.host:
        raise DerivationError("empty host")

    port = resolve_port(domain_port=binding.port, app_port=entry.port, https=binding.https)
    if port <= 0:
        raise DerivationError(f"no port available for app {entry.name} domain {binding.host}")

    method = ForwardingMethod.HTTPS if binding.https else ForwardingMethod.HTTP

    try:
        target = ForwardingTarget(
            hostname=entry.app_name,
            port=port,
            method=method,
            path=resolve_path(binding.path),
        )
    except ValueError as exc:
        raise DerivationError(str(exc)) from exc

    return ResourceDeclaration(
        name=resource_name(entry.name, binding.host),
        full_domain=binding.host,
        ssl=binding.https,
        targets=(target,),
    )
