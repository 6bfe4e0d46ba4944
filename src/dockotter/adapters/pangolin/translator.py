"""Translate resource declarations into Pangolin blueprints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .schema import Blueprint, BlueprintTarget, ProxyResource

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dockotter.domain.model import ForwardingTarget, ResourceDeclaration


def to_target(target: ForwardingTarget) -> BlueprintTarget:
    return BlueprintTarget(
        hostname=target.hostname,
        port=target.port,
        method=str(target.method),
        enabled=target.enabled,
        path=target.path or None,
    )


def to_proxy_resource(declaration: ResourceDeclaration) -> ProxyResource:
    return ProxyResource(
        name=declaration.name,
        protocol=declaration.protocol,
        full_domain=declaration.full_domain,
        ssl=declaration.ssl or None,
        enabled=declaration.enabled,
        targets=[to_target(target) for target in declaration.targets],
    )


def to_blueprint(declarations: Iterable[ResourceDeclaration]) -> Blueprint:
    return Blueprint(proxy_resources=[to_proxy_resource(item) for item in declarations])
