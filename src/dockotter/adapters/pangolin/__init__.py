"""Public interface for the Pangolin adapter."""

from __future__ import annotations

from .client import PangolinPublisher
from .schema import Blueprint, BlueprintTarget, ProxyResource
from .translator import to_blueprint, to_proxy_resource

__all__ = [
    "Blueprint",
    "BlueprintTarget",
    "PangolinPublisher",
    "ProxyResource",
    "to_blueprint",
    "to_proxy_resource",
]
