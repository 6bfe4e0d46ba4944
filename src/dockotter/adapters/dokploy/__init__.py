"""Public interface for the Dokploy adapter."""

from __future__ import annotations

from .client import CANDIDATE_ENDPOINTS, DokployInventoryReader
from .schema import DokployApplication, DokployDomain, DokployProject
from .translator import to_binding, to_entry, to_project

__all__ = [
    "CANDIDATE_ENDPOINTS",
    "DokployApplication",
    "DokployDomain",
    "DokployInventoryReader",
    "DokployProject",
    "to_binding",
    "to_entry",
    "to_project",
]
