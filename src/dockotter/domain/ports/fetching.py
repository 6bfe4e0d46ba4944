"""Port for reading the Dokploy inventory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dockotter.domain.model import Project


@runtime_checkable
class InventoryFetcher(Protocol):
    """Callable port returning every project with its applications and domains.

    Implementations raise :class:`~dockotter.domain.errors.InventoryFetchError`
    when no inventory could be read.
    """

    def __call__(self) -> list[Project]:
        ...


__all__ = ["InventoryFetcher"]
