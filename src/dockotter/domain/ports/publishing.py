"""Port for submitting resource declarations to Pangolin."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dockotter.domain.model import ResourceDeclaration


@runtime_checkable
class ResourcePublisher(Protocol):
    """Callable port that submits one declaration.

    Returning normally means Pangolin accepted it (any 2xx); applying it may
    still happen asynchronously on the Pangolin side. Failures raise
    :class:`~dockotter.domain.errors.PublishError`.
    """

    def __call__(self, declaration: ResourceDeclaration) -> None:
        ...


__all__ = ["ResourcePublisher"]
