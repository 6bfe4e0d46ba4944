"""Errors raised by the reconciliation engine."""

from __future__ import annotations


class DockOtterError(RuntimeError):
    """Base class for failures inside a reconciliation pass."""


class InventoryFetchError(DockOtterError):
    """Raised when no candidate Dokploy endpoint produced a usable inventory.

    Only the last candidate's failure is carried (as message and ``__cause__``);
    earlier failures are logged at debug level and dropped.
    """


class DerivationError(DockOtterError):
    """Raised when a domain binding cannot be turned into a resource declaration."""


class PublishError(DockOtterError):
    """Raised when Pangolin did not accept a resource declaration."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
