"""One reconciliation pass from Dokploy inventory to Pangolin resources.

Projects, entries and bindings are processed strictly in order on the calling
thread. A binding that fails derivation or exhausts its publish attempts is
counted as errored and the pass moves on to its siblings.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta
from logging import getLogger
from typing import TYPE_CHECKING

from .derivation import derive
from .errors import DockOtterError, PublishError
from .ledger import PublishLedger
from .model import PassResult

if TYPE_CHECKING:
    from .model import DomainBinding, InventoryEntry, ResourceDeclaration
    from .ports import InventoryFetcher, ResourcePublisher

log = getLogger(__name__)

Sleep = Callable[[float], None]


def publish_with_retry(
    publish: ResourcePublisher,
    declaration: ResourceDeclaration,
    *,
    attempts: int,
    delay: timedelta,
    sleep: Sleep = time.sleep,
) -> None:
    """Call ``publish`` up to ``attempts`` times with a fixed pause in between.

    Every failure is retried the same way, whatever its cause. Only the last
    failure survives into the raised :class:`PublishError`.
    """

    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    last_error: Exception | None = None
    for attempt in range(1, attempts + 1):
        try:
            publish(declaration)
        except PublishError as exc:
            last_error = exc
        else:
            return

        if attempt < attempts:
            log.warning(
                "Publishing %s failed (attempt %s/%s), retrying in %s: %s",
                declaration.name,
                attempt,
                attempts,
                delay,
                last_error,
            )
            sleep(delay.total_seconds())

    raise PublishError(
        f"all {attempts} attempts failed, last error: {last_error}"
    ) from last_error


@dataclass(slots=True)
class Reconciler:
    """Owns the publish ledger and runs reconciliation passes."""

    fetch_inventory: InventoryFetcher
    publish: ResourcePublisher
    retry_attempts: int = 3
    retry_delay: timedelta = field(default_factory=lambda: timedelta(seconds=5))
    force: bool = False
    ledger: PublishLedger = field(default_factory=PublishLedger)
    sleep: Sleep = time.sleep

    def run_pass(self) -> PassResult:
        """Run one full pass and return its counters.

        :class:`~dockotter.domain.errors.InventoryFetchError` propagates
        unchanged; in that case nothing was derived or published and the ledger
        is untouched.
        """

        log.info("Syncing apps from Dokploy...")
        projects = self.fetch_inventory()

        processed = skipped = errored = 0
        for project in projects:
            log.debug("Processing project %s (%s)", project.name, project.project_id)
            for entry in project.entries():
                if not entry.is_running:
                    log.debug(
                        "Skipping %s %s - not running (status=%s)",
                        entry.kind,
                        entry.name,
                        entry.status,
                    )
                    skipped += 1
                    continue
                if not entry.domains:
                    log.debug("Skipping %s %s - no domains", entry.kind, entry.name)
                    skipped += 1
                    continue

                for binding in entry.domains:
                    try:
                        self.reconcile_binding(entry, binding)
                    except DockOtterError as exc:
                        log.error(  # noqa: TRY400
                            "Failed to process %s domain: %s=%s, domain=%s, error=%s",
                            entry.kind,
                            entry.kind,
                            entry.name,
                            binding.host,
                            exc,
                        )
                        errored += 1
                    else:
                        processed += 1

        result = PassResult(processed=processed, skipped=skipped, errored=errored)
        log.info(
            "Sync completed: processed=%s, skipped=%s, errors=%s",
            result.processed,
            result.skipped,
            result.errored,
        )
        return result

    def reconcile_binding(self, entry: InventoryEntry, binding: DomainBinding) -> bool:
        """Derive and publish one binding.

        Returns ``False`` when the ledger already holds the resource and no
        request was made, ``True`` after a successful publish.
        """

        declaration = derive(entry, binding)

        if not self.ledger.should_publish(declaration.name, force=self.force):
            log.debug("Resource %s already published, skipping", declaration.name)
            return False

        target = declaration.targets[0]
        log.info(
            "Creating Pangolin resource: domain=%s, app=%s, hostname=%s, port=%s, "
            "method=%s, path=%s, ssl=%s",
            declaration.full_domain,
            entry.name,
            target.hostname,
            target.port,
            target.method,
            target.path,
            declaration.ssl,
        )
        publish_with_retry(
            self.publish,
            declaration,
            attempts=self.retry_attempts,
            delay=self.retry_delay,
            sleep=self.sleep,
        )
        self.ledger.mark_published(declaration.name)
        log.info("Pangolin resource created: %s (%s)", declaration.name, declaration.full_domain)
        return True
