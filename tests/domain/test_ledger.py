from __future__ import annotations

from dockotter.domain.ledger import PublishLedger


def test_fresh_name_should_be_published() -> None:
    ledger = PublishLedger()

    assert ledger.should_publish("web-example-com")


def test_published_name_is_not_published_again() -> None:
    ledger = PublishLedger()
    ledger.mark_published("web-example-com")

    assert not ledger.should_publish("web-example-com")
    assert ledger.should_publish("api-example-com")
    assert "web-example-com" in ledger
    assert len(ledger) == 1


def test_force_overrides_prior_state() -> None:
    ledger = PublishLedger()
    ledger.mark_published("web-example-com")

    assert ledger.should_publish("web-example-com", force=True)
    assert ledger.should_publish("never-seen", force=True)


def test_ledgers_are_independent() -> None:
    first = PublishLedger()
    second = PublishLedger()
    first.mark_published("web-example-com")

    assert second.should_publish("web-example-com")


def test_clear_forgets_everything() -> None:
    ledger = PublishLedger()
    ledger.mark_published("web-example-com")
    ledger.clear()

    assert ledger.should_publish("web-example-com")
    assert len(ledger) == 0
