"""In-memory record of resources published during this process lifetime."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class PublishLedger:
    """Gate re-publication of resource names already accepted by Pangolin.

    Nothing is persisted: a restart republishes everything, which Pangolin
    handles as an upsert. Content changes inside an already-published
    resource are not detected; ``force`` republishes regardless.
    """

    _published: set[str] = field(default_factory=set)

    def should_publish(self, name: str, *, force: bool = False) -> bool:
        return force or name not in self._published

    def mark_published(self, name: str) -> None:
        self._published.add(name)

    def clear(self) -> None:
        self._published.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._published

    def __len__(self) -> int:
        return len(self._published)
