"""
Per-page queues of pack names.

Templates may queue packs with ``append_*_pack_tag`` anywhere before the single
``*_pack_tag`` call that renders them. Each queue is a small state machine::

    EMPTY -> ACCUMULATING -> RENDERED

Appending or rendering again once a queue is RENDERED raises PackUsageError,
because the tags would either be lost or emitted twice.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from packtags.errors import PackUsageError
from packtags.sources import PackRequest

USAGE_GUIDE = "Queue extra packs with append_{tag} before {tag}, and call {tag} once per page."


class QueueState(Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"
    RENDERED = "rendered"


def _union(target: List[str], names: Iterable[str]) -> None:
    for name in names:
        name = str(name)
        if name not in target:
            target.append(name)


def _merge(appended: List[str], requested: List[str]) -> List[PackRequest]:
    merged = list(appended)
    _union(merged, requested)
    return [PackRequest(name, strict=name in requested) for name in merged]


class PackQueue:
    tag_name = ""

    def __init__(self):
        self.state = QueueState.EMPTY

    @property
    def rendered(self) -> bool:
        return self.state is QueueState.RENDERED

    def mark_rendered(self) -> None:
        self.ensure_renderable()
        self.state = QueueState.RENDERED

    def ensure_appendable(self) -> None:
        if self.rendered:
            raise PackUsageError(
                f"append_{self.tag_name} was called after {self.tag_name} already rendered this page. "
                + USAGE_GUIDE.format(tag=self.tag_name)
            )

    def ensure_renderable(self) -> None:
        if self.rendered:
            raise PackUsageError(
                f"{self.tag_name} was already rendered on this page; rendering it again would duplicate chunks. "
                + USAGE_GUIDE.format(tag=self.tag_name)
            )

    def _accumulate(self, bucket: List[str], names: Iterable[str]) -> None:
        self.ensure_appendable()
        _union(bucket, names)
        if bucket and self.state is QueueState.EMPTY:
            self.state = QueueState.ACCUMULATING


class StylesheetPackQueue(PackQueue):
    tag_name = "stylesheet_pack_tag"

    def __init__(self):
        super().__init__()
        self.names: List[str] = []

    def append(self, *names: str) -> None:
        self._accumulate(self.names, names)

    def requests(self, names: Iterable[str]) -> List[PackRequest]:
        """Requested names first and strict, then appended names best-effort."""
        self.ensure_renderable()
        requested: List[str] = []
        _union(requested, names)
        return [PackRequest(name) for name in requested] + [
            PackRequest(name, strict=False) for name in self.names if name not in requested
        ]


class JavascriptPackQueue(PackQueue):
    tag_name = "javascript_pack_tag"

    def __init__(self):
        super().__init__()
        self.deferred: List[str] = []
        self.non_deferred: List[str] = []

    def append(self, *names: str, defer: bool = True) -> None:
        self._accumulate(self.deferred if defer else self.non_deferred, names)

    def requests(self, names: Iterable[str], defer: bool = True) -> Tuple[List[PackRequest], List[PackRequest]]:
        """
        Return ``(non_deferred, deferred)`` requests.
        Directly requested names join the bucket picked by ``defer`` after the
        names appended earlier, and are the only strict requests.
        """
        self.ensure_renderable()
        requested: List[str] = []
        _union(requested, names)
        non_deferred = _merge(self.non_deferred, [] if defer else requested)
        deferred = _merge(self.deferred, requested if defer else [])
        return non_deferred, deferred


class PageAssets:
    """Pack queues for one page render."""

    def __init__(self):
        self.javascript = JavascriptPackQueue()
        self.stylesheet = StylesheetPackQueue()
