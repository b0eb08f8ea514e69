# tests/services/conftest.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import pytest
from starlette.testclient import TestClient

from galleryfeed.domain.dataclasses.feed import PageQuery
from galleryfeed.domain.entities.feed_item import FeedItem, TagAssignment
from galleryfeed.domain.enums.media_kind import MediaKind
from galleryfeed.services.api.app import create_app
from galleryfeed.services.api.deps import get_feed_repo

T0 = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class InMemoryFeedRepo:
    """
    MediaFeedPort fake backed by a list of FeedItems. Records every call so
    tests can assert what was (not) queried. Set `fail_on` to a method name
    to make that call raise.
    """

    def __init__(self, items: Iterable[FeedItem] = ()) -> None:
        self.items: List[FeedItem] = list(items)
        self.calls: List[Tuple[str, object]] = []
        self.fail_on: Optional[str] = None

    def _maybe_fail(self, name: str) -> None:
        if self.fail_on == name:
            raise ConnectionError(f"{name}: connection reset by peer")

    def calls_to(self, name: str) -> list:
        return [arg for (n, arg) in self.calls if n == name]

    def resolve_ids_for_tags(self, tag_values: Sequence[str]) -> List[Dict[str, str]]:
        self.calls.append(("resolve_ids_for_tags", list(tag_values)))
        self._maybe_fail("resolve_ids_for_tags")
        wanted = set(tag_values)
        return [
            {"id": it.id}
            for it in self.items
            if wanted.issubset({t.value for t in it.tags})
        ]

    def fetch_page(self, query: PageQuery) -> List[FeedItem]:
        self.calls.append(("fetch_page", query))
        self._maybe_fail("fetch_page")
        rows = list(self.items)
        if query.allowed_ids is not None:
            rows = [r for r in rows if r.id in query.allowed_ids]
        if query.media_kind is not None:
            rows = [r for r in rows if r.media_type == query.media_kind]
        if query.before is not None:
            ts = query.before.created_at_dt
            tie = query.before.item_id
            if tie is not None:
                rows = [r for r in rows if r.created_at < ts or (r.created_at == ts and r.id < tie)]
            else:
                rows = [r for r in rows if r.created_at < ts]
        rows.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return rows[: query.fetch_limit]

    def get_item(self, item_id: str) -> Optional[FeedItem]:
        self.calls.append(("get_item", item_id))
        self._maybe_fail("get_item")
        return next((it for it in self.items if it.id == item_id), None)

    def list_tag_counts(self) -> List[Tuple[str, str, int]]:
        self.calls.append(("list_tag_counts", None))
        self._maybe_fail("list_tag_counts")
        counts: Dict[Tuple[str, str], set] = {}
        for it in self.items:
            for t in it.tags:
                counts.setdefault((t.category, t.value), set()).add(it.id)
        return [(c, v, len(ids)) for (c, v), ids in counts.items()]


def mk_item(
    n: int,
    *,
    kind: MediaKind = MediaKind.image,
    tags: Iterable[Tuple[str, str]] = (),
    created_at: Optional[datetime] = None,
    item_id: Optional[str] = None,
) -> FeedItem:
    """Item n is n minutes after T0, so higher n == newer."""
    return FeedItem(
        id=item_id or f"item-{n:03d}",
        media_type=kind,
        media_url=f"https://cdn.example.test/{n}.jpg",
        thumbnail_url=f"https://cdn.example.test/{n}_t.jpg",
        title=f"Item {n}",
        created_at=created_at or (T0 + timedelta(minutes=n)),
        tags=tuple(TagAssignment(category=c, value=v) for c, v in tags),
    )


@pytest.fixture()
def make_item() -> Callable[..., FeedItem]:
    return mk_item


@pytest.fixture()
def fake_repo() -> InMemoryFeedRepo:
    return InMemoryFeedRepo()


@pytest.fixture()
def api_client(fake_repo):
    """
    A TestClient whose FastAPI dependency `get_feed_repo` is overridden to
    return the in-memory fake, so no database is needed.
    """
    app = create_app()
    app.dependency_overrides[get_feed_repo] = lambda: fake_repo
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
