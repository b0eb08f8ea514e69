# galleryfeed/domain/dataclasses/feed.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from galleryfeed.common.pagination.cursor import FeedCursor
from galleryfeed.domain.entities.feed_item import FeedItem
from galleryfeed.domain.enums.media_kind import MediaKind


@dataclass(frozen=True)
class PageQuery:
    """
    One bounded, ordered fetch. Repositories must:
      - keep only ids in allowed_ids (when not None)
      - keep only media_kind (when not None)
      - keep only rows strictly after `before` in (created_at DESC, id DESC)
        order: created_at < ts, or created_at == ts and id < before.item_id
      - order by created_at DESC, id DESC
      - return at most fetch_limit rows
    """
    limit: int
    before: Optional[FeedCursor] = None
    media_kind: Optional[MediaKind] = None
    allowed_ids: Optional[FrozenSet[str]] = None

    def __post_init__(self):
        if self.limit < 1:
            raise ValueError("limit must be >= 1")

    @property
    def fetch_limit(self) -> int:
        # one extra row tells us whether another page exists
        return self.limit + 1


@dataclass
class FeedPage:
    """One page of feed/search results plus its continuation token."""
    items: List[FeedItem] = field(default_factory=list)
    next_cursor: Optional[str] = None
    # Only the search variant computes this; None means "not computed".
    total_matches: Optional[int] = None

    @property
    def has_next_page(self) -> bool:
        return self.next_cursor is not None


@dataclass(frozen=True)
class TagValueCount:
    value: str
    count: int


@dataclass
class TagCategory:
    name: str
    values: List[TagValueCount] = field(default_factory=list)
